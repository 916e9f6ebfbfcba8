# -*- coding: utf-8 -*-
import uuid

import pytest

from app.shared.utils.validators import is_valid_uuid, validate_phone, validate_username


@pytest.mark.parametrize(
    "value",
    [
        uuid.uuid4(),
        str(uuid.uuid4()),
        str(uuid.uuid4()).upper(),
        str(uuid.uuid1()),
        "  315e0834-e96d-4ddc-9974-726e8c1e9cf9 ",
        "017f22e2-79b0-7cc3-98c4-dc0c0c07398f",  # v7
        "00000000-0000-0000-0000-000000000000",  # nil
        "FFFFFFFF-FFFF-FFFF-FFFF-FFFFFFFFFFFF",  # max
    ],
)
def test_valid_uuids(value):
    assert is_valid_uuid(value) is True


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "not-a-uuid",
        "315e0834e96d4ddc9974726e8c1e9cf9",
        "{315e0834-e96d-4ddc-9974-726e8c1e9cf9}",
        "315e0834-e96d-4ddc-9974-726e8c1e9cfz",
        12345,
        {"id": "x"},
    ],
)
def test_invalid_uuids(value):
    assert is_valid_uuid(value) is False


@pytest.mark.parametrize(
    "value",
    [
        "12345678-1234-1234-1234-123456789abc",  # variante 1
        "315e0834-e96d-4ddc-c974-726e8c1e9cf9",  # variante c
        "315e0834-e96d-0ddc-9974-726e8c1e9cf9",  # versión 0
        "315e0834-e96d-9ddc-9974-726e8c1e9cf9",  # versión 9
        "315e0834-e96d-fddc-9974-726e8c1e9cf9",  # versión f
    ],
)
def test_uuids_with_bad_version_or_variant_are_invalid(value):
    assert is_valid_uuid(value) is False
    assert is_valid_uuid(uuid.UUID(value)) is False


@pytest.mark.parametrize(
    "phone,ok",
    [("08012345678", True), ("+52 (55) 1234-5678", True), ("123", False), ("call me", False), ("", False)],
)
def test_validate_phone(phone, ok):
    assert validate_phone(phone) is ok


@pytest.mark.parametrize(
    "username,ok",
    [("janedoe", True), ("jane.doe_99", True), ("ab", False), ("bad name", False), ("x" * 51, False)],
)
def test_validate_username(username, ok):
    assert validate_username(username) is ok
