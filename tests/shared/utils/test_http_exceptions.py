# -*- coding: utf-8 -*-
import pytest
from fastapi import HTTPException

from app.shared.utils.http_exceptions import (
    BadRequest,
    Conflict,
    Forbidden,
    InvalidInput,
    ResourceNotFound,
    ServerError,
    Unauthorized,
)


@pytest.mark.parametrize(
    "exc_cls,status",
    [
        (BadRequest, 400),
        (Unauthorized, 401),
        (Forbidden, 403),
        (ResourceNotFound, 404),
        (Conflict, 409),
        (InvalidInput, 422),
        (ServerError, 500),
    ],
)
def test_status_codes_and_default_messages(exc_cls, status):
    exc = exc_cls()
    assert isinstance(exc, HTTPException)
    assert exc.status_code == status
    assert exc.message == exc_cls.message_default


def test_custom_message_is_kept():
    exc = ResourceNotFound("User not found")
    assert exc.detail == "User not found"
    assert exc.message == "User not found"


def test_unauthorized_adds_bearer_challenge():
    assert Unauthorized().headers == {"WWW-Authenticate": "Bearer"}
    assert Unauthorized(headers={"X-Test": "1"}).headers == {"X-Test": "1"}
