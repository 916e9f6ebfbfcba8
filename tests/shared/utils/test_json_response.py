# -*- coding: utf-8 -*-
import json
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel

from app.shared.utils.json_response import error_json_response, send_json_response


class _Item(BaseModel):
    id: uuid.UUID
    created_at: datetime


def _body(response) -> dict:
    return json.loads(response.body)


def test_success_envelope():
    item = _Item(id=uuid.uuid4(), created_at=datetime(2026, 1, 1, tzinfo=timezone.utc))

    response = send_json_response(200, "ok", item)

    assert response.status_code == 200
    assert response.media_type == "application/json; charset=utf-8"
    body = _body(response)
    assert body == {
        "status": "success",
        "status_code": 200,
        "message": "ok",
        "data": {"id": str(item.id), "created_at": "2026-01-01T00:00:00Z"},
    }


def test_success_envelope_with_no_data():
    assert _body(send_json_response(201, "created"))["data"] is None


def test_error_envelope_with_extras():
    response = error_json_response(422, "Validation error", errors=[{"loc": ["body"]}], request_id=None)

    assert response.status_code == 422
    assert _body(response) == {
        "status": "unsuccessful",
        "status_code": 422,
        "message": "Validation error",
        "errors": [{"loc": ["body"]}],
    }


def test_utf8_messages_are_preserved():
    response = error_json_response(400, "Petición inválida: ñandú")
    assert _body(response)["message"] == "Petición inválida: ñandú"
