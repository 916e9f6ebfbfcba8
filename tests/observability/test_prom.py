# -*- coding: utf-8 -*-
"""
Tests del middleware Prometheus: labels por plantilla de ruta y /metrics.
"""

import uuid

from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from app.observability.prom import UNMATCHED_PATH, setup_observability


def _app() -> FastAPI:
    app = FastAPI()
    setup_observability(app)

    @app.get("/probe/{item_id}")
    async def probe(item_id: str):
        return {"item_id": item_id}

    return app


def _count(path: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "http_requests_total", {"method": "GET", "path": path, "status": status}
    )
    return value or 0.0


def test_requests_are_labelled_by_route_template():
    client = TestClient(_app())
    before = _count("/probe/{item_id}", "200")

    client.get(f"/probe/{uuid.uuid4()}")
    client.get(f"/probe/{uuid.uuid4()}")

    assert _count("/probe/{item_id}", "200") == before + 2


def test_unmatched_paths_share_one_series():
    client = TestClient(_app())
    before = _count(UNMATCHED_PATH, "404")

    client.get("/nope/1")
    client.get("/nope/2")

    assert _count(UNMATCHED_PATH, "404") == before + 2


def test_metrics_endpoint_exposes_prometheus_text():
    client = TestClient(_app())
    client.get("/probe/x")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "http_requests_total" in response.text
