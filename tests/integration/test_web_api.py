"""Integration tests for the REST API."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from simready.contracts import RuntimeCapabilities
from simready.web.app import create_app
from simready.web.dependencies import get_capabilities_provider

DOCUMENTS_PATH = Path(__file__).parent.parent / "fixtures" / "documents"

pytestmark = pytest.mark.integration


class _FixedCapabilities:
    def __init__(self, can_execute: bool) -> None:
        self._caps = RuntimeCapabilities(can_execute=can_execute)

    def get_runtime_capabilities(self) -> RuntimeCapabilities:
        return self._caps


def _load(name: str) -> Any:
    return json.loads((DOCUMENTS_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def app():
    application = create_app()
    application.dependency_overrides[get_capabilities_provider] = lambda: (
        _FixedCapabilities(can_execute=True)
    )
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestDiagnosticsEndpoint:
    """Tests for POST /api/v1/diagnostics."""

    def test_consistent_document(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/diagnostics",
            json={"document": _load("office.json"), "zones": _load("zones.json")["zones"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["issues"] == []
        assert body["geometry"]["totals"]["zones"] == 2

    def test_missing_material(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/diagnostics",
            json={"document": _load("missing_material.json"), "zones": ["Zone_1"]},
        )

        body = response.json()
        assert body["materials"]["missingMaterials"] == ["Glass_Unknown"]
        assert body["issues"][0]["category"] == "materials"
        assert body["issues"][0]["path"] == "constructions[0].layers[0]"

    def test_empty_request(self, client: TestClient) -> None:
        response = client.post("/api/v1/diagnostics", json={})

        assert response.status_code == 200
        assert response.json()["issues"] == []

    def test_malformed_document_lenient(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/diagnostics", json={"document": _load("malformed.json")}
        )

        assert response.status_code == 200

    def test_malformed_document_strict(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/diagnostics",
            json={"document": _load("malformed.json"), "strict": True},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert "constructions[0].layers" in [d["path"] for d in body["details"]]


class TestReadinessEndpoint:
    """Tests for POST /api/v1/readiness."""

    def test_office_ready(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/readiness",
            json={"document": _load("office.json"), "zones": _load("zones.json")["zones"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert [step["status"] for step in body["steps"]] == ["ok"] * 7
        assert body["blockingSteps"] == []
        assert body["summary"] == "ok"

    def test_request_capabilities_override_server(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/readiness",
            json={
                "document": _load("office.json"),
                "zones": _load("zones.json")["zones"],
                "capabilities": {"canExecute": False},
            },
        )

        run = response.json()["steps"][6]
        assert run["id"] == "run-energyplus"
        assert run["status"] == "warning"

    def test_empty_document(self, client: TestClient) -> None:
        response = client.post("/api/v1/readiness", json={"document": {}, "zones": []})

        body = response.json()
        assert body["steps"][0]["status"] == "warning"
        assert body["steps"][6]["status"] == "error"
        assert body["blockingSteps"] == ["weather-location", "run-energyplus"]
        assert body["summary"] == "error"

    def test_server_without_engine(self, app, client: TestClient) -> None:
        app.dependency_overrides[get_capabilities_provider] = lambda: _FixedCapabilities(
            can_execute=False
        )

        response = client.post(
            "/api/v1/readiness",
            json={"document": _load("office.json"), "zones": _load("zones.json")["zones"]},
        )

        assert response.json()["steps"][6]["status"] == "warning"


class TestCompactEndpoints:
    """Tests for the compact schedule endpoints."""

    def test_parse_lines(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedules/compact/parse",
            json={"lines": ["Through: 12/31", "", "for: AllDays", "Until: 24:00, 1"]},
        )

        assert response.status_code == 200
        assert response.json()["rows"] == [
            {"value": "12/31", "type": "Through"},
            {"value": "AllDays", "type": "For"},
            {"value": "1", "type": "Until", "time": "24:00"},
        ]

    def test_parse_text(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedules/compact/parse", json={"text": "Through: 6/30\nMystery"}
        )

        rows = response.json()["rows"]
        assert rows[1] == {"value": "Mystery", "type": "Unknown"}

    def test_parse_nothing_gives_scaffold(self, client: TestClient) -> None:
        response = client.post("/api/v1/schedules/compact/parse", json={})

        assert [row["type"] for row in response.json()["rows"]] == [
            "Through",
            "For",
            "Until",
        ]

    def test_serialize(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedules/compact/serialize",
            json={
                "rows": [
                    {"type": "Through", "value": "12/31"},
                    {"type": "Until", "time": "9", "value": "0.5"},
                    {"type": "For", "value": ""},
                ]
            },
        )

        assert response.status_code == 200
        assert response.json()["lines"] == ["Through: 12/31", "Until: 9:00, 0.5"]

    def test_serialize_rejects_unknown_type(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedules/compact/serialize",
            json={"rows": [{"type": "Holiday", "value": "1/1"}]},
        )

        assert response.status_code == 422
