"""Tests for the FastAPI service mode."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from alignscan.engine import AlignmentEngine
from alignscan.service import create_app
from tests._fixtures.repo_builder import RepoBuilder


class _StubEngine:
    def __init__(self, report: Dict[str, Any]) -> None:
        self.report = report
        self.calls: List[Dict[str, str]] = []

    def engineer_alignment(self, project_path: str, stated_purpose: str) -> Dict[str, Any]:
        self.calls.append({"project_path": project_path, "stated_purpose": stated_purpose})
        return self.report


@pytest.fixture
def error_engine() -> _StubEngine:
    return _StubEngine(
        {"error": "Alignment analysis failed: Project path not found: /nope", "timestamp": "T"}
    )


def test_health_endpoint() -> None:
    client = TestClient(create_app())
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_alignment_endpoint_runs_engine(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"src/orchestrator.js": "function runOrchestration() {}\n"})
    client = TestClient(create_app(AlignmentEngine))

    response = client.post(
        "/alignment",
        json={
            "project_path": str(repo_builder.path()),
            "stated_purpose": "build an orchestration platform",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["tool"] == "alignment_engineering"
    assert body["analysis"]["alignment_analysis"]["alignment_percentage"] == 100
    assert body["analysis"]["purpose_analysis"]["domain_focus"] == "workflow_orchestration"


def test_alignment_endpoint_uses_fresh_engine_per_request() -> None:
    created: List[_StubEngine] = []

    def factory() -> _StubEngine:
        engine = _StubEngine({"timestamp": "T", "alignment_analysis": {}})
        created.append(engine)
        return engine

    client = TestClient(create_app(factory))  # type: ignore[arg-type]
    client.post("/alignment", json={"project_path": "a", "stated_purpose": "one"})
    client.post("/alignment", json={"project_path": "b"})

    assert [engine.calls for engine in created] == [
        [{"project_path": "a", "stated_purpose": "one"}],
        [{"project_path": "b", "stated_purpose": ""}],
    ]


def test_alignment_endpoint_maps_error_to_404(error_engine: _StubEngine) -> None:
    client = TestClient(create_app(lambda: error_engine))  # type: ignore[arg-type,return-value]

    response = client.post("/alignment", json={"project_path": "/nope", "stated_purpose": "x"})

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Alignment analysis failed: Project path not found: /nope",
        "timestamp": "T",
    }


def test_alignment_endpoint_validates_payload() -> None:
    client = TestClient(create_app())
    response = client.post("/alignment", json={"stated_purpose": "x"})
    assert response.status_code == 422


def test_report_endpoint_returns_markdown(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"src/booking.js": "function processCustomerBooking() {}\n"})
    client = TestClient(create_app())

    response = client.post(
        "/alignment/report",
        json={"project_path": str(repo_builder.path()), "stated_purpose": "deploy a secure API"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert "## Misaligned components" in response.text
    assert "`src/booking.js`" in response.text


def test_report_endpoint_renders_errors(error_engine: _StubEngine) -> None:
    client = TestClient(create_app(lambda: error_engine))  # type: ignore[arg-type,return-value]

    response = client.post("/alignment/report", json={"project_path": "/nope"})

    assert response.status_code == 404
    assert "**Error:** Alignment analysis failed" in response.text
