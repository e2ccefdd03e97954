"""Tests for the JSON web API.

Tests use ``pytest.importorskip`` so they are skipped gracefully when
Flask is not installed.
"""

from __future__ import annotations

from typing import Any

import pytest

flask = pytest.importorskip("flask")

from py_disk.config import SimulatorConfig  # noqa: E402
from py_disk.web.app import create_app  # noqa: E402

HTTP_OK = 200
HTTP_BAD_REQUEST = 400

_TEXTBOOK = {
    "requests": [98, 183, 37, 122, 14, 124, 65, 67],
    "head": 53,
    "disk_size": 200,
    "direction": 1,
}


def _create_client(config: SimulatorConfig | None = None) -> Any:
    """Create a test client from a fresh app."""
    app = create_app(config)
    app.config["TESTING"] = True
    return app.test_client()


class TestAppCreation:
    """Verify the app factory and the algorithms endpoint."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(), flask.Flask)

    def test_algorithms(self) -> None:
        """GET /api/algorithms lists the planners in run order."""
        response = _create_client().get("/api/algorithms")
        assert response.status_code == HTTP_OK
        assert response.get_json() == {"algorithms": ["FCFS", "SCAN", "C-SCAN"]}


class TestScheduleEndpoint:
    """Verify the /api/schedule POST endpoint."""

    def test_textbook(self) -> None:
        """Each algorithm reports its order and movement."""
        response = _create_client().post("/api/schedule", json=_TEXTBOOK)
        assert response.status_code == HTTP_OK
        results = response.get_json()["results"]
        assert [r["algorithm"] for r in results] == ["FCFS", "SCAN", "C-SCAN"]
        assert [r["total_movement"] for r in results] == [640, 331, 382]
        assert results[2]["order"] == [65, 67, 98, 122, 124, 183, 199, 0, 14, 37]

    def test_direction_defaults_up(self) -> None:
        """Without a direction, SCAN sweeps up first."""
        body = {k: v for k, v in _TEXTBOOK.items() if k != "direction"}
        response = _create_client().post("/api/schedule", json=body)
        assert response.get_json()["results"][1]["total_movement"] == 331

    def test_log_included(self) -> None:
        """The run log comes back with the results."""
        response = _create_client().post("/api/schedule", json=_TEXTBOOK)
        assert any("C-SCAN" in line for line in response.get_json()["log"])


class TestErrorHandling:
    """Verify error responses for malformed requests."""

    def test_missing_field(self) -> None:
        """A workload without a head is a 400."""
        body = {k: v for k, v in _TEXTBOOK.items() if k != "head"}
        response = _create_client().post("/api/schedule", json=body)
        assert response.status_code == HTTP_BAD_REQUEST
        assert "head" in response.get_json()["error"]

    def test_no_json_body(self) -> None:
        """A body that is not JSON is a 400."""
        response = _create_client().post("/api/schedule", data="not json")
        assert response.status_code == HTTP_BAD_REQUEST

    def test_non_integer_request(self) -> None:
        """Requests must be integers."""
        response = _create_client().post("/api/schedule", json={**_TEXTBOOK, "requests": ["a"]})
        assert response.status_code == HTTP_BAD_REQUEST

    def test_out_of_range(self) -> None:
        """Validation errors become 400s."""
        response = _create_client().post("/api/schedule", json={**_TEXTBOOK, "requests": [300]})
        assert response.status_code == HTTP_BAD_REQUEST
        assert "outside the disk" in response.get_json()["error"]

    def test_config_limit(self) -> None:
        """The app enforces its configured maximum."""
        client = _create_client(SimulatorConfig(max_requests=2))
        response = client.post("/api/schedule", json=_TEXTBOOK)
        assert response.status_code == HTTP_BAD_REQUEST
        assert "too many requests" in response.get_json()["error"]
