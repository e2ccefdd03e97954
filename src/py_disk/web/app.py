"""Flask application factory for the PyDisk web API.

The ``create_app`` function returns a Flask app with two endpoints:

- ``GET /api/algorithms`` — list the algorithms a run reports.
- ``POST /api/schedule`` — run every planner on a workload and return JSON.

The app is stateless: each request carries its whole workload.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from py_disk.config import SimulatorConfig
from py_disk.disk import Direction, DiskRequestError
from py_disk.logging import Logger
from py_disk.simulator import ALGORITHMS, Workload, simulate

_HTTP_BAD_REQUEST = 400
_FIELDS = ("requests", "head", "disk_size")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_workload(data: Any) -> Workload:
    """Build a workload from a decoded JSON body.

    Raises:
        DiskRequestError: If a field is missing or not an integer.

    """
    if not isinstance(data, dict):
        msg = "Expected a JSON object"
        raise DiskRequestError(msg)
    for name in _FIELDS:
        if name not in data:
            msg = f"Missing '{name}' field"
            raise DiskRequestError(msg)

    requests = data["requests"]
    if not isinstance(requests, list) or not all(_is_int(r) for r in requests):
        msg = "'requests' must be a list of integers"
        raise DiskRequestError(msg)
    direction = data.get("direction", int(Direction.UP))
    for name, value in (
        ("head", data["head"]),
        ("disk_size", data["disk_size"]),
        ("direction", direction),
    ):
        if not _is_int(value):
            msg = f"'{name}' must be an integer"
            raise DiskRequestError(msg)
    if direction not in tuple(Direction):
        msg = f"direction must be 0 or 1, got {direction}"
        raise DiskRequestError(msg)

    return Workload(
        requests=tuple(requests),
        head=data["head"],
        disk_size=data["disk_size"],
        direction=Direction(direction),
    )


def create_app(config: SimulatorConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Simulator settings; defaults are used if None.

    Returns:
        A configured Flask application ready to serve.

    """
    settings = config if config is not None else SimulatorConfig()
    app = Flask(__name__)

    @app.route("/api/algorithms")
    def algorithms() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the algorithms every run reports, in run order."""
        return jsonify({"algorithms": list(ALGORITHMS)})

    @app.route("/api/schedule", methods=["POST"])
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run every planner on the posted workload.

        Expects JSON body:
        ``{"requests": [...], "head": 53, "disk_size": 200, "direction": 1}``

        Returns:
            JSON with one ``results`` entry per algorithm, or ``error``.

        """
        data = request.get_json(silent=True)
        logger = Logger()
        try:
            workload = _parse_workload(data)
            results = simulate(workload, max_requests=settings.max_requests, logger=logger)
        except DiskRequestError as e:
            return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST

        return jsonify(
            {
                "results": [
                    {
                        "algorithm": r.algorithm,
                        "order": list(r.order),
                        "total_movement": r.total_movement,
                    }
                    for r in results
                ],
                "log": [str(entry) for entry in logger.filter(min_level=settings.log_level)],
            }
        )

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-disk-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
