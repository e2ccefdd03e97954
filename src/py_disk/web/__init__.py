"""JSON web API for the disk scheduling simulator.

This package provides a Flask application that runs the planners over
HTTP.  It is an **optional** extra — install with::

    pip install py-disk[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/algorithms`` — the algorithms every run reports.
- ``POST /api/schedule`` — run all planners on a JSON workload.
"""
