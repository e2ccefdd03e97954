"""Tests for the run log.

The logger records structured entries for each simulation: which
planner ran, what it produced, and why a workload was rejected.
"""

from py_disk.disk import Direction
from py_disk.logging import LogEntry, Logger, LogLevel
from py_disk.simulator import Workload, simulate


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message and source."""
        entry = LogEntry(level=LogLevel.INFO, message="test message", source="SCAN")
        assert entry.level is LogLevel.INFO
        assert entry.message == "test message"
        assert entry.source == "SCAN"

    def test_entry_str(self) -> None:
        """String form is ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="odd", source="C-SCAN")
        assert str(entry) == "[WARNING] C-SCAN: odd"


class TestLogger:
    """Verify logger append, filtering and clearing."""

    def test_starts_empty(self) -> None:
        """A new logger has no entries."""
        assert Logger().entries == []

    def test_log_appends_in_order(self) -> None:
        """Entries come back in the order they were logged."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="a")
        logger.log(LogLevel.ERROR, "second", source="b")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_filter_by_level(self) -> None:
        """min_level drops entries below it."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "noise", source="a")
        logger.log(LogLevel.ERROR, "bad", source="a")
        result = logger.filter(min_level=LogLevel.WARNING)
        assert [e.message for e in result] == ["bad"]

    def test_filter_by_source(self) -> None:
        """source keeps only matching entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="FCFS")
        logger.log(LogLevel.INFO, "y", source="SCAN")
        assert [e.message for e in logger.filter(source="SCAN")] == ["y"]

    def test_filter_returns_copy(self) -> None:
        """Mutating a filter result does not touch the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="a")
        logger.filter().clear()
        assert len(logger.entries) == 1

    def test_clear(self) -> None:
        """clear() empties the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="a")
        logger.clear()
        assert logger.entries == []


class TestSimulationLogging:
    """The simulator records what each planner did."""

    def test_each_algorithm_logs_result(self) -> None:
        """Every planner leaves an INFO entry with its movement."""
        logger = Logger()
        workload = Workload(requests=(98, 183, 37), head=53, disk_size=200, direction=Direction.UP)
        simulate(workload, logger=logger)
        for name in ("FCFS", "SCAN", "C-SCAN"):
            entries = logger.filter(source=name, min_level=LogLevel.INFO)
            assert len(entries) == 1
            assert "total movement" in entries[0].message
