"""Simulator configuration.

The console prompts for the workload itself; everything else that can
vary between runs lives in a ``SimulatorConfig``.  A config file is an
optional JSON object, for example::

    {"max_requests": 100, "log_level": "DEBUG", "separator": " => "}

Missing keys fall back to the defaults and unknown keys are ignored.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from py_disk.disk import DEFAULT_MAX_REQUESTS
from py_disk.logging import LogLevel


class ConfigError(RuntimeError):
    """Raise when a config file cannot be loaded.

    Examples: missing file, invalid JSON, a negative request limit.
    """


@dataclass(frozen=True)
class SimulatorConfig:
    """Settings for one simulator session.

    Attributes:
        max_requests: Largest request count a workload may carry.
        log_level: Minimum level printed by ``--verbose``.
        separator: Text placed between positions in a printed order.

    """

    max_requests: int = DEFAULT_MAX_REQUESTS
    log_level: LogLevel = LogLevel.INFO
    separator: str = " -> "


def load_config(path: Path | None = None) -> SimulatorConfig:
    """Load a config from a JSON file, or return the defaults.

    Args:
        path: JSON file to read.  If None, defaults are used.

    Raises:
        ConfigError: If the file cannot be read or holds bad values.

    """
    if path is None:
        return SimulatorConfig()

    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load config: {e}"
        raise ConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"Cannot load config: {path} does not hold a JSON object"
        raise ConfigError(msg)

    defaults = SimulatorConfig()
    max_requests = data.get("max_requests", defaults.max_requests)
    if isinstance(max_requests, bool) or not isinstance(max_requests, int) or max_requests < 0:
        msg = f"max_requests must be a non-negative integer, got {max_requests!r}"
        raise ConfigError(msg)

    level_name = str(data.get("log_level", defaults.log_level.name)).upper()
    try:
        log_level = LogLevel[level_name]
    except KeyError as e:
        msg = f"Unknown log level: {level_name}"
        raise ConfigError(msg) from e

    return SimulatorConfig(
        max_requests=max_requests,
        log_level=log_level,
        separator=str(data.get("separator", defaults.separator)),
    )
