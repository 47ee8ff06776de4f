"""Loguru handlers for nocomments.

Usage:
    from nocomments.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if NOCOMMENTS_LOG_LEVEL=DEBUG

Environment Variables:
    NOCOMMENTS_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    NOCOMMENTS_LOG_JSON: 0|1 (default: 0, human-readable)
    NOCOMMENTS_LOG_FILE: path to an NDJSON log file (optional)

All records go to stderr so `check --json` output on stdout stays parseable.
The `--log-level` CLI option calls `configure()` again to override the
environment.
"""

import json
import os
import sys

from loguru import logger

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Numeric levels for NDJSON records
JSON_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 35,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_HUMAN_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"

_handler_ids: list[int] = []


def _to_json(record) -> str:
    payload = {
        "level": JSON_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "module": record["name"],
    }
    for key, value in record["extra"].items():
        payload[key] = value if isinstance(value, (str, int, float, bool)) else str(value)
    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return json.dumps(payload)


def json_sink(message):
    """Write log records as NDJSON to stderr.

    Never call logger.* inside a sink - causes infinite recursion.
    """
    sys.stderr.write(_to_json(message.record) + "\n")
    sys.stderr.flush()


def _file_sink(path: str):
    def sink(message):
        with open(path, "a", encoding="utf-8") as f:
            f.write(_to_json(message.record) + "\n")

    return sink


def configure(
    level: str | None = None,
    json_mode: bool | None = None,
    log_file: str | None = None,
) -> list[int]:
    """Replace the nocomments handlers.

    Arguments left as None come from the NOCOMMENTS_LOG_* variables.

    Returns:
        The loguru ids of the installed handlers.
    """
    level = (level or os.environ.get("NOCOMMENTS_LOG_LEVEL", "WARNING")).upper()
    if json_mode is None:
        json_mode = os.environ.get("NOCOMMENTS_LOG_JSON", "0") == "1"
    if log_file is None:
        log_file = os.environ.get("NOCOMMENTS_LOG_FILE")

    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()

    if json_mode:
        _handler_ids.append(logger.add(json_sink, level=level, colorize=False))
    else:
        # colorize=None: colors on a TTY, plain when piped
        _handler_ids.append(logger.add(sys.stderr, level=level, format=_HUMAN_FORMAT, colorize=None))
    if log_file:
        _handler_ids.append(logger.add(_file_sink(log_file), level="DEBUG"))
    return list(_handler_ids)


# Drop loguru's default stderr handler before installing ours
logger.remove()
configure()


__all__ = ["LEVELS", "configure", "json_sink", "logger"]
