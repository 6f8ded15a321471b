"""Logging configuration utilities for wavecrest.

Provides centralized logging configuration with:
- Output to stderr or a file
- Customizable format strings
- Structured logging support (JSON lines)
- Timing of geometry operations

Geometry modules attach what they generated (pattern, mode, seed, point and
frame counts) with ``extra=geometry_extra(...)``. Structured logs report
those fields under ``"geometry"``; text logs ignore them.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

GEOMETRY_LOGGER_NAME = "WAVECREST_GEOMETRY"

# Record attributes that structured logs report under "geometry"
GEOMETRY_FIELDS = (
    "operation",
    "pattern",
    "mode",
    "seed",
    "frame_count",
    "points_in",
    "points_out",
    "duration_ms",
)

F = TypeVar("F", bound=Callable[..., Any])


def geometry_extra(**fields: Any) -> dict[str, Any]:
    """Build the ``extra=`` mapping for a geometry log call.

    Enums are logged by value and ``None`` fields are dropped.

    Raises:
        ValueError: For a field not in ``GEOMETRY_FIELDS``.

    Example:
        >>> geometry_extra(pattern="organic", seed=7, mode=None)
        {'pattern': 'organic', 'seed': 7}
    """
    unknown = sorted(set(fields) - set(GEOMETRY_FIELDS))
    if unknown:
        raise ValueError(f"Unknown geometry log fields: {', '.join(unknown)}")
    return {
        key: getattr(value, "value", value) for key, value in fields.items() if value is not None
    }


class StructuredJSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per log record.

    Format:
    {
        "level": "DEBUG",
        "message": "Interlock edges generated: ...",
        "timestamp": "2026-01-29T12:00:00.000000+00:00",
        "logger": "wavecrest.core.geometry.interlock",
        "location": "interlock.generate_interlock:149",
        "geometry": {"pattern": "organic", "mode": "apart", "seed": 7},
        "error": {"type": "...", "message": "...", "stack_trace": "..."}
    }

    ``geometry`` and ``error`` only appear when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "logger": record.name,
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        geometry = {key: getattr(record, key) for key in GEOMETRY_FIELDS if hasattr(record, key)}
        if geometry:
            entry["geometry"] = geometry

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["error"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "stack_trace": record.exc_text or self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Configure application-wide logging.

    Can be called multiple times to reconfigure logging (uses force=True).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Case-insensitive.
        format_string: Custom format string for log messages.
                      If None, uses a default format with timestamp and level.
                      Ignored if structured=True.
        filename: Path to log file. If None, logs to stderr so that command
                  output on stdout stays machine-readable.
        structured: If True, use structured JSON logging format.

    Examples:
        >>> configure_logging(level="INFO")
        >>> configure_logging(level="DEBUG", structured=True, filename="wavecrest.jsonl")
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stderr)

    formatter: logging.Formatter
    if structured:
        formatter = StructuredJSONFormatter()
    else:
        if format_string is None:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        formatter = logging.Formatter(format_string)

    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )


def get_geometry_logger() -> logging.Logger:
    """Get the logger that receives geometry timings."""
    return logging.getLogger(GEOMETRY_LOGGER_NAME)


def log_performance(func: F) -> F:
    """Log how long each call to a geometry operation takes, at DEBUG."""

    @functools.wraps(func)
    def wrapper_timer(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        duration_ms = (time.perf_counter() - start_time) * 1000
        get_geometry_logger().debug(
            "%s took %.3f ms",
            func.__name__,
            duration_ms,
            extra=geometry_extra(operation=func.__name__, duration_ms=round(duration_ms, 3)),
        )
        return result

    return wrapper_timer  # type: ignore[return-value]
