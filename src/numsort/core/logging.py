"""Logging configuration for numsort.

Records go either to a rich console handler for people or, with
``json_output``, to one JSON object per line for machines. Records emitted
while a file is being written carry the output format of the run.
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Generator, TextIO

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACE = "numsort"

output_format_var: ContextVar[str | None] = ContextVar("output_format", default=None)

# Attributes every LogRecord has; anything else came in through ``extra``
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Fields passed to a logging call through ``extra``."""
    return {k: v for k, v in vars(record).items() if k not in _STANDARD_ATTRS}


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
        }
        output_format = output_format_var.get()
        if output_format:
            entry["output_format"] = output_format
        entry.update(record_extras(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a single handler on the numsort logger.

    Args:
        level: Logging level name
        json_output: Emit JSON lines instead of rich console output
        stream: Destination (defaults to sys.stderr)

    Returns:
        The installed handler
    """
    stream = stream if stream is not None else sys.stderr

    handler: logging.Handler
    if json_output:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
    else:
        handler = RichHandler(
            console=Console(file=stream, highlight=False),
            show_time=False,
            show_path=False,
        )

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the numsort namespace."""
    if not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)


@contextmanager
def log_context(output_format: str | None = None) -> Generator[None, None, None]:
    """Tag records emitted inside the block with the output format."""
    token = output_format_var.set(output_format)
    try:
        yield
    finally:
        output_format_var.reset(token)


@contextmanager
def log_stage(logger: logging.Logger, stage: str) -> Generator[None, None, None]:
    """Log one DEBUG record per pipeline stage with its outcome and duration.

    Exceptions are re-raised after the record is written.
    """
    started = time.perf_counter()
    outcome = "ok"
    try:
        yield
    except Exception as e:
        outcome = type(e).__name__
        raise
    finally:
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.debug(
            f"Stage {stage}: {outcome}",
            extra={"stage": stage, "outcome": outcome, "duration_ms": elapsed_ms},
        )
