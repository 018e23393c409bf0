"""Logging configuration for the container runner.

The Docker SDK logs every HTTP request through ``docker`` and ``urllib3``;
those loggers are held at WARNING unless DEBUG output is requested.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are noisy on every engine call
ENGINE_LOGGERS = ("docker", "urllib3")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for programmatic parsing."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj)


def _console_handler(level: str, rich_console: bool, json_format: bool) -> logging.Handler:
    if json_format:
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        return handler
    if rich_console:
        return RichHandler(
            level=level,
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_path=False,
        )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    rich_console: bool = True,
    json_format: bool = False,
) -> None:
    """Configure logging for a runner session.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives the lifecycle log as well
        rich_console: Use rich console handler for pretty output
        json_format: Use structured JSON logging format (overrides rich_console)
    """
    level = level.upper()
    handlers = [_console_handler(level, rich_console, json_format)]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level),
        handlers=handlers,
        force=True,
    )

    engine_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(engine_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
