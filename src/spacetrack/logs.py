"""Logging setup for the spacetrack CLI."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional

from .errors import ConfigError
from .models.config import LOG_LEVELS, LoggerConfig

LOGGER_NAME = "spacetrack"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

DATE_FORMATS = {
    "iso8601": "%Y-%m-%dT%H:%M:%S%z",
    "rfc3339": "%Y-%m-%dT%H:%M:%S%z",
    "rfc1123": "%a, %d %b %Y %H:%M:%S %Z",
    "ansic": "%a %b %d %H:%M:%S %Y",
    "kitchen": "%I:%M%p",
    "stamp": "%b %d %H:%M:%S",
}


def parse_level(level: str) -> int:
    """Map a level name (``warn`` accepted) to a logging constant."""
    name = level.lower()
    if name == "warn":
        name = "warning"
    if name not in LOG_LEVELS:
        raise ConfigError(
            f"logger level not allowed: {level}. Use one of {', '.join(LOG_LEVELS)}"
        )
    return getattr(logging, name.upper())


def configure_logging(
    config: Optional[LoggerConfig] = None,
    level: Optional[str] = None,
    log_files: Iterable[str] = (),
    console: Optional[bool] = None,
) -> logging.Logger:
    """Install handlers on the ``spacetrack`` logger.

    Command line values (``level``, ``log_files``, ``console``) take
    precedence over the config file's ``logger`` section. Calling this again
    replaces the previous handlers.
    """
    config = config or LoggerConfig()
    numeric_level = parse_level(level or config.level)
    use_console = config.console if console is None else console

    date_format = DATE_FORMATS.get(config.date_format.lower())
    if date_format is None:
        raise ConfigError(f"date time format not allowed: {config.date_format}")
    formatter = logging.Formatter(LOG_FORMAT, datefmt=date_format)

    handlers: List[logging.Handler] = []
    if use_console:
        handlers.append(logging.StreamHandler(sys.stderr))

    for path in [*config.files, *log_files]:
        try:
            handlers.append(logging.FileHandler(path, encoding="utf-8"))
        except OSError as e:
            for handler in handlers:
                handler.close()
            raise ConfigError(f"can not open log file {path}: {e}") from e

    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    root.setLevel(numeric_level)
    root.propagate = False
    return root


__all__ = ["DATE_FORMATS", "LOGGER_NAME", "configure_logging", "parse_level"]
