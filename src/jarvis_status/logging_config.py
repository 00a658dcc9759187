"""
Logging configuration for the status summarizer.

Stdout carries the JSON record the status-bar host parses, so nothing is ever
logged there:
- Console output goes to stderr and is silenced unless a level is configured
- File output is opt-in and appends to the configured path
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_SILENT_LEVEL = logging.CRITICAL + 1
_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, e)


def _reset_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


def _technical_formatter() -> logging.Formatter:
    return logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)


def _build_console_handler(level_name: Optional[str]) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_technical_formatter())
    if level_name is None:
        console_handler.setLevel(_SILENT_LEVEL)
    else:
        console_handler.setLevel(getattr(logging, level_name))
    return console_handler


def _build_file_handler(log_file: Optional[Path], level_name: Optional[str]) -> Optional[logging.Handler]:
    if log_file is None:
        return None

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        _MODULE_LOGGER.debug("Log file %s unavailable: %s", log_file, exc)
        return None

    file_handler.setFormatter(_technical_formatter())
    file_handler.setLevel(getattr(logging, level_name) if level_name else logging.INFO)
    return file_handler


def setup_logging(
    level_name: Optional[str] = None,
    log_file: Optional[Path] = None,
    *,
    root_logger: Optional[logging.Logger] = None,
) -> None:
    """Configure the root logger (or the given logger) for one status invocation."""

    with _config_lock:
        if root_logger is None:
            root_logger = logging.getLogger()
        _reset_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(level_name))

        file_handler = _build_file_handler(log_file, level_name)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG)
