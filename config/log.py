"""Logging setup driven by :class:`config.settings.LoggingSettings`.

Console output uses the plain format from the settings; the optional log file
rotates by size and can be switched to one JSON object per line.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

from .settings import LoggingSettings, settings

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging(logging_settings: Optional[LoggingSettings] = None) -> None:
    """Configure the root logger.

    Args:
        logging_settings: Section to apply; defaults to the global settings.
    """
    cfg = logging_settings or settings.logging

    root_logger = logging.getLogger()
    root_logger.setLevel(cfg.log_level)
    root_logger.handlers.clear()

    if cfg.console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(cfg.console_log_level)
        console_handler.setFormatter(logging.Formatter(cfg.log_format))
        root_logger.addHandler(console_handler)

    if cfg.log_file:
        cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_log_size_mb * 1024 * 1024,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(cfg.log_file_level)
        if cfg.json_logging:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(cfg.log_format))
        root_logger.addHandler(file_handler)

    # Keep third-party parsers quiet unless we are debugging them
    for noisy in ("pdfminer", "PIL"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
