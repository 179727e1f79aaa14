# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
Structured Logging — JSON format with element context.

Logs go to stderr: stdout carries nothing but the rendered prompt.
"""

from __future__ import annotations

import json
import logging
import sys


class StructuredFormatter(logging.Formatter):
    """JSON log formatter with element kind/token context."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        for key in ("kind", "token", "errno"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


def setup_logging(level: str = "WARNING") -> None:
    """Configure structured JSON logging on stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.handlers.clear()
    root.addHandler(handler)
