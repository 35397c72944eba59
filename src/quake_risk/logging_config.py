"""Structured JSON logging for the prediction service and CLI.

Outputs one JSON object per line, compatible with Google Cloud Logging,
with optional fields for run_id, locale, risk_level, score, nearest and
duration_ms.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

STRUCTURED_FIELDS = ("run_id", "locale", "risk_level", "score", "nearest", "duration_ms")


class StructuredFormatter(logging.Formatter):
    """Outputs log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Passed via logger.info(..., extra={...})
        for field in STRUCTURED_FIELDS:
            val = getattr(record, field, None)
            if val is not None:
                log_entry[field] = val

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: int = logging.INFO) -> None:
    """Replace root handlers with a single structured JSON handler.

    Call once at startup, before any logging.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
