"""Application logging and structured audit events.

Audit events are JSON lines suitable for ingestion by SIEM tools. They
describe what happened to the record store and never carry a password or
a password hash.

The library only emits records; handlers are attached by the CLI through
configure_logging().
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    APP_LOG_NAME,
    AUDIT_LOG_NAME,
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_MAX_BYTES,
)
from core.storage import ensure_directory


AUDIT_LOGGER_NAME = "passkeeper.audit"
EVENT_SOURCE = "passkeeper"

# Module-level state
_logging_configured = False
_configure_lock = Lock()

audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)


class JsonEventFormatter(logging.Formatter):
    """Render audit records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        event = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "event_type": getattr(record, "event_type", record.getMessage()),
            "status": getattr(record, "status", record.levelname),
            "source": EVENT_SOURCE,
        }

        details = getattr(record, "details", None)
        if details:
            event["details"] = details

        return json.dumps(event)


def configure_logging(log_dir: str = LOG_DIR, level: int = logging.INFO) -> None:
    """Configure rotating log files on first use.

    Args:
        log_dir: Directory for the application and audit logs
        level: Level for the application log
    """
    global _logging_configured
    with _configure_lock:
        if _logging_configured:
            return

        ensure_directory(log_dir)

        app_handler = RotatingFileHandler(
            os.path.join(log_dir, APP_LOG_NAME),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        app_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        root = logging.getLogger()
        root.setLevel(level)
        root.addHandler(app_handler)

        audit_handler = RotatingFileHandler(
            os.path.join(log_dir, AUDIT_LOG_NAME),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        audit_handler.setFormatter(JsonEventFormatter())
        audit_logger.setLevel(logging.INFO)
        audit_logger.addHandler(audit_handler)
        audit_logger.propagate = False

        _logging_configured = True


def log_event(event_type: str, status: str, details: Optional[dict] = None) -> None:
    """Log an audit event.

    Args:
        event_type: Type of event (e.g., 'credential_saved')
        status: Event status (e.g., 'SUCCESS', 'FAILURE')
        details: Optional additional event details
    """
    audit_logger.info(
        event_type,
        extra={"event_type": event_type, "status": status, "details": details},
    )
