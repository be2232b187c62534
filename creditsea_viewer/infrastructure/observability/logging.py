"""Structured JSON logging for the viewer"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from creditsea_viewer.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_fetch(outcome: str, report_count: int | None, duration_ms: float, sequence: int) -> None:
    """Log structured collection fetch outcome"""
    logging.getLogger("creditsea_viewer.fetch").info(
        "Report fetch completed",
        extra={
            "step": "fetch_complete",
            "outcome": outcome,  # applied | stale | failed
            "report_count": report_count,
            "duration_ms": duration_ms,
            "sequence": sequence,
        },
    )


def log_upload(filename: str, succeeded: bool, duration_ms: float) -> None:
    """Log structured upload outcome"""
    logging.getLogger("creditsea_viewer.upload").info(
        "Report upload completed",
        extra={
            "step": "upload_complete",
            "outcome": "succeeded" if succeeded else "failed",
            "upload_filename": filename,
            "duration_ms": duration_ms,
        },
    )
