"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from fraudscan_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)


def log_scan(
    request_id: str,
    user_id: str,
    status: str,
    score: float,
    source: str,
    duration_ms: float,
) -> None:
    """Log structured scan outcome for analysis"""
    logging.info(
        "Scan completed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "scan_complete",
            "status": status,
            "risk_score": round(score, 4),
            "source": source,
            "duration_ms": duration_ms,
        },
    )


def log_fallback(request_id: str, user_id: str, error: Exception) -> None:
    """Log the switch from remote prediction to local heuristic scoring"""
    logging.warning(
        f"Prediction service unavailable, using heuristic scorer: {error}",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "prediction_fallback",
        },
    )
