"""Structured logging configuration.

All logs go to stdout. Uses JSON format for structured logging in
production and a plain text format for local development.

ERROR LOGGING REQUIREMENTS:
- Never log document text, only its length
- Log scoring completion at INFO with score, level and failed check ids
- Log scoring operations slower than the configured threshold at WARNING
- Log rule configuration errors at ERROR with the offending values
"""

import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pythonjsonlogger import jsonlogger

from content_scoring.core.config import get_settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):  # type: ignore[name-defined]
    """Custom JSON formatter with additional fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def setup_logging() -> None:
    """Configure application logging.

    Uses JSON format when ``log_format`` is ``json``, text format otherwise.
    """
    settings = get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # Clear existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)


class ScoringLogger:
    """Logger for scoring operations with required error logging."""

    def __init__(self) -> None:
        self.logger = get_logger("content_scoring.scoring")

    def scoring_started(self, content_length: int, slug: str, word_count: int) -> None:
        """Log method entry at DEBUG with sanitized document context."""
        self.logger.debug(
            "score_document() called",
            extra={
                "content_length": content_length,
                "slug": slug,
                "word_count": word_count,
            },
        )

    def scoring_completed(
        self,
        score: int,
        level: str,
        failed_checks: list[str],
        duration_ms: float,
        slug: str | None = None,
    ) -> None:
        """Log scoring completion at INFO."""
        self.logger.info(
            "Content scoring completed",
            extra={
                "phase": "seo_scoring",
                "status": "completed",
                "score": score,
                "level": level,
                "failed_checks": failed_checks,
                "duration_ms": round(duration_ms, 2),
                "slug": slug,
            },
        )

    def slow_operation(
        self,
        operation: str,
        duration_ms: float,
        threshold_ms: int,
        **context: Any,
    ) -> None:
        """Log an operation that exceeded the slow threshold at WARNING."""
        self.logger.warning(
            f"Slow {operation} operation",
            extra={
                "operation": operation,
                "duration_ms": round(duration_ms, 2),
                "threshold_ms": threshold_ms,
                **context,
            },
        )

    def batch_completed(
        self,
        input_count: int,
        average_score: float,
        duration_ms: float,
    ) -> None:
        """Log batch scoring completion at INFO."""
        self.logger.info(
            "Batch content scoring completed",
            extra={
                "input_count": input_count,
                "average_score": round(average_score, 2),
                "duration_ms": round(duration_ms, 2),
            },
        )

    def rules_invalid(self, reason: str, **context: Any) -> None:
        """Log an inconsistent rule configuration at ERROR."""
        self.logger.error(
            "Invalid scoring rules",
            extra={"reason": reason, **context},
        )


scoring_logger = ScoringLogger()
