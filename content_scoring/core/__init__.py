"""Core utilities and configuration."""

from content_scoring.core.config import Settings, get_settings
from content_scoring.core.logging import (
    ScoringLogger,
    get_logger,
    scoring_logger,
    setup_logging,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "ScoringLogger",
    "get_logger",
    "scoring_logger",
    "setup_logging",
]
