"""Logging setup and decision logging for the generator.

User progress goes through the CLI; this module covers the log stream used
for debugging and for auditing degraded output.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class CleanFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        if record.levelname == "INFO":
            return record.getMessage()
        elif record.levelname == "ERROR":
            return f"❌ {record.getMessage()}"
        elif record.levelname == "DEBUG":
            return f"🔍 {record.getMessage()}"
        else:
            return f"{record.levelname}: {record.getMessage()}"


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(CleanFormatter())
    logging.basicConfig(level=level, handlers=[console_handler], force=True)


def log_configuration(config: dict[str, Any]) -> None:
    logger.info("Generator configuration:")
    for key, value in config.items():
        logger.info("  %s: %s", key, value)


def log_extraction_decision(
    page_key: str, filename: str, decision: str, context: dict[str, Any] | None = None
) -> None:
    """Log how a topic was resolved for a page.

    Args:
        page_key: Registry key of the page
        filename: Topic spec file name
        decision: "matched", "fallback", "not-found" or "missing-file"
        context: Optional context information
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.info("%s / %s: %s (%s)", page_key, filename, decision, context_str)
    else:
        logger.info("%s / %s: %s", page_key, filename, decision)


def log_error_policy(
    feature: str, error_type: str, action: str, details: str | None = None
) -> None:
    """Log error handling policy decisions.

    Args:
        feature: Component encountering the error (e.g., "spec-source", "extractor")
        error_type: Type of error (e.g., "missing_spec_file", "no_match_found")
        action: Action taken (e.g., "placeholder", "skip", "exit")
        details: Optional additional details
    """
    if details:
        logger.warning("%s error policy: %s -> %s (%s)", feature, error_type, action, details)
    else:
        logger.warning("%s error policy: %s -> %s", feature, error_type, action)


__all__ = [
    "CleanFormatter",
    "log_configuration",
    "log_error_policy",
    "log_extraction_decision",
    "setup_logging",
]
