from __future__ import annotations

import logging

import pytest

from landing_specgen.reporting import CleanFormatter, log_error_policy, log_extraction_decision


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("x", level, __file__, 1, msg, None, None)


def test_clean_formatter_prefixes() -> None:
    fmt = CleanFormatter()
    assert fmt.format(_record(logging.INFO, "hello")) == "hello"
    assert fmt.format(_record(logging.ERROR, "bad")) == "❌ bad"
    assert fmt.format(_record(logging.WARNING, "careful")) == "WARNING: careful"


def test_decision_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="landing_specgen.reporting"):
        log_extraction_decision("a", "12-footer.cy.js", "matched", {"blocks": 2})
        log_error_policy("extractor", "no_match_found", "placeholder", "b / 12-footer.cy.js")

    assert "a / 12-footer.cy.js: matched (blocks=2)" in caplog.text
    assert "extractor error policy: no_match_found -> placeholder (b / 12-footer.cy.js)" in caplog.text
