from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from landing_specgen.cli import app


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, isolate_logging: None) -> None:
    monkeypatch.delenv("LOCALE", raising=False)
    monkeypatch.delenv("PAGE_KEY", raising=False)


def test_cli_shows_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "generate" in result.stdout
    assert "pages" in result.stdout


def test_generate_command(cypress_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--root", str(cypress_project)])

    assert result.exit_code == 0, result.output
    assert "Found 2 pages" in result.stdout
    assert "Generating tests for: Course A (a)..." in result.stdout
    assert "✅ Created:" in result.stdout
    assert "Done! Generated 2 page test files" in result.stdout
    assert "Generated files may need manual adjustments" in result.stdout
    assert (cypress_project / "cypress" / "e2e" / "pages" / "b.cy.js").exists()


def test_generate_reports_degraded_topics(cypress_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--root", str(cypress_project)])

    assert result.exit_code == 0
    assert "Spec file not found:" in result.stdout
    assert "b / 12-footer.cy.js: No tests found for page 'b' in 12-footer.cy.js" in result.stdout


def test_no_arguments_runs_generate(cypress_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(cypress_project)
    runner = CliRunner()
    result = runner.invoke(app, [], env={"LOCALE": "ua-ru"})

    assert result.exit_code == 0, result.output
    assert "Done! Generated 1 page test files" in result.stdout
    out_dir = cypress_project / "cypress" / "e2e" / "pages"
    assert sorted(p.name for p in out_dir.iterdir()) == ["b.cy.js"]


def test_page_key_option(cypress_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "--root", str(cypress_project), "--page-key", "a"]
    )
    assert result.exit_code == 0
    assert "Done! Generated 1 page test files" in result.stdout


def test_malformed_registry_exits_non_zero(
    cypress_project: Path, write_registry: Callable[[Any], Path]
) -> None:
    write_registry({"not": "a list"})
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--root", str(cypress_project)])

    assert result.exit_code == 1
    assert "Malformed page registry" in result.output
    assert not (cypress_project / "cypress" / "e2e" / "pages").exists()


def test_invalid_locale_exits_non_zero(cypress_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--root", str(cypress_project), "--locale", "en"])
    assert result.exit_code == 1
    assert "Invalid locale 'en'" in result.output


def test_pages_command_lists_selection(cypress_project: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["pages", "--root", str(cypress_project), "--locale", "ua"])

    assert result.exit_code == 0, result.output
    assert "Pages (1)" in result.stdout
    assert "Course A" in result.stdout
    assert "Course B" not in result.stdout
