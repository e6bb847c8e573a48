"""CLI interface for landing-specgen."""

import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.table import Table

from landing_specgen import __version__
from landing_specgen.config import GeneratorConfig
from landing_specgen.errors import MalformedRegistry
from landing_specgen.generator import generate_page_specs
from landing_specgen.model.specs import GenerationReport
from landing_specgen.registry import load_registry, select_pages
from landing_specgen.reporting import setup_logging
from landing_specgen.ui.progress import ProgressReporter

app = typer.Typer(
    name="landing-specgen",
    help="Generate per-page Cypress spec files from the topic specs and the page registry.",
    invoke_without_command=True,
)

RootOpt = Annotated[
    Path,
    typer.Option("--root", help="Cypress project root (default: current directory)"),
]
RegistryOpt = Annotated[
    Path | None,
    typer.Option("--registry", help="Page registry JSON (default: cypress/fixtures/pages.json)"),
]
LocaleOpt = Annotated[
    str | None,
    typer.Option("--locale", envvar="LOCALE", help="Only pages with this locale ('ua' or 'ua-ru')"),
]
PageKeyOpt = Annotated[
    str | None,
    typer.Option("--page-key", envvar="PAGE_KEY", help="Only the page with this registry key"),
]


def _build_config(
    *,
    root: Path = Path("."),
    registry: Path | None = None,
    e2e_dir: Path | None = None,
    out_dir: Path | None = None,
    locale: str | None = None,
    page_key: str | None = None,
) -> GeneratorConfig:
    try:
        return GeneratorConfig.from_cli(
            root=root,
            registry=registry,
            e2e_dir=e2e_dir,
            out_dir=out_dir,
            locale=locale,
            page_key=page_key,
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _print_summary(report: GenerationReport) -> None:
    typer.echo(f"\n✨ Done! Generated {report.count} page test files")

    for path in report.missing_spec_files:
        typer.echo(f"⚠️  Spec file not found: {path}")
    for item in report.degraded:
        if item.status != "missing-file":
            typer.echo(f"⚠️  {item.page_key} / {item.filename}: {item.reason}")
    if report.count == 0:
        typer.echo("⚠️  No pages matched the selected filters; nothing was written")

    typer.echo("\n⚠️  Note: Generated files may need manual adjustments")
    typer.echo("   Please review and test each file before using in production")


def run_generate(config: GeneratorConfig) -> GenerationReport:
    typer.echo("🚀 Generating page-specific test files...\n")

    with ProgressReporter(disable=not sys.stdout.isatty()) as pr:

        def _emit(event: str, payload: dict[str, int | str]) -> None:
            pr.emit(event, payload)
            if event == "registry:loaded":
                typer.echo(f"Found {payload['pages']} pages\n")
            elif event == "page:start":
                typer.echo(f"Generating tests for: {payload['name']} ({payload['key']})...")
            elif event == "page:written":
                typer.echo(f"  ✅ Created: {payload['path']}\n")

        try:
            report = generate_page_specs(config, on_progress=_emit)
        except MalformedRegistry as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    _print_summary(report)
    return report


@app.command()
def generate(
    root: RootOpt = Path("."),
    registry: RegistryOpt = None,
    e2e_dir: Annotated[
        Path | None,
        typer.Option("--e2e-dir", help="Directory with the topic spec files (default: cypress/e2e)"),
    ] = None,
    out_dir: Annotated[
        Path | None,
        typer.Option("--out-dir", help="Output directory for page files (default: <e2e-dir>/pages)"),
    ] = None,
    locale: LocaleOpt = None,
    page_key: PageKeyOpt = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every extraction decision"),
    ] = False,
) -> None:
    """
    Generate one consolidated spec file per landing page.

    Every page in the registry gets cypress/e2e/pages/<key>.cy.js containing
    the tests extracted from each topic spec. Existing page files are
    overwritten; other files in the output directory are left alone.

    Examples:

        # Regenerate everything from the project root
        landing-specgen generate

        # Only the Russian-language landings
        landing-specgen generate --locale ua-ru
    """
    setup_logging(verbose)
    config = _build_config(
        root=root,
        registry=registry,
        e2e_dir=e2e_dir,
        out_dir=out_dir,
        locale=locale,
        page_key=page_key,
    )
    run_generate(config)


@app.command()
def pages(
    root: RootOpt = Path("."),
    registry: RegistryOpt = None,
    locale: LocaleOpt = None,
    page_key: PageKeyOpt = None,
) -> None:
    """List the registry pages selected by the given filters."""
    config = _build_config(root=root, registry=registry, locale=locale, page_key=page_key)
    try:
        selected = select_pages(load_registry(config.registry_path), config.filters)
    except MalformedRegistry as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    table = Table(title=f"Pages ({len(selected)})")
    table.add_column("Key")
    table.add_column("Locale")
    table.add_column("Name")
    table.add_column("URL")
    for page in selected:
        table.add_row(page.key, page.locale.value, page.name, page.url)
    Console().print(table)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"landing-specgen version {__version__}")


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"landing-specgen version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    landing-specgen - consolidate topic-based Cypress specs into per-page files.

    Run without a command to regenerate all page files with the default
    project layout (same as `landing-specgen generate`). PAGE_KEY and LOCALE
    are read from the environment or a .env file.
    """
    # .env values never override the real environment
    load_dotenv(find_dotenv(usecwd=True), override=False)
    if ctx.invoked_subcommand is None:
        setup_logging(False)
        config = _build_config(
            locale=os.environ.get("LOCALE"),
            page_key=os.environ.get("PAGE_KEY"),
        )
        run_generate(config)


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
