"""Generate one consolidated spec file per registry page.

Pipeline: load registry -> select pages -> read each topic spec once ->
per page, extract/sanitize every topic -> render -> write ``<key>.cy.js``.

Only an unreadable registry aborts the run. Missing topic files and topics
with no extractable tests become placeholders and are listed in the report.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from landing_specgen.builder.assembler import (
    assemble_page_spec,
    build_section,
    registry_require_path,
)
from landing_specgen.builder.catalog import SPEC_FILES
from landing_specgen.builder.output_io import atomic_write_text
from landing_specgen.builder.templating import create_environment
from landing_specgen.config import GeneratorConfig
from landing_specgen.errors import MissingSpecFile, NoMatchFound
from landing_specgen.model.specs import (
    DegradedTopic,
    GeneratedSpecFile,
    GenerationReport,
    SpecFileDescriptor,
    TopicSection,
)
from landing_specgen.registry import load_registry, select_pages
from landing_specgen.reporting import (
    log_configuration,
    log_error_policy,
    log_extraction_decision,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, dict[str, int | str]], None]


def _section_context(section: TopicSection) -> dict[str, int | str]:
    if section.body is not None:
        return {"lines": section.body.count("\n") + 1}
    return {"reason": section.reason or ""}


def read_spec_source(e2e_dir: Path, spec: SpecFileDescriptor) -> str:
    """Read one topic spec file as opaque text.

    Raises:
        MissingSpecFile: If the file does not exist
    """
    path = e2e_dir / spec.filename
    if not path.is_file():
        raise MissingSpecFile(path)
    return path.read_text(encoding="utf-8")


def load_spec_sources(
    e2e_dir: Path,
    specs: Sequence[SpecFileDescriptor],
    report: GenerationReport,
) -> dict[str, str | None]:
    sources: dict[str, str | None] = {}
    for spec in specs:
        try:
            sources[spec.filename] = read_spec_source(e2e_dir, spec)
        except MissingSpecFile as exc:
            log_error_policy("spec-source", "missing_spec_file", "placeholder", str(exc.path))
            report.missing_spec_files.append(exc.path)
            sources[spec.filename] = None
    return sources


def generate_page_specs(
    config: GeneratorConfig,
    *,
    specs: Sequence[SpecFileDescriptor] = SPEC_FILES,
    on_progress: ProgressCallback | None = None,
) -> GenerationReport:
    """Regenerate every selected page file, overwriting previous output.

    Raises:
        MalformedRegistry: If the registry cannot be read or parsed
    """

    def _emit(event: str, payload: dict[str, int | str]) -> None:
        if on_progress is not None:
            on_progress(event, payload)

    log_configuration(config.to_dict())

    # Registry first: a fatal error must not leave an output directory behind
    pages = select_pages(load_registry(config.registry_path), config.filters)
    _emit("registry:loaded", {"pages": len(pages)})

    report = GenerationReport()
    sources = load_spec_sources(config.e2e_dir, specs, report)

    config.out_dir.mkdir(parents=True, exist_ok=True)
    templates = create_environment()
    registry_require = registry_require_path(config.registry_path, config.out_dir)

    for page in pages:
        _emit("page:start", {"key": page.key, "name": page.name})

        sections = []
        for spec in specs:
            section = build_section(
                spec, sources[spec.filename], page.key, viewport=config.viewport
            )
            log_extraction_decision(
                page.key, spec.filename, section.status, _section_context(section)
            )
            if section.is_placeholder:
                reason = section.reason or ""
                if section.status == "not-found":
                    reason = str(NoMatchFound(page.key, spec.filename))
                    log_error_policy("extractor", "no_match_found", "placeholder", reason)
                report.degraded.append(
                    DegradedTopic(page.key, spec.filename, section.status, reason)
                )
            sections.append(section)

        content = assemble_page_spec(
            page,
            sections,
            registry_require=registry_require,
            helpers_require=config.helpers_require,
            viewport=config.viewport,
            templates=templates,
        )
        output_path = config.output_path(page.key)
        atomic_write_text(output_path, content)
        report.files.append(
            GeneratedSpecFile(page=page, path=output_path, content=content, sections=sections)
        )
        _emit("page:written", {"key": page.key, "path": str(output_path)})

    _emit("generation:finalized", {"pages": report.count})
    logger.debug("Generated %d page spec files in %s", report.count, config.out_dir)
    return report


__all__ = [
    "ProgressCallback",
    "generate_page_specs",
    "load_spec_sources",
    "read_spec_source",
]
