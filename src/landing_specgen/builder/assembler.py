"""Assemble one page's consolidated spec file from its topic sections."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from landing_specgen.builder.templating import Templates, create_environment
from landing_specgen.extract import extract_block, sanitize_block
from landing_specgen.extract.sanitizer import DEFAULT_VIEWPORT
from landing_specgen.model.pages import PageDescriptor
from landing_specgen.model.specs import (
    FallbackTemplate,
    Matched,
    NotFound,
    SpecFileDescriptor,
    TopicSection,
)

DEFAULT_HELPER_NAMES: tuple[str, ...] = (
    "normalizeUrlForCanonical",
    "getModalHelpers",
    "TEST_LEAD",
    "safeBodyText",
)


def build_section(
    spec: SpecFileDescriptor,
    source: str | None,
    page_key: str,
    *,
    viewport: tuple[int, int] = DEFAULT_VIEWPORT,
) -> TopicSection:
    """Extract and sanitize one topic for one page.

    ``source`` is ``None`` when the spec file is missing. ``viewport`` is the
    one the page file's shared hook sets, so repeating it counts as duplicate setup.
    """
    if source is None:
        return TopicSection(
            spec=spec,
            status="missing-file",
            reason=f"{spec.filename} not found in the e2e directory",
        )

    result = extract_block(source, page_key)
    if isinstance(result, (Matched, FallbackTemplate)):
        status = "matched" if isinstance(result, Matched) else "fallback"
        body = sanitize_block(
            result.block,
            unwrap=isinstance(result, FallbackTemplate),
            viewport=viewport,
        )
        if not body:
            return TopicSection(spec=spec, status=status, reason="extracted block is empty")
        return TopicSection(spec=spec, status=status, body=body)
    if isinstance(result, NotFound):
        return TopicSection(spec=spec, status="not-found", reason=result.reason)
    raise TypeError(f"Unexpected extraction result: {result!r}")


def registry_require_path(registry_path: Path, out_dir: Path) -> str:
    """Relative ``require()`` path from the output directory to the registry."""
    rel = os.path.relpath(registry_path, out_dir).replace(os.sep, "/")
    return rel if rel.startswith(".") else f"./{rel}"


def assemble_page_spec(
    page: PageDescriptor,
    sections: Sequence[TopicSection],
    *,
    registry_require: str,
    helpers_require: str | None = "./_helpers",
    helper_names: Sequence[str] = DEFAULT_HELPER_NAMES,
    viewport: tuple[int, int] = DEFAULT_VIEWPORT,
    templates: Templates | None = None,
) -> str:
    """Render the page file: header, shared setup, one group per topic."""
    templates = templates or create_environment()
    context = {
        "page": page,
        "sections": list(sections),
        "registry_require": registry_require,
        "registry_name": registry_require.rsplit("/", 1)[-1],
        "helpers_require": helpers_require,
        "helper_names": list(helper_names),
        "viewport": viewport,
    }
    return templates.render_page_spec(context)
