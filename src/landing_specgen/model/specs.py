"""Spec file, extraction and generation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from landing_specgen.model.pages import PageDescriptor


@dataclass(frozen=True, slots=True)
class SpecFileDescriptor:
    filename: str
    title: str


@dataclass(frozen=True, slots=True)
class Matched:
    """Bodies of the groups tagged ``[<page_key>]``, joined in source order."""

    block: str
    page_key: str


@dataclass(frozen=True, slots=True)
class FallbackTemplate:
    """Body of the page iteration callback, returned verbatim.

    The body is page-agnostic: it refers to the loop variable ``page`` and is
    not instantiated with the target page's data.
    """

    block: str
    page_key: str


@dataclass(frozen=True, slots=True)
class NotFound:
    page_key: str
    reason: str


ExtractionResult = Matched | FallbackTemplate | NotFound

SectionStatus = Literal["matched", "fallback", "not-found", "missing-file"]


@dataclass(frozen=True, slots=True)
class TopicSection:
    """One topic group in a generated page file."""

    spec: SpecFileDescriptor
    status: SectionStatus
    body: str | None = None
    reason: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.body is None


@dataclass(frozen=True, slots=True)
class DegradedTopic:
    page_key: str
    filename: str
    status: SectionStatus
    reason: str


@dataclass(slots=True)
class GeneratedSpecFile:
    page: PageDescriptor
    path: Path
    content: str
    sections: list[TopicSection] = field(default_factory=list)

    @property
    def placeholder_only(self) -> bool:
        return all(s.is_placeholder for s in self.sections)


@dataclass(slots=True)
class GenerationReport:
    files: list[GeneratedSpecFile] = field(default_factory=list)
    missing_spec_files: list[Path] = field(default_factory=list)
    degraded: list[DegradedTopic] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)

    @property
    def needs_review(self) -> bool:
        return bool(self.missing_spec_files or self.degraded)


__all__ = [
    "DegradedTopic",
    "ExtractionResult",
    "FallbackTemplate",
    "GeneratedSpecFile",
    "GenerationReport",
    "Matched",
    "NotFound",
    "SectionStatus",
    "SpecFileDescriptor",
    "TopicSection",
]
