"""Generator configuration.

Paths default to the Cypress project layout::

    cypress/fixtures/pages.json   page registry
    cypress/e2e/                  topic spec files
    cypress/e2e/pages/            generated page files

Relative overrides are resolved against the project root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from landing_specgen.model.pages import PageFilters

DEFAULT_REGISTRY = Path("cypress/fixtures/pages.json")
DEFAULT_E2E_DIR = Path("cypress/e2e")
DEFAULT_OUT_SUBDIR = "pages"


@dataclass(frozen=True)
class GeneratorConfig:
    registry_path: Path
    e2e_dir: Path
    out_dir: Path
    filters: PageFilters = field(default_factory=PageFilters)
    extension: str = ".cy.js"
    helpers_require: str | None = "./_helpers"
    viewport: tuple[int, int] = (1280, 720)

    @classmethod
    def from_cli(
        cls,
        *,
        root: Path = Path("."),
        registry: Path | None = None,
        e2e_dir: Path | None = None,
        out_dir: Path | None = None,
        locale: str | None = None,
        page_key: str | None = None,
    ) -> GeneratorConfig:
        """Build a config from CLI argument values.

        Raises:
            ValueError: If the locale filter is not a known locale
        """
        e2e = _resolve(root, e2e_dir, DEFAULT_E2E_DIR)
        return cls(
            registry_path=_resolve(root, registry, DEFAULT_REGISTRY),
            e2e_dir=e2e,
            out_dir=_resolve(root, out_dir, e2e / DEFAULT_OUT_SUBDIR),
            filters=PageFilters.from_cli(locale=locale, key=page_key),
        )

    def output_path(self, page_key: str) -> Path:
        return self.out_dir / f"{page_key}{self.extension}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "registry_path": str(self.registry_path),
            "e2e_dir": str(self.e2e_dir),
            "out_dir": str(self.out_dir),
            "locale": self.filters.locale.value if self.filters.locale else None,
            "page_key": self.filters.key,
            "extension": self.extension,
        }


def _resolve(root: Path, value: Path | None, default: Path) -> Path:
    path = value if value is not None else default
    return path if path.is_absolute() else root / path
