"""Exception classes for registry loading and spec generation.

Only ``MalformedRegistry`` is fatal. ``MissingSpecFile`` and ``NoMatchFound``
describe degraded topics: the generator records them and emits a placeholder
instead of aborting the run.
"""

from __future__ import annotations

from pathlib import Path


class SpecGenError(Exception):
    """Base class for all generator errors."""


class MalformedRegistry(SpecGenError):
    """Raised when the page registry cannot be read or is not a list of pages."""

    def __init__(self, path: Path, reason: str, cause: Exception | None = None) -> None:
        self.path = path
        self.reason = reason
        self.cause = cause

        message = f"Malformed page registry {path}: {reason}"
        if cause:
            message += f" ({cause})"
        super().__init__(message)


class MissingSpecFile(SpecGenError):
    """Raised when a catalog spec file does not exist in the e2e directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Spec file not found: {path}")


class NoMatchFound(SpecGenError):
    """No page-tagged group and no iteration template in a spec file."""

    def __init__(self, page_key: str, filename: str) -> None:
        self.page_key = page_key
        self.filename = filename
        super().__init__(f"No tests found for page '{page_key}' in {filename}")


__all__ = [
    "MalformedRegistry",
    "MissingSpecFile",
    "NoMatchFound",
    "SpecGenError",
]
