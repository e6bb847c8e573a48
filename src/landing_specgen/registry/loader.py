"""Page registry loading and validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from landing_specgen.errors import MalformedRegistry
from landing_specgen.model.pages import Locale, PageDescriptor, PageExpectations

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("key", "name", "url", "locale")


def load_registry(path: Path) -> list[PageDescriptor]:
    """Parse ``pages.json`` into page descriptors, preserving file order.

    Raises:
        MalformedRegistry: If the file is missing, unparsable, not a JSON array,
            or any entry breaks a registry invariant
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MalformedRegistry(path, "cannot read file", cause=exc) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedRegistry(path, "invalid JSON", cause=exc) from exc

    if not isinstance(data, list):
        raise MalformedRegistry(path, f"expected a JSON array, got {type(data).__name__}")

    pages: list[PageDescriptor] = []
    seen: set[str] = set()
    for index, entry in enumerate(data):
        page = _parse_entry(path, index, entry)
        if page.key in seen:
            raise MalformedRegistry(path, f"duplicate page key '{page.key}'")
        seen.add(page.key)
        pages.append(page)

    logger.debug("Loaded %d pages from %s", len(pages), path)
    return pages


def _parse_entry(path: Path, index: int, entry: Any) -> PageDescriptor:
    if not isinstance(entry, dict):
        raise MalformedRegistry(path, f"entry {index} is not an object")

    for name in _REQUIRED_FIELDS:
        value = entry.get(name)
        if not isinstance(value, str) or not value.strip():
            raise MalformedRegistry(path, f"entry {index} has no valid '{name}'")

    key = entry["key"]
    try:
        locale = Locale(entry["locale"])
    except ValueError as exc:
        raise MalformedRegistry(
            path, f"page '{key}' has unknown locale '{entry['locale']}'"
        ) from exc

    url = entry["url"]
    _check_url(path, key, url, locale)

    expected_raw = entry.get("expected") or {}
    if not isinstance(expected_raw, dict):
        raise MalformedRegistry(path, f"page '{key}': 'expected' must be an object")
    try:
        expected = PageExpectations.from_dict(expected_raw)
    except ValueError as exc:
        raise MalformedRegistry(path, f"page '{key}': {exc}") from exc

    zoho = entry.get("zohoFooter")
    if zoho is not None and not isinstance(zoho, dict):
        raise MalformedRegistry(path, f"page '{key}': 'zohoFooter' must be an object")

    return PageDescriptor(
        key=key,
        name=entry["name"],
        url=url,
        locale=locale,
        expected=expected,
        zoho_footer=dict(zoho) if zoho is not None else None,
    )


def _check_url(path: Path, key: str, url: str, locale: Locale) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise MalformedRegistry(path, f"page '{key}' url is not absolute: {url}")

    secondary_prefix = Locale.SECONDARY.path_prefix or ""
    under_secondary = parsed.path.startswith(secondary_prefix)
    if (locale is Locale.SECONDARY) != under_secondary:
        raise MalformedRegistry(
            path,
            f"page '{key}' url path {parsed.path!r} does not match locale '{locale.value}'",
        )
