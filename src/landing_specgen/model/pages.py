"""Page registry data structures.

A registry entry in ``pages.json`` looks like::

    {
      "key": "python-ua",
      "name": "Python course (UA)",
      "url": "https://goit.global/ua/courses/python/",
      "locale": "ua",
      "expected": {"h1": "...", "ctaText": "...", "modalTitle": "..."},
      "zohoFooter": {"productName": "...", "productId": "..."}
    }

Field names stay camelCase in JSON and are mapped to snake_case attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Locale(Enum):
    """Landing page locale."""

    PRIMARY = "ua"
    SECONDARY = "ua-ru"

    @property
    def path_prefix(self) -> str | None:
        # Secondary-locale landings live under their own path; primary ones have no fixed prefix
        return "/ua-ru/" if self is Locale.SECONDARY else None


_EXPECTED_FIELDS = {
    "h1": "h1",
    "ctaText": "cta_text",
    "modalTitle": "modal_title",
    "submitButtonText": "submit_button_text",
    "anchors": "anchors",
    "discountSectionSelector": "discount_section_selector",
}


@dataclass(frozen=True, slots=True)
class PageExpectations:
    h1: str | None = None
    cta_text: str | None = None
    modal_title: str | None = None
    submit_button_text: str | None = None
    anchors: tuple[str, ...] = ()
    discount_section_selector: str | None = None
    # Unmodeled keys from pages.json
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageExpectations:
        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for json_key, value in data.items():
            attr = _EXPECTED_FIELDS.get(json_key)
            if attr is None:
                extra[json_key] = value
            elif attr == "anchors":
                if not isinstance(value, list):
                    raise ValueError("expected.anchors must be a list of selectors")
                kwargs[attr] = tuple(str(a) for a in value)
            else:
                kwargs[attr] = None if value is None else str(value)
        return cls(extra=extra, **kwargs)


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """One landing page under test."""

    key: str
    name: str
    url: str
    locale: Locale
    expected: PageExpectations = field(default_factory=PageExpectations)
    zoho_footer: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class PageFilters:
    """Registry filters, mirroring the suite's ``LOCALE`` and ``PAGE_KEY`` env vars."""

    locale: Locale | None = None
    key: str | None = None

    @classmethod
    def from_cli(cls, *, locale: str | None = None, key: str | None = None) -> PageFilters:
        """Build filters from raw CLI/env values; empty strings mean "no filter".

        Raises:
            ValueError: If the locale is not a known value
        """
        locale_enum: Locale | None = None
        if locale:
            try:
                locale_enum = Locale(locale)
            except ValueError as exc:
                valid_values = [loc.value for loc in Locale]
                raise ValueError(
                    f"Invalid locale '{locale}'. Valid values: {valid_values}"
                ) from exc
        return cls(locale=locale_enum, key=key or None)

    @property
    def is_empty(self) -> bool:
        return self.locale is None and self.key is None


__all__ = [
    "Locale",
    "PageDescriptor",
    "PageExpectations",
    "PageFilters",
]
