from __future__ import annotations

from collections.abc import Sequence

from landing_specgen.model.pages import PageDescriptor, PageFilters


def select_pages(pages: Sequence[PageDescriptor], filters: PageFilters) -> list[PageDescriptor]:
    """Apply the locale filter, then the key filter, keeping registry order."""
    selected = list(pages)
    if filters.locale is not None:
        selected = [p for p in selected if p.locale is filters.locale]
    if filters.key is not None:
        selected = [p for p in selected if p.key == filters.key]
    return selected
