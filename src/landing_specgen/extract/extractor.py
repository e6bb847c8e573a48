"""Locate the test code written for one page inside a topic spec file.

Lookup order:

1. ``describe(...)`` groups whose title literally contains ``[<page-key>]``.
   All of them, in source order, make up a ``Matched`` result.
2. The callback body of the suite's page loop (``targetPages.forEach((page) => {…})``),
   returned verbatim as a ``FallbackTemplate``.
3. ``NotFound``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from landing_specgen.extract.scanner import (
    code_mask,
    find_matching,
    iter_code,
    skip_quoted,
    skip_template,
)
from landing_specgen.model.specs import ExtractionResult, FallbackTemplate, Matched, NotFound

logger = logging.getLogger(__name__)

_DESCRIBE_RE = re.compile(r"\bdescribe(?:\.only|\.skip)?\s*\(\s*")
_ITERATION_RE = re.compile(r"\b(?:targetPages|filteredPages|pages)\.forEach\s*\(")
# Callback head of the page loop: `(page) => {`, `page => {`, `function (page, i) {`
_PAGE_CALLBACK_RE = re.compile(
    r"\s*(?:function\s*\w*\s*)?(?:\(\s*page\b[^)]*\)|page)\s*(?:=>)?\s*\{"
)


@dataclass(frozen=True, slots=True)
class GroupSpan:
    """A ``describe`` call found in source: its title and callback body span."""

    title: str
    start: int
    body_start: int
    body_end: int


def iter_describe_groups(source: str, mask: bytearray | None = None) -> Iterator[GroupSpan]:
    """Yield every ``describe('<literal title>', () => {…})`` group in ``source``.

    Groups whose title is not a string literal, or whose body never closes,
    are skipped.
    """
    if mask is None:
        mask = code_mask(source)
    for match in _DESCRIBE_RE.finditer(source):
        if not mask[match.start()]:
            continue
        group = _parse_group(source, match.start(), match.end())
        if group is not None:
            yield group


def _parse_group(source: str, call_start: int, arg_start: int) -> GroupSpan | None:
    quote = source[arg_start : arg_start + 1]
    if quote in ("'", '"'):
        title_end = skip_quoted(source, arg_start + 1, quote)
    elif quote == "`":
        title_end = skip_template(source, arg_start + 1)
    else:
        return None
    title = source[arg_start + 1 : title_end - 1]

    # First `{` still inside the describe(...) argument list opens the callback body
    parens = 1
    body_open: int | None = None
    for pos in iter_code(source, title_end):
        ch = source[pos]
        if ch == "(":
            parens += 1
        elif ch == ")":
            parens -= 1
            if parens == 0:
                return None
        elif ch == "{" and parens == 1:
            body_open = pos
            break
    if body_open is None:
        return None

    body_close = find_matching(source, body_open)
    if body_close is None:
        logger.debug("Unbalanced describe body at offset %d", call_start)
        return None
    return GroupSpan(title=title, start=call_start, body_start=body_open + 1, body_end=body_close)


def find_tagged_blocks(source: str, page_key: str) -> list[str]:
    """Return the bodies of groups tagged ``[page_key]``, outermost only."""
    tag = f"[{page_key}]"
    blocks: list[str] = []
    covered_until = -1
    for group in iter_describe_groups(source):
        if group.start < covered_until:
            continue
        if tag in group.title:
            blocks.append(source[group.body_start : group.body_end])
            covered_until = group.body_end
    return blocks


def find_iteration_template(source: str) -> str | None:
    """Return the body of the first page-loop callback, or ``None``."""
    mask = code_mask(source)
    for match in _ITERATION_RE.finditer(source):
        if not mask[match.start()]:
            continue
        head = _PAGE_CALLBACK_RE.match(source, match.end())
        if head is None:
            continue
        body_open = head.end() - 1
        body_close = find_matching(source, body_open)
        if body_close is None:
            logger.debug("Unbalanced page loop body at offset %d", match.start())
            continue
        return source[body_open + 1 : body_close]
    return None


def extract_block(source: str, page_key: str) -> ExtractionResult:
    """Extract the test code for ``page_key`` from one spec source."""
    tagged = find_tagged_blocks(source, page_key)
    if tagged:
        return Matched(block="\n".join(tagged), page_key=page_key)

    template = find_iteration_template(source)
    if template is not None:
        return FallbackTemplate(block=template, page_key=page_key)

    return NotFound(
        page_key=page_key,
        reason=f"no group tagged [{page_key}] and no page iteration block",
    )
