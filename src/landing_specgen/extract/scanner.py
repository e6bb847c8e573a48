"""Balanced-delimiter scanning over JavaScript spec sources.

Cypress sources are scanned as a token stream: string literals, template
literals (with nested ``${ ... }`` expressions), comments and regular
expression literals are skipped, so delimiters inside them never change the
nesting depth.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

_PAIRS = {"(": ")", "{": "}", "[": "]"}

# A `/` after one of these starts a regex literal, not a division
_REGEX_PRECEDERS = frozenset("(,=:[!&|?{};+-*%<>~^")
_REGEX_KEYWORDS = re.compile(r"\b(?:return|typeof|case|do|else|in|of|void|yield|await|delete|throw)$")
_IDENT_CHARS = re.compile(r"[A-Za-z0-9_$]")


def skip_quoted(source: str, i: int, quote: str) -> int:
    """Return the index just past a '…' or "…" literal whose body starts at ``i``.

    An unterminated literal ends at the line break.
    """
    n = len(source)
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            return i
        i += 1
    return n


def skip_template(source: str, i: int) -> int:
    """Return the index just past a template literal whose body starts at ``i``."""
    n = len(source)
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "`":
            return i + 1
        if ch == "$" and source.startswith("{", i + 1):
            i = _skip_interpolation(source, i + 2)
            continue
        i += 1
    return n


def _skip_interpolation(source: str, i: int) -> int:
    depth = 0
    for pos in iter_code(source, i):
        ch = source[pos]
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                return pos + 1
            depth -= 1
    return len(source)


def _skip_regex(source: str, i: int) -> int:
    n = len(source)
    in_class = False
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "\n":
            return i
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "/":
            i += 1
            while i < n and source[i].isalpha():
                i += 1
            return i
        i += 1
    return n


def _regex_allowed(source: str, i: int, prev: str) -> bool:
    if not prev or prev in _REGEX_PRECEDERS:
        return True
    if _IDENT_CHARS.match(prev):
        return bool(_REGEX_KEYWORDS.search(source[max(0, i - 16) : i].rstrip()))
    return False


def iter_code(source: str, start: int = 0) -> Iterator[int]:
    """Yield the indices of ``source`` that are code, starting at ``start``.

    Positions inside string, template and regex literals and inside comments
    are not yielded (nor are the literal delimiters themselves).
    """
    n = len(source)
    i = start
    prev = ""
    while i < n:
        ch = source[i]
        if ch == "'" or ch == '"':
            i = skip_quoted(source, i + 1, ch)
            prev = "a"
            continue
        if ch == "`":
            i = skip_template(source, i + 1)
            prev = "a"
            continue
        if ch == "/":
            nxt = source[i + 1 : i + 2]
            if nxt == "/":
                newline = source.find("\n", i)
                i = n if newline == -1 else newline
                continue
            if nxt == "*":
                end = source.find("*/", i + 2)
                i = n if end == -1 else end + 2
                continue
            if _regex_allowed(source, i, prev):
                i = _skip_regex(source, i + 1)
                prev = "a"
                continue
        yield i
        if not ch.isspace():
            prev = ch
        i += 1


def find_matching(source: str, open_index: int) -> int | None:
    """Return the index of the delimiter closing the one at ``open_index``.

    Only delimiters of the same kind are counted. Returns ``None`` when the
    source ends before the nesting depth returns to zero.
    """
    opener = source[open_index]
    closer = _PAIRS.get(opener)
    if closer is None:
        raise ValueError(f"Not an opening delimiter at {open_index}: {opener!r}")

    depth = 0
    for pos in iter_code(source, open_index):
        ch = source[pos]
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return pos
    return None


def code_mask(source: str) -> bytearray:
    """Return a per-character mask: 1 where ``source`` is code, 0 elsewhere."""
    mask = bytearray(len(source))
    for pos in iter_code(source):
        mask[pos] = 1
    return mask


def top_level_positions(source: str) -> Iterator[int]:
    """Yield code positions that sit outside every (), {} and [] pair."""
    depth = 0
    for pos in iter_code(source):
        ch = source[pos]
        if ch in "({[":
            if depth == 0:
                yield pos
            depth += 1
        elif ch in ")}]":
            depth = max(depth - 1, 0)
        elif depth == 0:
            yield pos


__all__ = [
    "code_mask",
    "find_matching",
    "iter_code",
    "skip_quoted",
    "skip_template",
    "top_level_positions",
]
