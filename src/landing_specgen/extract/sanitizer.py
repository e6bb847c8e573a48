"""Turn an extracted block into code that can be embedded in a page file.

Only structure changes here: the per-page ``describe`` wrapper of the loop
template is unwrapped, setup statements the page file's shared
``beforeEach`` already runs are dropped, and the text is re-indented. Test
bodies are kept as written.
"""

from __future__ import annotations

import re
import textwrap

from landing_specgen.extract.extractor import iter_describe_groups
from landing_specgen.extract.scanner import (
    code_mask,
    find_matching,
    iter_code,
    top_level_positions,
)

BODY_INDENT = "    "
DEFAULT_VIEWPORT: tuple[int, int] = (1280, 720)

# Title of the loop's per-page group: `[${page.key}] Hero block`
_LOOP_TITLE_RE = re.compile(r"\[\$\{\s*page\.key\s*\}\]")
_WRAPPER_TAIL_RE = re.compile(r"\s*\)\s*;?\s*")
_HOOK_RE = re.compile(r"\bbeforeEach\s*\(")
_STATEMENT_END_RE = re.compile(r"[ \t]*;?[ \t]*(?:\r?\n)?")
_LINE_REST_RE = re.compile(r"[ \t]*(?:\r?\n|\Z)")
_LEADING_BLANKS_RE = re.compile(r"\A[ \t]*\n(?:[ \t]*\n)+")


def unwrap_page_group(block: str) -> str:
    """Return the inner body when ``block`` is the loop's single per-page ``describe``."""
    stripped = block.strip()
    if not stripped.startswith("describe"):
        return block
    group = next(iter_describe_groups(stripped), None)
    if group is None or group.start != 0 or not _LOOP_TITLE_RE.match(group.title):
        return block
    if not _WRAPPER_TAIL_RE.fullmatch(stripped, group.body_end + 1):
        return block
    return stripped[group.body_start : group.body_end]


def shared_setup_patterns(
    viewport: tuple[int, int] = DEFAULT_VIEWPORT,
) -> tuple[re.Pattern[str], ...]:
    """Statements of the page file's own ``beforeEach``, whitespace removed."""
    width, height = viewport
    return (
        re.compile(rf"cy\.viewport\({width},{height}\)"),
        re.compile(r"cy\.visit\(page\.url\)"),
        re.compile(
            r"cy\.window\(\)\.then\(\(?win\)?=>"
            r"(?:win\.scrollTo\(0,0\)|\{win\.scrollTo\(0,0\);?\})\)"
        ),
    )


def _callback_body_open(block: str, open_paren: int) -> int | None:
    parens = 0
    for pos in iter_code(block, open_paren):
        ch = block[pos]
        if ch == "(":
            parens += 1
        elif ch == ")":
            parens -= 1
            if parens == 0:
                return None
        elif ch == "{" and parens == 1:
            return pos
    return None


def _cut_statement(text: str, start: int, end: int) -> str:
    line_start = text.rfind("\n", 0, start) + 1
    rest = _LINE_REST_RE.match(text, end)
    if rest is not None and not text[line_start:start].strip():
        return text[:line_start] + text[rest.end() :]
    return text[:start] + text[end:].lstrip(" \t")


def drop_shared_statements(body: str, patterns: tuple[re.Pattern[str], ...]) -> str | None:
    """Remove the ``;``-terminated statements of ``body`` matching ``patterns``.

    Returns ``None`` when no other code is left, i.e. the whole hook only
    repeated the shared setup.
    """
    spans: list[tuple[int, int]] = []
    other_code = False
    depth = 0
    first: int | None = None
    chars: list[str] = []
    for pos in iter_code(body):
        ch = body[pos]
        if ch.isspace():
            continue
        if first is None:
            first = pos
        chars.append(ch)
        if ch in "({[":
            depth += 1
        elif ch in ")}]":
            depth -= 1
        elif ch == ";" and depth == 0:
            statement = "".join(chars[:-1])
            if any(p.fullmatch(statement) for p in patterns):
                spans.append((first, pos + 1))
            else:
                other_code = True
            first = None
            chars = []
    if first is not None:
        other_code = True
    if not other_code:
        return None

    for start, end in reversed(spans):
        body = _cut_statement(body, start, end)
    return _LEADING_BLANKS_RE.sub("\n", body, count=1)


def remove_setup_hooks(block: str, viewport: tuple[int, int] = DEFAULT_VIEWPORT) -> str:
    """Strip the shared setup out of top-level ``beforeEach(...)`` hooks.

    A hook that only repeats the page file's setup is removed entirely. A hook
    doing anything else keeps its remaining statements and comments.
    Nested hooks are left alone.
    """
    patterns = shared_setup_patterns(viewport)
    mask = code_mask(block)
    top_level = set(top_level_positions(block))
    edits: list[tuple[int, int, str]] = []
    for match in _HOOK_RE.finditer(block):
        start = match.start()
        if not mask[start] or start not in top_level:
            continue
        open_paren = match.end() - 1
        close = find_matching(block, open_paren)
        body_open = _callback_body_open(block, open_paren)
        if close is None or body_open is None:
            continue
        body_close = find_matching(block, body_open)
        if body_close is None or body_close > close:
            continue

        body = block[body_open + 1 : body_close]
        kept = drop_shared_statements(body, patterns)
        if kept is None:
            end = _STATEMENT_END_RE.match(block, close + 1).end()
            line_start = block.rfind("\n", 0, start) + 1
            if not block[line_start:start].strip():
                start = line_start
            edits.append((start, end, ""))
        elif kept != body:
            edits.append((body_open + 1, body_close, kept))

    for start, end, text in reversed(edits):
        block = block[:start] + text + block[end:]
    return block


def reindent(block: str, indent: str = BODY_INDENT) -> str:
    lines = [line.rstrip() for line in textwrap.dedent(block).splitlines()]

    out: list[str] = []
    for line in lines:
        if not line and (not out or not out[-1]):
            continue
        out.append(line)
    while out and not out[-1]:
        out.pop()

    return "\n".join(indent + line if line else "" for line in out)


def sanitize_block(
    block: str,
    *,
    unwrap: bool = False,
    viewport: tuple[int, int] = DEFAULT_VIEWPORT,
) -> str:
    """Drop duplicated setup and re-indent an extracted block.

    ``unwrap`` is set for loop templates, whose body is the per-page group.
    """
    if unwrap:
        block = unwrap_page_group(block)
    return reindent(remove_setup_hooks(block, viewport))


__all__ = [
    "BODY_INDENT",
    "DEFAULT_VIEWPORT",
    "drop_shared_statements",
    "reindent",
    "remove_setup_hooks",
    "sanitize_block",
    "shared_setup_patterns",
    "unwrap_page_group",
]
