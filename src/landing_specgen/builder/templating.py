from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def js_string(value: object) -> str:
    """Escape a value for use inside a single-quoted JavaScript string."""
    text = str(value)
    return (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def js_comment(value: object) -> str:
    """Make a value safe inside a single-line or block comment."""
    return " ".join(str(value).split()).replace("*/", "*\\/")


@dataclass(frozen=True)
class Templates:
    env: Environment

    def render_page_spec(self, context: dict[str, Any]) -> str:
        tpl = self.env.get_template("page_spec.cy.js.j2")
        return str(tpl.render(**context))


def create_environment(templates_dir: Path = TEMPLATES_DIR) -> Templates:
    loader = FileSystemLoader(str(templates_dir))
    # Output is JavaScript, not HTML: escaping is done explicitly with the js_* filters
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["js_string"] = js_string
    env.filters["js_comment"] = js_comment
    return Templates(env=env)
