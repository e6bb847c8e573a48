import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


TAGGED_FOOTER_SPEC = """/// <reference types="cypress" />

describe('[a] Footer', () => {
  beforeEach(() => {
    cy.viewport(1280, 720);
    cy.visit(page.url);
  });

  it('shows the footer form', () => {
    if (page.zohoFooter) {
      cy.get('footer form').should('exist');
    } else {
      cy.log('no footer form configured');
    }
    cy.get('footer').should('contain', 'ASSERT_A');
  });
});
"""

LOOP_HERO_SPEC = """/// <reference types="cypress" />

// eslint-disable-next-line @typescript-eslint/no-var-requires
const pages = require('../fixtures/pages.json');

const pageKey = Cypress.env('PAGE_KEY');
const targetPages = pageKey ? pages.filter((p) => p.key === pageKey) : pages;

targetPages.forEach((page) => {
  describe(`[${page.key}] Hero block`, () => {
    const getHero = () => cy.get('section.hero');

    beforeEach(() => {
      cy.viewport(1280, 720);
      cy.visit(page.url);
    });

    it('hero has h1', () => {
      getHero().find('h1').should('contain', page.expected.h1);
    });
  });
});
"""


def page_entry(key: str, locale: str = "ua", **extra: Any) -> dict[str, Any]:
    prefix = "ua-ru" if locale == "ua-ru" else "ua"
    entry: dict[str, Any] = {
        "key": key,
        "name": f"Course {key.upper()}",
        "url": f"https://goit.global/{prefix}/courses/{key}/",
        "locale": locale,
        "expected": {"h1": f"Heading {key}", "ctaText": "Записатися"},
    }
    entry.update(extra)
    return entry


@pytest.fixture
def write_registry(tmp_path: Path) -> Callable[[Any], Path]:
    """Write registry data to cypress/fixtures/pages.json under tmp_path."""

    def _write(data: Any) -> Path:
        path = tmp_path / "cypress" / "fixtures" / "pages.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cypress_project(tmp_path: Path, write_registry: Callable[[Any], Path]) -> Path:
    """A minimal Cypress project: two pages, one tagged and one loop spec."""
    write_registry([page_entry("a"), page_entry("b", locale="ua-ru")])
    e2e = tmp_path / "cypress" / "e2e"
    e2e.mkdir(parents=True, exist_ok=True)
    (e2e / "04-hero-block.cy.js").write_text(LOOP_HERO_SPEC, encoding="utf-8")
    (e2e / "12-footer.cy.js").write_text(TAGGED_FOOTER_SPEC, encoding="utf-8")
    return tmp_path


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests to prevent CI issues.

    The CLI reconfigures the root logger with a stream handler bound to the
    runner's captured stderr, which is closed once the invocation ends.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)


@pytest.fixture
def make_page() -> Callable[..., dict[str, Any]]:
    return page_entry


@pytest.fixture
def tagged_footer_spec() -> str:
    return TAGGED_FOOTER_SPEC


@pytest.fixture
def loop_hero_spec() -> str:
    return LOOP_HERO_SPEC
