"""Topic spec files merged into every page file, in output order."""

from __future__ import annotations

from landing_specgen.model.specs import SpecFileDescriptor

SPEC_FILES: tuple[SpecFileDescriptor, ...] = (
    SpecFileDescriptor("01-smoke-sanity.cy.js", "Smoke / Sanity / SEO checks"),
    SpecFileDescriptor("02-header-navigation.cy.js", "Header / Menu / Navigation"),
    SpecFileDescriptor("03-language-switcher.cy.js", "Language switcher / Localization"),
    SpecFileDescriptor("04-hero-block.cy.js", "Hero block"),
    SpecFileDescriptor("05-modal-form.cy.js", 'Modal "Записатися на курс" (форма)'),
    SpecFileDescriptor("06-benefits-section.cy.js", "Benefits section (#benefits)"),
    SpecFileDescriptor("07-about-section.cy.js", "About section (#about)"),
    SpecFileDescriptor("08-course-program.cy.js", "Course program (#program) - accordion"),
    SpecFileDescriptor("09-learning-format.cy.js", "Learning format (#format)"),
    SpecFileDescriptor("10-reviews.cy.js", "Reviews (#reviews)"),
    SpecFileDescriptor("11-pricing-section.cy.js", "Pricing section"),
    SpecFileDescriptor("12-footer.cy.js", "Footer"),
    SpecFileDescriptor("13-analytics-datalayer.cy.js", "Analytics / dataLayer"),
    SpecFileDescriptor("14-responsive-cross-browser.cy.js", "Responsive / Cross-browser checks"),
    SpecFileDescriptor("15-accessibility.cy.js", "Accessibility checks"),
    SpecFileDescriptor("16-discount-section.cy.js", "Discount section"),
)
