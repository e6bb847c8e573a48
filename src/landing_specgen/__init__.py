"""Per-page Cypress spec generation for the course landing pages suite."""

__version__ = "0.1.0"
