"""Contact and company enrichment via an external research agent."""

__version__ = "0.1.0"
