"""Fetch, parse and process dependency changelogs into digest-ready entries."""

__version__ = "0.1.0"