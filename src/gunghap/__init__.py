"""gunghap — Hangul name compatibility calculator."""

__version__ = "0.1.0"
