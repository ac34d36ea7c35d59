"""Markup tree with lazily parsed style attributes."""

__version__ = "0.1.0"
