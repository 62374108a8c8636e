"""Appearance resolution engine: theme colors, themed icons and custom fonts."""

__version__ = "0.3.0"
