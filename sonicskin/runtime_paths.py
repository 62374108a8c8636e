"""Locations of the resources shipped inside the package."""

from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    return Path(__file__).resolve().parent


def icons_root() -> Path:
    """Directory holding the light and inverted SVG pair of every icon."""
    return package_root() / "ui" / "assets" / "icons"


def builtin_themes_root() -> Path:
    return package_root() / "ui" / "themes" / "builtin"


def default_theme_path() -> Path:
    """The embedded theme every custom theme falls back to."""
    return builtin_themes_root() / "default.toml"
