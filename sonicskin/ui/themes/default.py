"""The embedded default theme."""

from __future__ import annotations

from pathlib import Path

from sonicskin.runtime_paths import default_theme_path
from sonicskin.ui.themes.loader import read_theme_file
from sonicskin.ui.themes.models import ThemeFile, ThemeValidationError


class DefaultThemeProvider:
    """Holds the built-in theme, parsed once and never replaced."""

    def __init__(self, path: Path | None = None) -> None:
        source = path if path is not None else default_theme_path()
        theme = read_theme_file(source)
        if not (theme.supports_light and theme.supports_dark):
            raise ThemeValidationError(f"{source}: default theme must support both variants")
        self._theme = theme

    @property
    def theme(self) -> ThemeFile:
        return self._theme
