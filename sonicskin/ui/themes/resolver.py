"""Semantic color resolution with layered fallback."""

from __future__ import annotations

import logging

from PySide6.QtGui import QColor

from sonicskin.ui.themes.appearance import AppearanceResolver
from sonicskin.ui.themes.colors import baseline_color, parse_color
from sonicskin.ui.themes.constants import ColorName, Variant
from sonicskin.ui.themes.default import DefaultThemeProvider
from sonicskin.ui.themes.models import ColorSet, ThemeFile, ThemeValidationError
from sonicskin.ui.themes.store import ThemeFileStore

logger = logging.getLogger(__name__)


class ColorResolver:
    """Resolves a semantic color name for the current configuration.

    Lookup order is the configured theme file, then the default theme, then
    the built-in baseline. A theme that does not declare the effective
    variant is swapped for the default theme as a whole; missing or invalid
    individual colors fall through to the baseline.
    """

    def __init__(
        self,
        store: ThemeFileStore,
        default_theme: DefaultThemeProvider,
        appearance: AppearanceResolver,
    ) -> None:
        self._store = store
        self._default_theme = default_theme
        self._appearance = appearance

    def resolve(self, name: ColorName | str, config) -> QColor:
        color_name = ColorName(name)
        colors, variant = self._color_set(config)
        return _color_or_baseline(colors, color_name, variant)

    def resolve_all(self, config) -> dict[ColorName, QColor]:
        colors, variant = self._color_set(config)
        return {name: _color_or_baseline(colors, name, variant) for name in ColorName}

    def active_theme(self, config) -> ThemeFile:
        """Return the configured theme, or the default theme when it cannot be loaded."""
        path = getattr(config, "theme_file_path", "") or ""
        if not path:
            return self._default_theme.theme
        try:
            return self._store.load(path)
        except ThemeValidationError:
            return self._default_theme.theme

    def _color_set(self, config) -> tuple[ColorSet, Variant]:
        theme = self.active_theme(config)
        variant = self._appearance.effective_variant(config)
        if not theme.supports(variant):
            theme = self._default_theme.theme
        return theme.colors_for(variant), variant


def _color_or_baseline(colors: ColorSet, name: ColorName, variant: Variant) -> QColor:
    raw = colors.get(name)
    color = parse_color(raw)
    if color is not None:
        return color
    if raw:
        logger.debug("invalid color %r for %s; using built-in", raw, name.value)
    return baseline_color(name, variant)
