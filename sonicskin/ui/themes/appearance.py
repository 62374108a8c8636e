"""Effective light/dark variant resolution."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication, QPalette

from sonicskin.ui.themes.constants import DEFAULT_APPEARANCE, AppearanceMode, Variant

HostVariantProbe = Callable[[], Variant]

_MODE_VARIANTS = {
    AppearanceMode.LIGHT: Variant.LIGHT,
    AppearanceMode.DARK: Variant.DARK,
}


def qt_host_variant() -> Variant:
    """Return the live appearance reported by the running Qt application."""
    app = QGuiApplication.instance()
    if app is None:
        return Variant.DARK
    scheme = QGuiApplication.styleHints().colorScheme()
    if scheme == Qt.ColorScheme.Light:
        return Variant.LIGHT
    if scheme == Qt.ColorScheme.Dark:
        return Variant.DARK
    # Platforms that do not report a scheme: judge by the window color.
    window = QGuiApplication.palette().color(QPalette.ColorRole.Window)
    return Variant.DARK if window.lightness() < 128 else Variant.LIGHT


def normalize_appearance_mode(value: object) -> AppearanceMode:
    """Map a persisted mode value to an AppearanceMode; unknown values get the default."""
    for mode in AppearanceMode:
        if value == mode.value:
            return mode
    return DEFAULT_APPEARANCE


class AppearanceResolver:
    """Computes the effective variant from configuration.

    Nothing is cached: in Auto mode every call asks the host, so a system
    appearance switch shows up on the next lookup.
    """

    def __init__(self, host_variant: HostVariantProbe = qt_host_variant) -> None:
        self._host_variant = host_variant

    def effective_variant(self, config) -> Variant:
        mode = normalize_appearance_mode(getattr(config, "appearance_mode", None))
        if mode == AppearanceMode.AUTO:
            return self._host_variant()
        return _MODE_VARIANTS[mode]
