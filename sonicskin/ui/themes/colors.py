"""Color-string parsing and the built-in baseline palette."""

from __future__ import annotations

import re

from PySide6.QtGui import QColor

from sonicskin.ui.themes.constants import ColorName, Variant

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_MAX_COLOR_VALUE_LEN = 64

# Toolkit defaults, (light, dark) per semantic name.
BASELINE_COLORS: dict[ColorName, tuple[str, str]] = {
    ColorName.PAGE_BACKGROUND: ("#ffffff", "#171718"),
    ColorName.BACKGROUND: ("#ffffff", "#171718"),
    ColorName.BUTTON: ("#f5f5f5", "#282829"),
    ColorName.DISABLED: ("#e3e3e3", "#39393a"),
    ColorName.DISABLED_BUTTON: ("#e5e5e5", "#282829"),
    ColorName.ERROR: ("#f44336", "#f44336"),
    ColorName.FOCUS: ("#2196f37f", "#2196f37f"),
    ColorName.FOREGROUND: ("#111111", "#f3f3f3"),
    ColorName.HOVER: ("#0000000f", "#ffffff0f"),
    ColorName.INPUT_BACKGROUND: ("#f3f3f3", "#202023"),
    ColorName.INPUT_BORDER: ("#e3e3e3", "#39393a"),
    ColorName.MENU_BACKGROUND: ("#f5f5f5", "#28292e"),
    ColorName.OVERLAY_BACKGROUND: ("#ffffff", "#18191d"),
    ColorName.PLACEHOLDER: ("#888888", "#b2b2b2"),
    ColorName.PRESSED: ("#00000019", "#ffffff66"),
    ColorName.PRIMARY: ("#2196f3", "#2196f3"),
    ColorName.SCROLL_BAR: ("#00000099", "#ffffff99"),
    ColorName.SELECTION: ("#2196f33f", "#2196f33f"),
    ColorName.SEPARATOR: ("#e3e3e3", "#000000"),
    ColorName.SHADOW: ("#00000033", "#00000066"),
    ColorName.SUCCESS: ("#43f436", "#43f436"),
    ColorName.WARNING: ("#ff9800", "#ff9800"),
}


def parse_color(value: str | None) -> QColor | None:
    """Parse a theme color string, returning None when it is empty or invalid.

    Hex forms carry alpha last (``#RRGGBBAA``); anything else must be a color
    name known to Qt.
    """
    if not value:
        return None
    cleaned = value.strip()
    if not cleaned or len(cleaned) > _MAX_COLOR_VALUE_LEN:
        return None
    if cleaned.startswith("#"):
        if not _HEX_COLOR_RE.match(cleaned):
            return None
        return _hex_to_color(cleaned[1:])
    color = QColor(cleaned)
    if not color.isValid():
        return None
    return color


def _hex_to_color(digits: str) -> QColor:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    red = int(digits[0:2], 16)
    green = int(digits[2:4], 16)
    blue = int(digits[4:6], 16)
    alpha = int(digits[6:8], 16) if len(digits) == 8 else 255
    return QColor(red, green, blue, alpha)


def baseline_color(name: ColorName, variant: Variant) -> QColor:
    """Return the built-in color for a semantic name, the fallback of last resort."""
    light, dark = BASELINE_COLORS[name]
    color = parse_color(light if variant == Variant.LIGHT else dark)
    if color is None:
        raise ValueError(f"invalid baseline color for {name.value}")
    return color


def color_to_hex(color: QColor) -> str:
    """Format a color as ``#rrggbbaa``."""
    return "#{:02x}{:02x}{:02x}{:02x}".format(
        color.red(), color.green(), color.blue(), color.alpha()
    )
