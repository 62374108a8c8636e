"""Theme compilation helpers."""

from __future__ import annotations

from typing import Mapping

from PySide6.QtGui import QColor, QPalette

from sonicskin.ui.themes.constants import ColorName

_Group = QPalette.ColorGroup
_Role = QPalette.ColorRole

# (palette role, semantic color) applied to every color group
PALETTE_ROLES: tuple[tuple[QPalette.ColorRole, ColorName], ...] = (
    (_Role.Window, ColorName.BACKGROUND),
    (_Role.WindowText, ColorName.FOREGROUND),
    (_Role.Base, ColorName.INPUT_BACKGROUND),
    (_Role.AlternateBase, ColorName.MENU_BACKGROUND),
    (_Role.Text, ColorName.FOREGROUND),
    (_Role.Button, ColorName.BUTTON),
    (_Role.ButtonText, ColorName.FOREGROUND),
    (_Role.Highlight, ColorName.PRIMARY),
    (_Role.HighlightedText, ColorName.FOREGROUND),
    (_Role.PlaceholderText, ColorName.PLACEHOLDER),
    (_Role.ToolTipBase, ColorName.OVERLAY_BACKGROUND),
    (_Role.ToolTipText, ColorName.FOREGROUND),
    (_Role.Link, ColorName.PRIMARY),
    (_Role.Mid, ColorName.SEPARATOR),
    (_Role.Shadow, ColorName.SHADOW),
)

DISABLED_ROLES: tuple[tuple[QPalette.ColorRole, ColorName], ...] = (
    (_Role.WindowText, ColorName.DISABLED),
    (_Role.Text, ColorName.DISABLED),
    (_Role.ButtonText, ColorName.DISABLED),
    (_Role.Button, ColorName.DISABLED_BUTTON),
)


def compile_palette(colors: Mapping[ColorName, QColor]) -> QPalette:
    """Compile resolved semantic colors into an application palette."""
    palette = QPalette()
    for role, name in PALETTE_ROLES:
        palette.setColor(role, colors[name])
    for role, name in DISABLED_ROLES:
        palette.setColor(_Group.Disabled, role, colors[name])
    return palette
