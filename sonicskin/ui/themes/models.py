"""Theme framework models."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from operator import attrgetter
from pathlib import Path
from typing import Callable

from sonicskin.ui.themes.constants import ColorName, Variant


class ThemeValidationError(ValueError):
    """Raised when a theme file fails to parse or validate."""


@dataclass(frozen=True, slots=True)
class ColorSet:
    """Raw color strings for one variant, as written in the theme file.

    Strings are kept verbatim; an empty or unparseable value is replaced by a
    fallback at resolution time.
    """

    page_background: str = ""
    background: str = ""
    button: str = ""
    disabled: str = ""
    disabled_button: str = ""
    error: str = ""
    focus: str = ""
    foreground: str = ""
    hover: str = ""
    input_background: str = ""
    input_border: str = ""
    menu_background: str = ""
    overlay_background: str = ""
    placeholder: str = ""
    pressed: str = ""
    primary: str = ""
    scroll_bar: str = ""
    selection: str = ""
    separator: str = ""
    shadow: str = ""
    success: str = ""
    warning: str = ""

    def get(self, name: ColorName) -> str:
        return COLOR_ACCESSORS[name](self)


@dataclass(frozen=True, slots=True)
class ThemeFile:
    """A parsed theme definition."""

    source_path: Path
    display_name: str
    light_colors: ColorSet
    dark_colors: ColorSet
    supports_light: bool
    supports_dark: bool
    version: str = ""

    def supports(self, variant: Variant) -> bool:
        if variant == Variant.LIGHT:
            return self.supports_light
        return self.supports_dark

    def colors_for(self, variant: Variant) -> ColorSet:
        if variant == Variant.LIGHT:
            return self.light_colors
        return self.dark_colors


def field_name_for(name: ColorName) -> str:
    """Map a theme-file key such as ``InputBorder`` to ``input_border``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name.value).lower()


def _build_accessors() -> dict[ColorName, Callable[[ColorSet], str]]:
    declared = {f.name for f in fields(ColorSet)}
    accessors: dict[ColorName, Callable[[ColorSet], str]] = {}
    for name in ColorName:
        attr = field_name_for(name)
        if attr not in declared:
            raise RuntimeError(f"ColorSet has no field for color {name.value!r}")
        accessors[name] = attrgetter(attr)
    return accessors


COLOR_ACCESSORS: dict[ColorName, Callable[[ColorSet], str]] = _build_accessors()
