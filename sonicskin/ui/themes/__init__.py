"""Theme resolution exports."""

from sonicskin.ui.themes.appearance import AppearanceResolver
from sonicskin.ui.themes.constants import AppearanceMode, ColorName, FontStyle, IconName, Variant
from sonicskin.ui.themes.context import ThemeContext
from sonicskin.ui.themes.default import DefaultThemeProvider
from sonicskin.ui.themes.fonts import FontLoader, FontResource
from sonicskin.ui.themes.icons import IconRegistry, StaticResource, ThemedAsset
from sonicskin.ui.themes.models import ColorSet, ThemeFile, ThemeValidationError
from sonicskin.ui.themes.resolver import ColorResolver
from sonicskin.ui.themes.service import ThemeService
from sonicskin.ui.themes.store import ThemeFileStore

__all__ = [
    "AppearanceMode",
    "AppearanceResolver",
    "ColorName",
    "ColorResolver",
    "ColorSet",
    "DefaultThemeProvider",
    "FontLoader",
    "FontResource",
    "FontStyle",
    "IconName",
    "IconRegistry",
    "StaticResource",
    "ThemeContext",
    "ThemeFile",
    "ThemeFileStore",
    "ThemeService",
    "ThemeValidationError",
    "ThemedAsset",
    "Variant",
]
