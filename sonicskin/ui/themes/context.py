"""Composition-root object owning the appearance caches."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtGui import QColor

from sonicskin.runtime_paths import icons_root
from sonicskin.ui.themes.appearance import AppearanceResolver, HostVariantProbe, qt_host_variant
from sonicskin.ui.themes.constants import ColorName, FontStyle, IconName, Variant
from sonicskin.ui.themes.default import DefaultThemeProvider
from sonicskin.ui.themes.fonts import FontLoader, FontLoadResult, FontResource
from sonicskin.ui.themes.icons import IconRegistry, StaticResource
from sonicskin.ui.themes.resolver import ColorResolver
from sonicskin.ui.themes.store import ThemeFileStore


class ThemeContext:
    """Everything the rendering layer asks for colors, icons and fonts.

    ``config`` is read on every call, so changing it takes effect on the next
    lookup. Each context owns its own caches; ``close()`` drops them.
    """

    def __init__(
        self,
        config,
        themes_dir: Path,
        *,
        host_variant: HostVariantProbe = qt_host_variant,
        icons_dir: Path | None = None,
        default_theme: DefaultThemeProvider | None = None,
    ) -> None:
        self.config = config
        self.store = ThemeFileStore(themes_dir)
        self.default_theme = default_theme or DefaultThemeProvider()
        self.appearance = AppearanceResolver(host_variant)
        self.colors_resolver = ColorResolver(self.store, self.default_theme, self.appearance)
        self.icons = IconRegistry.from_directory(icons_dir or icons_root(), self.appearance)
        self.fonts = FontLoader()

    def __enter__(self) -> ThemeContext:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def effective_variant(self) -> Variant:
        return self.appearance.effective_variant(self.config)

    def color(self, name: ColorName | str) -> QColor:
        return self.colors_resolver.resolve(name, self.config)

    def colors(self) -> dict[ColorName, QColor]:
        return self.colors_resolver.resolve_all(self.config)

    def icon(self, icon_id: IconName | str) -> StaticResource:
        return self.icons.resolve(icon_id, self.config)

    def font(self, style: FontStyle = FontStyle.NORMAL) -> FontResource:
        return self.fonts.resolve(style, self.config)

    def load_font(self, style: FontStyle) -> FontLoadResult:
        return self.fonts.load(style, self.config)

    def list_theme_files(self) -> dict[str, str]:
        return self.store.list_available()

    def close(self) -> None:
        self.store.invalidate()
        self.fonts.reset()
