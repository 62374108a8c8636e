"""Runtime theme apply and persistence service."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtGui import QColor, QFont, QFontDatabase, QGuiApplication, QIcon, QPixmap

from sonicskin.config.settings import AppearanceConfig
from sonicskin.ui.themes.compiler import compile_palette
from sonicskin.ui.themes.constants import AppearanceMode, ColorName, FontStyle, IconName
from sonicskin.ui.themes.context import ThemeContext
from sonicskin.ui.themes.fonts import FontResource
from sonicskin.ui.themes.models import ThemeValidationError

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Apply the resolved palette to the application and persist selections.

    The palette is re-applied whenever the host color scheme changes, so Auto
    mode follows the system without a restart.
    """

    theme_changed = Signal(str)
    appearance_changed = Signal(str)

    def __init__(self, app: QGuiApplication, settings, context: ThemeContext) -> None:
        super().__init__()
        self._app = app
        self._settings = settings
        self._context = context
        self._font_families: dict[bytes, list[str]] = {}
        self._preview_theme: str | None = None
        app.styleHints().colorSchemeChanged.connect(self._on_color_scheme_changed)

    @property
    def context(self) -> ThemeContext:
        return self._context

    def available_themes(self) -> dict[str, str]:
        themes = self._context.list_theme_files()
        errors = self._context.store.load_errors()
        if errors:
            logger.warning("theme load warnings: %s", " | ".join(errors[:6]))
        return themes

    def apply_theme(self, theme_file: str, *, persist: bool = True) -> tuple[bool, str]:
        theme_file = (theme_file or "").strip()
        if theme_file:
            try:
                theme = self._context.store.load(theme_file)
            except ThemeValidationError as exc:
                return False, f"Could not load theme {theme_file}: {exc}"
            name = theme.display_name
        else:
            name = self._context.default_theme.theme.display_name

        if persist:
            self._settings.theme_file_path = theme_file
            self._preview_theme = None
        else:
            self._preview_theme = theme_file
        self.apply_palette()
        self.theme_changed.emit(theme_file)
        return True, f"Applied theme: {name}"

    def set_appearance_mode(self, mode: AppearanceMode | str) -> None:
        value = mode.value if isinstance(mode, AppearanceMode) else str(mode)
        self._settings.appearance_mode = value
        self.apply_palette()
        self.appearance_changed.emit(self._context.effective_variant().value)

    def apply_palette(self) -> None:
        self._app.setPalette(compile_palette(self._resolve_colors()))

    def _resolve_colors(self) -> dict[ColorName, QColor]:
        if self._preview_theme is None:
            return self._context.colors()
        # an unsaved theme replaces only the file; the configured mode still applies
        preview = AppearanceConfig(
            appearance_mode=self._context.config.appearance_mode,
            theme_file_path=self._preview_theme,
        )
        return self._context.colors_resolver.resolve_all(preview)

    def icon(self, icon_id: IconName | str) -> QIcon:
        resource = self._context.icon(icon_id)
        pixmap = QPixmap()
        if not pixmap.loadFromData(resource.content):
            logger.warning("could not decode icon asset %s", resource.name)
        return QIcon(pixmap)

    def font(self, style: FontStyle = FontStyle.NORMAL) -> QFont:
        resource = self._context.font(style)
        families = self._families_for(resource)
        if families:
            font = QFont(families[0])
        else:
            font = QFontDatabase.systemFont(QFontDatabase.SystemFont.GeneralFont)
        font.setBold(style == FontStyle.BOLD)
        return font

    def _families_for(self, resource: FontResource) -> list[str]:
        if resource.is_system:
            return []
        if resource.content not in self._font_families:
            font_id = QFontDatabase.addApplicationFontFromData(resource.content)
            if font_id < 0:
                logger.warning("Qt rejected custom font %s; using the system font", resource.name)
                families: list[str] = []
            else:
                families = QFontDatabase.applicationFontFamilies(font_id)
            self._font_families[resource.content] = families
        return self._font_families[resource.content]

    def _on_color_scheme_changed(self, scheme: Qt.ColorScheme) -> None:
        logger.info("host color scheme changed to %s", scheme.name)
        self.apply_palette()
        self.appearance_changed.emit(self._context.effective_variant().value)
