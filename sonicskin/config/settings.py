"""Appearance configuration, in memory or persisted via QSettings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings


@dataclass
class AppearanceConfig:
    """Plain appearance configuration.

    ``appearance_mode`` is one of "Light", "Dark" or "Auto"; anything else is
    treated as the default mode when resolving. Empty paths mean the default
    theme and the toolkit font.
    """

    appearance_mode: str = "Auto"
    theme_file_path: str = ""
    normal_font_path: str = ""
    bold_font_path: str = ""


class AppSettings:
    """Wraps QSettings for persistent appearance configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("SonicSkin", "SonicSkin")

    # -- appearance --

    @property
    def appearance_mode(self) -> str:
        # stored verbatim; unknown values are handled at resolution time
        return self._qs.value("appearance/mode", "Auto", type=str) or ""

    @appearance_mode.setter
    def appearance_mode(self, value: str) -> None:
        self._qs.setValue("appearance/mode", value)

    @property
    def theme_file_path(self) -> str:
        raw = self._qs.value("appearance/theme_file", "", type=str)
        return (raw or "").strip()

    @theme_file_path.setter
    def theme_file_path(self, value: str) -> None:
        self._qs.setValue("appearance/theme_file", (value or "").strip())

    # -- fonts --

    @property
    def normal_font_path(self) -> str:
        return self._qs.value("fonts/normal", "", type=str) or ""

    @normal_font_path.setter
    def normal_font_path(self, value: str) -> None:
        self._qs.setValue("fonts/normal", value or "")

    @property
    def bold_font_path(self) -> str:
        return self._qs.value("fonts/bold", "", type=str) or ""

    @bold_font_path.setter
    def bold_font_path(self, value: str) -> None:
        self._qs.setValue("fonts/bold", value or "")

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def themes_dir(self) -> Path:
        path = self.app_data_dir / "themes"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "sonicskin"
