"""Shared fixtures for the appearance tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtGui import QGuiApplication  # noqa: E402

from sonicskin.config.settings import AppearanceConfig  # noqa: E402
from sonicskin.ui.themes.constants import Variant  # noqa: E402
from sonicskin.ui.themes.context import ThemeContext  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> QGuiApplication:
    app = QGuiApplication.instance() or QGuiApplication([])
    return app


def _toml_section(name: str, values: dict[str, object]) -> str:
    lines = [f"[{name}]"]
    for key, value in values.items():
        if isinstance(value, bool):
            lines.append(f"{key} = {'true' if value else 'false'}")
        else:
            lines.append(f'{key} = "{value}"')
    return "\n".join(lines)


@pytest.fixture
def write_theme(tmp_path: Path) -> Callable[..., Path]:
    """Write a theme file into ``tmp_path / "themes"`` and return its path."""

    def _write(
        filename: str = "custom.toml",
        *,
        name: str = "Custom",
        supports_dark: bool | None = True,
        supports_light: bool | None = True,
        dark: dict[str, str] | None = None,
        light: dict[str, str] | None = None,
    ) -> Path:
        meta: dict[str, object] = {"Name": name, "Version": "1.0"}
        if supports_dark is not None:
            meta["SupportsDark"] = supports_dark
        if supports_light is not None:
            meta["SupportsLight"] = supports_light
        sections = [_toml_section("Theme", meta)]
        if dark is not None:
            sections.append(_toml_section("DarkColors", dark))
        if light is not None:
            sections.append(_toml_section("LightColors", light))
        path = tmp_path / "themes" / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n\n".join(sections) + "\n", encoding="utf-8")
        return path

    return _write


class HostAppearance:
    """Stand-in for the system appearance setting."""

    def __init__(self, variant: Variant = Variant.DARK) -> None:
        self.variant = variant
        self.calls = 0

    def __call__(self) -> Variant:
        self.calls += 1
        return self.variant


@pytest.fixture
def host() -> HostAppearance:
    return HostAppearance()


@pytest.fixture
def config() -> AppearanceConfig:
    return AppearanceConfig(appearance_mode="Dark")


@pytest.fixture
def context(tmp_path: Path, config: AppearanceConfig, host: HostAppearance):
    themes_dir = tmp_path / "themes"
    themes_dir.mkdir(exist_ok=True)
    with ThemeContext(config, themes_dir, host_variant=host) as ctx:
        yield ctx
