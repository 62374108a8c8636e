"""Tests for the theme context, palette compilation and runtime service."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon, QPalette

from sonicskin.config.settings import AppearanceConfig
from sonicskin.ui.themes import service as service_module
from sonicskin.ui.themes.colors import color_to_hex
from sonicskin.ui.themes.compiler import PALETTE_ROLES, compile_palette
from sonicskin.ui.themes.constants import ColorName, FontStyle, IconName, Variant
from sonicskin.ui.themes.context import ThemeContext
from sonicskin.ui.themes.fonts import FontResource
from sonicskin.ui.themes.service import ThemeService


def test_independent_contexts_do_not_share_caches(tmp_path: Path, write_theme, host) -> None:
    write_theme("a.toml", dark={"Primary": "#336699"})
    themes_dir = tmp_path / "themes"
    first = ThemeContext(AppearanceConfig("Dark", "a.toml"), themes_dir, host_variant=host)
    second = ThemeContext(AppearanceConfig("Dark", ""), themes_dir, host_variant=host)

    assert color_to_hex(first.color(ColorName.PRIMARY)) == "#336699ff"
    assert color_to_hex(second.color(ColorName.PRIMARY)) != "#336699ff"
    assert second.store.reads == 0


def test_close_drops_caches(tmp_path: Path, write_theme, host) -> None:
    write_theme("a.toml", name="Before")
    font = tmp_path / "normal.ttf"
    font.write_bytes(b"font")
    config = AppearanceConfig("Dark", "a.toml", normal_font_path=str(font))
    context = ThemeContext(config, tmp_path / "themes", host_variant=host)
    context.color(ColorName.PRIMARY)
    assert context.font().content == b"font"

    context.close()
    write_theme("a.toml", name="After")
    assert context.colors_resolver.active_theme(config).display_name == "After"
    assert context.store.reads == 2


def test_list_theme_files(context, write_theme) -> None:
    write_theme("a.toml", name="A")
    write_theme("b.toml", name="B")
    assert context.list_theme_files() == {"a.toml": "A", "b.toml": "B"}


def test_compile_palette_maps_semantic_colors(qapp, context, config, write_theme) -> None:
    write_theme(dark={"Background": "#101010", "Primary": "#336699", "Disabled": "#555555"})
    config.theme_file_path = "custom.toml"

    palette = compile_palette(context.colors())
    assert color_to_hex(palette.color(QPalette.ColorRole.Window)) == "#101010ff"
    assert color_to_hex(palette.color(QPalette.ColorRole.Highlight)) == "#336699ff"
    disabled = palette.color(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text)
    assert color_to_hex(disabled) == "#555555ff"
    assert {name for _, name in PALETTE_ROLES} <= set(ColorName)


def test_service_apply_theme_persists_and_emits(qapp, context, config, write_theme) -> None:
    write_theme(name="Ocean", dark={"Background": "#102030"})
    service = ThemeService(qapp, config, context)
    emitted: list[str] = []
    service.theme_changed.connect(emitted.append)

    ok, message = service.apply_theme("custom.toml")
    assert ok
    assert message == "Applied theme: Ocean"
    assert config.theme_file_path == "custom.toml"
    assert emitted == ["custom.toml"]
    assert color_to_hex(qapp.palette().color(QPalette.ColorRole.Window)) == "#102030ff"


def test_service_apply_broken_theme_keeps_selection(qapp, context, config, tmp_path) -> None:
    (tmp_path / "themes" / "broken.toml").write_text("[Theme\n", encoding="utf-8")
    service = ThemeService(qapp, config, context)

    ok, message = service.apply_theme("broken.toml")
    assert not ok
    assert "broken.toml" in message
    assert config.theme_file_path == ""


def test_service_apply_default_theme(qapp, context, config) -> None:
    service = ThemeService(qapp, config, context)
    ok, message = service.apply_theme("")
    assert ok
    assert message == "Applied theme: Default"


def test_service_set_appearance_mode(qapp, context, config, write_theme) -> None:
    write_theme(dark={"Background": "#000000"}, light={"Background": "#ffffff"})
    config.theme_file_path = "custom.toml"
    service = ThemeService(qapp, config, context)
    variants: list[str] = []
    service.appearance_changed.connect(variants.append)

    service.set_appearance_mode("Light")
    assert config.appearance_mode == "Light"
    assert variants == [Variant.LIGHT.value]
    assert color_to_hex(qapp.palette().color(QPalette.ColorRole.Window)) == "#ffffffff"


def test_service_reapplies_on_host_scheme_change(qapp, context, config, host, write_theme) -> None:
    write_theme(dark={"Background": "#000000"}, light={"Background": "#ffffff"})
    config.theme_file_path = "custom.toml"
    config.appearance_mode = "Auto"
    service = ThemeService(qapp, config, context)
    variants: list[str] = []
    service.appearance_changed.connect(variants.append)

    host.variant = Variant.LIGHT
    service._on_color_scheme_changed(Qt.ColorScheme.Light)
    assert variants == ["light"]
    assert color_to_hex(qapp.palette().color(QPalette.ColorRole.Window)) == "#ffffffff"


def test_service_icon_and_font(qapp, context) -> None:
    service = ThemeService(qapp, context.config, context)
    assert isinstance(service.icon(IconName.PLAYLIST), QIcon)
    font = service.font(FontStyle.BOLD)
    assert font.bold()


def test_service_apply_theme_without_persisting(qapp, context, config, write_theme) -> None:
    write_theme(name="Ocean", dark={"Background": "#102030"})
    service = ThemeService(qapp, config, context)

    ok, message = service.apply_theme("custom.toml", persist=False)
    assert ok
    assert message == "Applied theme: Ocean"
    assert config.theme_file_path == ""
    assert color_to_hex(qapp.palette().color(QPalette.ColorRole.Window)) == "#102030ff"

    service.apply_theme("")
    assert color_to_hex(qapp.palette().color(QPalette.ColorRole.Window)) != "#102030ff"


def test_service_registers_each_font_content(qapp, context, monkeypatch) -> None:
    registered: list[bytes] = []

    class _FontDatabase:
        @staticmethod
        def addApplicationFontFromData(content):
            registered.append(bytes(content))
            return len(registered) - 1

        @staticmethod
        def applicationFontFamilies(font_id):
            return [f"Family {font_id}"]

    monkeypatch.setattr(service_module, "QFontDatabase", _FontDatabase)
    service = ThemeService(qapp, context.config, context)

    first = service._families_for(FontResource(name="normalFont", content=b"first"))
    again = service._families_for(FontResource(name="normalFont", content=b"first"))
    second = service._families_for(FontResource(name="normalFont", content=b"second"))
    assert first == again == ["Family 0"]
    assert second == ["Family 1"]
    assert registered == [b"first", b"second"]
