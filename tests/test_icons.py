"""Tests for themed icon resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from sonicskin.runtime_paths import icons_root
from sonicskin.ui.themes.appearance import AppearanceResolver
from sonicskin.ui.themes.constants import IconName, Variant
from sonicskin.ui.themes.icons import IconRegistry, StaticResource, ThemedAsset, load_themed_assets


def test_every_icon_has_both_assets() -> None:
    assets = load_themed_assets(icons_root())
    assert set(assets) == set(IconName)
    for asset in assets.values():
        assert asset.dark.name.endswith("_invert.svg")
        assert not asset.light.name.endswith("_invert.svg")
        assert asset.dark.content != asset.light.content


def test_resolve_follows_configured_mode(context, config) -> None:
    asset = context.icons.asset(IconName.ALBUM)

    assert context.icon(IconName.ALBUM) == asset.dark
    config.appearance_mode = "Light"
    assert context.icon(IconName.ALBUM) == asset.light
    assert context.icon("album") == asset.light


def test_resolve_follows_host_in_auto_mode(context, config, host) -> None:
    config.appearance_mode = "Auto"
    host.variant = Variant.LIGHT
    assert context.icon(IconName.SHUFFLE).name == "shuffle.svg"
    host.variant = Variant.DARK
    assert context.icon(IconName.SHUFFLE).name == "shuffle_invert.svg"


def test_registry_requires_every_icon(host) -> None:
    resource = StaticResource(name="x.svg", content=b"<svg/>")
    partial = {IconName.ALBUM: ThemedAsset(IconName.ALBUM, dark=resource, light=resource)}
    with pytest.raises(ValueError, match="missing themed icons"):
        IconRegistry(partial, AppearanceResolver(host))


def test_from_directory_missing_asset_raises(tmp_path: Path, host) -> None:
    with pytest.raises(FileNotFoundError):
        IconRegistry.from_directory(tmp_path, AppearanceResolver(host))


def test_unknown_icon_id_rejected(context) -> None:
    with pytest.raises(ValueError):
        context.icon("spaceship")
