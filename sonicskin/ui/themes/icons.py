"""Themed icons backed by light/dark asset pairs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from sonicskin.ui.themes.appearance import AppearanceResolver
from sonicskin.ui.themes.constants import ICON_ASSET_STEMS, IconName, Variant


@dataclass(frozen=True, slots=True)
class StaticResource:
    """A named, immutable binary asset."""

    name: str
    content: bytes

    @classmethod
    def from_file(cls, path: Path) -> StaticResource:
        return cls(name=path.name, content=path.read_bytes())


@dataclass(frozen=True, slots=True)
class ThemedAsset:
    """An icon with one asset per variant."""

    id: IconName
    dark: StaticResource
    light: StaticResource

    def for_variant(self, variant: Variant) -> StaticResource:
        return self.dark if variant == Variant.DARK else self.light


def load_themed_assets(icons_dir: Path) -> dict[IconName, ThemedAsset]:
    """Read every themed icon pair from ``icons_dir``.

    Each icon needs ``<stem>.svg`` for the light variant and
    ``<stem>_invert.svg`` for the dark variant.
    """
    assets: dict[IconName, ThemedAsset] = {}
    for icon_id, stem in ICON_ASSET_STEMS.items():
        assets[icon_id] = ThemedAsset(
            id=icon_id,
            dark=StaticResource.from_file(icons_dir / f"{stem}_invert.svg"),
            light=StaticResource.from_file(icons_dir / f"{stem}.svg"),
        )
    return assets


class IconRegistry:
    """Fixed table of themed icons, resolved against the live appearance."""

    def __init__(
        self,
        assets: Mapping[IconName, ThemedAsset],
        appearance: AppearanceResolver,
    ) -> None:
        missing = [icon_id.value for icon_id in IconName if icon_id not in assets]
        if missing:
            raise ValueError(f"missing themed icons: {', '.join(missing)}")
        self._assets = dict(assets)
        self._appearance = appearance

    @classmethod
    def from_directory(cls, icons_dir: Path, appearance: AppearanceResolver) -> IconRegistry:
        return cls(load_themed_assets(icons_dir), appearance)

    def asset(self, icon_id: IconName | str) -> ThemedAsset:
        return self._assets[IconName(icon_id)]

    def resolve(self, icon_id: IconName | str, config) -> StaticResource:
        variant = self._appearance.effective_variant(config)
        return self.asset(icon_id).for_variant(variant)

    def icon_ids(self) -> list[IconName]:
        return list(self._assets)
