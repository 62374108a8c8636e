"""Theme file parsing and validation."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Mapping

from sonicskin.ui.themes.constants import ColorName
from sonicskin.ui.themes.models import ColorSet, ThemeFile, ThemeValidationError, field_name_for

logger = logging.getLogger(__name__)

META_SECTION = "Theme"
LIGHT_SECTION = "LightColors"
DARK_SECTION = "DarkColors"

_MAX_THEME_BYTES = 64 * 1024
_MAX_NAME_LEN = 120


def read_theme_file(path: Path) -> ThemeFile:
    """Read and parse a single theme file from disk."""
    content = _read_text_limited(path, max_bytes=_MAX_THEME_BYTES)
    return decode_theme_file(content, source_path=path)


def decode_theme_file(content: str, *, source_path: Path) -> ThemeFile:
    """Parse theme file text.

    Layout::

        [Theme]
        Name = "Ocean"
        SupportsDark = true
        SupportsLight = false

        [DarkColors]
        Primary = "#336699"

    Color values are kept as written; only structural problems raise.
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ThemeValidationError(f"Invalid TOML in {source_path}: {exc}") from exc

    meta = data.get(META_SECTION)
    if not isinstance(meta, dict):
        raise ThemeValidationError(f"{source_path}: missing [{META_SECTION}] section")

    display_name = _required_str(meta, "Name", source_path)
    version = meta.get("Version", "")
    if not isinstance(version, str):
        version = str(version)

    light_colors = _parse_colors(data, LIGHT_SECTION, source_path)
    dark_colors = _parse_colors(data, DARK_SECTION, source_path)

    return ThemeFile(
        source_path=source_path,
        display_name=display_name,
        light_colors=light_colors or ColorSet(),
        dark_colors=dark_colors or ColorSet(),
        supports_light=_support_flag(meta, "SupportsLight", light_colors is not None, source_path),
        supports_dark=_support_flag(meta, "SupportsDark", dark_colors is not None, source_path),
        version=version.strip(),
    )


def _parse_colors(
    data: Mapping[str, object], section: str, source_path: Path
) -> ColorSet | None:
    raw = data.get(section)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ThemeValidationError(f"{source_path}: [{section}] must be a table")

    known = {name.value: name for name in ColorName}
    values: dict[str, str] = {}
    for key, value in raw.items():
        name = known.get(key)
        if name is None:
            logger.debug("%s: ignoring unknown color %r in [%s]", source_path, key, section)
            continue
        if not isinstance(value, str):
            raise ThemeValidationError(
                f"{source_path}: color {section}.{key} must be a string, got {type(value).__name__}"
            )
        values[field_name_for(name)] = value.strip()
    return ColorSet(**values)


def _support_flag(
    meta: Mapping[str, object], key: str, default: bool, source_path: Path
) -> bool:
    value = meta.get(key, default)
    if not isinstance(value, bool):
        raise ThemeValidationError(f"{source_path}: field {key!r} must be true or false")
    return value


def _required_str(data: Mapping[str, object], key: str, source_path: Path) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ThemeValidationError(f"{source_path}: field {key!r} must be a non-empty string")
    cleaned = value.strip()
    if len(cleaned) > _MAX_NAME_LEN:
        raise ThemeValidationError(f"{source_path}: field {key!r} exceeds max length {_MAX_NAME_LEN}")
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise ThemeValidationError(f"{source_path}: field {key!r} must be a single line string")
    return cleaned


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > max_bytes:
        raise ThemeValidationError(f"{path}: file exceeds max size ({max_bytes} bytes)")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeValidationError(f"Unable to read {path}: {exc}") from exc
