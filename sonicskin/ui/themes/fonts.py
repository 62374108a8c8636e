"""Lazy loading of user-supplied font files."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from sonicskin.errors import ErrorCode, FontLoadError, UnsupportedFontFormatError, error_code_for
from sonicskin.ui.themes.constants import FONT_FILE_SUFFIX, FontStyle

logger = logging.getLogger(__name__)

# config attribute holding the custom font path for each style
FONT_PATH_ATTRS: dict[FontStyle, str] = {
    FontStyle.NORMAL: "normal_font_path",
    FontStyle.BOLD: "bold_font_path",
}


@dataclass(frozen=True, slots=True)
class FontResource:
    """Font file bytes; empty content means the toolkit default font."""

    name: str
    content: bytes

    @property
    def is_system(self) -> bool:
        return not self.content


SYSTEM_FONT = FontResource(name="system", content=b"")


class FontSlotState(Enum):
    EMPTY = auto()
    LOADED = auto()
    FAILED = auto()


@dataclass(frozen=True, slots=True)
class FontLoadResult:
    """Outcome of a load attempt. Both fields are None when no font is configured."""

    resource: FontResource | None = None
    error: FontLoadError | None = None

    @property
    def ok(self) -> bool:
        return self.resource is not None


class _FontSlot:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.state = FontSlotState.EMPTY
        self.resource: FontResource | None = None
        self.failed_path = ""
        self.error: FontLoadError | None = None

    def clear(self) -> None:
        self.state = FontSlotState.EMPTY
        self.resource = None
        self.failed_path = ""
        self.error = None


def read_font_file(path: str | Path) -> bytes:
    """Read a custom font, accepting only TrueType files."""
    font_path = Path(path)
    if font_path.suffix.lower() != FONT_FILE_SUFFIX:
        raise UnsupportedFontFormatError(
            ErrorCode.FONT_UNSUPPORTED_FORMAT,
            message=f"only {FONT_FILE_SUFFIX} fonts are supported",
            path=font_path,
        )
    try:
        return font_path.read_bytes()
    except OSError as exc:
        raise FontLoadError(
            ErrorCode.FONT_READ_FAILED,
            path=font_path,
            details={"reason": error_code_for(exc).name, "original": str(exc)},
        ) from exc


class FontLoader:
    """Per-style font cache.

    A font is read at most once per process. When loading fails the slot
    remembers the failing path and treats it as unset for the rest of the
    run. The configuration itself is never written, so a persisted font
    setting survives a transient read failure.
    """

    def __init__(self) -> None:
        self._slots = {style: _FontSlot() for style in FontStyle}

    def state(self, style: FontStyle) -> FontSlotState:
        return self._slots[style].state

    def load(self, style: FontStyle, config) -> FontLoadResult:
        attr = FONT_PATH_ATTRS[style]
        slot = self._slots[style]
        with slot.lock:
            if slot.state == FontSlotState.LOADED:
                return FontLoadResult(resource=slot.resource)
            path = getattr(config, attr, "") or ""
            if slot.state == FontSlotState.FAILED and path in ("", slot.failed_path):
                return FontLoadResult(error=slot.error)
            if not path:
                return FontLoadResult()
            try:
                content = read_font_file(path)
            except FontLoadError as exc:
                logger.warning("error loading custom %s font %r: %s", style.value, path, exc.message)
                slot.state = FontSlotState.FAILED
                slot.failed_path = path
                slot.error = exc
                return FontLoadResult(error=exc)
            slot.resource = FontResource(name=f"{style.value}Font", content=content)
            slot.state = FontSlotState.LOADED
            slot.failed_path = ""
            slot.error = None
            logger.info("loaded custom %s font %r (%d bytes)", style.value, path, len(content))
            return FontLoadResult(resource=slot.resource)

    def resolve(self, style: FontStyle, config) -> FontResource:
        """Return the font for ``style``: bold falls back to normal, then the system font."""
        result = self.load(style, config)
        if result.resource is not None:
            return result.resource
        if style == FontStyle.BOLD:
            return self.resolve(FontStyle.NORMAL, config)
        return SYSTEM_FONT

    def reset(self) -> None:
        for slot in self._slots.values():
            with slot.lock:
                slot.clear()
