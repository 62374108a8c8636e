"""Theme framework constants."""

from __future__ import annotations

from enum import Enum

THEME_FILE_SUFFIX = ".toml"
FONT_FILE_SUFFIX = ".ttf"


class Variant(str, Enum):
    """The two appearances every color and icon is conditioned on."""

    LIGHT = "light"
    DARK = "dark"


class AppearanceMode(str, Enum):
    """Persisted appearance setting. Values are matched case-sensitively."""

    LIGHT = "Light"
    DARK = "Dark"
    AUTO = "Auto"


# Used when the configured mode is missing or not one of the literal values.
DEFAULT_APPEARANCE = AppearanceMode.DARK


class ColorName(str, Enum):
    """Semantic color names. Values double as the keys used in theme files."""

    PAGE_BACKGROUND = "PageBackground"
    BACKGROUND = "Background"
    BUTTON = "Button"
    DISABLED = "Disabled"
    DISABLED_BUTTON = "DisabledButton"
    ERROR = "Error"
    FOCUS = "Focus"
    FOREGROUND = "Foreground"
    HOVER = "Hover"
    INPUT_BACKGROUND = "InputBackground"
    INPUT_BORDER = "InputBorder"
    MENU_BACKGROUND = "MenuBackground"
    OVERLAY_BACKGROUND = "OverlayBackground"
    PLACEHOLDER = "Placeholder"
    PRESSED = "Pressed"
    PRIMARY = "Primary"
    SCROLL_BAR = "ScrollBar"
    SELECTION = "Selection"
    SEPARATOR = "Separator"
    SHADOW = "Shadow"
    SUCCESS = "Success"
    WARNING = "Warning"


class IconName(str, Enum):
    """Semantic identifiers of the themed icons."""

    ALBUM = "album"
    ARTIST = "artist"
    FAVORITE = "favorite"
    NOT_FAVORITE = "not_favorite"
    GENRE = "genre"
    NOW_PLAYING = "now_playing"
    PLAYLIST = "playlist"
    SHUFFLE = "shuffle"
    TRACKS = "tracks"


# icon id -> asset file stem; the dark variant lives in "<stem>_invert.svg"
ICON_ASSET_STEMS: dict[IconName, str] = {
    IconName.ALBUM: "disc",
    IconName.ARTIST: "people",
    IconName.FAVORITE: "heart_filled",
    IconName.NOT_FAVORITE: "heart_outline",
    IconName.GENRE: "theatermasks",
    IconName.NOW_PLAYING: "headphones",
    IconName.PLAYLIST: "playlist",
    IconName.SHUFFLE: "shuffle",
    IconName.TRACKS: "musicnotes",
}


class FontStyle(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"
