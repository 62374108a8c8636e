"""Theme file cache and discovery."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from sonicskin.ui.themes.constants import THEME_FILE_SUFFIX
from sonicskin.ui.themes.loader import read_theme_file
from sonicskin.ui.themes.models import ThemeFile, ThemeValidationError

logger = logging.getLogger(__name__)

_MAX_THEME_FILE_CANDIDATES = 512


class ThemeFileStore:
    """Loads theme files from a directory, caching the most recent one.

    The cache holds a single entry keyed by the requested path string. It is
    replaced only when a different string is requested; editing the file in
    place at the same path is not noticed until ``invalidate()`` is called.
    """

    def __init__(self, themes_dir: Path) -> None:
        self._themes_dir = Path(themes_dir)
        self._lock = threading.Lock()
        self._cached_key: str | None = None
        self._cached_theme: ThemeFile | None = None
        self._cached_error: ThemeValidationError | None = None
        self._load_errors: list[str] = []
        self._reads = 0

    @property
    def themes_dir(self) -> Path:
        return self._themes_dir

    @property
    def reads(self) -> int:
        """Number of times a theme file was read from storage through ``load``."""
        return self._reads

    def set_themes_dir(self, path: Path) -> None:
        with self._lock:
            self._themes_dir = Path(path)
            self._clear_slot()

    def load(self, path: str) -> ThemeFile:
        """Return the theme file at ``path``, relative to the themes directory.

        Raises ThemeValidationError when the file cannot be read or parsed. The
        failure is remembered for the same path string.
        """
        with self._lock:
            if path != self._cached_key:
                self._clear_slot()
                self._cached_key = path
                self._reads += 1
                try:
                    self._cached_theme = read_theme_file(self._themes_dir / path)
                except ThemeValidationError as exc:
                    logger.warning("failed to load theme file %r: %s", path, exc)
                    self._cached_error = exc
                else:
                    logger.info(
                        "loaded theme file %r (%s)", path, self._cached_theme.display_name
                    )
            if self._cached_error is not None:
                raise self._cached_error
            return self._cached_theme

    def invalidate(self) -> None:
        """Drop the cached entry so the next ``load`` reads from storage."""
        with self._lock:
            self._clear_slot()

    def list_available(self, directory: Path | None = None) -> dict[str, str]:
        """Return a mapping of theme file name to display name.

        Files that fail to parse are left out and reported by ``load_errors()``.
        """
        root = Path(directory) if directory is not None else self._themes_dir
        errors: list[str] = []
        result: dict[str, str] = {}
        if root.exists():
            result = _scan_themes(root, errors)
        if errors:
            logger.debug("theme listing warnings: %s", " | ".join(errors[:6]))
        with self._lock:
            self._load_errors = errors
        return result

    def load_errors(self) -> list[str]:
        with self._lock:
            return list(self._load_errors)

    def _clear_slot(self) -> None:
        self._cached_key = None
        self._cached_theme = None
        self._cached_error = None


def _scan_themes(root: Path, errors: list[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    try:
        all_files = sorted(
            path for path in root.iterdir()
            if path.suffix == THEME_FILE_SUFFIX and path.is_file()
        )
    except OSError as exc:
        errors.append(f"Failed to list themes in {root}: {exc}")
        return result

    candidates: list[Path] = []
    for path in all_files:
        if path.is_symlink():
            errors.append(f"Skipping symlink theme file: {path}")
            continue
        candidates.append(path)
    if len(candidates) > _MAX_THEME_FILE_CANDIDATES:
        errors.append(
            f"Theme file limit exceeded in {root}; "
            f"only first {_MAX_THEME_FILE_CANDIDATES} files were scanned."
        )
        candidates = candidates[:_MAX_THEME_FILE_CANDIDATES]

    for theme_path in candidates:
        try:
            theme = read_theme_file(theme_path)
        except ThemeValidationError as exc:
            errors.append(str(exc))
            continue
        result[theme_path.name] = theme.display_name

    return result
