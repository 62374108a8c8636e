"""Application bootstrap and command line interface."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Sequence

from PySide6.QtGui import QGuiApplication

from sonicskin.config.settings import AppearanceConfig, AppSettings
from sonicskin.errors import format_error_for_user
from sonicskin.runtime_paths import default_theme_path, icons_root, package_root
from sonicskin.ui.themes.colors import color_to_hex
from sonicskin.ui.themes.constants import AppearanceMode, FontStyle, IconName
from sonicskin.ui.themes.context import ThemeContext
from sonicskin.ui.themes.models import ThemeValidationError
from sonicskin.ui.themes.service import ThemeService


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("sonicskin")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "sonicskin.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sonicskin",
        description="Inspect theme files and the resolved appearance.",
    )
    parser.add_argument("--themes-dir", type=Path, help="directory containing theme files")
    parser.add_argument(
        "--appearance",
        choices=[mode.value for mode in AppearanceMode],
        help="override the configured appearance mode",
    )
    parser.add_argument("--theme", help="theme file to resolve against (relative to the themes dir)")
    parser.add_argument(
        "command",
        choices=("themes", "palette", "icons", "fonts"),
        help="what to print",
    )
    return parser


def format_palette(context: ThemeContext) -> list[str]:
    return [f"{name.value:<18} {color_to_hex(color)}" for name, color in context.colors().items()]


def format_icons(context: ThemeContext) -> list[str]:
    return [f"{icon_id.value:<14} {context.icon(icon_id).name}" for icon_id in IconName]


def format_fonts(context: ThemeContext) -> list[str]:
    lines = []
    for style in FontStyle:
        result = context.load_font(style)
        if result.error is not None:
            lines.append(f"{style.value:<8} error: {format_error_for_user(result.error)}")
        resource = context.font(style)
        lines.append(f"{style.value:<8} {resource.name} ({len(resource.content)} bytes)")
    return lines


def run_app(argv: Sequence[str] | None = None) -> int:
    """Resolve the appearance for the stored settings and print the requested view."""
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])
    app.setApplicationName("SonicSkin")
    app.setOrganizationName("SonicSkin")
    settings = AppSettings()
    logger = _configure_logger(settings)
    logger.info("startup package_root=%s", package_root())

    if not default_theme_path().is_file():
        logger.warning("default theme missing at %s", default_theme_path())

    themes_dir = args.themes_dir or settings.themes_dir
    # command-line overrides are not persisted
    config = AppearanceConfig(
        appearance_mode=args.appearance or settings.appearance_mode,
        theme_file_path=args.theme if args.theme is not None else settings.theme_file_path,
        normal_font_path=settings.normal_font_path,
        bold_font_path=settings.bold_font_path,
    )
    context = ThemeContext(config, themes_dir, icons_dir=icons_root())
    service = ThemeService(app, config, context)
    if config.theme_file_path:
        try:
            context.store.load(config.theme_file_path)
        except ThemeValidationError as exc:
            print(f"warning: {exc}; using the default theme", file=sys.stderr)

    with context:
        service.apply_palette()
        if args.command == "themes":
            themes = service.available_themes()
            lines = [f"{path}\t{name}" for path, name in sorted(themes.items())]
            for error in context.store.load_errors():
                print(f"skipped: {error}", file=sys.stderr)
        elif args.command == "palette":
            lines = [f"variant: {context.effective_variant().value}", *format_palette(context)]
        elif args.command == "icons":
            lines = format_icons(context)
        else:
            lines = format_fonts(context)

    for line in lines:
        print(line)
    return 0

