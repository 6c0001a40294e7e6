"""Repository palette - render the CSS colors of a GitHub repository as SVG tiles."""

from repo_palette.app import create_app
from repo_palette.archive import Archive, ArchiveEntry, open_archive
from repo_palette.colors import find_colors, normalize_color
from repo_palette.config import Settings
from repo_palette.exceptions import (
    ArchiveFormatError,
    ColorParseError,
    ConfigurationError,
    FetchError,
    PaletteError,
    StyleParseError,
    ValidationError,
)
from repo_palette.extract import extract_colors, is_stylesheet_path
from repo_palette.fetcher import RepositoryFetcher
from repo_palette.logging import configure_logging, get_logger
from repo_palette.pipeline import build_palette
from repo_palette.render import render_palette, render_svg, to_grid
from repo_palette.stylesheet import parse_stylesheet
from repo_palette.types import ColorSet, DeclarationNode, RequestOptions, RuleNode, StyleNode
from repo_palette.walker import collect_colors

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Application
    "create_app",
    "build_palette",
    "Settings",
    # Pipeline stages
    "RepositoryFetcher",
    "open_archive",
    "Archive",
    "ArchiveEntry",
    "extract_colors",
    "is_stylesheet_path",
    "parse_stylesheet",
    "collect_colors",
    "normalize_color",
    "find_colors",
    "to_grid",
    "render_svg",
    "render_palette",
    # Types
    "RequestOptions",
    "StyleNode",
    "RuleNode",
    "DeclarationNode",
    "ColorSet",
    # Exceptions
    "PaletteError",
    "ValidationError",
    "FetchError",
    "ArchiveFormatError",
    "StyleParseError",
    "ColorParseError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
]
