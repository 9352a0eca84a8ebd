"""Core functionality for glyph package."""

from .slug import slug
from .headings import (
    parse_headings,
    build_anchor_map,
    strip_anchor_syntax,
    resolve_heading_id,
)
from .links import resolve, find_chapter, resolve_link, is_external_link
from .view import load_chapter_view
from .renderer import render_chapter_html
from .library import BookLoader, translation_path_for
from .navigator import Navigator
from .processor import BookProcessor, LinkIssue
from .progress import ProgressStore
from .config import Config, validate_config

__all__ = [
    "slug",
    "parse_headings",
    "build_anchor_map",
    "strip_anchor_syntax",
    "resolve_heading_id",
    "resolve",
    "find_chapter",
    "resolve_link",
    "is_external_link",
    "load_chapter_view",
    "render_chapter_html",
    "BookLoader",
    "translation_path_for",
    "Navigator",
    "BookProcessor",
    "LinkIssue",
    "ProgressStore",
    "Config",
    "validate_config",
]
