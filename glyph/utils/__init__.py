"""Utility functions for glyph package."""

from .format import (
    format_toc,
    format_chapter_list,
    format_navigation_target,
    format_link_issues,
    interactive_reader,
)

__all__ = [
    "format_toc",
    "format_chapter_list",
    "format_navigation_target",
    "format_link_issues",
    "interactive_reader",
]
