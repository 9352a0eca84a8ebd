"""Data models for glyph package."""

from .toc import TocEntry, HeadingLevel
from .book import (
    Book,
    Chapter,
    ChapterView,
    NavigationTarget,
    ReadingProgress,
    ResolvedHref,
)

__all__ = [
    "TocEntry",
    "HeadingLevel",
    "Book",
    "Chapter",
    "ChapterView",
    "NavigationTarget",
    "ReadingProgress",
    "ResolvedHref",
]
