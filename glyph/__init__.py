"""
Glyph - Markdown 책 리더의 목차 및 탐색 엔진

챕터 원문에서 계층적 목차를 만들고, 작성자가 지정한 앵커({#id})를
표시용 텍스트에서도 유지하며, 챕터 간 상대 링크를 대상 챕터와 앵커로
해석하는 패키지입니다.
"""

__version__ = "0.1.0"
__author__ = "Glyph Team"
__email__ = "glyph@example.com"

# Core classes and functions
from .core.slug import slug
from .core.headings import (
    parse_headings,
    build_anchor_map,
    strip_anchor_syntax,
    resolve_heading_id,
)
from .core.links import resolve, find_chapter, resolve_link
from .core.view import load_chapter_view
from .core.renderer import render_chapter_html
from .core.library import BookLoader
from .core.navigator import Navigator
from .core.processor import BookProcessor, LinkIssue
from .core.progress import ProgressStore
from .core.config import Config, validate_config

# Data models
from .models.toc import TocEntry, HeadingLevel
from .models.book import (
    Book,
    Chapter,
    ChapterView,
    NavigationTarget,
    ReadingProgress,
    ResolvedHref,
)

# Utilities
from .utils.format import (
    format_toc,
    format_chapter_list,
    format_navigation_target,
    format_link_issues,
    interactive_reader,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    # Core functions
    "slug",
    "parse_headings",
    "build_anchor_map",
    "strip_anchor_syntax",
    "resolve_heading_id",
    "resolve",
    "find_chapter",
    "resolve_link",
    "load_chapter_view",
    "render_chapter_html",
    # Core classes
    "BookLoader",
    "Navigator",
    "BookProcessor",
    "LinkIssue",
    "ProgressStore",
    "Config",
    "validate_config",
    # Data models
    "TocEntry",
    "HeadingLevel",
    "Book",
    "Chapter",
    "ChapterView",
    "NavigationTarget",
    "ReadingProgress",
    "ResolvedHref",
    # Utilities
    "format_toc",
    "format_chapter_list",
    "format_navigation_target",
    "format_link_issues",
    "interactive_reader",
]
