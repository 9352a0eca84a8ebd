"""Book, chapter and navigation related data models."""

from typing import List, Dict, Optional
from dataclasses import dataclass, field

from .toc import TocEntry


@dataclass
class Chapter:
    """책의 한 챕터 (하나의 Markdown 파일)"""

    id: str
    title: str
    path: str


@dataclass
class Book:
    """챕터 순서가 정해진 책"""

    id: str
    title: str
    path: str
    chapters: List[Chapter] = field(default_factory=list)
    author: Optional[str] = None
    is_babelfish: bool = False
    translation_path: Optional[str] = None


@dataclass(frozen=True)
class NavigationTarget:
    """링크 이동 대상. chapter_id가 None이면 현재 문서 안에서 이동합니다."""

    chapter_id: Optional[str]
    anchor: Optional[str] = None


@dataclass(frozen=True)
class ResolvedHref:
    """정규화된 링크 경로와 프래그먼트"""

    file_part: str
    fragment: Optional[str] = None

    @property
    def is_same_document(self) -> bool:
        return not self.file_part


@dataclass
class ChapterView:
    """현재 표시 중인 챕터에서 파생된 값들"""

    toc: List[TocEntry]
    anchor_map: Dict[str, str]
    display_text: str


@dataclass
class ReadingProgress:
    """책별 읽기 진행 상황"""

    book_id: str
    chapter_id: str
    scroll_position: float
    last_read: str
