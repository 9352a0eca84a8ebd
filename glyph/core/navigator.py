"""
챕터 이동 관리 모듈
링크 이동, 이전/다음 챕터, 읽기 진행 상황 복원을 처리합니다.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from ..models.book import Book, Chapter, ChapterView, NavigationTarget
from .library import read_text, chapter_index, translation_path_for
from .library import next_chapter as find_next_chapter
from .library import previous_chapter as find_previous_chapter
from .links import resolve_link
from .progress import ProgressStore
from .view import load_chapter_view

# 로깅 설정
logger = logging.getLogger(__name__)

ChapterReader = Callable[[Chapter], str]


def _read_chapter_file(chapter: Chapter) -> str:
    return read_text(chapter.path)


class Navigator:
    """
    현재 책에서 챕터 이동을 관리하는 클래스

    챕터 이동은 begin_navigation -> (콘텐츠 로드) -> complete_navigation 순서로
    진행됩니다. 이전 이동이 끝나기 전에 새 이동이 시작되면 이전 이동의
    완료 요청은 무시됩니다. 앵커로의 스크롤은 새 뷰가 만들어진 뒤
    take_pending_anchor()로 가져가야 합니다.

    Babelfish 프로젝트에서 비교 모드(show_comparison)가 켜져 있으면
    챕터를 열 때 번역 파일도 함께 읽어 translation_view에 둡니다.
    """

    def __init__(
        self,
        book: Book,
        reader: Optional[ChapterReader] = None,
        progress_store: Optional[ProgressStore] = None,
    ):
        """
        Args:
            book: 읽을 책
            reader: 챕터 원문을 읽는 함수 (기본값: 챕터 경로의 파일 읽기)
            progress_store: 읽기 진행 상황 저장소
        """
        self.book = book
        self.reader = reader or _read_chapter_file
        self.progress_store = progress_store

        self.current_chapter: Optional[Chapter] = None
        self.view: Optional[ChapterView] = None
        self.pending_anchor: Optional[str] = None
        self.show_comparison = False
        self.translation_view: Optional[ChapterView] = None

        self._ticket = 0
        self._request: Optional[Tuple[int, Chapter, Optional[str]]] = None

    def get_chapter(self, chapter_id: str) -> Optional[Chapter]:
        for chapter in self.book.chapters:
            if chapter.id == chapter_id:
                return chapter
        return None

    def begin_navigation(self, chapter: Chapter, anchor: Optional[str] = None) -> int:
        """
        챕터 이동을 시작합니다. 진행 중인 이전 이동은 무효가 됩니다.

        Returns:
            complete_navigation에 전달할 티켓
        """
        self._ticket += 1
        if self._request is not None:
            logger.debug(f"이전 이동 요청을 대체합니다: {self._request[1].title}")
        self._request = (self._ticket, chapter, anchor)
        logger.info(f"챕터 이동 시작: {chapter.title}")
        return self._ticket

    def complete_navigation(self, ticket: int, raw_text: str) -> Optional[ChapterView]:
        """
        로드된 콘텐츠로 챕터 이동을 완료합니다.

        Args:
            ticket: begin_navigation이 반환한 티켓
            raw_text: 로드된 챕터 원문

        Returns:
            새 챕터 뷰. 더 최근 이동으로 대체된 요청이면 None
        """
        if self._request is None or self._request[0] != ticket:
            logger.debug(f"대체된 이동 요청을 무시합니다: 티켓 {ticket}")
            return None

        _, chapter, anchor = self._request
        self._request = None

        self.current_chapter = chapter
        self.view = load_chapter_view(raw_text)
        self.pending_anchor = anchor
        self.translation_view = (
            self._load_translation(chapter) if self.show_comparison else None
        )
        return self.view

    def open_chapter(
        self, chapter: Chapter, anchor: Optional[str] = None
    ) -> Optional[ChapterView]:
        """챕터를 읽어 현재 챕터로 설정합니다."""
        ticket = self.begin_navigation(chapter, anchor)
        return self.complete_navigation(ticket, self.reader(chapter))

    def _load_translation(self, chapter: Chapter) -> Optional[ChapterView]:
        path = translation_path_for(self.book, chapter)
        if path is None:
            return None

        if not Path(path).is_file():
            logger.info(f"번역 파일이 없습니다: {path}")
            return None

        text = read_text(path)
        return load_chapter_view(text) if text else None

    def toggle_comparison(self) -> bool:
        """
        원문/번역 비교 모드를 전환합니다.

        현재 챕터가 있으면 번역 뷰를 다시 읽거나 비웁니다.

        Returns:
            전환 후 비교 모드 상태
        """
        self.show_comparison = not self.show_comparison
        logger.info(f"비교 모드: {'켜짐' if self.show_comparison else '꺼짐'}")

        if self.show_comparison and self.current_chapter is not None:
            self.translation_view = self._load_translation(self.current_chapter)
        else:
            self.translation_view = None
        return self.show_comparison

    def take_pending_anchor(self) -> Optional[str]:
        """스크롤할 앵커를 가져가고 비웁니다."""
        anchor, self.pending_anchor = self.pending_anchor, None
        return anchor

    def follow_link(self, href: str) -> Optional[NavigationTarget]:
        """
        현재 챕터의 링크를 따라갑니다.

        Args:
            href: 링크

        Returns:
            이동 대상. 이동하지 않는 링크이면 None
        """
        if self.current_chapter is None:
            return None

        target = resolve_link(href, self.current_chapter.path, self.book.chapters)
        if target is None:
            return None

        if target.chapter_id is None:
            self.pending_anchor = target.anchor
            return target

        chapter = self.get_chapter(target.chapter_id)
        if chapter is None:
            return None

        self.open_chapter(chapter, target.anchor)
        return target

    def next_chapter(self) -> Optional[Chapter]:
        """다음 챕터로 이동합니다."""
        if self.current_chapter is None:
            return None
        chapter = find_next_chapter(self.book, self.current_chapter)
        if chapter is not None:
            self.open_chapter(chapter)
        return chapter

    def previous_chapter(self) -> Optional[Chapter]:
        """이전 챕터로 이동합니다."""
        if self.current_chapter is None:
            return None
        chapter = find_previous_chapter(self.book, self.current_chapter)
        if chapter is not None:
            self.open_chapter(chapter)
        return chapter

    def resume(self) -> Optional[Chapter]:
        """
        저장된 진행 상황의 챕터를 엽니다. 없으면 첫 번째 챕터를 엽니다.

        Returns:
            열린 챕터 또는 None (챕터가 없는 책)
        """
        if self.progress_store is not None:
            progress = self.progress_store.get(self.book.id)
            if progress is not None:
                chapter = self.get_chapter(progress.chapter_id)
                if chapter is not None:
                    logger.info(f"읽기 진행 상황 복원: {chapter.title}")
                    self.open_chapter(chapter)
                    return chapter

        if not self.book.chapters:
            return None

        chapter = self.book.chapters[0]
        self.open_chapter(chapter)
        return chapter

    def save_progress(self, scroll_position: Optional[float] = None):
        """
        현재 챕터와 스크롤 위치를 저장합니다.

        Args:
            scroll_position: 스크롤 위치. None이면 같은 챕터에 저장된 위치를
                유지하고, 챕터가 바뀌었으면 0.0을 사용합니다.
        """
        if self.progress_store is None or self.current_chapter is None:
            return None

        if scroll_position is None:
            stored = self.progress_store.get(self.book.id)
            if stored is not None and stored.chapter_id == self.current_chapter.id:
                scroll_position = stored.scroll_position
            else:
                scroll_position = 0.0

        return self.progress_store.save(
            self.book.id, self.current_chapter.id, scroll_position
        )

    def chapter_position(self) -> Optional[Tuple[int, int]]:
        """현재 챕터의 (순번, 전체 챕터 수). 순번은 1부터 시작합니다."""
        if self.current_chapter is None:
            return None
        index = chapter_index(self.book, self.current_chapter)
        if index is None:
            return None
        return index + 1, len(self.book.chapters)
