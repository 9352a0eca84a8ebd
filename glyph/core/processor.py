"""
책 전체 처리 모듈
모든 챕터의 목차를 추출하여 JSON으로 저장하고, 챕터 간 링크를 검사합니다.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Any, Optional, Set, Union
from urllib.parse import unquote

from markdown_it import MarkdownIt
from tqdm import tqdm

from ..models.book import Book, Chapter
from .headings import parse_headings
from .library import BookLoader
from .links import is_external_link, resolve_link

# 로깅 설정
logger = logging.getLogger(__name__)


@dataclass
class LinkIssue:
    """해석되지 않는 링크 정보"""

    chapter_id: str
    href: str
    reason: str


class BookProcessor:
    """책 전체를 처리하는 메인 클래스"""

    def __init__(self, loader: Optional[BookLoader] = None, show_progress: bool = True):
        """
        책 프로세서를 초기화합니다.

        Args:
            loader: 챕터 원문을 읽을 로더
            show_progress: 진행 표시줄 사용 여부
        """
        self.loader = loader or BookLoader()
        self.show_progress = show_progress
        self.md = MarkdownIt("commonmark")

    def _iter_chapters(self, book: Book, desc: str):
        return tqdm(book.chapters, desc=desc, disable=not self.show_progress)

    def build_book_toc(self, book: Book) -> List[Dict[str, Any]]:
        """
        모든 챕터의 목차를 추출합니다.

        Args:
            book: 처리할 책

        Returns:
            챕터별 목차 정보 리스트
        """
        logger.info(f"책 목차 추출 시작: {book.title} ({len(book.chapters)}개 챕터)")

        book_toc = []
        for chapter in self._iter_chapters(book, "목차 추출"):
            toc = parse_headings(self.loader.read_chapter(chapter))
            book_toc.append(
                {
                    "chapter_id": chapter.id,
                    "title": chapter.title,
                    "path": chapter.path,
                    "toc": [entry.to_dict() for entry in toc],
                }
            )

        logger.info(f"총 {len(book_toc)}개 챕터의 목차를 추출했습니다.")
        return book_toc

    def save_toc_json(self, book: Book, output_path: Union[str, Path]) -> Path:
        """
        책 목차를 JSON 파일로 저장합니다.

        Args:
            book: 처리할 책
            output_path: 저장할 파일 경로

        Returns:
            저장된 파일 경로
        """
        output_path = Path(output_path)
        toc_data = {
            "book_id": book.id,
            "title": book.title,
            "author": book.author,
            "chapters": self.build_book_toc(book),
        }

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(toc_data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"TOC JSON 저장 중 오류 발생: {e}")
            raise

        logger.info(f"TOC JSON 파일 저장: {output_path}")
        return output_path

    def extract_links(self, text: str) -> List[str]:
        """
        Markdown 텍스트에서 링크 주소를 추출합니다.

        Args:
            text: Markdown 텍스트

        Returns:
            문서 순서대로의 링크 주소 리스트
        """
        links = []
        for token in self.md.parse(text):
            for child in token.children or []:
                if child.type == "link_open":
                    href = child.attrGet("href")
                    if href:
                        links.append(unquote(str(href)))
        return links

    def check_links(self, book: Book) -> List[LinkIssue]:
        """
        모든 챕터의 링크를 검사합니다.

        일치하는 챕터가 없는 링크와, 대상 챕터 목차(h1~h3)에 없는 앵커를
        가리키는 링크를 보고합니다. 외부 링크는 검사하지 않습니다.

        Args:
            book: 검사할 책

        Returns:
            문제가 있는 링크 리스트
        """
        logger.info(f"링크 검사 시작: {book.title}")

        texts = {chapter.id: self.loader.read_chapter(chapter) for chapter in book.chapters}
        anchors: Dict[str, Set[str]] = {}

        def anchors_of(chapter_id: str) -> Set[str]:
            if chapter_id not in anchors:
                anchors[chapter_id] = {
                    entry.anchor
                    for root in parse_headings(texts.get(chapter_id, ""))
                    for entry in root.walk()
                }
            return anchors[chapter_id]

        issues = []
        for chapter in self._iter_chapters(book, "링크 검사"):
            for href in self.extract_links(texts[chapter.id]):
                issue = self._check_link(book, chapter, href, anchors_of)
                if issue is not None:
                    issues.append(issue)

        if issues:
            logger.warning(f"{len(issues)}개의 링크 문제를 발견했습니다.")
        else:
            logger.info("모든 링크가 정상입니다.")
        return issues

    def _check_link(self, book: Book, chapter: Chapter, href: str, anchors_of):
        if is_external_link(href):
            return None

        target = resolve_link(href, chapter.path, book.chapters)
        if target is None:
            return LinkIssue(chapter.id, href, "일치하는 챕터가 없습니다")

        if target.anchor is None:
            return None

        target_id = target.chapter_id or chapter.id
        if target.anchor not in anchors_of(target_id):
            return LinkIssue(chapter.id, href, f"앵커를 찾을 수 없습니다: #{target.anchor}")

        return None
