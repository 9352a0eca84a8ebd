"""
Markdown 책 디렉토리 로딩 모듈
디렉토리를 스캔하여 챕터 목록을 만들고, Babelfish 번역 프로젝트(book.yaml)를 인식합니다.
"""

import logging
from pathlib import Path
from typing import List, Dict, Any, Optional, Union

import yaml

from ..models.book import Book, Chapter
from .config import Config

# 로깅 설정
logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BookLoader:
    """Markdown 디렉토리를 Book으로 읽어들이는 클래스"""

    def __init__(
        self,
        chapter_extension: str = Config.CHAPTER_EXTENSION,
        manifest_name: str = Config.MANIFEST_NAME,
        source_dir_name: str = Config.SOURCE_DIR_NAME,
        translation_dir_name: str = Config.TRANSLATION_DIR_NAME,
    ):
        """
        책 로더를 초기화합니다.

        Args:
            chapter_extension: 챕터 파일 확장자
            manifest_name: Babelfish 프로젝트 매니페스트 파일 이름
            source_dir_name: Babelfish 원문 디렉토리 이름
            translation_dir_name: Babelfish 번역 디렉토리 이름
        """
        self.chapter_extension = chapter_extension
        self.manifest_name = manifest_name
        self.source_dir_name = source_dir_name
        self.translation_dir_name = translation_dir_name

    def is_babelfish_project(self, path: PathLike) -> bool:
        """매니페스트 파일이 있으면 Babelfish 번역 프로젝트입니다."""
        return (Path(path) / self.manifest_name).is_file()

    def read_manifest(self, path: PathLike) -> Dict[str, Any]:
        """
        매니페스트(book.yaml)를 읽습니다.

        Args:
            path: 책 디렉토리

        Returns:
            매니페스트 내용. 없거나 읽을 수 없으면 빈 딕셔너리
        """
        manifest_path = Path(path) / self.manifest_name
        if not manifest_path.is_file():
            return {}

        try:
            with open(manifest_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"매니페스트를 읽을 수 없습니다: {manifest_path} ({e})")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"매니페스트 형식이 올바르지 않습니다: {manifest_path}")
            return {}

        return data

    def chapter_title(self, file_name: str) -> str:
        """파일 이름에서 챕터 제목을 만듭니다. (예: "01_Getting_Started.md")"""
        return file_name.replace(self.chapter_extension, "", 1).replace("_", " ")

    def scan_chapters(self, directory: PathLike) -> List[Chapter]:
        """
        디렉토리를 재귀적으로 스캔하여 챕터 목록을 만듭니다.

        Args:
            directory: 스캔할 디렉토리

        Returns:
            제목 순으로 정렬된 챕터 리스트
        """
        logger.info(f"챕터 스캔 중: {directory}")

        chapters = []
        for file_path in Path(directory).rglob(f"*{self.chapter_extension}"):
            if not file_path.is_file():
                continue

            path = file_path.as_posix()
            chapters.append(
                Chapter(id=path, title=self.chapter_title(file_path.name), path=path)
            )

        chapters.sort(key=lambda c: (c.title.casefold(), c.path))

        logger.info(f"총 {len(chapters)}개의 챕터를 찾았습니다.")
        return chapters

    def load_book(self, path: PathLike) -> Book:
        """
        책 디렉토리를 읽어 Book을 생성합니다.

        Args:
            path: 책 디렉토리

        Returns:
            Book 객체

        Raises:
            FileNotFoundError: 디렉토리가 없는 경우
        """
        root = Path(path)
        if not root.is_dir():
            logger.error(f"책 디렉토리를 찾을 수 없습니다: {root}")
            raise FileNotFoundError(f"책 디렉토리를 찾을 수 없습니다: {root}")

        is_babelfish = self.is_babelfish_project(root)
        manifest = self.read_manifest(root) if is_babelfish else {}

        source_path = root / self.source_dir_name if is_babelfish else root
        if is_babelfish:
            logger.info(f"Babelfish 프로젝트 감지: {root}")

        chapters = self.scan_chapters(source_path) if source_path.is_dir() else []
        if not chapters:
            logger.warning(f"챕터가 없습니다: {source_path}")

        return Book(
            id=root.as_posix(),
            title=str(manifest.get("title") or root.resolve().name or "Book"),
            path=source_path.as_posix(),
            chapters=chapters,
            author=manifest.get("author"),
            is_babelfish=is_babelfish,
            translation_path=(
                (root / self.translation_dir_name).as_posix() if is_babelfish else None
            ),
        )

    def read_chapter(self, chapter: Chapter) -> str:
        """
        챕터 원문을 읽습니다.

        Args:
            chapter: 읽을 챕터

        Returns:
            챕터 원문. 읽을 수 없으면 빈 문자열
        """
        return read_text(chapter.path)


def read_text(path: PathLike) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"파일 읽기 중 오류 발생: {path} ({e})")
        return ""


def translation_path_for(book: Book, chapter: Chapter) -> Optional[str]:
    """
    챕터에 대응하는 번역 파일 경로를 반환합니다.

    Args:
        book: Babelfish 프로젝트 책
        chapter: 원문 챕터

    Returns:
        번역 파일 경로. 번역 프로젝트가 아니면 None
    """
    if not book.is_babelfish or not book.translation_path:
        return None
    if not chapter.path.startswith(book.path):
        return None
    return book.translation_path + chapter.path[len(book.path) :]


def chapter_index(book: Book, chapter: Chapter) -> Optional[int]:
    for i, candidate in enumerate(book.chapters):
        if candidate.id == chapter.id:
            return i
    return None


def next_chapter(book: Book, chapter: Chapter) -> Optional[Chapter]:
    """책 순서상 다음 챕터 (마지막이면 None)"""
    index = chapter_index(book, chapter)
    if index is None or index + 1 >= len(book.chapters):
        return None
    return book.chapters[index + 1]


def previous_chapter(book: Book, chapter: Chapter) -> Optional[Chapter]:
    """책 순서상 이전 챕터 (처음이면 None)"""
    index = chapter_index(book, chapter)
    if index is None or index == 0:
        return None
    return book.chapters[index - 1]
