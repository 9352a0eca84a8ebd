"""
챕터 간 링크 해석 모듈
작성자가 쓴 상대 경로 링크를 정규화하고 책의 챕터 목록에서 대상 챕터를 찾습니다.
"""

import logging
from typing import List, Optional, Sequence

from ..models.book import Chapter, NavigationTarget, ResolvedHref

# 로깅 설정
logger = logging.getLogger(__name__)

CHAPTER_EXTENSION = ".md"
EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "data:")


def is_external_link(href: str) -> bool:
    """외부 URL 링크인지 확인합니다."""
    return href.lower().startswith(EXTERNAL_PREFIXES)


def resolve(href: str, current_chapter_path: str) -> ResolvedHref:
    """
    상대 링크를 현재 챕터 경로 기준으로 정규화합니다.

    파일 시스템에 접근하지 않으며, 루트 위로 올라가는 ".."는 무시됩니다.

    Args:
        href: 링크 (예: "../ch2.md#sec")
        current_chapter_path: 현재 챕터 경로 (예: "/book/ch1/intro.md")

    Returns:
        정규화된 경로와 프래그먼트. 파일 부분이 비어 있으면 같은 문서 안의 링크입니다.
    """
    if "#" in href:
        file_part, fragment = href.split("#", 1)
    else:
        file_part, fragment = href, None

    if not file_part:
        return ResolvedHref(file_part="", fragment=fragment)

    slash = current_chapter_path.rfind("/")
    current_dir = current_chapter_path[:slash] if slash >= 0 else ""

    segments: List[str] = []
    for part in f"{current_dir}/{file_part}".split("/"):
        if part == "..":
            if segments:
                segments.pop()
        elif part and part != ".":
            segments.append(part)

    return ResolvedHref(file_part="/" + "/".join(segments), fragment=fragment)


def filename_of(path: str) -> str:
    return path[path.rfind("/") + 1 :]


def filename_without_extension(path: str) -> str:
    name = filename_of(path)
    dot = name.rfind(".")
    return name[:dot] if dot > 0 else name


def find_chapter(resolved_path: str, chapters: Sequence[Chapter]) -> Optional[Chapter]:
    """
    정규화된 경로에 해당하는 챕터를 찾습니다.

    1. 경로가 정확히 일치하는 챕터
    2. 경로가 "/" + 파일명으로 끝나는 챕터
    3. 경로가 확장자를 뺀 파일명 + ".md"로 끝나는 챕터

    파일명이 없는 경로("/" 등 디렉토리만 가리키는 경로)는 1번 규칙만
    적용합니다. 3번 규칙을 그대로 적용하면 ".md"로 끝나는 모든 챕터와
    일치하기 때문입니다.

    Args:
        resolved_path: resolve()로 정규화된 경로
        chapters: 책의 챕터 목록 (순서대로)

    Returns:
        찾은 챕터 또는 None
    """
    for chapter in chapters:
        if chapter.path == resolved_path:
            return chapter

    filename = filename_of(resolved_path)
    if not filename:
        return None

    for chapter in chapters:
        if chapter.path.endswith("/" + filename):
            logger.debug(f"파일명으로 챕터 매칭: {resolved_path} -> {chapter.path}")
            return chapter

    stem_suffix = filename_without_extension(resolved_path) + CHAPTER_EXTENSION
    for chapter in chapters:
        if chapter.path.endswith(stem_suffix):
            logger.debug(f"확장자 무시 매칭: {resolved_path} -> {chapter.path}")
            return chapter

    return None


def resolve_link(
    href: str, current_chapter_path: str, chapters: Sequence[Chapter]
) -> Optional[NavigationTarget]:
    """
    링크를 이동 대상으로 변환합니다.

    Args:
        href: 링크
        current_chapter_path: 현재 챕터 경로
        chapters: 책의 챕터 목록

    Returns:
        이동 대상. 외부 링크이거나 일치하는 챕터가 없으면 None
    """
    if not href or is_external_link(href):
        return None

    resolved = resolve(href, current_chapter_path)
    anchor = resolved.fragment or None

    if resolved.is_same_document:
        return NavigationTarget(chapter_id=None, anchor=anchor)

    chapter = find_chapter(resolved.file_part, chapters)
    if chapter is None:
        logger.debug(f"일치하는 챕터가 없습니다: {href} ({resolved.file_part})")
        return None

    return NavigationTarget(chapter_id=chapter.id, anchor=anchor)
