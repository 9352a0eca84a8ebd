"""
챕터 로드 시 표시에 필요한 값(목차, 앵커 맵, 표시용 텍스트)을 생성합니다.
"""

import logging

from ..models.book import ChapterView
from .headings import parse_headings, build_anchor_map, strip_anchor_syntax

# 로깅 설정
logger = logging.getLogger(__name__)


def load_chapter_view(raw_text: str) -> ChapterView:
    """
    챕터 원문으로부터 ChapterView를 생성합니다.

    Args:
        raw_text: 챕터 원문

    Returns:
        목차, 앵커 맵, 표시용 텍스트
    """
    view = ChapterView(
        toc=parse_headings(raw_text),
        anchor_map=build_anchor_map(raw_text),
        display_text=strip_anchor_syntax(raw_text),
    )
    logger.debug(
        f"챕터 뷰 생성: TOC {len(view.toc)}개, 명시적 앵커 {len(view.anchor_map)}개"
    )
    return view
