"""
표시용 Markdown을 HTML로 렌더링하고 헤딩에 앵커 ID를 부여합니다.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt

from ..models.book import ChapterView
from ..models.toc import HeadingLevel
from .headings import resolve_heading_id

# 로깅 설정
logger = logging.getLogger(__name__)

_HEADING_TAGS = [level.tag for level in HeadingLevel]


def create_markdown_renderer() -> MarkdownIt:
    """CommonMark + 표 지원 렌더러를 생성합니다."""
    return MarkdownIt("commonmark").enable("table")


def render_chapter_html(view: ChapterView, md: Optional[MarkdownIt] = None) -> str:
    """
    챕터 뷰의 표시용 텍스트를 HTML로 렌더링합니다.

    h1~h3 헤딩에는 resolve_heading_id로 결정한 id 속성을 부여하므로
    {#id}가 제거된 텍스트에서도 작성자가 지정한 앵커로 이동할 수 있습니다.

    Args:
        view: load_chapter_view 결과
        md: 사용할 렌더러 (없으면 기본 렌더러 생성)

    Returns:
        HTML 문자열
    """
    md = md or create_markdown_renderer()
    html = md.render(view.display_text)
    soup = BeautifulSoup(html, "html.parser")

    for heading in soup.find_all(_HEADING_TAGS):
        anchor = resolve_heading_id(
            heading.get_text(), view.anchor_map, explicit_id=heading.get("id")
        )
        if anchor:
            heading["id"] = anchor

    logger.debug(f"HTML 렌더링 완료: {len(html)}자")
    return str(soup)
