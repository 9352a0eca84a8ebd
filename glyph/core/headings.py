"""
Markdown 헤딩 분석 모듈
챕터 원문에서 계층적 목차를 만들고, 명시적 앵커({#id}) 인덱스를 구성하며,
화면 표시용 텍스트에서 앵커 문법을 제거합니다.
"""

import logging
import re
from typing import List, Dict, Optional, Iterator
from dataclasses import dataclass

from ..models.toc import TocEntry, HeadingLevel
from .slug import slug

# 로깅 설정
logger = logging.getLogger(__name__)

FENCE_MARKER = "```"

# 목차 대상 헤딩: "#"~"###" + 공백 + 제목
_HEADING_RE = re.compile(r"^(#{1,3})\s+(.+)$")
# 제목 끝의 명시적 앵커 "{#id}"
_EXPLICIT_ANCHOR_RE = re.compile(r"\s*\{#([^}]+)\}$")
# 앵커 제거 대상: 모든 헤딩 레벨(h1~h6)
_STRIP_ANCHOR_RE = re.compile(r"^([ \t]*#{1,6}[ \t]+.+?)[ \t]*\{#[^}]+\}[ \t]*(\r?)$")


@dataclass(frozen=True)
class HeadingLine:
    """헤딩으로 판정된 한 줄"""

    level: HeadingLevel
    title: str
    explicit_id: Optional[str] = None

    @property
    def anchor(self) -> str:
        if self.explicit_id is not None:
            return self.explicit_id
        return slug(self.title)


def classify_heading(line: str) -> Optional[HeadingLine]:
    """
    한 줄이 목차 대상 헤딩인지 판정합니다. (코드 펜스 상태는 고려하지 않음)

    Args:
        line: 검사할 줄

    Returns:
        헤딩 정보 또는 None
    """
    match = _HEADING_RE.match(line.strip())
    if not match:
        return None

    level = HeadingLevel(len(match.group(1)))
    title = match.group(2).strip()

    explicit_id = None
    anchor_match = _EXPLICIT_ANCHOR_RE.search(title)
    if anchor_match:
        explicit_id = anchor_match.group(1)
        title = title[: anchor_match.start()].strip()

    if not title:
        return None

    return HeadingLine(level=level, title=title, explicit_id=explicit_id)


def is_fence_delimiter(line: str) -> bool:
    return line.strip().startswith(FENCE_MARKER)


def iter_heading_lines(text: str) -> Iterator[HeadingLine]:
    """
    코드 펜스 밖에 있는 헤딩 줄을 문서 순서대로 반환합니다.

    Args:
        text: 챕터 원문

    Yields:
        헤딩 정보
    """
    in_fence = False

    for line in text.split("\n"):
        if is_fence_delimiter(line):
            in_fence = not in_fence
            continue

        if in_fence:
            continue

        heading = classify_heading(line)
        if heading is not None:
            yield heading


def parse_headings(text: str) -> List[TocEntry]:
    """
    챕터 원문에서 계층적 목차(포레스트)를 생성합니다.

    각 헤딩은 앞에 나온 헤딩 중 레벨이 더 낮은 가장 가까운 헤딩의
    자식이 됩니다. 레벨을 건너뛴 경우(# 다음 ###)도 스택에 남은
    조상 아래에 그대로 붙습니다.

    Args:
        text: 챕터 원문

    Returns:
        최상위 TOC 항목들의 리스트
    """
    roots: List[TocEntry] = []
    stack: List[TocEntry] = []

    for heading in iter_heading_lines(text):
        entry = TocEntry(level=heading.level, title=heading.title, anchor=heading.anchor)

        while stack and stack[-1].level >= entry.level:
            stack.pop()

        if stack:
            stack[-1].children.append(entry)
        else:
            roots.append(entry)

        stack.append(entry)

    logger.debug(f"{len(roots)}개의 최상위 TOC 항목을 생성했습니다.")
    return roots


def build_anchor_map(text: str) -> Dict[str, str]:
    """
    slug(제목) -> 명시적 앵커 ID 맵을 생성합니다.

    표시용 텍스트에서는 {#id}가 제거되므로, 렌더링 시점에 보이는 제목의
    slug로 원래 작성자가 지정한 ID를 찾을 때 사용합니다.
    같은 slug가 여러 번 나오면 나중 헤딩의 ID가 앞의 것을 덮어씁니다.

    Args:
        text: 챕터 원문

    Returns:
        slug -> 명시적 ID 맵
    """
    anchor_map: Dict[str, str] = {}

    for heading in iter_heading_lines(text):
        if heading.explicit_id is None:
            continue

        key = slug(heading.title)
        if not key:
            continue

        if key in anchor_map and anchor_map[key] != heading.explicit_id:
            logger.debug(
                f"중복 slug '{key}': '{anchor_map[key]}' -> '{heading.explicit_id}'"
            )
        anchor_map[key] = heading.explicit_id

    return anchor_map


def strip_anchor_syntax(text: str) -> str:
    """
    헤딩 줄 끝의 {#id} 문법을 제거한 표시용 텍스트를 만듭니다.

    줄 단위로만 판정하므로 코드 펜스 상태와 무관하게 헤딩 형태의 줄은
    모두 대상입니다. 본문이나 줄 중간의 {#...}는 그대로 두며,
    줄 끝의 "\\r"은 유지됩니다.

    Args:
        text: 챕터 원문

    Returns:
        표시용 텍스트
    """
    lines = text.split("\n")
    return "\n".join(_STRIP_ANCHOR_RE.sub(r"\1\2", line) for line in lines)


def resolve_heading_id(
    visible_text: str,
    anchor_map: Dict[str, str],
    explicit_id: Optional[str] = None,
) -> str:
    """
    렌더링된 헤딩에 부여할 ID를 결정합니다.

    우선순위: 렌더링 컨텍스트가 지정한 ID > 앵커 맵 > slug(표시 텍스트)

    Args:
        visible_text: 화면에 보이는 헤딩 텍스트
        anchor_map: build_anchor_map 결과
        explicit_id: 렌더링 컨텍스트가 지정한 ID

    Returns:
        헤딩 ID (빈 문자열이면 식별자 없음)
    """
    if explicit_id:
        return explicit_id

    key = slug(visible_text)
    return anchor_map.get(key, key)
