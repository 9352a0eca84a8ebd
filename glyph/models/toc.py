"""TOC (Table of Contents) related data models."""

from typing import List, Dict, Any, Iterator
from dataclasses import dataclass, field
from enum import IntEnum


class HeadingLevel(IntEnum):
    """목차에 포함되는 헤딩 레벨 (h1~h3)"""

    H1 = 1
    H2 = 2
    H3 = 3

    @property
    def tag(self) -> str:
        """HTML 태그 이름"""
        return _HEADING_TAGS[self]


_HEADING_TAGS = {
    HeadingLevel.H1: "h1",
    HeadingLevel.H2: "h2",
    HeadingLevel.H3: "h3",
}


@dataclass
class TocEntry:
    """TOC 항목을 나타내는 데이터 클래스"""

    level: HeadingLevel
    title: str
    anchor: str
    children: List["TocEntry"] = field(default_factory=list)

    def walk(self) -> Iterator["TocEntry"]:
        """자신과 모든 하위 항목을 문서 순서대로 순회합니다."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": int(self.level),
            "title": self.title,
            "anchor": self.anchor,
            "children": [child.to_dict() for child in self.children],
        }
