"""
헤딩 제목을 URL에 안전한 식별자(slug)로 변환합니다.
"""

import re

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def slug(title: str) -> str:
    """
    제목에서 slug를 생성합니다.

    소문자로 바꾼 뒤 단어 문자, 공백, 하이픈 외의 문자를 지우고
    공백을 하이픈 하나로 바꿉니다. 빈 문자열이 반환될 수 있으며
    호출하는 쪽에서는 이를 "식별자 없음"으로 취급해야 합니다.

    Args:
        title: 헤딩 제목

    Returns:
        생성된 slug
    """
    text = _NON_SLUG_CHARS.sub("", title.lower())
    text = _WHITESPACE_RUN.sub("-", text)
    text = _HYPHEN_RUN.sub("-", text)
    return text.strip("-")
