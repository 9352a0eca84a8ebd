#!/usr/bin/env python3
"""
Glyph 패키지 기본 사용 예제

이 예제는 Glyph를 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

from pathlib import Path

# Glyph 패키지 import
from glyph import (
    BookLoader,
    Chapter,
    Navigator,
    load_chapter_view,
    render_chapter_html,
    resolve_link,
    format_toc,
    format_navigation_target,
)

SAMPLE_CHAPTER = """# Getting Started {#start}

Read [the next chapter](../part2/setup.md#install) or jump to [usage](#usage).

## Installation

```bash
# This is not a heading
pip install glyph-reader
```

## Usage {#usage}

### Advanced options
"""


def main():
    """기본 사용 예제"""
    print("📚 Glyph 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 챕터 뷰 생성
    view = load_chapter_view(SAMPLE_CHAPTER)
    print("\n📖 목차:")
    print(format_toc(view.toc))
    print(f"\n🔖 명시적 앵커: {view.anchor_map}")

    # 2. HTML 렌더링 ({#id}가 제거된 텍스트에서도 앵커 유지)
    html = render_chapter_html(view)
    print("\n🌐 HTML 미리보기:")
    print(html[:300] + "..." if len(html) > 300 else html)

    # 3. 링크 해석
    chapters = [
        Chapter(id="intro", title="Getting Started", path="/book/part1/intro.md"),
        Chapter(id="setup", title="Setup", path="/book/part2/setup.md"),
    ]
    for href in ["../part2/setup.md#install", "#usage", "missing.md"]:
        target = resolve_link(href, "/book/part1/intro.md", chapters)
        print(f"\n🔗 {href}")
        print(f"   {format_navigation_target(target)}")

    # 4. 디렉토리의 책 읽기 (있는 경우)
    book_dir = Path("book")
    if book_dir.is_dir():
        book = BookLoader().load_book(book_dir)
        navigator = Navigator(book)
        chapter = navigator.resume()
        if chapter:
            print(f"\n📖 첫 챕터: {chapter.title}")
            print(format_toc(navigator.view.toc))
    else:
        print(f"\n⚠️  책 디렉토리를 찾을 수 없습니다: {book_dir}")


if __name__ == "__main__":
    main()
