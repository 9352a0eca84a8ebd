"""
목차/챕터/링크 정보 포맷팅 및 대화형 리더 유틸리티
"""

from typing import List, Optional

from ..models.book import Book, Chapter, NavigationTarget
from ..models.toc import TocEntry
from ..core.navigator import Navigator
from ..core.processor import LinkIssue


def format_toc(entries: List[TocEntry], show_anchors: bool = True) -> str:
    """
    목차를 트리 형태로 포맷팅합니다.

    Args:
        entries: 최상위 TOC 항목들
        show_anchors: 앵커 표시 여부

    Returns:
        포맷팅된 목차
    """
    if not entries:
        return "목차 없음"

    lines = []

    def add_entry(entry: TocEntry, depth: int):
        line = f"{'  ' * depth}├─ {entry.title}"
        if show_anchors:
            line += f"  #{entry.anchor}" if entry.anchor else "  (앵커 없음)"
        lines.append(line)
        for child in entry.children:
            add_entry(child, depth + 1)

    for entry in entries:
        add_entry(entry, 0)

    return "\n".join(lines)


def format_chapter_list(book: Book, current: Optional[Chapter] = None) -> str:
    """
    책의 챕터 목록을 포맷팅합니다.

    Args:
        book: 책
        current: 현재 챕터 (표시용)

    Returns:
        포맷팅된 챕터 목록
    """
    header = f"📚 {book.title}"
    if book.author:
        header += f" - {book.author}"
    if book.is_babelfish:
        header += " (Babelfish)"

    lines = [header, "=" * 50]
    if not book.chapters:
        lines.append("챕터가 없습니다.")

    for i, chapter in enumerate(book.chapters, 1):
        marker = "▶" if current is not None and chapter.id == current.id else " "
        lines.append(f"{marker} {i:3d}. {chapter.title}  ({chapter.path})")

    return "\n".join(lines)


def format_navigation_target(target: Optional[NavigationTarget], book: Optional[Book] = None) -> str:
    """이동 대상을 한 줄로 포맷팅합니다."""
    if target is None:
        return "이동할 수 없는 링크입니다."

    anchor = f"#{target.anchor}" if target.anchor else "(문서 처음)"

    if target.chapter_id is None:
        return f"📍 현재 문서 {anchor}"

    title = target.chapter_id
    if book is not None:
        for chapter in book.chapters:
            if chapter.id == target.chapter_id:
                title = chapter.title
                break

    return f"📖 {title} {anchor}"


def format_link_issues(issues: List[LinkIssue]) -> str:
    """링크 검사 결과를 포맷팅합니다."""
    if not issues:
        return "✅ 모든 링크가 정상입니다."

    lines = [f"❌ 링크 문제 {len(issues)}개:"]
    for issue in issues:
        lines.append(f"  - {issue.chapter_id}: {issue.href} ({issue.reason})")
    return "\n".join(lines)


def interactive_reader(navigator: Navigator):
    """
    터미널에서 책을 탐색할 수 있는 대화형 리더입니다.

    Args:
        navigator: 책이 설정된 Navigator
    """
    book = navigator.book
    if navigator.current_chapter is None and navigator.resume() is None:
        print("표시할 챕터가 없습니다.")
        return

    def show_current_chapter():
        """현재 챕터 정보를 표시합니다."""
        chapter = navigator.current_chapter
        position = navigator.chapter_position()
        print("\n" + "=" * 80)
        if position:
            print(f"📖 {chapter.title} ({position[0]} / {position[1]})")
        else:
            print(f"📖 {chapter.title}")
        print("=" * 80)
        print(format_toc(navigator.view.toc))

        anchor = navigator.take_pending_anchor()
        if anchor:
            print(f"\n📍 이동 위치: #{anchor}")

    def show_help():
        """도움말을 표시합니다."""
        print("\n📖 대화형 리더 명령어:")
        print("  n, next       - 다음 챕터")
        print("  p, prev       - 이전 챕터")
        print("  t, toc        - 현재 챕터 목차")
        print("  c, chapters   - 챕터 목록")
        print("  r, read       - 현재 챕터 본문 보기")
        print("  g, goto LINK  - 링크 따라가기 (예: g ../ch2.md#intro)")
        if book.is_babelfish:
            print("  x, compare    - 원문/번역 비교 모드 전환")
        print("  help          - 이 도움말 보기")
        print("  q, quit       - 종료")

    print(f"📚 {book.title} 대화형 리더 ({len(book.chapters)}개 챕터)")
    show_help()
    show_current_chapter()

    while True:
        try:
            command = input("\n명령어를 입력하세요 (help를 입력하면 도움말): ").strip()
            name, _, argument = command.partition(" ")
            name = name.lower()

            if name in ["q", "quit", "exit"]:
                navigator.save_progress()
                print("👋 리더를 종료합니다.")
                break

            elif name in ["n", "next"]:
                if navigator.next_chapter():
                    show_current_chapter()
                else:
                    print("❗ 마지막 챕터입니다.")

            elif name in ["p", "prev"]:
                if navigator.previous_chapter():
                    show_current_chapter()
                else:
                    print("❗ 첫 번째 챕터입니다.")

            elif name in ["t", "toc"]:
                print(format_toc(navigator.view.toc))

            elif name in ["c", "chapters"]:
                print(format_chapter_list(book, navigator.current_chapter))

            elif name in ["r", "read"]:
                print("-" * 80)
                if navigator.show_comparison and navigator.translation_view:
                    print("[원문]")
                    print(navigator.view.display_text)
                    print("-" * 80)
                    print("[번역]")
                    print(navigator.translation_view.display_text)
                else:
                    print(navigator.view.display_text)
                print("-" * 80)

            elif name in ["x", "compare"]:
                if not book.is_babelfish:
                    print("❗ 번역 프로젝트가 아니어서 비교 모드를 사용할 수 없습니다.")
                    continue

                if navigator.toggle_comparison():
                    print("🔀 비교 모드를 켰습니다.")
                    if navigator.translation_view is None:
                        print("❗ 이 챕터의 번역이 없습니다.")
                else:
                    print("🔀 비교 모드를 껐습니다.")

            elif name in ["g", "goto"]:
                if not argument:
                    print("❗ 링크를 입력하세요.")
                    continue

                target = navigator.follow_link(argument.strip())
                print(format_navigation_target(target, book))
                if target is not None and target.chapter_id is not None:
                    show_current_chapter()
                else:
                    navigator.take_pending_anchor()

            elif name == "help":
                show_help()

            else:
                print("❓ 알 수 없는 명령어입니다. 'help'를 입력하면 도움말을 볼 수 있습니다.")

        except KeyboardInterrupt:
            navigator.save_progress()
            print("\n👋 리더를 종료합니다.")
            break
        except EOFError:
            navigator.save_progress()
            break
