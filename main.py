#!/usr/bin/env python3
"""
Markdown 책 목차 및 탐색 도구 통합 실행 스크립트
"""

import sys
import json
import argparse
import logging
from pathlib import Path

from glyph import (
    Config,
    validate_config,
    BookLoader,
    BookProcessor,
    Navigator,
    ProgressStore,
    load_chapter_view,
    render_chapter_html,
    resolve,
    resolve_link,
    format_toc,
    format_chapter_list,
    format_navigation_target,
    format_link_issues,
    interactive_reader,
)
from glyph.core.library import read_text

logger = logging.getLogger(__name__)


def setup_logging(config: Config):
    """로깅 설정"""
    logging.basicConfig(
        level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )


def _book_path(args, config: Config):
    return args.book or config.book_path


def toc_command(args):
    """챕터 목차 출력 명령"""
    try:
        if not Path(args.chapter_file).is_file():
            print(f"❌ 챕터 파일을 찾을 수 없습니다: {args.chapter_file}")
            return 1

        view = load_chapter_view(read_text(args.chapter_file))

        if args.json:
            print(
                json.dumps(
                    [entry.to_dict() for entry in view.toc], ensure_ascii=False, indent=2
                )
            )
        else:
            print(format_toc(view.toc, show_anchors=not args.no_anchors))

    except Exception as e:
        logger.error(f"목차 추출 중 오류 발생: {e}")
        return 1
    return 0


def strip_command(args):
    """표시용 텍스트 출력 명령"""
    try:
        if not Path(args.chapter_file).is_file():
            print(f"❌ 챕터 파일을 찾을 수 없습니다: {args.chapter_file}")
            return 1

        print(load_chapter_view(read_text(args.chapter_file)).display_text)

    except Exception as e:
        logger.error(f"앵커 문법 제거 중 오류 발생: {e}")
        return 1
    return 0


def render_command(args):
    """HTML 렌더링 명령"""
    try:
        if not Path(args.chapter_file).is_file():
            print(f"❌ 챕터 파일을 찾을 수 없습니다: {args.chapter_file}")
            return 1

        html = render_chapter_html(load_chapter_view(read_text(args.chapter_file)))

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(html)
            print(f"✅ HTML 저장 완료: {args.output}")
        else:
            print(html)

    except Exception as e:
        logger.error(f"HTML 렌더링 중 오류 발생: {e}")
        return 1
    return 0


def chapters_command(args, config: Config):
    """챕터 목록 출력 명령"""
    try:
        book_path = _book_path(args, config)
        if not book_path:
            print("❌ 책 디렉토리를 지정하세요. (--book 또는 BOOK_PATH)")
            return 1

        book = BookLoader().load_book(book_path)
        print(format_chapter_list(book))

    except Exception as e:
        logger.error(f"챕터 목록 로드 중 오류 발생: {e}")
        return 1
    return 0


def resolve_command(args, config: Config):
    """링크 해석 명령"""
    try:
        resolved = resolve(args.href, args.current)
        print(f"🔗 정규화된 경로: {resolved.file_part or '(현재 문서)'}")
        print(f"   프래그먼트: {resolved.fragment if resolved.fragment else '(없음)'}")

        book_path = _book_path(args, config)
        if book_path:
            book = BookLoader().load_book(book_path)
            target = resolve_link(args.href, args.current, book.chapters)
            print(format_navigation_target(target, book))

    except Exception as e:
        logger.error(f"링크 해석 중 오류 발생: {e}")
        return 1
    return 0


def index_command(args, config: Config):
    """책 전체 목차 JSON 생성 명령"""
    try:
        book_path = _book_path(args, config)
        if not book_path:
            print("❌ 책 디렉토리를 지정하세요. (--book 또는 BOOK_PATH)")
            return 1

        book = BookLoader().load_book(book_path)
        output = args.output or str(Path(book_path) / "toc.json")

        print(f"📖 책 목차 추출 시작: {book.title} ({len(book.chapters)}개 챕터)")
        BookProcessor().save_toc_json(book, output)
        print(f"✅ 목차 JSON 저장 완료: {output}")

    except Exception as e:
        logger.error(f"책 목차 생성 중 오류 발생: {e}")
        return 1
    return 0


def check_links_command(args, config: Config):
    """링크 검사 명령"""
    try:
        book_path = _book_path(args, config)
        if not book_path:
            print("❌ 책 디렉토리를 지정하세요. (--book 또는 BOOK_PATH)")
            return 1

        book = BookLoader().load_book(book_path)
        issues = BookProcessor().check_links(book)
        print(format_link_issues(issues))

        if issues:
            return 1

    except Exception as e:
        logger.error(f"링크 검사 중 오류 발생: {e}")
        return 1
    return 0


def read_command(args, config: Config):
    """대화형 리더 명령"""
    try:
        book_path = _book_path(args, config)
        if not book_path:
            print("❌ 책 디렉토리를 지정하세요. (--book 또는 BOOK_PATH)")
            return 1

        book = BookLoader().load_book(book_path)
        navigator = Navigator(book, progress_store=ProgressStore(config.progress_file))
        interactive_reader(navigator)

    except Exception as e:
        logger.error(f"대화형 리더 실행 중 오류 발생: {e}")
        return 1
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="Markdown 책 목차 및 탐색 도구",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 챕터 목차 보기
  python main.py toc book/ch1/intro.md

  # 표시용 텍스트 / HTML
  python main.py strip book/ch1/intro.md
  python main.py render book/ch1/intro.md -o intro.html

  # 링크 해석
  python main.py resolve "../ch2.md#sec" --current /book/ch1/intro.md --book book

  # 책 전체 목차 JSON, 링크 검사
  python main.py index --book book
  python main.py check-links --book book

  # 대화형 리더
  python main.py read --book book
        """,
    )
    parser.add_argument("--show-config", action="store_true", help="현재 설정 출력")

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # toc 명령
    toc_parser = subparsers.add_parser("toc", help="챕터 목차 출력")
    toc_parser.add_argument("chapter_file", help="챕터 Markdown 파일")
    toc_parser.add_argument("--json", action="store_true", help="JSON 형식으로 출력")
    toc_parser.add_argument(
        "--no-anchors", action="store_true", help="앵커 표시하지 않기"
    )

    # strip 명령
    strip_parser = subparsers.add_parser("strip", help="표시용 텍스트 출력")
    strip_parser.add_argument("chapter_file", help="챕터 Markdown 파일")

    # render 명령
    render_parser = subparsers.add_parser("render", help="HTML 렌더링")
    render_parser.add_argument("chapter_file", help="챕터 Markdown 파일")
    render_parser.add_argument("-o", "--output", help="저장할 HTML 파일")

    # chapters 명령
    chapters_parser = subparsers.add_parser("chapters", help="챕터 목록 출력")
    chapters_parser.add_argument("--book", help="책 디렉토리 (기본값: BOOK_PATH)")

    # resolve 명령
    resolve_parser = subparsers.add_parser("resolve", help="링크 해석")
    resolve_parser.add_argument("href", help="해석할 링크")
    resolve_parser.add_argument(
        "--current", required=True, help="현재 챕터 경로 (예: /book/ch1/intro.md)"
    )
    resolve_parser.add_argument("--book", help="대상 챕터를 찾을 책 디렉토리")

    # index 명령
    index_parser = subparsers.add_parser("index", help="책 전체 목차 JSON 생성")
    index_parser.add_argument("--book", help="책 디렉토리 (기본값: BOOK_PATH)")
    index_parser.add_argument("-o", "--output", help="저장할 JSON 파일 (기본값: <책>/toc.json)")

    # check-links 명령
    check_parser = subparsers.add_parser("check-links", help="챕터 간 링크 검사")
    check_parser.add_argument("--book", help="책 디렉토리 (기본값: BOOK_PATH)")

    # read 명령
    read_parser = subparsers.add_parser("read", help="대화형 리더")
    read_parser.add_argument("--book", help="책 디렉토리 (기본값: BOOK_PATH)")

    return parser


def main(argv=None):
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = Config()
    try:
        validate_config(config)
    except ValueError as e:
        print(f"⚠️ {e}")
        return 1

    setup_logging(config)

    if args.show_config:
        config.print_config()

    if not args.command:
        if not args.show_config:
            parser.print_help()
            return 1
        return 0

    # 명령 실행
    if args.command == "toc":
        return toc_command(args)
    elif args.command == "strip":
        return strip_command(args)
    elif args.command == "render":
        return render_command(args)
    elif args.command == "chapters":
        return chapters_command(args, config)
    elif args.command == "resolve":
        return resolve_command(args, config)
    elif args.command == "index":
        return index_command(args, config)
    elif args.command == "check-links":
        return check_links_command(args, config)
    elif args.command == "read":
        return read_command(args, config)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
