"""Tests for glyph.core.navigator and glyph.core.progress modules."""
import json

from glyph.core.library import BookLoader
from glyph.core.navigator import Navigator
from glyph.core.progress import ProgressStore
from glyph.models.book import Book, Chapter, NavigationTarget


def make_book():
    chapters = [
        Chapter(id="a", title="A", path="/book/ch1/a.md"),
        Chapter(id="b", title="B", path="/book/ch2/b.md"),
        Chapter(id="c", title="C", path="/book/ch2/c.md"),
    ]
    return Book(id="book", title="Book", path="/book", chapters=chapters)


TEXTS = {
    "a": "# A\n\n[to b](../ch2/b.md#b-two)\n",
    "b": "# B\n## B Two {#b-two}\n",
    "c": "# C\n",
}


def make_navigator(**kwargs):
    return Navigator(make_book(), reader=lambda chapter: TEXTS[chapter.id], **kwargs)


class TestOpenChapter:
    def test_builds_view(self):
        nav = make_navigator()
        view = nav.open_chapter(nav.book.chapters[1])
        assert nav.current_chapter.id == "b"
        assert view is nav.view
        assert view.anchor_map == {"b-two": "b-two"}
        assert nav.take_pending_anchor() is None

    def test_pending_anchor_taken_once(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[1], anchor="b-two")
        assert nav.take_pending_anchor() == "b-two"
        assert nav.take_pending_anchor() is None


class TestSupersede:
    def test_later_navigation_wins(self):
        nav = make_navigator()
        first = nav.begin_navigation(nav.book.chapters[0], anchor="x")
        second = nav.begin_navigation(nav.book.chapters[2])

        assert nav.complete_navigation(first, TEXTS["a"]) is None
        assert nav.current_chapter is None

        assert nav.complete_navigation(second, TEXTS["c"]) is not None
        assert nav.current_chapter.id == "c"
        assert nav.pending_anchor is None

    def test_ticket_completes_once(self):
        nav = make_navigator()
        ticket = nav.begin_navigation(nav.book.chapters[0])
        assert nav.complete_navigation(ticket, TEXTS["a"]) is not None
        assert nav.complete_navigation(ticket, TEXTS["a"]) is None


class TestFollowLink:
    def test_cross_chapter_link(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[0])
        target = nav.follow_link("../ch2/b.md#b-two")
        assert target == NavigationTarget(chapter_id="b", anchor="b-two")
        assert nav.current_chapter.id == "b"
        assert nav.take_pending_anchor() == "b-two"

    def test_same_document_link(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[1])
        target = nav.follow_link("#b-two")
        assert target.chapter_id is None
        assert nav.current_chapter.id == "b"
        assert nav.take_pending_anchor() == "b-two"

    def test_unresolved_link_is_inert(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[0])
        assert nav.follow_link("missing.md") is None
        assert nav.current_chapter.id == "a"

    def test_without_current_chapter(self):
        assert make_navigator().follow_link("../ch2/b.md") is None


class TestChapterSteps:
    def test_next_and_previous(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[0])
        assert nav.next_chapter().id == "b"
        assert nav.chapter_position() == (2, 3)
        assert nav.next_chapter().id == "c"
        assert nav.next_chapter() is None
        assert nav.current_chapter.id == "c"
        assert nav.previous_chapter().id == "b"

    def test_previous_at_start(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[0])
        assert nav.previous_chapter() is None
        assert nav.chapter_position() == (1, 3)

    def test_no_current_chapter(self):
        nav = make_navigator()
        assert nav.next_chapter() is None
        assert nav.chapter_position() is None


class TestProgress:
    def test_resume_first_chapter(self, tmp_path):
        nav = make_navigator(progress_store=ProgressStore(tmp_path / "p.json"))
        assert nav.resume().id == "a"

    def test_save_and_resume(self, tmp_path):
        store = ProgressStore(tmp_path / "p.json")
        nav = make_navigator(progress_store=store)
        nav.open_chapter(nav.book.chapters[2])
        saved = nav.save_progress(1.7)
        assert saved.scroll_position == 1.0

        restored = make_navigator(progress_store=store)
        assert restored.resume().id == "c"

    def test_stale_progress_falls_back(self, tmp_path):
        store = ProgressStore(tmp_path / "p.json")
        store.save("book", "gone", 0.5)
        assert make_navigator(progress_store=store).resume().id == "a"

    def test_empty_book(self):
        nav = Navigator(Book(id="e", title="E", path="/e"), reader=lambda c: "")
        assert nav.resume() is None

    def test_save_without_store(self):
        nav = make_navigator()
        nav.open_chapter(nav.book.chapters[0])
        assert nav.save_progress(0.5) is None

    def test_save_keeps_stored_position_for_same_chapter(self, tmp_path):
        store = ProgressStore(tmp_path / "p.json")
        store.save("book", "c", 0.6)

        nav = make_navigator(progress_store=store)
        nav.resume()
        assert nav.save_progress().scroll_position == 0.6

        nav.previous_chapter()
        assert nav.save_progress().scroll_position == 0.0
        assert store.get("book").chapter_id == "b"


class TestProgressStore:
    def test_round_trip(self, tmp_path):
        store = ProgressStore(tmp_path / "nested" / "p.json")
        store.save("b1", "c1", 0.25)
        store.save("b2", "c9", -1)
        assert store.get("b1").chapter_id == "c1"
        assert store.get("b1").scroll_position == 0.25
        assert store.get("b2").scroll_position == 0.0
        assert store.get("missing") is None

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text("{not json", encoding="utf-8")
        assert ProgressStore(path).load_all() == {}

    def test_skips_invalid_entries(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text(json.dumps({"b": {"book_id": "b"}}), encoding="utf-8")
        assert ProgressStore(path).load_all() == {}


class TestWithFiles:
    def test_reads_chapters_from_disk(self, book_dir):
        book = BookLoader().load_book(book_dir)
        nav = Navigator(book)
        assert nav.resume().title == "01 Introduction"
        assert [e.anchor for e in nav.view.toc] == ["intro"]

        target = nav.follow_link("part2/02_Setup.md#install")
        assert target.anchor == "install"
        assert nav.current_chapter.title == "02 Setup"
        assert "Install" in [c.title for c in nav.view.toc[0].children]


class TestComparison:
    def test_off_by_default(self, babelfish_dir):
        nav = Navigator(BookLoader().load_book(babelfish_dir))
        nav.resume()
        assert nav.show_comparison is False
        assert nav.translation_view is None

    def test_toggle_loads_translation(self, babelfish_dir):
        nav = Navigator(BookLoader().load_book(babelfish_dir))
        nav.resume()

        assert nav.toggle_comparison() is True
        assert [e.title for e in nav.translation_view.toc] == ["Uno"]
        assert [e.title for e in nav.view.toc] == ["One"]

        assert nav.toggle_comparison() is False
        assert nav.translation_view is None

    def test_navigation_reloads_translation(self, babelfish_dir):
        nav = Navigator(BookLoader().load_book(babelfish_dir))
        nav.toggle_comparison()
        nav.resume()
        assert nav.translation_view.toc[0].title == "Uno"

        nav.next_chapter()
        assert nav.current_chapter.title == "ch2"
        assert nav.translation_view is None

        nav.previous_chapter()
        assert nav.translation_view.toc[0].title == "Uno"

    def test_not_babelfish(self, book_dir):
        nav = Navigator(BookLoader().load_book(book_dir))
        nav.resume()
        assert nav.toggle_comparison() is True
        assert nav.translation_view is None
