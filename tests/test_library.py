"""Tests for glyph.core.library module."""
import pytest

from glyph.core.library import (
    BookLoader,
    next_chapter,
    previous_chapter,
    read_text,
    translation_path_for,
)
from glyph.models.book import Book, Chapter


class TestScanChapters:
    def test_finds_markdown_recursively(self, book_dir):
        chapters = BookLoader().scan_chapters(book_dir)
        assert [c.title for c in chapters] == [
            "01 Introduction",
            "02 Setup",
            "03 Advanced Topics",
        ]

    def test_ids_are_posix_paths(self, book_dir):
        chapters = BookLoader().scan_chapters(book_dir)
        assert all(c.id == c.path for c in chapters)
        assert chapters[1].path == (book_dir / "part2" / "02_Setup.md").as_posix()

    def test_case_insensitive_sort(self, tmp_path):
        for name in ["beta.md", "Alpha.md", "gamma.md"]:
            (tmp_path / name).write_text("# x\n", encoding="utf-8")
        titles = [c.title for c in BookLoader().scan_chapters(tmp_path)]
        assert titles == ["Alpha", "beta", "gamma"]

    def test_custom_extension(self, tmp_path):
        (tmp_path / "a.markdown").write_text("# a\n", encoding="utf-8")
        (tmp_path / "b.md").write_text("# b\n", encoding="utf-8")
        chapters = BookLoader(chapter_extension=".markdown").scan_chapters(tmp_path)
        assert [c.title for c in chapters] == ["a"]


class TestLoadBook:
    def test_plain_directory(self, book_dir):
        book = BookLoader().load_book(book_dir)
        assert book.title == "demo"
        assert book.id == book_dir.as_posix()
        assert book.path == book_dir.as_posix()
        assert not book.is_babelfish
        assert book.translation_path is None
        assert len(book.chapters) == 3

    def test_babelfish_project(self, babelfish_dir):
        loader = BookLoader()
        assert loader.is_babelfish_project(babelfish_dir)

        book = loader.load_book(babelfish_dir)
        assert book.is_babelfish
        assert book.title == "The Translated Book"
        assert book.author == "Jane Doe"
        assert book.path == (babelfish_dir / "source").as_posix()
        assert book.translation_path == (babelfish_dir / "translated").as_posix()
        assert [c.title for c in book.chapters] == ["ch1", "ch2"]

    def test_malformed_manifest_ignored(self, tmp_path):
        (tmp_path / "book.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        (tmp_path / "source").mkdir()
        (tmp_path / "source" / "a.md").write_text("# a\n", encoding="utf-8")
        book = BookLoader().load_book(tmp_path)
        assert book.is_babelfish
        assert book.title == tmp_path.name
        assert book.author is None

    def test_missing_source_directory(self, tmp_path):
        (tmp_path / "book.yaml").write_text("title: Empty\n", encoding="utf-8")
        book = BookLoader().load_book(tmp_path)
        assert book.chapters == []

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BookLoader().load_book(tmp_path / "nope")


class TestReadChapter:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "한글.md"
        path.write_text("# 제목\n", encoding="utf-8")
        chapter = Chapter(id="k", title="한글", path=path.as_posix())
        assert BookLoader().read_chapter(chapter) == "# 제목\n"

    def test_missing_file_is_empty(self, tmp_path):
        assert read_text(tmp_path / "missing.md") == ""


class TestTranslationPath:
    def test_maps_source_to_translation(self, babelfish_dir):
        book = BookLoader().load_book(babelfish_dir)
        chapter = book.chapters[1]
        expected = (babelfish_dir / "translated" / "sub" / "ch2.md").as_posix()
        assert translation_path_for(book, chapter) == expected

    def test_not_babelfish(self, book_dir):
        book = BookLoader().load_book(book_dir)
        assert translation_path_for(book, book.chapters[0]) is None


class TestChapterOrder:
    def setup_method(self):
        self.chapters = [
            Chapter(id=str(i), title=f"C{i}", path=f"/b/c{i}.md") for i in range(3)
        ]
        self.book = Book(id="b", title="B", path="/b", chapters=self.chapters)

    def test_next(self):
        assert next_chapter(self.book, self.chapters[0]) is self.chapters[1]
        assert next_chapter(self.book, self.chapters[2]) is None

    def test_previous(self):
        assert previous_chapter(self.book, self.chapters[2]) is self.chapters[1]
        assert previous_chapter(self.book, self.chapters[0]) is None

    def test_unknown_chapter(self):
        stranger = Chapter(id="x", title="X", path="/x.md")
        assert next_chapter(self.book, stranger) is None
        assert previous_chapter(self.book, stranger) is None
