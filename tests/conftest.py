import pytest


def write(path, text=""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def book_dir(tmp_path):
    """A small book with nested chapters and cross-links."""
    root = tmp_path / "demo"
    write(
        root / "01_Introduction.md",
        "# Introduction {#intro}\n\n"
        "See [setup](part2/02_Setup.md#install) and [usage](#usage).\n\n"
        "## Usage {#usage}\n\n"
        "Broken [link](missing.md) and [bad anchor](part2/02_Setup.md#nope).\n\n"
        "[External](https://example.com)\n",
    )
    write(
        root / "part2" / "02_Setup.md",
        "# Setup\n\n## Install {#install}\n\nBack to [intro](../01_Introduction.md).\n",
    )
    write(root / "part2" / "03_Advanced_Topics.md", "# Advanced Topics\n### Deep Dive\n")
    write(root / "notes.txt", "not a chapter")
    return root


@pytest.fixture
def babelfish_dir(tmp_path):
    """A Babelfish translation project with a manifest."""
    root = tmp_path / "project"
    write(root / "book.yaml", "title: The Translated Book\nauthor: Jane Doe\n")
    write(root / "source" / "ch1.md", "# One\n")
    write(root / "source" / "sub" / "ch2.md", "# Two\n")
    write(root / "translated" / "ch1.md", "# Uno\n")
    return root
