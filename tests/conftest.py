"""Pytest fixtures for wordproc tests."""

import pytest


@pytest.fixture
def word_tree(tmp_path):
    """Source tree with two top-level lists, a non-list file and a sub directory.

    lists/
        a.txt          "4 Hello"
        b.lst          "World" twice
        notes.md       ignored when filtering on txt/lst
        sub/c.txt      counted passwords
    """
    root = tmp_path / "lists"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("4 Hello\n", encoding="utf-8")
    (root / "b.lst").write_text("World\nWorld\n", encoding="utf-8")
    (root / "notes.md").write_text("not a list\n", encoding="utf-8")
    (root / "sub" / "c.txt").write_text("12 password\n  letmein \n", encoding="utf-8")
    return root
