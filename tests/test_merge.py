"""Tests for deduplication and the output writer."""

import pytest

from wordproc.merge import deduplicate, write_words


class TestDeduplicate:
    """Tests for deduplicate."""

    def test_each_word_once(self):
        words = ["Hello", "Goodbye", "Hello", "aa", "aa", "aa", "bb", "aa"]
        out = deduplicate(words)
        assert len(out) == len(set(out))
        assert set(out) == {"Goodbye", "Hello", "aa", "bb"}

    def test_output_is_sorted(self):
        assert deduplicate(["Hello", "Goodbye", "Hello", "aa", "bb"]) == ["Goodbye", "Hello", "aa", "bb"]

    def test_case_sensitive(self):
        assert deduplicate(["a", "A", "a"]) == ["A", "a"]

    def test_no_unicode_normalization(self):
        """Composed and decomposed forms are different words."""
        assert len(deduplicate(["\u00e9", "e\u0301"])) == 2

    def test_empty(self):
        assert deduplicate([]) == []

    def test_idempotent(self):
        once = deduplicate(["b", "a", "b"])
        assert deduplicate(once) == once


class TestWriteWords:
    """Tests for write_words."""

    def test_one_word_per_line(self, tmp_path):
        out = tmp_path / "out.lst"
        n = write_words(out, ["Hello", "There", "Jorge"])

        assert n == 3
        assert out.read_text(encoding="utf-8") == "Hello\nThere\nJorge\n"

    def test_overwrites_existing(self, tmp_path):
        out = tmp_path / "out.lst"
        out.write_text("old\nstuff\n", encoding="utf-8")

        write_words(out, ["new"])

        assert out.read_text(encoding="utf-8") == "new\n"

    def test_empty_list_gives_empty_file(self, tmp_path):
        out = tmp_path / "out.lst"
        assert write_words(out, []) == 0
        assert out.read_bytes() == b""

    def test_creates_parent_dirs(self, tmp_path):
        out = tmp_path / "nested" / "dir" / "out.lst"
        write_words(out, ["x"])
        assert out.exists()

    def test_utf8_and_lf(self, tmp_path):
        out = tmp_path / "out.lst"
        write_words(out, ["日本", "é"])
        assert out.read_bytes() == "日本\né\n".encode("utf-8")

    def test_unwritable_destination_raises(self, tmp_path):
        """A directory in the way of the output file is fatal."""
        out = tmp_path / "taken"
        out.mkdir()
        with pytest.raises(OSError):
            write_words(out, ["x"])
