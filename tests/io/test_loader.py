"""
Unit tests for CSV loaders.
"""

import pytest

from wordsearch.io.loader import load_grid_csv, load_words_csv
from wordsearch.types import InvalidInput


class TestLoadGridCsv:
    """Test both supported grid layouts."""

    def test_cell_per_column(self, write_csv):
        path = write_csv("grid.csv", "a,b,c\nd,e,f\n")
        assert load_grid_csv(path) == ["abc", "def"]

    def test_row_per_line(self, write_csv, sample_rows):
        path = write_csv("grid.csv", "\n".join(sample_rows) + "\n")
        assert load_grid_csv(path) == sample_rows

    def test_na_like_text_kept(self, write_csv):
        # "NA" must stay text, not become a missing value
        path = write_csv("grid.csv", "NA\nab\n")
        assert load_grid_csv(path) == ["NA", "ab"]

    def test_missing_cell(self, write_csv):
        path = write_csv("grid.csv", "a,b\nc,\n")
        with pytest.raises(InvalidInput):
            load_grid_csv(path)

    def test_blank_line_is_rejected(self, write_csv):
        # a blank line is a zero-length row, not a separator
        path = write_csv("grid.csv", "ab\n\ncd\n")
        with pytest.raises(InvalidInput, match="same length"):
            load_grid_csv(path)

    def test_ragged_rows(self, write_csv):
        path = write_csv("grid.csv", "abc\nab\n")
        with pytest.raises(InvalidInput):
            load_grid_csv(path)

    def test_extra_field_is_invalid_input(self, write_csv):
        path = write_csv("grid.csv", "a,b\nc,d,e\n")
        with pytest.raises(InvalidInput, match="malformed"):
            load_grid_csv(path)

    def test_empty_file(self, write_csv):
        path = write_csv("grid.csv", "")
        with pytest.raises(InvalidInput):
            load_grid_csv(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_grid_csv(tmp_path / "nope.csv")


class TestLoadWordsCsv:

    def test_word_column(self, write_csv):
        path = write_csv("words.csv", "word,note\nchill,x\ncold,y\nchill,z\n")
        assert load_words_csv(path) == ["chill", "cold", "chill"]

    def test_missing_word_column(self, write_csv):
        path = write_csv("words.csv", "text\nchill\n")
        with pytest.raises(InvalidInput, match="'word' column"):
            load_words_csv(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_words_csv(tmp_path / "nope.csv")
