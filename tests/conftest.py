"""
Shared pytest fixtures for the wordsearch test suite.
"""

import pytest

from wordsearch import build


@pytest.fixture
def sample_rows():
    """The 5x5 board used throughout the examples."""
    return ["abcdc", "fgwio", "chill", "pqnsd", "uvdwy"]


@pytest.fixture
def sample_index(sample_rows):
    return build(sample_rows)


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
