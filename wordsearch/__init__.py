# -*- coding: utf-8 -*-
"""
wordsearch パッケージの入口となるモジュールです。

    from wordsearch import build, find_top_words

    index = build(["abcdc", "fgwio", "chill", "pqnsd", "uvdwy"])
    find_top_words(index, ["cold", "wind", "snow", "chill"])  # -> ["chill", "cold", "wind"]

盤面（行文字列の並び）から
1. 盤面の検証と numpy 配列への変換
2. 行 + 列（転置）を走査線として並べた索引の構築
を行い、その索引に対して
3. 検索語の重複除去と出現回数の集計
4. 出現回数順の上位 10 語の抽出
を呼び出します。
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import TOP_WORDS_LIMIT
from .grid.indexer import build_index, build_index_from_frame
from .ranking.ranker import find_top_words, rank_words
from .types import GridIndex, InvalidInput, WordCount

__all__ = [
    "GridIndex",
    "InvalidInput",
    "WordCount",
    "build",
    "build_index_from_frame",
    "find_top_words",
    "rank_words",
    "search",
]


def build(rows: Optional[Iterable[str]]) -> GridIndex:
    """盤面の行から索引を作ります。不正な盤面なら InvalidInput。"""
    return build_index(rows)


def search(
    rows: Optional[Iterable[str]],
    words: Optional[Iterable[Optional[str]]],
    limit: int = TOP_WORDS_LIMIT,
) -> List[str]:
    """
    索引の構築と上位語の抽出を 1回で行うヘルパー関数。

    同じ盤面に何度も問い合わせる場合は、:func:`build` で作った索引を
    使い回して :func:`find_top_words` を呼んでください。
    """
    return find_top_words(build_index(rows), words, limit=limit)
