# -*- coding: utf-8 -*-
"""
検索語を走査線に対して集計し、出現回数の多い順に並べるモジュールです。

処理の流れ
----------
1. 空文字 / None の語を除外
2. 重複を除去（完全一致）
3. 各語の出現回数を全走査線（行 + 列）で合計
4. 出現回数 0 の語を捨てる
5. 出現回数の降順、同数なら語の昇順で並べ、先頭 limit 件を返す
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from ..config import TOP_WORDS_LIMIT
from ..logging_utils import get_logger
from ..types import GridIndex, InvalidInput, WordCount
from .counting import count_in_lines

logger = get_logger()


def unique_words(words: Iterable[Optional[str]]) -> Set[str]:
    """空文字・None を除いた語の集合を返します。"""
    return {w for w in words if w}


def rank_words(
    index: GridIndex,
    words: Optional[Iterable[Optional[str]]],
    limit: int = TOP_WORDS_LIMIT,
) -> List[WordCount]:
    """
    検索語ごとの出現回数を集計し、上位 limit 件を WordCount のリストで返します。

    Parameters
    ----------
    index : GridIndex
        :func:`wordsearch.grid.indexer.build_index` で作った索引。
    words : iterable of str
        検索語の並び。重複・空文字・None を含んでいてもよい。
    limit : int
        返す件数の上限。

    Returns
    -------
    list of WordCount
        出現回数の降順（同数なら語の昇順）。出現回数 0 の語は含みません。

    Raises
    ------
    InvalidInput
        words そのものが None、または文字列 1 本の場合。
    """
    if words is None:
        logger.warning("Invalid query: word stream is None")
        raise InvalidInput("Word stream must not be None.")
    if isinstance(words, str):
        # 文字列 1 本だと 1文字ずつの語として数えてしまう
        logger.warning("Invalid query: word stream is a single string %r", words)
        raise InvalidInput("Word stream must be a sequence of words, not a single string.")

    unique = unique_words(words)
    if not unique:
        return []

    counts: List[WordCount] = []
    for w in unique:
        total = count_in_lines(index.lines, w)
        if total > 0:
            counts.append(WordCount(word=w, count=total))

    logger.debug("Ranked words: unique=%d, matched=%d", len(unique), len(counts))

    counts.sort(key=lambda wc: (-wc.count, wc.word))
    return counts[: max(0, limit)]


def find_top_words(
    index: GridIndex,
    words: Optional[Iterable[Optional[str]]],
    limit: int = TOP_WORDS_LIMIT,
) -> List[str]:
    """
    盤面に最も多く現れる検索語を、最大 limit 件（既定 10件）返します。

    出現回数は返さず、語だけを順位の順に並べます。
    """
    return [wc.word for wc in rank_words(index, words, limit=limit)]
