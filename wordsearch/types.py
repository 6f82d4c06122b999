# -*- coding: utf-8 -*-
"""
wordsearch で使う主なデータ構造（型）と例外をまとめたモジュールです。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class InvalidInput(ValueError):
    """
    盤面や検索語の入力が不正なときに送出される例外です。

    ValueError のサブクラスなので、呼び出し側の境界（CLI や API）では
    ``except ValueError`` でまとめて捕まえてメッセージを表示できます。
    """


@dataclass(frozen=True)
class GridIndex:
    """
    盤面から作った「走査線（scan line）」の索引です。

    Attributes
    ----------
    rows : int
        盤面の行数。
    cols : int
        盤面の列数。
    lines : tuple of str
        全ての行（左から右）の後ろに、全ての列（上から下）を
        連結したもの。長さは rows + cols。
    """

    rows: int
    cols: int
    lines: Tuple[str, ...]

    @property
    def row_lines(self) -> Tuple[str, ...]:
        """元の行だけを返します。"""
        return self.lines[: self.rows]

    @property
    def column_lines(self) -> Tuple[str, ...]:
        """転置で作った列だけを返します。"""
        return self.lines[self.rows :]


@dataclass(frozen=True)
class WordCount:
    """ランキング中に使う (語, 出現回数) の組。"""

    word: str
    count: int
