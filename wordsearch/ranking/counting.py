# -*- coding: utf-8 -*-
"""
部分文字列の出現回数を数えるモジュールです。
"""

from __future__ import annotations

from typing import Iterable


def count_occurrences(text: str, pattern: str) -> int:
    """
    text の中に pattern が何回現れるかを数えます。

    一致が見つかったら、その開始位置の 1文字後ろから探索を再開します。
    そのため重なった出現も数えます（例: "aaa" 中の "aa" は 2回）。

    pattern が空、または text より長い場合は 0 を返します。
    比較は文字コードそのままの完全一致です（大文字小文字は区別）。
    """
    if not pattern or len(pattern) > len(text):
        return 0

    count = 0
    i = 0
    while True:
        idx = text.find(pattern, i)
        if idx < 0:
            break
        count += 1
        i = idx + 1

    return count


def count_in_lines(lines: Iterable[str], pattern: str) -> int:
    """全ての走査線について :func:`count_occurrences` を合計します。"""
    return sum(count_occurrences(line, pattern) for line in lines)
