# -*- coding: utf-8 -*-
"""
盤面から走査線の索引を作るモジュールです。

横方向（行）はそのまま、縦方向（列）は転置して 1本の文字列にしておくことで、
どちらの方向も同じ部分文字列カウント処理で探索できるようにします。
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from ..logging_utils import get_logger
from ..types import GridIndex
from .parser import normalize_frame, normalize_rows

logger = get_logger()


def extract_lines(grid: np.ndarray) -> List[str]:
    """
    正規化済みの 2次元配列から走査線を取り出します。

    Returns
    -------
    list of str
        全ての行（長さ cols）の後ろに全ての列（長さ rows）を並べたリスト。
    """
    lines: List[str] = []

    # --- 横方向 ---
    for row in grid:
        lines.append("".join(row))

    # --- 縦方向（上から下へ） ---
    for column in grid.T:
        lines.append("".join(column))

    return lines


def _index_from_grid(grid: np.ndarray) -> GridIndex:
    rows, cols = grid.shape
    index = GridIndex(rows=rows, cols=cols, lines=tuple(extract_lines(grid)))
    logger.debug("Built grid index: rows=%d, cols=%d, lines=%d", rows, cols, len(index.lines))
    return index


def build_index(rows: Optional[Iterable[str]]) -> GridIndex:
    """
    行文字列の並びから :class:`GridIndex` を作ります。

    入力の検証は :func:`normalize_rows` が行い、
    不正な場合は索引を作らずに InvalidInput を送出します。
    """
    return _index_from_grid(normalize_rows(rows))


def build_index_from_frame(df: Optional[pd.DataFrame]) -> GridIndex:
    """1セル1文字の DataFrame から :class:`GridIndex` を作ります。"""
    return _index_from_grid(normalize_frame(df))
