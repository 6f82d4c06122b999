# -*- coding: utf-8 -*-
"""
盤面を内部表現に正規化するモジュールです。

主な役割:
- 行文字列のリスト / pandas.DataFrame を 2次元 numpy 配列に変換
- 盤面が長方形（全行が同じ長さ、1行1列以上）であることの検証
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from ..logging_utils import get_logger
from ..types import InvalidInput

logger = get_logger()


def _reject(message: str) -> InvalidInput:
    logger.warning("Invalid grid: %s", message)
    return InvalidInput(message)


def normalize_rows(rows: Optional[Iterable[str]]) -> np.ndarray:
    """
    行文字列の並びを検証し、1マス1文字の 2次元 numpy 配列に変換します。

    Parameters
    ----------
    rows : iterable of str
        盤面の各行。全て同じ長さである必要があります。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols)、dtype=object の 2次元配列。

    Raises
    ------
    InvalidInput
        rows が None / 行が 0 個 / 先頭行が空 / 行の長さが揃っていない場合。
    """
    if rows is None:
        raise _reject("Matrix must not be None.")
    if isinstance(rows, str):
        # 文字列 1 本を渡されると 1文字ずつの行と解釈されてしまうので弾く
        raise _reject("Matrix must be a sequence of row strings, not a single string.")

    row_list = list(rows)
    if not row_list:
        raise _reject("Must have rows.")

    for r, row in enumerate(row_list):
        if not isinstance(row, str):
            raise _reject(f"Row {r} is not a string: {row!r}")

    cols = len(row_list[0])
    if cols == 0:
        raise _reject("Rows must have at least one char.")

    for r in range(1, len(row_list)):
        if len(row_list[r]) != cols:
            raise _reject("All rows must be the same length.")

    grid = np.empty((len(row_list), cols), dtype=object)
    for i, row in enumerate(row_list):
        for j, ch in enumerate(row):
            grid[i, j] = ch

    return grid


def normalize_cell(x: Any) -> str:
    """
    DataFrame の個々のセルを 1文字の文字列に変換します。

    変換ルール
    ----------
    - None / NaN / 空文字: 盤面の穴とみなしてエラー
    - それ以外: str() した結果がちょうど 1文字ならそのまま
    """
    if x is None or (not isinstance(x, str) and pd.isna(x)):
        raise _reject("Grid cells must not be empty.")

    s = str(x)
    if len(s) != 1:
        raise _reject(f"Grid cells must be single characters: {s!r}")

    return s


def normalize_frame(df: Optional[pd.DataFrame]) -> np.ndarray:
    """
    DataFrame から 2次元 numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    DataFrame は常に長方形なので、検証するのは
    空でないこととセルの中身だけです。
    """
    if df is None:
        raise _reject("Matrix must not be None.")

    rows, cols = df.shape
    if rows == 0:
        raise _reject("Must have rows.")
    if cols == 0:
        raise _reject("Rows must have at least one char.")

    grid = np.empty((rows, cols), dtype=object)

    for i in range(rows):
        for j in range(cols):
            grid[i, j] = normalize_cell(df.iat[i, j])

    return grid
