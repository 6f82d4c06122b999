# -*- coding: utf-8 -*-
"""
盤面 CSV と検索語 CSV を読み込むモジュールです。

盤面 CSV は次のどちらかの形式に対応します（ヘッダ行なし）。
- 1セル1文字の表形式:   a,b,c
- 1列に行全体を書く形式: abc

検索語 CSV は 'word' 列を必ず持つ表形式です。
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from ..config import GRID_CSV_ENCODING, WORD_COLUMN, WORDS_CSV_ENCODING
from ..grid.parser import normalize_frame, normalize_rows
from ..logging_utils import get_logger
from ..types import InvalidInput

logger = get_logger()


def load_grid_csv(path: str | Path) -> List[str]:
    """
    盤面 CSV を読み込み、行文字列のリストにして返します。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Returns
    -------
    list of str
        盤面の各行。そのまま :func:`wordsearch.build` に渡せます。

    Raises
    ------
    InvalidInput
        空ファイル、表として読めない CSV、空行や長さの揃わない行を含む盤面。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Grid CSV not found: {p}")

    logger.info("Loading grid from %s...", p)

    # 文字をそのまま扱いたいので、型推論と NaN 変換は行わない
    try:
        df = pd.read_csv(
            p,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            encoding=GRID_CSV_ENCODING,
        )
    except pd.errors.EmptyDataError as e:
        raise InvalidInput(f"Grid CSV is empty: {p}") from e
    except pd.errors.ParserError as e:
        # 行ごとにセル数が違うなど、表として読めない
        raise InvalidInput(f"Grid CSV is malformed: {p}: {e}") from e

    if df.shape[1] == 1:
        # 1列形式: 各行が行文字列そのもの。空行は長さ 0 の行として検証で弾く
        rows = df.iloc[:, 0].fillna("").astype(str).tolist()
        normalize_rows(rows)
    else:
        grid = normalize_frame(df)
        rows = ["".join(row) for row in grid]

    logger.info("Loaded grid with %d rows.", len(rows))
    return rows


def load_words_csv(path: str | Path) -> List[str]:
    """
    検索語 CSV を読み込み、'word' 列の値をリストで返します。

    欠損値は除外しますが、重複や空文字はそのまま残します
    （それらの扱いはランキング側の責務です）。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Words CSV not found: {p}")

    logger.info("Loading words from %s...", p)

    df = pd.read_csv(p, dtype=str, keep_default_na=False, encoding=WORDS_CSV_ENCODING)

    if WORD_COLUMN not in df.columns:
        raise InvalidInput(f"Words CSV must have a '{WORD_COLUMN}' column.")

    words = df[WORD_COLUMN].dropna().astype(str).tolist()

    logger.info("Loaded %d words.", len(words))
    return words
