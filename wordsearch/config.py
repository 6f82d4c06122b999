# -*- coding: utf-8 -*-
"""
wordsearch 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- ランキング結果の件数
- CSV の文字コードや列名
などを変更できます。
"""

from __future__ import annotations

# ==== ランキング関連 =======================================================

# find_top_words が返す語の最大数
TOP_WORDS_LIMIT: int = 10

# ==== CSV 読み込み関連 =====================================================

# 盤面 CSV の文字コード（BOM 付きでも読めるように utf-8-sig）
GRID_CSV_ENCODING: str = "utf-8-sig"

# 検索語 CSV の文字コード
WORDS_CSV_ENCODING: str = "utf-8-sig"

# 検索語 CSV で語が入っている列名
WORD_COLUMN: str = "word"
