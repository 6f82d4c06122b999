# -*- coding: utf-8 -*-
"""
wordsearch のロガーを用意するモジュールです。

索引の構築は DEBUG、CSV 読み込みは INFO、入力エラーは WARNING で記録します。
"""

from __future__ import annotations

import logging

LOGGER_NAME = "wordsearch"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_logger() -> logging.Logger:
    """
    "wordsearch" ロガーを返します。

    初回呼び出し時だけ、コンソール出力用のハンドラを 1つ付けて
    レベルを INFO にします。呼び出し側がすでにハンドラを
    設定している場合は何も変更しません。
    """
    logger = logging.getLogger(LOGGER_NAME)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    return logger
