# -*- coding: utf-8 -*-
"""
wordsearch.io パッケージ

盤面と検索語を CSV ファイルから読み込む処理をまとめています。
"""
