# -*- coding: utf-8 -*-
"""
wordsearch.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py  : 行のリストや DataFrame から内部表現（numpy 配列）への変換と検証
- indexer.py : 行と列を走査線として並べた索引の構築
"""
