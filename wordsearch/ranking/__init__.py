# -*- coding: utf-8 -*-
"""
wordsearch.ranking パッケージ

検索語の出現回数の集計とランキングをまとめています。
- counting.py : 走査線 1本 / 複数本に対する部分文字列の出現回数
- ranker.py   : 重複除去・集計・並べ替えによる上位語の抽出
"""
