# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- レポート（探索結果や彩色結果）は標準出力に print しますが、
  ログは標準エラー出力に流すので、両者が混ざることはありません。
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

# classic_solver パッケージ共通で使うロガー名
LOGGER_NAME = "classic_solver"


def get_logger() -> logging.Logger:
    """
    classic_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に config.LOG_LEVEL のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    return logger
