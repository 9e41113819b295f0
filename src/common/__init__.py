"""
どこで: `common` パッケージ。
何を: shades 本体とスクリプトの双方で使う軽量ユーティリティ（ロギング/環境変数/設定）。
なぜ: 周辺的な関心事をドメイン層から分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
