"""
どこで: `common.settings`
何を: ソルバ/セッションの調整値を環境変数から型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str


@dataclass
class _Settings:
    # Solver
    LIGHTNESS_BISECTION_ITERATIONS: int = 20
    CHROMA_BISECTION_ITERATIONS: int = 10
    CHROMA_REDUCTION_MAX_ITER: int = 128

    # Session
    MAX_SCALE_STEPS: int = 20

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 反復回数は 1 以上に丸める（0 回の探索は意味を持たないため）。
    """
    _settings.LIGHTNESS_BISECTION_ITERATIONS = (
        env_int("SHADES_LIGHTNESS_BISECTION_ITERATIONS", 20, min_value=1) or 20
    )
    _settings.CHROMA_BISECTION_ITERATIONS = (
        env_int("SHADES_CHROMA_BISECTION_ITERATIONS", 10, min_value=1) or 10
    )
    _settings.CHROMA_REDUCTION_MAX_ITER = (
        env_int("SHADES_CHROMA_REDUCTION_MAX_ITER", 128, min_value=1) or 128
    )
    _settings.MAX_SCALE_STEPS = env_int("SHADES_MAX_SCALE_STEPS", 20, min_value=1) or 20
    _settings.LOG_LEVEL = env_str("SHADES_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
