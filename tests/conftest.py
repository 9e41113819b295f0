"""共通フィクスチャ。

- 既定の ColorEngine
- 設定（環境変数由来）のテスト後リセット
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from shades import DefaultColorEngine
from shades.defaults import PaletteDefaults


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """環境変数を書き換えたテストの影響を次のテストへ持ち越さない。"""
    yield
    settings.reload_from_env()


@pytest.fixture(scope="session")
def engine() -> DefaultColorEngine:
    return DefaultColorEngine()


@pytest.fixture()
def builtin_defaults() -> PaletteDefaults:
    """設定ファイルに依存しない組み込み既定値。"""
    return PaletteDefaults()
