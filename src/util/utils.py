"""
どこで: `util.utils`
何を: YAML 構成ファイルの探索・読込・マージ。
なぜ: 既定値（`configs/default.yaml`）とユーザー上書き（`config.yaml` / `SHADES_CONFIG`）を
      1 箇所で解決し、呼び出し側は辞書だけを扱えばよいようにするため。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHADES_CONFIG"


def _read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """YAML を読み、トップレベルが辞書でなければ空辞書を返す。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("config %s could not be read: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`pyproject.toml` か `configs/` を持つ最寄りの祖先ディレクトリを返す。

    見つからない場合は `start.parent.parent`（`<repo>/src/util` 想定）を返す。
    """
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists() or (parent / "configs").exists():
            return parent
    return cur.parent.parent


def _merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """辞書同士のセクションは 1 段だけマージ、それ以外は置き換える。"""
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged = dict(current)
            merged.update(value)
            base[key] = merged
        else:
            base[key] = value


def _config_paths(project_root: Path) -> Iterable[Path]:
    yield project_root / "configs" / "default.yaml"
    yield project_root / "config.yaml"
    extra = os.getenv(CONFIG_ENV_VAR)
    if extra:
        yield Path(extra)


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    適用順（後勝ち）:
    1) `configs/default.yaml`
    2) ルート `config.yaml`
    3) 環境変数 `SHADES_CONFIG` が指すファイル

    - 存在しないファイルは黙って飛ばし、壊れたファイルは警告して飛ばす。
    - `project_root` 未指定時はこのモジュールの位置から推定する。
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    config: Dict[str, Any] = {}
    for path in _config_paths(root):
        if path.exists():
            _merge_into(config, _read_yaml_mapping(path))
    return config


def load_section(name: str, project_root: Optional[Path] = None) -> Dict[str, Any]:
    """`load_config()` の 1 セクションを返す（無い/辞書でない場合は空辞書）。"""
    section = load_config(project_root).get(name)
    return section if isinstance(section, dict) else {}
