from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "print_scale.py"


@pytest.fixture(scope="module")
def print_scale():
    spec = importlib.util.spec_from_file_location("print_scale", SCRIPT)
    assert spec is not None and spec.loader is not None
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.mark.integration
def test_table_output(print_scale, capsys) -> None:
    assert print_scale.main(["#d93025"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("#d93025  (closest: ")
    # one header line + 16 configured steps
    assert len(out.strip().splitlines()) == 17
    assert "white=" in out and "black=" in out


@pytest.mark.integration
def test_json_output_with_distributed_steps(print_scale, capsys) -> None:
    argv = ["#1a73e8", "--steps", "5", "--range", "1", "9", "--space", "oklch", "--format", "json"]
    assert print_scale.main(argv) == 0
    doc = json.loads(capsys.readouterr().out)
    (row,) = doc.values()
    assert list(row) == ["50", "40", "30", "20", "10"]
    assert all(v.startswith("#") for v in row.values())


@pytest.mark.integration
def test_invalid_color_exits_with_error(print_scale) -> None:
    assert print_scale.main(["#12"]) == 2
