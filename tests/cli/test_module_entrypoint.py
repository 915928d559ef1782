"""Tests for running spcore as a module (`python -m spcore`)."""

from __future__ import annotations

import runpy
from pathlib import Path
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    with patch("sys.argv", ["spcore", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("spcore", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_run_subcommand(tmp_path: Path, capsys) -> None:
    path = tmp_path / "g.csv"
    path.write_text("a,b,2\n")
    with patch("sys.argv", ["spcore", "run", str(path), "-s", "a", "-t", "b"]):
        runpy.run_module("spcore", run_name="__main__")
    assert capsys.readouterr().out.strip() == "a -> b(2)"
