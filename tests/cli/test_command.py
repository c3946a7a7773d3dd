from __future__ import annotations

import argparse
from typing import List

import pytest

from ritrepo.cli.command import STDIN_WARNING, deprecate_cmd, run_func_e


def _runners(calls: List[str]) -> tuple:
    def stdin_func(_: argparse.Namespace) -> int:
        calls.append("stdin")
        return 0

    def prompt_func(_: argparse.Namespace) -> int:
        calls.append("prompt")
        return 0

    return stdin_func, prompt_func


def test_run_func_e_uses_stdin_when_flag_set(capsys: pytest.CaptureFixture[str]) -> None:
    calls: List[str] = []
    runner = run_func_e(*_runners(calls))

    assert runner(argparse.Namespace(stdin=True)) == 0
    assert calls == ["stdin"]
    assert STDIN_WARNING in capsys.readouterr().err


def test_run_func_e_uses_prompt_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    calls: List[str] = []
    runner = run_func_e(*_runners(calls))

    assert runner(argparse.Namespace(stdin=False)) == 0
    assert runner(argparse.Namespace()) == 0
    assert calls == ["prompt", "prompt"]
    assert capsys.readouterr().err == ""


def test_deprecate_cmd_registers_retired_command(capsys: pytest.CaptureFixture[str]) -> None:
    parser = argparse.ArgumentParser(prog="ritrepo")
    sub = parser.add_subparsers(dest="command")
    deprecate_cmd(sub, "old", "use 'new' instead")

    args = parser.parse_args(["old", "x", "1"])
    assert args.func(args) == 1
    assert "Command 'old' is deprecated, use 'new' instead" in capsys.readouterr().err
