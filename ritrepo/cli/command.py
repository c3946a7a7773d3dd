"""Helpers shared by the command-line entry points."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable

logger = logging.getLogger(__name__)

STDIN_WARNING = (
    "stdin commands are deprecated and will no longer be supported in future versions. "
    "Please use flags for programmatic execution"
)

CommandRunner = Callable[[argparse.Namespace], int]


def run_func_e(stdin_func: CommandRunner, prompt_func: CommandRunner) -> CommandRunner:
    """Delegate to ``stdin_func`` when ``--stdin`` was passed, otherwise to ``prompt_func``."""

    def runner(args: argparse.Namespace) -> int:
        if getattr(args, "stdin", False):
            logger.warning(STDIN_WARNING)
            print(f"Warning: {STDIN_WARNING}", file=sys.stderr)
            return stdin_func(args)
        return prompt_func(args)

    return runner


def deprecate_cmd(
    subparsers: "argparse._SubParsersAction[Any]", deprecated_cmd: str, deprecated_msg: str
) -> argparse.ArgumentParser:
    """Register ``deprecated_cmd`` as a retired command that only reports ``deprecated_msg``."""

    parser = subparsers.add_parser(deprecated_cmd, add_help=False)
    parser.add_argument("rest", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    def _run(_: argparse.Namespace) -> int:
        print(f"Command {deprecated_cmd!r} is deprecated, {deprecated_msg}", file=sys.stderr)
        return 1

    parser.set_defaults(func=_run)
    return parser
