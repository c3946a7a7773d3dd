from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable, List, Sequence

from pydantic import BaseModel, ValidationError

from ritrepo.application.services.priority_setter import PrioritySetter
from ritrepo.cli.command import deprecate_cmd, run_func_e
from ritrepo.domain.entities.repository import Repository
from ritrepo.logging_config import get_logger
from ritrepo.repositories.errors import RepositoryError


class _PriorityInput(BaseModel):
    name: str
    priority: int


def _format_rows(repos: Iterable[Repository]) -> str:
    out_lines: List[str] = []
    for r in repos:
        location = r.url or "local"
        provider = r.provider or "-"
        version = r.version or "-"
        out_lines.append(f"{r.priority}: {r.name} {version} ({provider}) [{location}]")
    return "\n".join(out_lines)


def _list(args: argparse.Namespace) -> int:
    repos = PrioritySetter().list().by_priority()
    if args.json:
        print(json.dumps([r.model_dump(by_alias=True) for r in repos], indent=2))
    elif not repos:
        print("No repositories configured.")
    else:
        print(_format_rows(repos))
    return 0


def _apply(name: str, priority: int) -> int:
    updated = PrioritySetter().set_priority(name, priority)
    repo = updated.get(name)
    applied = repo.priority if repo is not None else priority
    print(f"Repository {name!r} now has priority {applied}.")
    return 0


def _set_priority_stdin(_: argparse.Namespace) -> int:
    try:
        payload = _PriorityInput.model_validate_json(sys.stdin.read())
    except ValidationError as exc:
        print(f"Invalid stdin input: {exc}", file=sys.stderr)
        return 2
    return _apply(payload.name, payload.priority)


def _set_priority_prompt(args: argparse.Namespace) -> int:
    try:
        name = args.name or input("Repository name: ").strip()
        raw_priority = args.priority if args.priority is not None else input("New priority: ")
    except EOFError:
        print(
            "No interactive input available; pass NAME and PRIORITY or use --stdin",
            file=sys.stderr,
        )
        return 2
    try:
        priority = int(raw_priority)
    except ValueError:
        print(f"Priority must be an integer, got {raw_priority!r}", file=sys.stderr)
        return 2
    return _apply(name, priority)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ritrepo", description="Manage formula repositories and their lookup priority"
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    list_p = sub.add_parser("list", help="List repositories ordered by priority")
    list_p.add_argument("--json", action="store_true", help="Output JSON instead of text")
    list_p.set_defaults(func=_list)

    set_p = sub.add_parser("set-priority", help="Change the priority of a repository")
    set_p.add_argument("name", nargs="?", help="Repository name (prompted if omitted)")
    set_p.add_argument(
        "priority", nargs="?", type=int, help="New zero-based priority (prompted if omitted)"
    )
    set_p.add_argument(
        "--stdin",
        action="store_true",
        help='Read {"name": ..., "priority": ...} as JSON from stdin (deprecated)',
    )
    set_p.set_defaults(func=run_func_e(_set_priority_stdin, _set_priority_prompt))

    delete_p = sub.add_parser("delete", help="Delete an object like a context or repository")

    def _delete_help(_: argparse.Namespace) -> int:
        delete_p.print_help()
        return 0

    delete_p.set_defaults(func=_delete_help)

    deprecate_cmd(sub, "update-repo-priority", "use 'ritrepo set-priority' instead")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "func", None) is None:
        parser.print_help()
        return 1

    get_logger()
    try:
        return int(args.func(args))
    except RepositoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
