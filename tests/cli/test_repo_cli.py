from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

import ritrepo.cli.repo as repo_cli
from ritrepo.application.services.priority_setter import PrioritySetter
from ritrepo.infrastructure.file_storage import InMemoryStorage
from ritrepo.repositories.json_file import json_list_writer, repos_file_path

HOME = Path("/rit-home")

SAMPLE = [
    {"name": "commons", "version": "v2.0.0", "url": "https://example.com/f", "priority": 0},
    {"name": "repo-1", "version": "0.0.0", "priority": 1, "isLocal": True, "provider": "Local"},
    {"name": "repo-2", "version": "0.0.0", "priority": 2, "isLocal": True, "provider": "Local"},
]


@pytest.fixture
def storage(monkeypatch: pytest.MonkeyPatch) -> InMemoryStorage:
    store = InMemoryStorage({str(repos_file_path(HOME)): json.dumps(SAMPLE).encode("utf-8")})
    monkeypatch.setattr(
        repo_cli, "PrioritySetter", lambda: PrioritySetter(json_list_writer(HOME, store))
    )
    monkeypatch.setattr(repo_cli, "get_logger", lambda *a, **k: None)
    return store


def _ranks(store: InMemoryStorage) -> list[tuple[str, int]]:
    return [(r["name"], r["priority"]) for r in json.loads(store.read(repos_file_path(HOME)))]


def test_list_text(storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]) -> None:
    rc = repo_cli.main(["list"])
    assert rc == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("0: commons v2.0.0")
    assert "[local]" in lines[1]


def test_list_json(storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]) -> None:
    rc = repo_cli.main(["list", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["name"] for d in data] == ["commons", "repo-1", "repo-2"]
    assert data[1]["isLocal"] is True


def test_set_priority_with_arguments(
    storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = repo_cli.main(["set-priority", "repo-2", "-1"])
    assert rc == 0
    assert "priority 0" in capsys.readouterr().out
    assert _ranks(storage) == [("repo-2", 0), ("commons", 1), ("repo-1", 2)]


def test_set_priority_prompts_for_missing_values(
    storage: InMemoryStorage, monkeypatch: pytest.MonkeyPatch
) -> None:
    answers = iter(["commons", "1"])
    monkeypatch.setattr("builtins.input", lambda *_: next(answers))
    rc = repo_cli.main(["set-priority"])
    assert rc == 0
    assert _ranks(storage) == [("repo-1", 0), ("commons", 1), ("repo-2", 2)]


def test_set_priority_prompt_rejects_non_integer(
    storage: InMemoryStorage,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("builtins.input", lambda *_: "high")
    rc = repo_cli.main(["set-priority", "commons"])
    assert rc == 2
    assert "must be an integer" in capsys.readouterr().err


def test_set_priority_prompt_without_input_reports_error(
    storage: InMemoryStorage,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    rc = repo_cli.main(["set-priority"])
    assert rc == 2
    assert "No interactive input" in capsys.readouterr().err
    assert _ranks(storage) == [("commons", 0), ("repo-1", 1), ("repo-2", 2)]


def test_set_priority_from_stdin(
    storage: InMemoryStorage,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"name": "repo-1", "priority": 0}'))
    rc = repo_cli.main(["set-priority", "--stdin"])
    assert rc == 0
    assert "deprecated" in capsys.readouterr().err
    assert _ranks(storage) == [("repo-1", 0), ("commons", 1), ("repo-2", 2)]


def test_set_priority_from_invalid_stdin(
    storage: InMemoryStorage, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("not json"))
    assert repo_cli.main(["set-priority", "--stdin"]) == 2


def test_unknown_repository_reports_error(
    storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = repo_cli.main(["set-priority", "ghost", "1"])
    assert rc == 1
    assert "ghost" in capsys.readouterr().err
    assert _ranks(storage) == [("commons", 0), ("repo-1", 1), ("repo-2", 2)]


def test_missing_file_reports_no_repositories(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    empty = InMemoryStorage()
    monkeypatch.setattr(
        repo_cli, "PrioritySetter", lambda: PrioritySetter(json_list_writer(HOME, empty))
    )
    monkeypatch.setattr(repo_cli, "get_logger", lambda *a, **k: None)
    rc = repo_cli.main(["list"])
    assert rc == 1
    assert "no repositories configured" in capsys.readouterr().err


def test_deprecated_command(storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]) -> None:
    rc = repo_cli.main(["update-repo-priority", "commons", "1"])
    assert rc == 1
    err = capsys.readouterr().err
    assert "deprecated" in err and "set-priority" in err
    assert _ranks(storage) == [("commons", 0), ("repo-1", 1), ("repo-2", 2)]


def test_delete_without_subcommand_prints_help(
    storage: InMemoryStorage, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = repo_cli.main(["delete"])
    assert rc == 0
    assert "usage" in capsys.readouterr().out


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    rc = repo_cli.main([])
    assert rc == 1
    assert "set-priority" in capsys.readouterr().out
