# tests/test_main.py

from __future__ import annotations

import json

from task_tracker.cli.main import main
from task_tracker.config import Settings


def _doc(settings: Settings) -> dict:
    return json.loads(settings.tasks_file.read_text("utf-8"))


def test_full_cycle_persists_between_runs(settings: Settings, capsys) -> None:
    assert main(["add", "buy milk"], settings=settings) == 0
    assert main(["add", "call mom"], settings=settings) == 0
    assert main(["mark", "1", "done"], settings=settings) == 0
    assert main(["edit", "2", "call dad"], settings=settings) == 0

    doc = _doc(settings)
    assert [(t["id"], t["status"], t["desc"]) for t in doc["list"]] == [
        (1, "Done", "buy milk"),
        (2, "Todo", "call dad"),
    ]

    capsys.readouterr()
    assert main(["list", "todo"], settings=settings) == 0
    out = capsys.readouterr().out
    assert "call dad" in out
    assert "buy milk" not in out


def test_deleted_id_not_reused_across_runs(settings: Settings) -> None:
    main(["add", "a"], settings=settings)
    main(["add", "b"], settings=settings)
    main(["delete", "2"], settings=settings)
    main(["add", "c"], settings=settings)

    assert [t["id"] for t in _doc(settings)["list"]] == [1, 3]


def test_first_run_creates_task_file(settings: Settings, capsys) -> None:
    assert not settings.tasks_file.exists()

    assert main(["list"], settings=settings) == 0

    assert _doc(settings)["list"] == []
    assert "No tasks found." in capsys.readouterr().out


def test_unknown_id_exits_1_and_keeps_file(settings: Settings, capsys) -> None:
    main(["add", "a"], settings=settings)
    before = settings.tasks_file.read_text("utf-8")

    assert main(["delete", "9"], settings=settings) == 1

    assert settings.tasks_file.read_text("utf-8") == before
    assert "Error: Task 9 not found" in capsys.readouterr().err


def test_parse_errors_exit_1(settings: Settings, capsys) -> None:
    assert main(["mark", "1", "all"], settings=settings) == 1
    assert "Status not allowed" in capsys.readouterr().err

    assert main(["frobnicate"], settings=settings) == 1
    err = capsys.readouterr().err
    assert "Got incorrect command: frobnicate" in err
    assert "Usage:" in err

    assert main([], settings=settings) == 1
    assert "Usage:" in capsys.readouterr().err


def test_parse_error_does_not_touch_task_file(settings: Settings) -> None:
    assert main(["edit", "x", "y"], settings=settings) == 1
    assert not settings.tasks_file.exists()


def test_corrupt_file_reports_path(settings: Settings, capsys) -> None:
    settings.tasks_file.parent.mkdir(parents=True)
    settings.tasks_file.write_text("[1, 2", "utf-8")

    assert main(["list"], settings=settings) == 1

    err = capsys.readouterr().err
    assert "Failed to parse JSON" in err
    assert str(settings.tasks_file) in err


def test_help(settings: Settings, capsys) -> None:
    assert main(["--help"], settings=settings) == 0
    assert "Usage: task-tracker" in capsys.readouterr().out
