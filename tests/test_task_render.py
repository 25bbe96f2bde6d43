# tests/test_task_render.py

from __future__ import annotations

from task_tracker.tasks.task_models import TaskStatus
from task_tracker.tasks.task_render import TableRenderer, format_date, status_label
from task_tracker.tasks.task_store import TaskStore

from .fakes import START


def test_status_labels() -> None:
    assert status_label(TaskStatus.TODO) == "To do"
    assert status_label(TaskStatus.PROGRESS) == "In Progress"
    assert status_label(TaskStatus.DONE) == "Done"


def test_format_date() -> None:
    assert format_date(START) == "2024-05-01 10:00:00"


def test_table_has_header_and_one_row_per_task(store: TaskStore) -> None:
    store.add("buy milk")
    store.add("call mom")
    store.mark_status(2, TaskStatus.DONE)

    lines = TableRenderer(width=120).render(store.tasks).splitlines()

    assert lines[0].split(" | ")[:3] == ["ID", "Status", "Description"]
    assert set(lines[1].replace(" | ", "")) == {"-"}
    assert len(lines) == 4
    assert "buy milk" in lines[2] and "To do" in lines[2]
    assert "call mom" in lines[3] and "Done" in lines[3]
    assert "2024-05-01 10:00:00" in lines[2]


def test_long_descriptions_wrap_within_width(store: TaskStore) -> None:
    store.add("word " * 40)

    lines = TableRenderer(width=80).render(store.tasks).splitlines()

    assert len(lines) > 3
    assert all(len(line) <= 80 for line in lines)


def test_render_task_mentions_id_status_and_description(store: TaskStore) -> None:
    task = store.add("write docs")

    text = TableRenderer().render_task(task)

    assert text.startswith("#1 [To do] write docs")
    assert "created: 2024-05-01 10:00:00" in text
