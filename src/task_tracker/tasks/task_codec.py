# src/task_tracker/tasks/task_codec.py

"""
JSON codec for the task file.

Document layout:

    {
      "list": [
        {"id": 1, "status": "Todo", "desc": "...",
         "create_at": "2024-05-01T10:00:00.123456+02:00",
         "update_at": "2024-05-01T10:00:00.123456+02:00"}
      ],
      "last_id": 1
    }

"last_id" is optional on read; files written by older versions only have
"list". Timestamps are RFC 3339 with an explicit numeric offset.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

from .task_models import Task, TaskStatus

EMPTY_DOCUMENT = '{"list": []}'

_TIMESTAMP_RE = re.compile(
    r"(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d{1,9}))?"
    r"(?P<offset>[+-]\d{2}:\d{2})",
    re.ASCII,
)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.astimezone()
    offset = value.utcoffset()
    if offset is not None and offset % timedelta(minutes=1):
        # Sub-minute offsets (historic LMT zones) cannot be written as ±HH:MM.
        value = value.astimezone(timezone(timedelta(minutes=offset // timedelta(minutes=1))))
    return value.isoformat()


def parse_timestamp(raw: str) -> datetime:
    """Parse an RFC 3339 timestamp with a numeric offset; reject anything else."""
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {type(raw).__name__}")
    m = _TIMESTAMP_RE.fullmatch(raw)
    if m is None:
        raise ValueError(f"invalid timestamp {raw!r}")

    text = m.group("base")
    frac = m.group("frac")
    if frac:
        # datetime keeps microseconds; extra digits are dropped.
        text += "." + frac[:6].ljust(6, "0")
    text += m.group("offset")
    return datetime.fromisoformat(text)


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "status": task.status.value,
        "desc": task.description,
        "create_at": format_timestamp(task.created_at),
        "update_at": format_timestamp(task.updated_at),
    }


def _require(raw: dict[str, Any], key: str, kind: type, index: int) -> Any:
    if key not in raw:
        raise ValueError(f"task #{index}: missing field {key!r}")
    value = raw[key]
    # bool is an int subclass; an id of true/false is not an id.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"task #{index}: field {key!r} must be {kind.__name__}")
    return value


def task_from_dict(raw: Any, index: int = 0) -> Task:
    if not isinstance(raw, dict):
        raise ValueError(f"task #{index}: expected an object")

    task_id = _require(raw, "id", int, index)
    status_raw = _require(raw, "status", str, index)
    desc = _require(raw, "desc", str, index)
    created_raw = _require(raw, "create_at", str, index)
    updated_raw = _require(raw, "update_at", str, index)

    try:
        status = TaskStatus(status_raw)
    except ValueError:
        raise ValueError(f"task #{index}: unknown status {status_raw!r}") from None

    try:
        created_at = parse_timestamp(created_raw)
        updated_at = parse_timestamp(updated_raw)
    except ValueError as e:
        raise ValueError(f"task #{index}: {e}") from None

    return Task(
        id=task_id,
        status=status,
        description=desc,
        created_at=created_at,
        updated_at=updated_at,
    )


def encode_document(tasks: Iterable[Task], last_id: int) -> str:
    data = {
        "list": [task_to_dict(t) for t in tasks],
        "last_id": int(last_id),
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def decode_document(text: str) -> tuple[list[Task], int]:
    """
    Decode a task file.

    Returns (tasks, last_id). Raises ValueError (json.JSONDecodeError is one)
    on malformed JSON or on a document that does not match the layout.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("top level must be an object")

    items = data.get("list")
    if not isinstance(items, list):
        raise ValueError("missing 'list' array")

    tasks = [task_from_dict(raw, i) for i, raw in enumerate(items)]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise ValueError(f"duplicate task id {t.id}")
        seen.add(t.id)

    last_id = data.get("last_id", 0)
    if not isinstance(last_id, int) or isinstance(last_id, bool):
        raise ValueError("'last_id' must be an integer")

    return tasks, last_id
