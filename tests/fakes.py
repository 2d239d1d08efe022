# tests/fakes.py

from __future__ import annotations

import re
from collections.abc import Iterable

from taskboard.tasks.task_models import Task
from taskboard.tasks.task_store import TaskStoreError

TASK_ID_RE = re.compile(r'data-task-id="([^"]+)"')


def created_id(html: str) -> str:
    """Pull the task id out of a rendered task fragment."""
    m = TASK_ID_RE.search(html)
    assert m is not None, f"no task id in fragment: {html!r}"
    return m.group(1)


class FailingTaskRepo:
    """
    TaskRepo wrapper that raises TaskStoreError for selected operations.

    Operations not listed in fail_on are delegated to the wrapped repo
    (a real TaskStore in most tests), so a single request can succeed on
    one call and fail on the next.
    """

    def __init__(self, inner=None, fail_on: Iterable[str] = ()) -> None:
        self.inner = inner
        self.fail_on = set(fail_on)
        self.calls: list[str] = []

    def _call(self, name: str, *args):
        self.calls.append(name)
        if name in self.fail_on or self.inner is None:
            raise TaskStoreError(f"simulated failure in {name}")
        return getattr(self.inner, name)(*args)

    def insert(self, task: Task) -> int:
        return self._call("insert", task)

    def list_all(self) -> list[Task]:
        return self._call("list_all")

    def get_by_id(self, task_id: str) -> Task:
        return self._call("get_by_id", task_id)

    def update_status(self, task_id: str, new_status: str) -> int:
        return self._call("update_status", task_id, new_status)

    def delete_by_id(self, task_id: str) -> int:
        return self._call("delete_by_id", task_id)

    def close(self) -> None:
        return None


class ZeroRowInsertRepo(FailingTaskRepo):
    """Insert "succeeds" without touching any row."""

    def insert(self, task: Task) -> int:
        self.calls.append("insert")
        return 0
