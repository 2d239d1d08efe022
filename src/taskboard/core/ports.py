# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the HTTP layer.

Handlers depend on this Protocol instead of the concrete SQLite store,
which keeps the store swappable and makes failure paths easy to test.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Task gateway contract.

    - get_by_id raises TaskNotFoundError when no row matches
    - every method raises TaskStoreError on store failure
    - write methods return the affected-row count
    """

    def insert(self, task: Task) -> int: ...
    def list_all(self) -> list[Task]: ...
    def get_by_id(self, task_id: str) -> Task: ...
    def update_status(self, task_id: str, new_status: str) -> int: ...
    def delete_by_id(self, task_id: str) -> int: ...
    def close(self) -> None: ...
