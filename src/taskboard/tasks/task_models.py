# src/taskboard/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Only one transition exists: TODO -> COMPLETED. There is no way back.
    """

    TODO = "to do"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str | None = None
    due_date: str | None = None
    status: str = TaskStatus.TODO.value

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def new_task_id() -> str:
    return str(uuid.uuid4())


def new_task(*, title: str, description: str | None = None, due_date: str | None = None) -> Task:
    """Build a fresh Task: server-generated id, status always TODO."""
    return Task(
        id=new_task_id(),
        title=title,
        description=description,
        due_date=due_date,
        status=TaskStatus.TODO.value,
    )
