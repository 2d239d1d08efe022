# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, description, due_date, status"


class TaskStoreError(RuntimeError):
    """Any store-level failure (open, query, write)."""


class TaskNotFoundError(TaskStoreError):
    """No row matched the requested id."""


class TaskStoreInitError(TaskStoreError):
    """The store could not be opened or its schema could not be ensured."""


class TaskStore:
    """
    SQLite task store.

    Owns the single connection shared by every request handler:
    - opened once by initialize()
    - WAL journal so readers are not blocked by a writer
    - autocommit: every statement is its own transaction

    Concurrency is left to SQLite itself; there is no in-process locking.
    """

    def __init__(self, db_path: str | Path = "data/tasks.db") -> None:
        self._db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    def initialize(self) -> None:
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(
                str(self._db_path),
                timeout=30.0,
                check_same_thread=False,
                isolation_level=None,
            )
        except (OSError, sqlite3.Error) as e:
            raise TaskStoreInitError(f"Failed to open task store at {self._db_path}: {e}") from e

        try:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT,
                    due_date TEXT,
                    status TEXT NOT NULL
                )
                """
            )
        except sqlite3.Error as e:
            conn.close()
            raise TaskStoreInitError(f"Failed to ensure task schema: {e}") from e

        self._conn = conn
        try:
            total = self.count_tasks()
        except TaskStoreError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.close()
        finally:
            self._conn = None

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise TaskStoreError("TaskStore is not initialized")
        return self._conn

    @staticmethod
    def _row_to_task(row: tuple) -> Task:
        # Positional: id, title, description, due_date, status
        return Task(
            id=str(row[0]),
            title=str(row[1]),
            description=row[2],
            due_date=row[3],
            status=str(row[4]),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        try:
            (n,) = self._get_conn().execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to count tasks: {e}") from e
        return int(n)

    def insert(self, task: Task) -> int:
        try:
            rows = self._get_conn().execute(
                f"INSERT INTO tasks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?) RETURNING id",
                (task.id, task.title, task.description, task.due_date, task.status),
            ).fetchall()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to insert task id={task.id}: {e}") from e
        logger.debug("Task inserted id=%s status=%s", task.id, task.status)
        return len(rows)

    def list_all(self) -> list[Task]:
        try:
            rows = self._get_conn().execute(f"SELECT {_COLUMNS} FROM tasks").fetchall()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to list tasks: {e}") from e
        return [self._row_to_task(r) for r in rows]

    def get_by_id(self, task_id: str) -> Task:
        try:
            row = (
                self._get_conn()
                .execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,))
                .fetchone()
            )
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to fetch task id={task_id}: {e}") from e
        if row is None:
            raise TaskNotFoundError(f"Task not found: {task_id}")
        return self._row_to_task(row)

    # Write counts come from RETURNING rows, not cursor.rowcount: the connection
    # is shared across threads and sqlite3_changes() is per connection.

    def update_status(self, task_id: str, new_status: str) -> int:
        """Set status unconditionally; callers validate new_status first."""
        try:
            rows = self._get_conn().execute(
                "UPDATE tasks SET status = ? WHERE id = ? RETURNING id",
                (new_status, task_id),
            ).fetchall()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to update task id={task_id}: {e}") from e
        logger.debug("Task status update id=%s status=%s rows=%s", task_id, new_status, len(rows))
        return len(rows)

    def delete_by_id(self, task_id: str) -> int:
        try:
            rows = self._get_conn().execute(
                "DELETE FROM tasks WHERE id = ? RETURNING id", (task_id,)
            ).fetchall()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to delete task id={task_id}: {e}") from e
        logger.debug("Task delete id=%s rows=%s", task_id, len(rows))
        return len(rows)
