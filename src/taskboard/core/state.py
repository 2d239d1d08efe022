# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings-like object (Settings in production, SimpleNamespace in tests).
    settings: Any

    task_store: TaskRepo
