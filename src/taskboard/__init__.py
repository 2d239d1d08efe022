"""taskboard: a small task-tracking HTTP service backed by SQLite."""

__version__ = "0.1.0"
