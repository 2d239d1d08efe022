# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Paths default under ./data so the DB and logs stay out of the source tree.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- HTTP ----
    host: str
    port: int
    partial_render_header: str

    # ---- Local data paths ----
    data_dir: Path
    db_path: Path
    static_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        host = _env(_k("HOST"), "0.0.0.0").strip() or "0.0.0.0"
        port = _env_int(_k("PORT"), 3000)
        # htmx sends "HX-Request: true" on every request it issues.
        partial_render_header = _env(_k("PARTIAL_HEADER"), "HX-Request").strip() or "HX-Request"

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "tasks.db")
        static_dir = _env_path(_k("STATIC_DIR"), Path("public"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            host=host,
            port=port,
            partial_render_header=partial_render_header,
            data_dir=data_dir,
            db_path=db_path,
            static_dir=static_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
