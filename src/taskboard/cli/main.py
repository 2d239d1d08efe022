# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store (fatal on failure), then serves
the HTTP API with uvicorn until interrupted.
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStoreInitError
from ..web.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except (TaskStoreInitError, OSError):
        logger.critical("Task store initialization failed; exiting.", exc_info=True)
        sys.exit(1)

    app = create_app(state)

    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    try:
        # log_config=None: uvicorn logs through the root handlers set up above.
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    finally:
        state.task_store.close()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
