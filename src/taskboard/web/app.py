# src/taskboard/web/app.py

"""
HTTP routes.

    GET    /                 -> index page (HTML)
    GET    /api/tasks        -> JSON array, or HTML fragment for partial-render requests
    POST   /api/tasks        -> HTML fragment with the created task
    GET    /api/tasks/{id}   -> JSON task
    PUT    /api/tasks/{id}   -> HTML fragment with the updated task (status=completed only)
    DELETE /api/tasks/{id}   -> empty text/html body

Response formats are intentionally not uniform (create/update return HTML,
get returns JSON, list is negotiated). Existing clients depend on this.
"""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_models import TaskStatus, new_task
from ..tasks.task_store import TaskNotFoundError, TaskStoreError
from .binding import BindingError, StatusInput, TaskInput, bind_status_input, bind_task_input
from .render import render_index, render_task_items

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def get_state(request: Request) -> AppState:
    return request.app.state.taskboard


def get_repo(request: Request) -> TaskRepo:
    return get_state(request).task_store


def wants_partial(request: Request) -> bool:
    settings = get_state(request).settings
    return request.headers.get(settings.partial_render_header) == "true"


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI app around an already-initialized store."""
    settings = state.settings
    app_name = settings.app_name

    app = FastAPI(title=app_name)
    app.state.taskboard = state

    static_dir = settings.static_dir
    if static_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(static_dir)), name="assets")
    else:
        logger.info("Static dir %s not found; /assets is not served", static_dir)

    @app.exception_handler(BindingError)
    async def _binding_error(_request: Request, exc: BindingError) -> JSONResponse:
        return _error(400, str(exc))

    @app.get("/", response_class=HTMLResponse)
    def index(repo: TaskRepo = Depends(get_repo)) -> Response:
        try:
            tasks = repo.list_all()
        except TaskStoreError:
            logger.exception("Index: failed to fetch tasks")
            return PlainTextResponse("Failed to fetch tasks", status_code=500)
        return HTMLResponse(render_index(tasks, title=app_name))

    @app.get("/api/tasks")
    def list_tasks(request: Request, repo: TaskRepo = Depends(get_repo)) -> Response:
        try:
            tasks = repo.list_all()
        except TaskStoreError:
            logger.exception("Failed to fetch tasks")
            return _error(500, "Failed to fetch tasks")
        if wants_partial(request):
            return HTMLResponse(render_task_items(tasks))
        return JSONResponse([t.to_dict() for t in tasks])

    @app.post("/api/tasks")
    def create_task(
        data: TaskInput = Depends(bind_task_input),
        repo: TaskRepo = Depends(get_repo),
    ) -> Response:
        task = new_task(title=data.title, description=data.description, due_date=data.due_date)
        try:
            rows = repo.insert(task)
        except TaskStoreError:
            logger.exception("Failed to create task id=%s", task.id)
            return _error(500, "Failed to create task")
        if rows == 0:
            logger.warning("Insert reported no affected rows id=%s", task.id)
        logger.info("Task created id=%s", task.id)
        return HTMLResponse(render_task_items([task]))

    @app.get("/api/tasks/{task_id}")
    def get_task(task_id: str, repo: TaskRepo = Depends(get_repo)) -> Response:
        try:
            task = repo.get_by_id(task_id)
        except TaskNotFoundError:
            return _error(404, "Task not found")
        except TaskStoreError:
            logger.exception("Failed to fetch task id=%s", task_id)
            return _error(500, "Database query failed")
        return JSONResponse(task.to_dict())

    @app.put("/api/tasks/{task_id}")
    def update_task(
        task_id: str,
        data: StatusInput = Depends(bind_status_input),
        repo: TaskRepo = Depends(get_repo),
    ) -> Response:
        # Allow-list: completing a task is the only supported transition.
        if data.status != TaskStatus.COMPLETED:
            return _error(400, "Invalid status update")

        try:
            rows = repo.update_status(task_id, TaskStatus.COMPLETED.value)
        except TaskStoreError:
            logger.exception("Failed to update task id=%s", task_id)
            return _error(500, "Failed to update task")
        if rows == 0:
            logger.warning("Status update matched no rows id=%s", task_id)

        try:
            updated = repo.get_by_id(task_id)
        except TaskStoreError:
            # TaskNotFoundError included: the row vanished or never existed.
            logger.exception("Failed to retrieve updated task id=%s", task_id)
            return _error(500, "Failed to retrieve updated task")
        return HTMLResponse(render_task_items([updated]))

    @app.delete("/api/tasks/{task_id}")
    def delete_task(task_id: str, repo: TaskRepo = Depends(get_repo)) -> Response:
        try:
            rows = repo.delete_by_id(task_id)
        except TaskStoreError:
            logger.exception("Failed to delete task id=%s", task_id)
            return _error(500, "Failed to delete task")
        if rows == 0:
            return _error(404, "Task not found")
        logger.info("Task deleted id=%s", task_id)
        return Response(content=b"", media_type="text/html")

    return app
