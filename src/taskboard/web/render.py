# src/taskboard/web/render.py

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from ..tasks.task_models import Task


def _text(value: str | None) -> str:
    return escape(value or "")


def render_task_item(task: Task) -> str:
    tid = escape(task.id, quote=True)
    classes = "task completed" if task.is_completed else "task"

    lines = [
        f'<li id="task-{tid}" class="{classes}" data-task-id="{tid}">',
        f'  <span class="task-title">{_text(task.title)}</span>',
    ]
    if task.description:
        lines.append(f'  <span class="task-description">{_text(task.description)}</span>')
    if task.due_date:
        lines.append(f'  <span class="task-due">{_text(task.due_date)}</span>')
    lines.append(f'  <span class="task-status">{_text(task.status)}</span>')

    if not task.is_completed:
        lines.append(
            f'  <button hx-put="/api/tasks/{tid}" hx-vals=\'{{"status": "completed"}}\' '
            f'hx-target="#task-{tid}" hx-swap="outerHTML">Complete</button>'
        )
    lines.append(
        f'  <button hx-delete="/api/tasks/{tid}" hx-target="#task-{tid}" '
        f'hx-swap="outerHTML">Delete</button>'
    )
    lines.append("</li>")
    return "\n".join(lines)


def render_task_items(tasks: Iterable[Task]) -> str:
    """HTML fragment: one <li> per task, no surrounding list element."""
    return "\n".join(render_task_item(t) for t in tasks)


def render_index(tasks: Iterable[Task], title: str = "taskboard") -> str:
    page_title = _text(title)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{page_title}</title>
  <script src="https://unpkg.com/htmx.org@1.9.12"></script>
</head>
<body>
  <h1>{page_title}</h1>
  <form hx-post="/api/tasks" hx-target="#task-list" hx-swap="beforeend">
    <input name="title" placeholder="Task" required>
    <input name="description" placeholder="Description">
    <input name="due_date" type="date">
    <button type="submit">Add</button>
  </form>
  <ul id="task-list">
{render_task_items(tasks)}
  </ul>
</body>
</html>
"""
