# tests/test_render.py

from __future__ import annotations

from taskboard.tasks.task_models import Task, TaskStatus
from taskboard.web.render import render_index, render_task_item, render_task_items


def test_task_item_escapes_user_text() -> None:
    html = render_task_item(
        Task(id="a1", title="<script>x</script>", description='say "hi" & bye', due_date="soon")
    )
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&quot;hi&quot; &amp; bye" in html
    assert 'id="task-a1"' in html


def test_open_task_has_complete_button_completed_does_not() -> None:
    open_html = render_task_item(Task(id="a", title="t"))
    done_html = render_task_item(Task(id="b", title="t", status=TaskStatus.COMPLETED.value))

    assert 'hx-put="/api/tasks/a"' in open_html
    assert "hx-put" not in done_html
    assert 'class="task completed"' in done_html
    assert 'hx-delete="/api/tasks/b"' in done_html


def test_optional_fields_are_omitted() -> None:
    html = render_task_item(Task(id="a", title="t"))
    assert "task-description" not in html
    assert "task-due" not in html


def test_items_and_index() -> None:
    tasks = [Task(id="a", title="one"), Task(id="b", title="two")]

    assert render_task_items([]) == ""
    assert render_task_items(tasks).count("<li ") == 2

    page = render_index(tasks, title="My <board>")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>My &lt;board&gt;</title>" in page
    assert 'id="task-list"' in page
    assert page.count("<li ") == 2
