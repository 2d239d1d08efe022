# src/taskboard/web/binding.py

"""
Request body binding.

One step, polymorphic over Content-Type:
- application/json -> JSON object
- anything else -> form fields (urlencoded or multipart)

The resulting mapping is validated into a pydantic model. Any failure is a
BindingError whose message is safe to echo back to the client.
"""

from __future__ import annotations

from typing import Any, TypeVar

from fastapi import Request
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

M = TypeVar("M", bound=BaseModel)


class BindingError(ValueError):
    """Request body could not be turned into the expected input model."""


class TaskInput(BaseModel):
    """Client-supplied task fields. id and status are server-owned and ignored."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = Field(min_length=1, validation_alias=AliasChoices("title", "task"))
    description: str | None = None
    due_date: str | None = Field(default=None, validation_alias=AliasChoices("due_date", "dueDate"))


class StatusInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str


def _is_json(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


async def _read_body(request: Request) -> dict[str, Any]:
    if _is_json(request):
        # Decode errors are ValueErrors; deeply nested arrays raise RecursionError.
        try:
            data = await request.json()
        except (ValueError, RecursionError) as e:
            raise BindingError(f"Invalid JSON body: {e}") from e
        if not isinstance(data, dict):
            raise BindingError("Request body must be a JSON object")
        return data

    form = await request.form()
    return dict(form)


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def bind(request: Request, model: type[M]) -> M:
    data = await _read_body(request)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise BindingError(_format_validation_error(e)) from e


async def bind_task_input(request: Request) -> TaskInput:
    return await bind(request, TaskInput)


async def bind_status_input(request: Request) -> StatusInput:
    return await bind(request, StatusInput)
