from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from src.app.application.services import TaskService
from src.app.domain.exceptions import StoreError, TaskNotFoundError, TaskValidationError
from src.app.domain.models import Task, TaskPayload, TaskUpdatePayload

router = APIRouter(prefix="/api/tasks", tags=["tasks"])
logger = logging.getLogger(__name__)


def get_task_service() -> TaskService:
    return TaskService()


@router.get(
    "",
    response_model=list[Task],
    response_model_exclude_none=True,
    summary="List tasks",
    description="Returns every task the store has committed. No filtering or pagination.",
    responses={500: {"description": "The store could not be read."}},
)
async def list_tasks(service: TaskService = Depends(get_task_service)):
    try:
        return await service.list_tasks()
    except StoreError:
        logger.exception("Error fetching tasks")
        raise HTTPException(status_code=500, detail="Error fetching tasks")  # noqa: B904


@router.post(
    "",
    response_model=Task,
    response_model_exclude_none=True,
    summary="Create a task",
    description=(
        "Echoes the submitted task and persists it in the background.\n"
        "A successful response does not mean the task is stored yet."
    ),
    responses={400: {"description": "Invalid request payload."}},
)
async def create_task(
    body: TaskPayload, service: TaskService = Depends(get_task_service)
):
    try:
        return await service.create_task(body)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))  # noqa: B904


@router.put("", include_in_schema=False)
@router.put("/", include_in_schema=False)
@router.delete("", include_in_schema=False)
@router.delete("/", include_in_schema=False)
async def missing_custom_id():
    raise HTTPException(status_code=400, detail="Missing custom ID")


@router.put(
    "/{custom_id}",
    response_model=Task,
    response_model_exclude_none=True,
    summary="Update a task",
    description="Overwrites name, description and dateCreated of the task with this custom id.",
    responses={
        400: {"description": "Invalid request payload or missing custom id."},
        404: {"description": "No task has this custom id."},
        500: {"description": "The store could not be updated."},
    },
)
async def update_task(
    custom_id: str,
    body: TaskUpdatePayload,
    service: TaskService = Depends(get_task_service),
):
    try:
        return await service.update_task(custom_id, body)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))  # noqa: B904
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")  # noqa: B904
    except StoreError:
        logger.exception("Error updating task", extra={"custom_id": custom_id})
        raise HTTPException(status_code=500, detail="Error updating task")  # noqa: B904


@router.delete(
    "/{custom_id}",
    response_class=PlainTextResponse,
    summary="Delete a task",
    responses={
        400: {"description": "Missing custom id."},
        404: {"description": "No task has this custom id."},
        500: {"description": "The store could not be updated."},
    },
)
async def delete_task(custom_id: str, service: TaskService = Depends(get_task_service)):
    try:
        await service.delete_task(custom_id)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))  # noqa: B904
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")  # noqa: B904
    except StoreError:
        logger.exception("Error deleting task", extra={"custom_id": custom_id})
        raise HTTPException(status_code=500, detail="Error deleting task")  # noqa: B904
    return "Task deleted successfully"
