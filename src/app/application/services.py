import logging
from typing import cast

import inject

from src.app.application.writer import DetachedTaskWriter
from src.app.domain.exceptions import TaskNotFoundError, TaskValidationError
from src.app.domain.models import CustomId, Task, TaskPayload, TaskUpdatePayload
from src.app.domain.repositories import TaskStoreRepository

logger = logging.getLogger(__name__)


def _require_custom_id(custom_id: str | None) -> CustomId:
    if custom_id is None or not custom_id.strip():
        raise TaskValidationError("Missing custom ID")
    return CustomId(custom_id)


class TaskService:
    """Runs task operations against the store.

    Creation is acknowledged before the task is persisted: the write is handed
    to the detached writer and its outcome is never reported back.
    """

    def __init__(
        self,
        store: TaskStoreRepository | None = None,
        writer: DetachedTaskWriter | None = None,
    ) -> None:
        self._store = store or cast(
            TaskStoreRepository, inject.instance(TaskStoreRepository)
        )
        self._writer = writer or cast(
            DetachedTaskWriter, inject.instance(DetachedTaskWriter)
        )

    async def list_tasks(self) -> list[Task]:
        """Return every committed task, unfiltered."""
        return await self._store.find_all()

    async def create_task(self, payload: TaskPayload) -> Task:
        """
        Schedule persistence of a new task and return it immediately.

        The returned task has no store key; it may not be listable yet and is
        lost if the background write fails.
        """
        task = Task(
            custom_id=_require_custom_id(payload.custom_id),
            name=payload.name,
            description=payload.description,
            date_created=payload.date_created,
        )
        logger.info("Task received", extra={"custom_id": task.custom_id})
        self._writer.submit(task)
        return task

    async def update_task(self, custom_id: str | None, payload: TaskUpdatePayload) -> Task:
        """Overwrite name, description and date_created of the task with ``custom_id``."""
        key = _require_custom_id(custom_id)
        updated = await self._store.update_by_custom_id(key, payload)
        if updated == 0:
            raise TaskNotFoundError(key)
        return Task(
            custom_id=key,
            name=payload.name,
            description=payload.description,
            date_created=payload.date_created,
        )

    async def delete_task(self, custom_id: str | None) -> None:
        """Delete the task with ``custom_id``."""
        key = _require_custom_id(custom_id)
        logger.info("Task to delete", extra={"custom_id": key})
        deleted = await self._store.delete_by_custom_id(key)
        if deleted == 0:
            raise TaskNotFoundError(key)
