from __future__ import annotations

from src.app.domain.models import CustomId, StoreKey, Task, TaskUpdatePayload
from src.app.infrastructure.database.orm import TaskRow


class OrmMapper:
    @staticmethod
    def to_task_row(store_key: StoreKey, task: Task) -> TaskRow:
        return TaskRow(
            store_key=store_key,
            custom_id=task.custom_id,
            name=task.name,
            description=task.description,
            date_created=task.date_created,
        )

    @staticmethod
    def to_update_values(changes: TaskUpdatePayload) -> dict[str, str | None]:
        # Wholesale overwrite: a missing description clears the stored one.
        return {
            "name": changes.name,
            "description": changes.description,
            "date_created": changes.date_created,
        }

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            store_key=StoreKey(row.store_key),
            custom_id=CustomId(row.custom_id),
            name=row.name,
            description=row.description,
            date_created=row.date_created,
        )
