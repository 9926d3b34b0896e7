from __future__ import annotations

from uuid import uuid4

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import SQLAlchemyError

from src.app.domain.exceptions import StoreError
from src.app.domain.models import CustomId, StoreKey, Task, TaskUpdatePayload
from src.app.domain.repositories import TaskStoreRepository
from src.app.infrastructure.database.mappers import OrmMapper
from src.app.infrastructure.database.orm import DatabaseOrm, TaskRow


class DatabaseTaskStoreRepository(TaskStoreRepository):
    """Task store backed by SQLAlchemy async sessions."""

    def __init__(self, orm: DatabaseOrm) -> None:
        self._orm = orm

    async def find_all(self) -> list[Task]:
        """Fetch every stored task."""
        try:
            async with self._orm.session_factory() as session:
                result = await session.execute(select(TaskRow))
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise StoreError("Error fetching tasks") from exc
        return [OrmMapper.to_domain_task(row) for row in rows]

    async def insert(self, task: Task) -> StoreKey:
        """Persist a new task and return its store key."""
        store_key = StoreKey(uuid4().hex)
        task_row = OrmMapper.to_task_row(store_key, task)
        try:
            async with self._orm.session_factory() as session:
                async with session.begin():
                    session.add(task_row)
        except SQLAlchemyError as exc:
            raise StoreError("Error inserting task") from exc
        return store_key

    async def update_by_custom_id(
        self, custom_id: CustomId, changes: TaskUpdatePayload
    ) -> int:
        """Overwrite the mutable fields of every task with ``custom_id``."""
        statement = (
            update(TaskRow)
            .where(TaskRow.custom_id == custom_id)
            .values(**OrmMapper.to_update_values(changes))
        )
        try:
            async with self._orm.session_factory() as session:
                async with session.begin():
                    result = await session.execute(statement)
        except SQLAlchemyError as exc:
            raise StoreError("Error updating task") from exc
        return result.rowcount

    async def delete_by_custom_id(self, custom_id: CustomId) -> int:
        """Delete every task with ``custom_id``."""
        statement = delete(TaskRow).where(TaskRow.custom_id == custom_id)
        try:
            async with self._orm.session_factory() as session:
                async with session.begin():
                    result = await session.execute(statement)
        except SQLAlchemyError as exc:
            raise StoreError("Error deleting task") from exc
        return result.rowcount

    async def ping(self) -> None:
        """Run a trivial query so an unreachable store fails at startup."""
        try:
            async with self._orm.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StoreError("Task store is unreachable") from exc

    async def close(self) -> None:
        await self._orm.dispose()
