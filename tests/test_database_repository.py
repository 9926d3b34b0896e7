from pathlib import Path

import pytest

from src.app.domain.exceptions import StoreError
from src.app.domain.models import CustomId, Task, TaskUpdatePayload
from src.app.infrastructure.database.orm import DatabaseOrm
from src.app.infrastructure.database.repositories import DatabaseTaskStoreRepository


def _orm(tmp_path: Path) -> DatabaseOrm:
    return DatabaseOrm(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")


def _task(custom_id: str, name: str = "Write report", description: str | None = None) -> Task:
    return Task(
        custom_id=CustomId(custom_id),
        name=name,
        description=description,
        date_created="2024-01-01",
    )


@pytest.mark.asyncio
async def test_insert_assigns_store_key_and_find_all_returns_it(tmp_path: Path) -> None:
    orm = _orm(tmp_path)
    await orm.create_schema()
    repo = DatabaseTaskStoreRepository(orm)
    try:
        store_key = await repo.insert(_task("t1", description="draft"))
        tasks = await repo.find_all()
    finally:
        await repo.close()

    assert len(store_key) == 32
    assert len(tasks) == 1
    assert tasks[0].store_key == store_key
    assert tasks[0].custom_id == "t1"
    assert tasks[0].description == "draft"
    assert tasks[0].model_dump(by_alias=True) == {
        "customId": "t1",
        "name": "Write report",
        "description": "draft",
        "dateCreated": "2024-01-01",
    }


@pytest.mark.asyncio
async def test_update_by_custom_id_overwrites_matching_rows(tmp_path: Path) -> None:
    orm = _orm(tmp_path)
    await orm.create_schema()
    repo = DatabaseTaskStoreRepository(orm)
    try:
        key = await repo.insert(_task("t1", description="old"))
        await repo.insert(_task("t2", name="Other"))

        updated = await repo.update_by_custom_id(
            CustomId("t1"), TaskUpdatePayload(name="New", date_created="2024-05-05")
        )
        missing = await repo.update_by_custom_id(
            CustomId("nope"), TaskUpdatePayload(name="X", date_created="d")
        )
        tasks = {t.custom_id: t for t in await repo.find_all()}
    finally:
        await repo.close()

    assert updated == 1
    assert missing == 0
    assert tasks["t1"].store_key == key
    assert tasks["t1"].name == "New"
    assert tasks["t1"].description is None
    assert tasks["t1"].date_created == "2024-05-05"
    assert tasks["t2"].name == "Other"


@pytest.mark.asyncio
async def test_duplicate_custom_ids_are_allowed_and_deleted_together(tmp_path: Path) -> None:
    orm = _orm(tmp_path)
    await orm.create_schema()
    repo = DatabaseTaskStoreRepository(orm)
    try:
        await repo.insert(_task("dup"))
        await repo.insert(_task("dup"))
        await repo.insert(_task("keep"))

        deleted = await repo.delete_by_custom_id(CustomId("dup"))
        again = await repo.delete_by_custom_id(CustomId("dup"))
        remaining = [t.custom_id for t in await repo.find_all()]
    finally:
        await repo.close()

    assert deleted == 2
    assert again == 0
    assert remaining == ["keep"]


@pytest.mark.asyncio
async def test_driver_errors_become_store_errors(tmp_path: Path) -> None:
    # No schema: every statement fails against the missing table.
    repo = DatabaseTaskStoreRepository(_orm(tmp_path))
    try:
        with pytest.raises(StoreError):
            await repo.find_all()
        with pytest.raises(StoreError):
            await repo.insert(_task("t1"))
        with pytest.raises(StoreError):
            await repo.update_by_custom_id(
                CustomId("t1"), TaskUpdatePayload(name="N", date_created="d")
            )
        with pytest.raises(StoreError) as exc_info:
            await repo.delete_by_custom_id(CustomId("t1"))
    finally:
        await repo.close()

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_ping_reaches_the_database(tmp_path: Path) -> None:
    repo = DatabaseTaskStoreRepository(_orm(tmp_path))
    try:
        await repo.ping()
    finally:
        await repo.close()


@pytest.mark.asyncio
async def test_ping_reports_unreachable_database(tmp_path: Path) -> None:
    orm = DatabaseOrm(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'tasks.db'}")
    repo = DatabaseTaskStoreRepository(orm)
    try:
        with pytest.raises(StoreError):
            await repo.ping()
    finally:
        await repo.close()
