import inject

from src.app.application.writer import DetachedTaskWriter
from src.app.domain.repositories import TaskStoreRepository
from src.app.infrastructure.database.orm import DatabaseOrm
from src.app.infrastructure.database.repositories import DatabaseTaskStoreRepository
from src.setup.db_config import get_database_settings
from src.setup.writer_config import get_writer_settings


def _build_orm() -> DatabaseOrm:
    settings = get_database_settings()
    return DatabaseOrm(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


def _build_store() -> TaskStoreRepository:
    return DatabaseTaskStoreRepository(inject.instance(DatabaseOrm))


def _build_writer() -> DetachedTaskWriter:
    settings = get_writer_settings()
    return DetachedTaskWriter(
        inject.instance(TaskStoreRepository),
        write_timeout=settings.WRITE_TIMEOUT_SECONDS,
        concurrency=settings.WRITER_CONCURRENCY,
    )


def _config(binder: inject.Binder) -> None:
    # Constructors run on first lookup, so the connection string is only
    # required once the store is actually needed.
    binder.bind_to_constructor(DatabaseOrm, _build_orm)
    binder.bind_to_constructor(TaskStoreRepository, _build_store)
    binder.bind_to_constructor(DetachedTaskWriter, _build_writer)


def configure_di() -> None:
    """Configure the process-wide injector once."""
    if not inject.is_configured():
        inject.configure(_config)
