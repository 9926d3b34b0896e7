from __future__ import annotations

import asyncio
import logging

from src.app.domain.exceptions import StoreError
from src.app.domain.models import Task
from src.app.domain.repositories import TaskStoreRepository

logger = logging.getLogger(__name__)


class DetachedTaskWriter:
    """
    Persists newly created tasks in the background.

    ``submit`` returns as soon as the task is queued. A pool of workers inserts
    queued tasks into the store, each write under its own time budget. The
    outcome never reaches the submitting request: successes and failures are
    only logged, and failed writes are not retried.
    """

    def __init__(
        self,
        store: TaskStoreRepository,
        *,
        write_timeout: float = 10.0,
        concurrency: int = 4,
    ) -> None:
        if concurrency < 1:
            raise ValueError("Writer concurrency must be at least 1.")
        self._store = store
        self._write_timeout = write_timeout
        self._concurrency = concurrency
        self._queue: asyncio.Queue[Task] | None = None
        self._workers: list[asyncio.Task[None]] = []
        self._in_flight = 0

    @property
    def running(self) -> bool:
        return bool(self._workers)

    @property
    def pending(self) -> int:
        """Number of submitted writes that have not finished yet."""
        return self._in_flight

    async def start(self) -> None:
        if self.running:
            return
        queue: asyncio.Queue[Task] = asyncio.Queue()
        self._queue = queue
        self._workers = [
            asyncio.create_task(self._run(queue), name=f"task-writer-{index}")
            for index in range(self._concurrency)
        ]
        logger.info("Detached task writer started", extra={"workers": self._concurrency})

    def submit(self, task: Task) -> None:
        """Queue ``task`` for insertion without waiting for the store."""
        if self._queue is None or not self.running:
            raise RuntimeError("Detached task writer is not running.")
        self._queue.put_nowait(task.model_copy())
        self._in_flight += 1

    async def drain(self) -> None:
        """Wait until every submitted write has settled."""
        if self._queue is not None:
            await self._queue.join()

    async def stop(self) -> None:
        """Stop the workers. Writes still queued are dropped, not awaited."""
        if not self.running:
            return
        dropped = self._in_flight
        for worker in self._workers:
            worker.cancel()
        await asyncio.gather(*self._workers, return_exceptions=True)
        self._workers = []
        queue, self._queue = self._queue, None
        # Settle what the workers never picked up so pending drain() calls return.
        while queue is not None and not queue.empty():
            queue.get_nowait()
            queue.task_done()
        self._in_flight = 0
        if dropped:
            logger.warning(
                "Detached task writer stopped with queued writes",
                extra={"dropped": dropped},
            )
        else:
            logger.info("Detached task writer stopped")

    async def _run(self, queue: asyncio.Queue[Task]) -> None:
        while True:
            task = await queue.get()
            try:
                await self._write(task)
            finally:
                self._in_flight -= 1
                queue.task_done()

    async def _write(self, task: Task) -> None:
        try:
            store_key = await asyncio.wait_for(
                self._store.insert(task), timeout=self._write_timeout
            )
        except StoreError:
            logger.exception(
                "Error inserting task into store",
                extra={"custom_id": task.custom_id},
            )
            return
        except TimeoutError:
            logger.error(
                "Timed out inserting task into store",
                extra={"custom_id": task.custom_id, "timeout": self._write_timeout},
            )
            return
        except Exception:
            logger.exception(
                "Unexpected error inserting task into store",
                extra={"custom_id": task.custom_id},
            )
            return
        task.store_key = store_key
        logger.info(
            "Task saved to store",
            extra={"custom_id": task.custom_id, "store_key": store_key},
        )
