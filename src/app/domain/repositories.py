from __future__ import annotations

from typing import Protocol

from src.app.domain.models import CustomId, StoreKey, Task, TaskUpdatePayload


class TaskStoreRepository(Protocol):
    """Contract for the document store holding tasks.

    Each call is atomic on its own; nothing is guaranteed across calls.
    Implementations raise ``StoreError`` when the store fails.
    """

    async def find_all(self) -> list[Task]:
        """Return every committed task."""

    async def insert(self, task: Task) -> StoreKey:
        """Persist a new task and return the key the store assigned to it."""

    async def update_by_custom_id(
        self, custom_id: CustomId, changes: TaskUpdatePayload
    ) -> int:
        """Overwrite name, description and date_created on matching tasks.

        Returns the number of tasks updated; zero is not an error here.
        """

    async def delete_by_custom_id(self, custom_id: CustomId) -> int:
        """Delete matching tasks and return how many were removed."""

    async def ping(self) -> None:
        """Check that the store is reachable."""

    async def close(self) -> None:
        """Release the underlying store connection."""
