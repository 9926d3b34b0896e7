from src.app.domain.models.payloads import TaskPayload, TaskUpdatePayload
from src.app.domain.models.task import CustomId, StoreKey, Task

__all__ = [
    "Task",
    "TaskPayload",
    "TaskUpdatePayload",
    "CustomId",
    "StoreKey",
]
