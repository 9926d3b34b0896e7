class TaskValidationError(Exception):
    """Raised when a request is missing input the operation requires."""


class TaskNotFoundError(Exception):
    """Raised when no stored task matches a custom id."""
    def __init__(self, custom_id: str) -> None:
        super().__init__(f"Task with custom id '{custom_id}' was not found.")
        self.custom_id = custom_id


class StoreError(Exception):
    """Raised when the task store fails or cannot be reached."""
