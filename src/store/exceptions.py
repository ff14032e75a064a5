"""Errors raised by the todo store."""


class TodoError(LookupError):
    """Base class for todo store errors."""
    pass


class NotFoundError(TodoError):
    """No todo with the requested id exists."""

    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__(f"could not find todo with id '{todo_id}'")
