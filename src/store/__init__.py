"""In-memory todo storage."""

from .exceptions import TodoError, NotFoundError
from .rwlock import ReadWriteLock
from .todo_store import TodoStore

__all__ = ["TodoStore", "ReadWriteLock", "TodoError", "NotFoundError"]
