"""In-memory todo collection safe for concurrent request handlers."""

import logging
from typing import List

from models import Todo
from .exceptions import NotFoundError
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class TodoStore:
    """Ordered, lock-guarded list of todos.

    Reads (list, get) share the lock; writes (add, complete, delete) hold it
    exclusively. The collection lives as long as the store instance and is
    never persisted.
    """

    def __init__(self):
        self._todos: List[Todo] = []
        self._lock = ReadWriteLock()

    def list(self) -> List[Todo]:
        """Return a snapshot of all todos in insertion order."""
        with self._lock.read_lock():
            return list(self._todos)

    def add(self, message: str) -> str:
        """Append a new incomplete todo and return its id."""
        todo = Todo.create(message)
        with self._lock.write_lock():
            self._todos.append(todo)
        logger.info(f"Added todo {todo.id}")
        return todo.id

    def get(self, todo_id: str) -> Todo:
        """Get a todo by id."""
        with self._lock.read_lock():
            return self._todos[self._find_location(todo_id)]

    def complete(self, todo_id: str) -> Todo:
        """Mark a todo as complete. Completing twice is a no-op."""
        with self._lock.write_lock():
            location = self._find_location(todo_id)
            todo = self._todos[location].completed()
            self._todos[location] = todo
        logger.info(f"Completed todo {todo_id}")
        return todo

    def delete(self, todo_id: str):
        """Remove a todo, keeping the order of the remaining ones."""
        with self._lock.write_lock():
            del self._todos[self._find_location(todo_id)]
        logger.info(f"Deleted todo {todo_id}")

    def count(self) -> int:
        with self._lock.read_lock():
            return len(self._todos)

    def _find_location(self, todo_id: str) -> int:
        # Caller must hold the lock
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        logger.debug(f"Todo {todo_id} not found")
        raise NotFoundError(todo_id)

    def __len__(self) -> int:
        return self.count()
