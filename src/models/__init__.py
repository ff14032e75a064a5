"""Data models for the todo service."""

from .todo import Todo, new_todo_id

__all__ = [
    "Todo",
    "new_todo_id"
]
