"""Todo record held by the in-memory store."""

from dataclasses import dataclass, replace
from typing import Any, Dict

from ulid import ULID


def new_todo_id() -> str:
    """Generate a unique, time-sortable identifier for a todo."""
    return str(ULID())


@dataclass(frozen=True)
class Todo:
    """A single to-do item.

    Records are immutable; completing a todo swaps in a new record with the
    flag set, so snapshots handed out by the store never change underneath
    their holders.
    """
    id: str
    message: str
    complete: bool = False

    @classmethod
    def create(cls, message: str) -> "Todo":
        return cls(id=new_todo_id(), message=message)

    def completed(self) -> "Todo":
        """Return this todo marked as complete."""
        if self.complete:
            return self
        return replace(self, complete=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "complete": self.complete
        }
