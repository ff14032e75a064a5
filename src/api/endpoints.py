"""API endpoints for todo management."""

from fastapi import APIRouter, HTTPException, Depends, Request
from pydantic import BaseModel
from typing import Any, Dict, List

from store import TodoStore, NotFoundError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TodoStore:
    """Get the todo store attached to the running application."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Todo store not initialized")
    return store


# Pydantic models for request bodies
class TodoCreate(BaseModel):
    message: str


class TodoComplete(BaseModel):
    id: str


@router.get("/todo")
def list_todos(store: TodoStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """Retrieve the entire todo list."""
    return [todo.to_dict() for todo in store.list()]


@router.post("/todo", status_code=201)
def add_todo(todo: TodoCreate, store: TodoStore = Depends(get_store)):
    """Add a new todo to the list."""
    return {"id": store.add(todo.message)}


@router.put("/todo")
def complete_todo(todo: TodoComplete, store: TodoStore = Depends(get_store)):
    """Mark a todo as complete."""
    try:
        return store.complete(todo.id).to_dict()
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Todo not found")


@router.get("/todo/{todo_id}")
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    """Retrieve a single todo by ID."""
    try:
        return store.get(todo_id).to_dict()
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Todo not found")


@router.delete("/todo/{todo_id}")
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    """Delete a todo by ID."""
    try:
        store.delete(todo_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Todo not found")

    return {"message": "Todo deleted successfully"}
