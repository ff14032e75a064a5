"""HTTP API for the todo service."""

from .http_server import create_app
from .endpoints import router, get_store

__all__ = ["create_app", "router", "get_store"]
