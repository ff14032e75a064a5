"""FastAPI HTTP server setup."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging
import time

from config import settings
from store import TodoStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Todo server started")

    yield

    # Todos are not persisted, whatever is left goes away with the process
    logger.info(f"Shutting down todo server, discarding {app.state.store.count()} todos")


def create_app(store: Optional[TodoStore] = None, static_dir: Optional[str] = None) -> FastAPI:
    """Build the application around a single todo store.

    The store is created here, before any request can reach a handler, and
    handed to the endpoints through ``app.state``.
    """
    app = FastAPI(
        title="Todo",
        description="In-memory todo list with a single-page UI",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.store = store if store is not None else TodoStore()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    from .endpoints import router
    app.include_router(router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "todos": app.state.store.count()
        }

    # Mounted after the API routes so those always match first
    static_path = Path(static_dir if static_dir is not None else settings.static_dir)
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(static_path), html=True), name="ui")
        logger.info(f"Serving UI from {static_path.resolve()}")
    else:
        logger.warning(f"Static directory {static_path} not found, UI disabled")

    return app
