"""
Task API Server — HTTP Interface to the Task Store
===================================================
FastAPI application exposing the TaskStore over REST.

Launch:
    python -m taskapi.server        # Direct
    python -m taskapi.cli serve     # Via CLI

Endpoints:
    GET    /api/tasks               → All tasks (JSON array)
    POST   /api/tasks               → Create a task from a JSON body
    DELETE /api/tasks/{id}          → Delete a task (no-op if unknown)
    GET    /api/health              → Plain-text liveness message
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from taskapi import __version__
from taskapi.config import ServerConfig
from taskapi.models import TaskPayload
from taskapi.store import TaskStore

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Application is running!"


# ─────────────────────────────────────────────────────────────
#  Error Handling
# ─────────────────────────────────────────────────────────────

async def _bad_request(request: Request, exc: RequestValidationError):
    """Report malformed bodies and path parameters as 400 Bad Request."""
    errors = jsonable_encoder(exc.errors())
    logger.info("Rejected %s %s: %d validation error(s)",
                request.method, request.url.path, len(errors))
    return JSONResponse(
        status_code=400,
        content={"error": "Bad Request", "detail": errors},
    )


# ─────────────────────────────────────────────────────────────
#  App Factory
# ─────────────────────────────────────────────────────────────

def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Create the FastAPI application around an explicitly owned store.

    Args:
        store: The TaskStore to serve. A fresh, empty one when omitted.

    Returns:
        Configured FastAPI application. The store is app.state.store.
    """
    store = store if store is not None else TaskStore()

    app = FastAPI(title="Task API", version=__version__)
    app.state.store = store

    app.add_exception_handler(RequestValidationError, _bad_request)

    # ─── Routes — Tasks ───────────────────────────────────

    @app.get("/api/tasks")
    async def list_tasks():
        """Return every task in creation order."""
        return JSONResponse([t.to_dict() for t in store.list_tasks()])

    @app.post("/api/tasks")
    async def create_task(payload: TaskPayload):
        """Create a task. Any client-supplied id or completed flag is ignored."""
        task = store.create_task(payload.title, payload.description)
        return JSONResponse(task.to_dict())

    @app.delete("/api/tasks/{task_id}")
    async def delete_task(task_id: int):
        """Delete matching tasks. Unknown ids succeed silently."""
        store.delete_task(task_id)
        return Response(status_code=200)

    # ─── Routes — Health ──────────────────────────────────

    @app.get("/api/health")
    async def health():
        """Liveness check, independent of store contents."""
        return PlainTextResponse(HEALTH_MESSAGE)

    return app


# ─────────────────────────────────────────────────────────────
#  Startup
# ─────────────────────────────────────────────────────────────

def run_server(config: Optional[ServerConfig] = None):
    """Launch the Task API with uvicorn. Blocks until the server stops."""
    import uvicorn

    config = config or ServerConfig.from_env()
    app = create_app()

    logger.info("Task API %s listening on http://%s:%d",
                __version__, config.host, config.port)

    uvicorn.run(app, host=config.host, port=config.port,
                log_level=config.log_level)


if __name__ == "__main__":
    from taskapi.logging_setup import setup_logging

    _config = ServerConfig.from_env()
    setup_logging(_config.log_level)
    run_server(_config)
