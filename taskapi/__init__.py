"""
Task API — Minimal Task-Tracking HTTP Service
==============================================
Create, list and delete task records over REST, backed by an
in-memory store.

Architecture:
    TaskStore  — In-memory ordered collection + identifier counter
    Server     — FastAPI app factory (routes, error mapping)
    CLI        — `taskapi serve` / `taskapi health`
"""

__version__ = "0.1.0"

from taskapi.models import Task, TaskPayload
from taskapi.store import TaskStore

__all__ = [
    "Task", "TaskPayload", "TaskStore",
]
