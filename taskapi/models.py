"""
Task Models — Records and Request Schemas
==========================================
Defines the data that flows between the HTTP layer and the store.

Components:
    Task         — A stored task record (identifier, title, description, flag)
    TaskPayload  — Body of a create request, bound explicitly by pydantic

The store only ever hands out copies of its Task records, so a caller
mutating a returned Task never changes stored state.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from typing import Optional

from pydantic import BaseModel, field_validator


# Largest identifier a task can carry (unsigned 64-bit).
MAX_TASK_ID = 2 ** 64 - 1


# ─────────────────────────────────────────────────────────────
#  Task Record
# ─────────────────────────────────────────────────────────────

@dataclass
class Task:
    """A single task as held by the TaskStore."""

    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False

    def to_dict(self) -> dict:
        """Serialize to the JSON wire shape (id, title, description, completed)."""
        return asdict(self)

    def copy(self) -> Task:
        return replace(self)


# ─────────────────────────────────────────────────────────────
#  Request Schema
# ─────────────────────────────────────────────────────────────

class TaskPayload(BaseModel):
    """JSON body accepted by POST /api/tasks.

    `id` and `completed` are tolerated so clients can post back a task
    they previously received, but the store assigns both itself.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    id: Optional[int] = None
    completed: Optional[bool] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def scalar_to_text(cls, value):
        """Accept any JSON scalar as text; objects and arrays stay invalid."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value
