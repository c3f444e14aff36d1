"""
Task Store — In-Memory Task Collection
=======================================
Owns every task the service knows about and the counter that numbers them.

Operations:
    list_tasks()                    — Snapshot of all tasks, insertion order
    create_task(title, description) — Append a new task with the next id
    delete_task(task_id)            — Remove every task carrying that id

A single lock guards both the counter and the task sequence, so each
operation is atomic with respect to the others. Nothing is persisted:
the store lives exactly as long as the application that owns it.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from taskapi.models import Task, MAX_TASK_ID

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered in-memory collection of tasks with monotonic id assignment."""

    def __init__(self):
        self._tasks: list[Task] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _next_id(self) -> int:
        # Caller holds self._lock.
        if self._last_id >= MAX_TASK_ID:
            raise OverflowError("task identifier space exhausted")
        self._last_id += 1
        return self._last_id

    def list_tasks(self) -> list[Task]:
        """All tasks in creation order (independent copies)."""
        with self._lock:
            return [task.copy() for task in self._tasks]

    def create_task(self, title: Optional[str] = None,
                    description: Optional[str] = None) -> Task:
        """Create and store a task. Returns a copy carrying the assigned id."""
        with self._lock:
            task = Task(
                id=self._next_id(),
                title=title,
                description=description,
                completed=False,
            )
            self._tasks.append(task)
        logger.debug("Created task %d (%r)", task.id, title)
        return task.copy()

    def delete_task(self, task_id: int) -> int:
        """Remove every task whose id equals task_id.

        Unknown ids are a silent no-op. Returns how many tasks were removed.
        """
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.id != task_id]
            removed = before - len(self._tasks)
        logger.debug("Delete task %d: %d removed", task_id, removed)
        return removed
