"""
Task assignment workflows.

``AssignmentService`` is the only place tasks are created, moved
between mechanics, edited or deleted.  Creation and reassignment go
through ``can_assign``; each of them reads the mechanic's current
complexity sum and writes the result inside a single
``Store.transaction()``, so concurrent requests cannot both admit
against the same stale sum.

Direct edits (``update_task``) overwrite brand, name and complexity
without re‑running the admission check, and editing a mechanic does
not re‑check the tasks it already owns.  A task can therefore end up
with a brand its owner no longer services, or push the owner over a
lowered capacity.  That behaviour is relied on by existing clients
and is kept as is.

Every method raises an ``AssignmentError`` subclass on failure and has
no effect on the database when it does.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from autoservice_api.app.core.errors import NotFoundError
from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.task import TaskRead
from autoservice_api.app.services.capacity_validator import can_assign
from autoservice_api.app.services.validation import (
    require_non_negative,
    require_text,
)

logger = logging.getLogger(__name__)


class AssignmentService:
    """Create, reassign, edit and delete tasks against a ``Store``."""

    def __init__(self, store: Store) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def get_task(self, task_id: str) -> TaskRead:
        task = self.store.find_task(task_id)
        if task is None:
            raise NotFoundError("Task")
        return task

    async def list_tasks(self, mechanic_id: str) -> List[TaskRead]:
        """Tasks owned by the mechanic; empty for an unknown id."""
        return self.store.list_tasks_by_mechanic(mechanic_id)

    # ------------------------------------------------------------------
    # Validated workflows
    # ------------------------------------------------------------------
    async def create_task(
        self,
        mechanic_id: str,
        brand: Optional[str],
        name: Optional[str],
        complexity: Optional[int],
    ) -> TaskRead:
        """Assign a new task to a mechanic.

        Raises
        ------
        ValidationFailedError
            ``brand``, ``name`` or ``complexity`` is missing, or
            ``complexity`` is negative.
        NotFoundError
            The mechanic does not exist.
        BrandMismatchError, CapacityExceededError
            The mechanic cannot take the task.
        """
        brand = require_text("brand", brand)
        name = require_text("name", name)
        complexity = require_non_negative("complexity", complexity)

        with self.store.transaction():
            mechanic = self.store.find_mechanic(mechanic_id)
            current_sum = self.store.sum_task_complexity(mechanic_id) if mechanic else 0
            admission = can_assign(mechanic, brand, complexity, current_sum)
            if not admission.admitted:
                logger.warning(
                    "Rejected task %r for mechanic %s: %s",
                    name,
                    mechanic_id,
                    admission.rejection,
                )
                admission.raise_for_rejection()
            task = self.store.insert_task(
                TaskRead(
                    id=str(uuid.uuid4()),
                    mechanic_id=mechanic_id,
                    brand=brand,
                    name=name,
                    complexity=complexity,
                )
            )
        logger.info(
            "Task %s created for mechanic %s (complexity %s, load %s/%s)",
            task.id,
            mechanic_id,
            complexity,
            current_sum + complexity,
            mechanic.max_complexity,
        )
        return task

    async def reassign_task(self, task_id: str, new_mechanic_id: Optional[str]) -> TaskRead:
        """Move a task to another mechanic.

        The task's own brand and complexity are checked against the new
        mechanic.  Only ``mechanic_id`` changes, and only when the new
        mechanic admits the task.

        Raises
        ------
        ValidationFailedError
            ``new_mechanic_id`` is missing.
        NotFoundError
            The task or the new mechanic does not exist.
        BrandMismatchError, CapacityExceededError
            The new mechanic cannot take the task.
        """
        new_mechanic_id = require_text("newMechanicId", new_mechanic_id)

        with self.store.transaction():
            task = self.store.find_task(task_id)
            if task is None:
                raise NotFoundError("Task")
            mechanic = self.store.find_mechanic(new_mechanic_id)
            # The task still belongs to its old owner at this point; leave it
            # out so moving a task onto its current owner is not double counted.
            current_sum = (
                self.store.sum_task_complexity(new_mechanic_id, exclude_task_id=task_id)
                if mechanic
                else 0
            )
            admission = can_assign(mechanic, task.brand, task.complexity, current_sum)
            if not admission.admitted:
                logger.warning(
                    "Rejected reassignment of task %s to mechanic %s: %s",
                    task_id,
                    new_mechanic_id,
                    admission.rejection,
                )
                admission.raise_for_rejection()
            if self.store.update_task_owner(task_id, new_mechanic_id) == 0:
                raise NotFoundError("Task")
        logger.info(
            "Task %s reassigned from mechanic %s to %s",
            task_id,
            task.mechanic_id,
            new_mechanic_id,
        )
        return task.model_copy(update={"mechanic_id": new_mechanic_id})

    # ------------------------------------------------------------------
    # Unchecked edits and deletes
    # ------------------------------------------------------------------
    async def update_task(
        self,
        task_id: str,
        mechanic_id: str,
        brand: Optional[str],
        name: Optional[str],
        complexity: Optional[int],
    ) -> TaskRead:
        """Overwrite a task's brand, name and complexity.

        The task must be owned by ``mechanic_id``.  The owner's brands
        and capacity are not re‑checked.
        """
        brand = require_text("brand", brand)
        name = require_text("name", name)
        complexity = require_non_negative("complexity", complexity)

        with self.store.transaction():
            changed = self.store.update_task_fields(task_id, mechanic_id, brand, name, complexity)
            if changed == 0:
                raise NotFoundError("Task", "Task not found or belongs to another mechanic")
        logger.info("Task %s of mechanic %s updated", task_id, mechanic_id)
        return TaskRead(
            id=task_id,
            mechanic_id=mechanic_id,
            brand=brand,
            name=name,
            complexity=complexity,
        )

    async def delete_task(self, task_id: str, mechanic_id: str) -> None:
        with self.store.transaction():
            if self.store.delete_task(task_id, mechanic_id) == 0:
                raise NotFoundError("Task", "Task not found or belongs to another mechanic")
        logger.info("Task %s of mechanic %s deleted", task_id, mechanic_id)

    async def delete_mechanic(self, mechanic_id: str) -> None:
        """Delete a mechanic together with all of its tasks.

        Tasks go first so no task ever references a missing mechanic.
        For an unknown id the task delete matches nothing and
        ``NotFoundError`` is raised.
        """
        with self.store.transaction():
            self.store.delete_tasks_by_mechanic(mechanic_id)
            if self.store.delete_mechanic(mechanic_id) == 0:
                raise NotFoundError("Mechanic")
        logger.info("Mechanic %s and all of its tasks deleted", mechanic_id)
