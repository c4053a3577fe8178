"""
Service layer for mechanic management.

Registering and editing a mechanic only checks its own fields: a name,
at least one serviced brand and a non‑negative capacity.  Editing does
not re‑check the tasks the mechanic already owns.  Deleting a mechanic
cascades to its tasks and lives in ``AssignmentService``.
"""

import logging
import uuid
from typing import List, Optional

from autoservice_api.app.core.config import settings
from autoservice_api.app.core.errors import NotFoundError
from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.mechanic import MechanicCreate, MechanicRead, MechanicUpdate
from autoservice_api.app.services.validation import (
    require_brand_list,
    require_non_negative,
    require_text,
)

logger = logging.getLogger(__name__)


def _capacity(value: Optional[int]) -> int:
    if value is None:
        return settings.default_capacity
    return require_non_negative("maxComplexity", value)


class MechanicService:
    """Service for registering, listing and editing mechanics."""

    def __init__(self, store: Store) -> None:
        self.store = store

    async def list_mechanics(self) -> List[MechanicRead]:
        return self.store.list_mechanics()

    async def get_mechanic(self, mechanic_id: str) -> MechanicRead:
        mechanic = self.store.find_mechanic(mechanic_id)
        if mechanic is None:
            raise NotFoundError("Mechanic")
        return mechanic

    async def create_mechanic(self, data: MechanicCreate) -> MechanicRead:
        name = require_text("name", data.name)
        brands = require_brand_list("brands", data.brands)
        mechanic = MechanicRead(
            id=str(uuid.uuid4()),
            name=name,
            brands=brands,
            max_complexity=_capacity(data.max_complexity),
        )
        with self.store.transaction():
            self.store.insert_mechanic(mechanic)
        logger.info("Mechanic %s (%s) created", mechanic.id, mechanic.name)
        return mechanic

    async def update_mechanic(self, mechanic_id: str, data: MechanicUpdate) -> MechanicRead:
        """Replace the mechanic's name, brands and capacity.

        An omitted capacity falls back to the default rather than
        keeping the stored value.
        """
        name = require_text("name", data.name)
        brands = require_brand_list("brands", data.brands)
        max_complexity = _capacity(data.max_complexity)
        with self.store.transaction():
            if self.store.update_mechanic(mechanic_id, name, brands, max_complexity) == 0:
                raise NotFoundError("Mechanic")
        logger.info("Mechanic %s updated", mechanic_id)
        return MechanicRead(id=mechanic_id, name=name, brands=brands, max_complexity=max_complexity)
