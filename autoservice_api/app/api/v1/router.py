"""
Top‑level router for version 1 of the API.

Aggregates the brand, mechanic and task routers.  Mechanic routes also
carry the per‑mechanic task collection (``/mechanics/{id}/tasks``);
the tasks router holds the routes addressed by task id alone.
"""

from fastapi import APIRouter

from .endpoints import brands, mechanics, tasks

router = APIRouter()

router.include_router(brands.router, prefix="/brands", tags=["brands"])
router.include_router(mechanics.router, prefix="/mechanics", tags=["mechanics"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
