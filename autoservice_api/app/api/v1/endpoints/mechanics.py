"""
Mechanic endpoints for API v1.

Besides CRUD on mechanics, this module exposes each mechanic's task
collection.  Creating a task here runs the admission check: the brand
must be one the mechanic services and the mechanic's total complexity
must stay within ``max_complexity``.  Editing a task here does not
re‑run that check.
"""

from typing import List

from fastapi import APIRouter, status

from autoservice_api.app.core.errors import AssignmentError, to_http_exception
from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.mechanic import MechanicCreate, MechanicRead, MechanicUpdate
from autoservice_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate
from autoservice_api.app.services.assignment_service import AssignmentService
from autoservice_api.app.services.mechanic_service import MechanicService

router = APIRouter()


@router.get("", response_model=List[MechanicRead])
async def list_mechanics() -> List[MechanicRead]:
    try:
        with Store.open() as store:
            return await MechanicService(store).list_mechanics()
    except AssignmentError as e:
        raise to_http_exception(e)


@router.post("", response_model=MechanicRead, status_code=status.HTTP_201_CREATED)
async def create_mechanic(mechanic_in: MechanicCreate) -> MechanicRead:
    """Register a mechanic.

    ``name`` and a non‑empty ``brands`` list are required.
    ``maxComplexity`` defaults to 10.
    """
    try:
        with Store.open() as store:
            return await MechanicService(store).create_mechanic(mechanic_in)
    except AssignmentError as e:
        raise to_http_exception(e)


@router.get("/{mechanic_id}", response_model=MechanicRead)
async def get_mechanic(mechanic_id: str) -> MechanicRead:
    try:
        with Store.open() as store:
            return await MechanicService(store).get_mechanic(mechanic_id)
    except AssignmentError as e:
        raise to_http_exception(e)


@router.put("/{mechanic_id}", response_model=MechanicRead)
async def update_mechanic(mechanic_id: str, mechanic_in: MechanicUpdate) -> MechanicRead:
    """Replace a mechanic's name, brands and capacity.

    Tasks already assigned to the mechanic are kept even if they no
    longer fit the new brands or capacity.
    """
    try:
        with Store.open() as store:
            return await MechanicService(store).update_mechanic(mechanic_id, mechanic_in)
    except AssignmentError as e:
        raise to_http_exception(e)


@router.delete("/{mechanic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_mechanic(mechanic_id: str) -> None:
    """Delete a mechanic and all of its tasks."""
    try:
        with Store.open() as store:
            await AssignmentService(store).delete_mechanic(mechanic_id)
    except AssignmentError as e:
        raise to_http_exception(e)


@router.get("/{mechanic_id}/tasks", response_model=List[TaskRead])
async def list_mechanic_tasks(mechanic_id: str) -> List[TaskRead]:
    try:
        with Store.open() as store:
            return await AssignmentService(store).list_tasks(mechanic_id)
    except AssignmentError as e:
        raise to_http_exception(e)


@router.post(
    "/{mechanic_id}/tasks",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(mechanic_id: str, task_in: TaskCreate) -> TaskRead:
    """Assign a new task to the mechanic.

    Returns HTTP 400 if the mechanic does not service the brand or the
    task would push the mechanic over its capacity, and HTTP 404 if the
    mechanic does not exist.
    """
    try:
        with Store.open() as store:
            return await AssignmentService(store).create_task(
                mechanic_id, task_in.brand, task_in.name, task_in.complexity
            )
    except AssignmentError as e:
        raise to_http_exception(e)


@router.put("/{mechanic_id}/tasks/{task_id}", response_model=TaskRead)
async def update_task(mechanic_id: str, task_id: str, task_in: TaskUpdate) -> TaskRead:
    """Overwrite a task's brand, name and complexity.

    Returns HTTP 404 if the task does not exist or belongs to another
    mechanic.
    """
    try:
        with Store.open() as store:
            return await AssignmentService(store).update_task(
                task_id, mechanic_id, task_in.brand, task_in.name, task_in.complexity
            )
    except AssignmentError as e:
        raise to_http_exception(e)


@router.delete("/{mechanic_id}/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(mechanic_id: str, task_id: str) -> None:
    try:
        with Store.open() as store:
            await AssignmentService(store).delete_task(task_id, mechanic_id)
    except AssignmentError as e:
        raise to_http_exception(e)
