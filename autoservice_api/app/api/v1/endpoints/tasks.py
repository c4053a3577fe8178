"""
Task endpoints addressed by task id alone.

Reassignment moves a task to another mechanic.  The task's existing
brand and complexity must fit the new mechanic, exactly as when the
task was created; otherwise the task stays where it is.
"""

from fastapi import APIRouter

from autoservice_api.app.core.errors import AssignmentError, to_http_exception
from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.task import TaskRead, TaskReassign
from autoservice_api.app.services.assignment_service import AssignmentService

router = APIRouter()


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: str) -> TaskRead:
    try:
        with Store.open() as store:
            return await AssignmentService(store).get_task(task_id)
    except AssignmentError as e:
        raise to_http_exception(e)


@router.put("/{task_id}/reassign", response_model=TaskRead)
async def reassign_task(task_id: str, body: TaskReassign) -> TaskRead:
    """Move a task to the mechanic given by ``newMechanicId``.

    Returns HTTP 404 if the task or the mechanic does not exist and
    HTTP 400 if the mechanic cannot take the task.
    """
    try:
        with Store.open() as store:
            return await AssignmentService(store).reassign_task(task_id, body.new_mechanic_id)
    except AssignmentError as e:
        raise to_http_exception(e)
