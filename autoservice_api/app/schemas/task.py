"""
Pydantic models for maintenance tasks.

A task belongs to exactly one mechanic at a time.  ``complexity`` is
counted against the owner's capacity when the task is created or
reassigned.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    """Body of ``POST /mechanics/{id}/tasks``."""

    brand: Optional[str] = Field(None, example="Audi")
    name: Optional[str] = Field(None, example="Oil change")
    complexity: Optional[int] = Field(None, example=3)


class TaskUpdate(TaskCreate):
    """Body of ``PUT /mechanics/{id}/tasks/{task_id}``.

    Overwrites brand, name and complexity without re‑checking the
    owner's brands or capacity.
    """


class TaskReassign(BaseModel):
    """Body of ``PUT /tasks/{task_id}/reassign``."""

    new_mechanic_id: Optional[str] = Field(None, alias="newMechanicId")

    model_config = {
        "populate_by_name": True,
    }


class TaskRead(BaseModel):
    id: str
    mechanic_id: str
    brand: str
    name: str
    complexity: int

    model_config = {
        "from_attributes": True,
    }
