"""
Pydantic schemas for mechanics.

A mechanic services an ordered list of car brands and accepts tasks up
to a total complexity of ``max_complexity`` (its capacity).  Request
models accept the camelCase ``maxComplexity`` used by existing clients
as well as the snake_case field name.

Required fields are optional at the schema level; the services reject
missing values with a ``400`` whose message names the field.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class MechanicCreate(BaseModel):
    """Schema for registering a mechanic."""

    name: Optional[str] = Field(None, example="Ivan Petrov")
    brands: Optional[List[str]] = Field(None, example=["Audi", "BMW"])
    max_complexity: Optional[int] = Field(
        None,
        alias="maxComplexity",
        example=10,
        description="Maximum total complexity of assigned tasks; defaults to 10",
    )

    model_config = {
        "populate_by_name": True,
    }


class MechanicUpdate(MechanicCreate):
    """Schema for replacing a mechanic's name, brands and capacity.

    Same shape as ``MechanicCreate``; an omitted ``max_complexity``
    resets the capacity to the default.
    """


class MechanicRead(BaseModel):
    """A mechanic as stored and returned by the API."""

    id: str
    name: str
    brands: List[str]
    max_complexity: int

    model_config = {
        "from_attributes": True,
    }
