"""Pydantic schemas for car brands."""

from typing import Optional

from pydantic import BaseModel, Field


class BrandCreate(BaseModel):
    name: Optional[str] = Field(None, example="Volvo")


class BrandRead(BaseModel):
    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
