"""
Brand endpoints for API v1.

Brands form the catalogue clients pick from when registering a
mechanic.  They can be listed and added, never edited or removed.
"""

from typing import List

from fastapi import APIRouter, status

from autoservice_api.app.core.errors import AssignmentError, to_http_exception
from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.brand import BrandCreate, BrandRead
from autoservice_api.app.services.brand_service import BrandService

router = APIRouter()


@router.get("", response_model=List[BrandRead])
async def list_brands() -> List[BrandRead]:
    try:
        with Store.open() as store:
            return await BrandService(store).list_brands()
    except AssignmentError as e:
        raise to_http_exception(e)


@router.post("", response_model=BrandRead, status_code=status.HTTP_201_CREATED)
async def create_brand(brand_in: BrandCreate) -> BrandRead:
    """Register a new brand.

    Returns HTTP 409 if a brand with the same name already exists.
    """
    try:
        with Store.open() as store:
            return await BrandService(store).create_brand(brand_in.name)
    except AssignmentError as e:
        raise to_http_exception(e)
