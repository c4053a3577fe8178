"""Service layer for the brand catalogue."""

import logging
from typing import List, Optional

from autoservice_api.app.core.store import Store
from autoservice_api.app.schemas.brand import BrandRead
from autoservice_api.app.services.validation import require_brand_name

logger = logging.getLogger(__name__)


class BrandService:
    def __init__(self, store: Store) -> None:
        self.store = store

    async def list_brands(self) -> List[BrandRead]:
        return self.store.list_brands()

    async def create_brand(self, name: Optional[str]) -> BrandRead:
        """Register a brand.  Raises ``AlreadyExistsError`` for a taken name."""
        name = require_brand_name("name", name)
        with self.store.transaction():
            brand = self.store.insert_brand(name)
        logger.info("Brand %s created", name)
        return brand
