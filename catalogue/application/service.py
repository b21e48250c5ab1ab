from typing import List, Optional
from starlette.concurrency import run_in_threadpool

from shared.core import get_logger
from catalogue.domain.models import Product
from catalogue.infrastructure.repository import ProductRepository
from catalogue.infrastructure.inventory_client import InventoryClient
from .schemas import DataStatus, InventorySnapshot, ProductResponse
from .validation import ProductValidationError, validate_product

logger = get_logger(__name__)

def _to_entry(
    product: Product,
    snapshot: Optional[InventorySnapshot],
    fallback_status: DataStatus,
) -> ProductResponse:
    """Merge a stored product with live inventory data, all or nothing"""
    if snapshot is None:
        return ProductResponse(
            id=product.id,
            name=product.name,
            description=product.description,
            data_status=fallback_status,
        )
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=float(snapshot.price),
        stock=snapshot.stock,
        data_status=DataStatus.LIVE,
    )

class CatalogueService:
    """
    Catalogue use cases: local product records enriched with live price and
    stock from the inventory provider. A failing provider degrades the
    data_status of an entry; it never fails the request.
    """

    def __init__(self, repo: ProductRepository, inventory_client: InventoryClient):
        self.repo = repo
        self.inventory_client = inventory_client

    async def create(self, name: Optional[str], description: Optional[str], correlation_id: str) -> ProductResponse:
        errors = validate_product(name, description)
        if errors:
            raise ProductValidationError(errors)

        product = await run_in_threadpool(self.repo.add, Product(name=name, description=description))

        logger.info(
            f"Created product {product.id}",
            extra={'correlation_id': correlation_id, 'extra_fields': {'product_id': product.id}}
        )

        # New products have no inventory record yet, so the provider is not asked
        return _to_entry(product, None, DataStatus.LOCAL_ONLY)

    async def get(self, product_id: int, correlation_id: str) -> Optional[ProductResponse]:
        product = await run_in_threadpool(self.repo.get, product_id)
        if product is None:
            return None

        snapshot = await self.inventory_client.fetch(product_id, correlation_id)
        if snapshot is None:
            logger.warning(
                f"Unable to fetch inventory data for product {product_id}, returning local data only",
                extra={'correlation_id': correlation_id, 'extra_fields': {'product_id': product_id}}
            )

        return _to_entry(product, snapshot, DataStatus.UNAVAILABLE)

    async def list(self, correlation_id: str) -> List[ProductResponse]:
        products = await run_in_threadpool(self.repo.list)

        # One lookup at a time, in listing order
        entries = []
        for product in products:
            snapshot = await self.inventory_client.fetch(product.id, correlation_id)
            entries.append(_to_entry(product, snapshot, DataStatus.LIST_UNAVAILABLE))
        return entries
