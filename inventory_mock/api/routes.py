from fastapi import APIRouter, Depends, Request
from shared.core import get_logger, CORRELATION_ID_HEADER
from inventory_mock.application.service import MockInventoryService
from inventory_mock.application.schemas import InventoryRead

logger = get_logger(__name__)

router = APIRouter(prefix="/api/inventory", tags=["inventory"])

def get_service(request: Request) -> MockInventoryService:
    return request.app.state.inventory_service

@router.get("/{product_id}", response_model=InventoryRead)
def get_inventory(product_id: int, request: Request, service: MockInventoryService = Depends(get_service)):
    logger.info(
        f"Mock inventory request for product {product_id}",
        extra={'extra_fields': {
            'product_id': product_id,
            'received_correlation_id': request.headers.get(CORRELATION_ID_HEADER),
        }}
    )
    return service.get(product_id)
