from typing import Any, Dict, List
from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse

from catalogue.api.dependencies import get_catalogue_service, get_correlation_id
from catalogue.application.service import CatalogueService
from catalogue.application.schemas import ProductCreate, ProductResponse
from catalogue.application.validation import ProductValidationError

router = APIRouter(prefix="/api/products", tags=["products"])

# Product ids are 32-bit integers
MAX_PRODUCT_ID = 2**31 - 1

def validation_problem(errors: Dict[str, List[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": "One or more validation errors occurred.",
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )

@router.get("", response_model=List[ProductResponse])
async def list_products(
    service: CatalogueService = Depends(get_catalogue_service),
    correlation_id: str = Depends(get_correlation_id),
):
    return await service.list(correlation_id)

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int = Path(ge=-MAX_PRODUCT_ID - 1, le=MAX_PRODUCT_ID),
    service: CatalogueService = Depends(get_catalogue_service),
    correlation_id: str = Depends(get_correlation_id),
) -> Any:
    entry = await service.get(product_id, correlation_id)
    if entry is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"Product with ID {product_id} not found"},
        )
    return entry

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    response: Response,
    service: CatalogueService = Depends(get_catalogue_service),
    correlation_id: str = Depends(get_correlation_id),
) -> Any:
    try:
        entry = await service.create(payload.name, payload.description, correlation_id)
    except ProductValidationError as e:
        return validation_problem(e.as_dict())
    response.headers["Location"] = f"{router.prefix}/{entry.id}"
    return entry
