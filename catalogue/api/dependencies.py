from typing import Iterator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from shared.core import resolve_correlation_id, CORRELATION_ID_HEADER
from catalogue.application.service import CatalogueService
from catalogue.infrastructure.db import session_scope
from catalogue.infrastructure.repository import ProductRepository

def get_db(request: Request) -> Iterator[Session]:
    yield from session_scope(request.app.state.session_factory)

def get_correlation_id(request: Request) -> str:
    """The id resolved by RequestLoggingMiddleware for this request"""
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id is None:
        correlation_id = resolve_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        request.state.correlation_id = correlation_id
    return correlation_id

def get_catalogue_service(request: Request, db: Session = Depends(get_db)) -> CatalogueService:
    return CatalogueService(ProductRepository(db), request.app.state.inventory_client)
