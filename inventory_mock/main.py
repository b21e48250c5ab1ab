"""
Mock Inventory Provider
Serves random price and stock data so the catalogue service can be run
locally without the real inventory API
"""

from fastapi import FastAPI
from typing import Optional
import os
import uvicorn

from shared.core import ServiceHealth, setup_logging, RequestLoggingMiddleware, get_logger
from inventory_mock.api.routes import router as inventory_router
from inventory_mock.application.service import MockInventoryService

SERVICE_NAME = "inventory-mock"
SERVICE_VERSION = os.getenv("SERVICE_VERSION", "1.0.0")

logger = get_logger(__name__)

def create_app(service: Optional[MockInventoryService] = None) -> FastAPI:
    setup_logging(
        service_name=SERVICE_NAME,
        level=os.getenv("LOG_LEVEL", "INFO")
    )

    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json"
    )
    app.state.inventory_service = service or MockInventoryService()

    app.add_middleware(RequestLoggingMiddleware)

    health_service = ServiceHealth(SERVICE_NAME, SERVICE_VERSION)
    app.include_router(health_service.create_health_router())
    app.include_router(inventory_router)
    return app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "7000")))
