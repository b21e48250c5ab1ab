"""
Catalogue Microservice
Local product records enriched with live price and stock from the inventory
provider
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict, List, Optional
import os
import uvicorn

from shared.core import ServiceHealth, setup_logging, RequestLoggingMiddleware, get_logger
from catalogue.api.routes import router as products_router, validation_problem
from catalogue.core_settings import Settings, get_settings
from catalogue.infrastructure.db import build_engine, build_session_factory, init_models
from catalogue.infrastructure.inventory_client import InventoryClient

# Service configuration
SERVICE_NAME = "catalogue-service"
SERVICE_DESCRIPTION = "Product catalogue with live inventory enrichment"

logger = get_logger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    inventory_client: Optional[InventoryClient] = None,
) -> FastAPI:
    """Compose the service: settings, store, inventory client, routes"""
    settings = settings or get_settings()

    os.environ.setdefault("ENVIRONMENT", settings.ENVIRONMENT)
    os.environ.setdefault("SERVICE_VERSION", settings.SERVICE_VERSION)
    setup_logging(service_name=SERVICE_NAME, level=settings.LOG_LEVEL)

    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle management"""
        logger.info(f"Starting {SERVICE_NAME} version {settings.SERVICE_VERSION}")

        try:
            init_models(engine)
            logger.info("Database models initialized")
        except Exception as e:
            logger.error(f"Failed to initialize database models: {e}")
            raise

        if app.state.inventory_client is None:
            app.state.inventory_client = InventoryClient(settings.INVENTORY_API_BASE_URL)
        logger.info(f"Inventory provider at {app.state.inventory_client.base_url}")

        logger.info(f"{SERVICE_NAME} started successfully")

        yield

        logger.info(f"Shutting down {SERVICE_NAME}")
        await app.state.inventory_client.aclose()
        engine.dispose()

    app = FastAPI(
        title=SERVICE_NAME,
        description=SERVICE_DESCRIPTION,
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.inventory_client = inventory_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID", "Location"],
    )

    # Added last so it runs first and every response carries the correlation id
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            loc = error.get("loc") or ("body",)
            errors.setdefault(str(loc[-1]), []).append(error.get("msg", "Invalid value"))
        return validation_problem(errors)

    health_service = ServiceHealth(
        SERVICE_NAME,
        settings.SERVICE_VERSION,
        engine=engine,
        required_tables=["products"],
    )
    app.include_router(health_service.create_health_router())

    app.include_router(products_router)

    @app.get("/")
    async def root():
        return {
            "service": SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "status": "running",
            "docs": "/api/docs"
        }

    @app.get("/info")
    async def info():
        """Service information endpoint"""
        return {
            "service": SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "description": SERVICE_DESCRIPTION,
            "environment": settings.ENVIRONMENT,
            "inventory_api": settings.INVENTORY_API_BASE_URL,
            "endpoints": {
                "products": "/api/products",
                "health": "/health",
                "ready": "/health/ready",
                "live": "/health/live",
                "metrics": "/metrics",
                "docs": "/api/docs"
            }
        }

    return app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
