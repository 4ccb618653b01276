"""
Destination Service - Main Application
======================================

Small CRUD backend for travel destinations. Creation requests are enriched
with capital, population and region from a country-information service.

Layers:
- Interfaces: FastAPI controllers
- Application: Service and DTOs
- Domain: Entities and value objects
- Infrastructure: Database, country lookup client
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from destination_service.config import settings
from destination_service.destinations.infrastructure import RestCountriesClient
from destination_service.destinations.interfaces import destinations_router
from destination_service.infrastructure.database import (
    check_connection,
    close_database,
    create_tables,
    init_database,
)
from destination_service.shared.api import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    global_exception_handler,
)
from destination_service.shared.infrastructure.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Initialize database engine and pool
    3. Create the destinations table if absent
    4. Create the country lookup client

    SHUTDOWN:
    1. Close the lookup client
    2. Close database connections
    """
    # === STARTUP ===
    setup_logging(level=settings.log_level, environment=settings.environment)
    logger.info("Starting Destination Service", extra={
        "version": settings.app_version,
        "environment": settings.environment,
        "port": settings.port,
        "db_host": settings.db_host,
        "db_name": settings.db_name,
        "countries_api_base_url": settings.countries_api_base_url
    })

    init_database()

    # A missing database does not stop startup; queries fail until it is back
    try:
        await create_tables()
        logger.info("Destinations table is ready")
    except Exception as e:
        logger.error(f"Error creating destinations table: {e}")

    lookup_client = RestCountriesClient()
    app.state.lookup_client = lookup_client

    logger.info(f"Server running on port {settings.port}")

    yield

    # === SHUTDOWN ===
    logger.info("Shutting down Destination Service")
    await lookup_client.close()
    await close_database()
    logger.info("Destination Service shutdown complete")


app = FastAPI(
    title="Destination Service API",
    description="List, create and delete travel destinations enriched with country facts.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# === Request logging (outermost runs first: correlation ID, then logging) ===
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(destinations_router)


@app.get("/", tags=["Root"], response_class=PlainTextResponse)
async def root():
    """Plain confirmation that the server is up; touches no dependency."""
    return "Server is working"


@app.get("/health", tags=["Health"])
async def health_check():
    """Service status including database connectivity."""
    database_ok = await check_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.app_version,
        "environment": settings.environment,
        "checks": {
            "database": "connected" if database_ok else "unavailable",
        }
    }


# === Development Entry Point ===

def run() -> None:
    import uvicorn

    uvicorn.run(
        "destination_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
