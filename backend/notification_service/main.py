"""
DreamHome Notification Service - FastAPI Application

Records notifications between agents and clients in MongoDB.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notification_service.config import Settings, get_settings
from notification_service.core.exceptions import (
    ConnectError,
    NotificationServiceError,
    NotReadyError,
)
from notification_service.database.connections import ConnectionManager
from notification_service.database.notification_db import create_indexes
from notification_service.routers import health, notifications, sequences
from notification_service.schemas.responses import ErrorResponse

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Make the single MongoDB connection attempt
    - Create indexes

    The server starts serving even when the connection fails; every data
    endpoint then reports that the DB is not connected.

    Shutdown:
    - Close the MongoDB connection
    """
    connections: ConnectionManager = app.state.connections

    logger.info("DreamHome.Notification ==> Begin Execution")

    if not connections.attempted:
        try:
            await connections.initialize()
            await create_indexes(connections.database())
            logger.info("Application has successfully connected to the DB")
        except ConnectError as e:
            logger.warning(f"Application failed to connect with the backend DB: {e}")

    yield

    logger.info("Shutting down DreamHome.Notification...")
    await connections.close()
    logger.info("Database connection closed")


async def service_error_handler(request: Request, exc: NotificationServiceError) -> JSONResponse:
    """Render core errors in the RC/error envelope."""
    if isinstance(exc, NotReadyError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    else:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    body = ErrorResponse(error=exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=body.model_dump(by_alias=True, mode="json"),
    )


def create_app(
    connections: Optional[ConnectionManager] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        connections: ConnectionManager to use (a fresh one when omitted)
        settings: Settings to use (cached environment settings when omitted)
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="DreamHome Notification API",
        description="""
## DreamHome Notification Service

Records notifications sent to agents about clients.

### Endpoints
- **/notify**: record a notification (`?agentId=...&clientId=...`)
- **/search**: query records with a JSON filter (`?query={"agentId":"agent1001"}`)
- **/reset**: delete every notification
- **/dbConnected**: store connectivity and collections
- **/sequences**: id allocation and counter administration

Every response carries an `RC` field: 0 OK, 1 warning, 2 error.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.connections = connections or ConnectionManager(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotificationServiceError, service_error_handler)

    app.include_router(health.router)
    app.include_router(notifications.router)
    app.include_router(sequences.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "DreamHome Notification API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run() -> None:
    """Run the service with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "notification_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
