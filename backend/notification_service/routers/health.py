"""
Health check router for liveness, readiness and store diagnostics.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from notification_service.database.connections import ConnectionManager
from notification_service.dependencies.store import get_connection_manager
from notification_service.schemas.responses import DbConnectedResponse, StatusResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
)
async def readiness_check(
    connections: Annotated[ConnectionManager, Depends(get_connection_manager)],
):
    """
    Readiness check reporting the outcome of the startup connection.

    The store is not pinged again: readiness is decided once at startup.
    """
    checks = {
        "api": "healthy",
        "mongodb": "healthy" if connections.is_ready else "not connected",
    }

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }


@router.get(
    "/dbConnected",
    response_model=DbConnectedResponse,
    summary="Store connectivity and collections",
)
async def db_connected(
    connections: Annotated[ConnectionManager, Depends(get_connection_manager)],
):
    """
    Report that the store is connected and list its collections.

    Responds 500 when the startup connection failed.
    """
    collections = await connections.list_collections()
    return DbConnectedResponse(
        success="Successfully connected to the DB.",
        collections=collections,
    )


@router.get(
    "/echo",
    response_model=StatusResponse,
    summary="Echo",
)
async def echo():
    """Sanity check that does not touch the store."""
    return StatusResponse(success="Echo from DreamHome.Notification service!")
