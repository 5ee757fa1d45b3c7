"""
Notifications router: record, search and reset notifications.
"""
import json
import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from notification_service.core.exceptions import (
    InvalidFilterError,
    MissingParameterError,
    NotReadyError,
)
from notification_service.dependencies.store import get_notification_repository
from notification_service.schemas.responses import NotifyResponse, ResetResponse
from notification_service.services.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notifications"])


@router.get(
    "/notify",
    response_model=NotifyResponse,
    summary="Notify an agent about a client",
)
async def notify(
    repository: Annotated[NotificationRepository, Depends(get_notification_repository)],
    agent_id: Optional[str] = Query(None, alias="agentId", description="Agent to notify"),
    client_id: Optional[str] = Query(None, alias="clientId", description="Client concerned"),
):
    """
    Record a notification for an agent.

    - **agentId**: agent identifier, e.g. `agent1001`
    - **clientId**: client identifier, e.g. `client1003`

    The record id comes from the `notification` sequence.
    """
    if not repository.connections.is_ready:
        raise NotReadyError()
    if not agent_id or not client_id:
        raise MissingParameterError(
            "Missing parms, valid syntax: .../notify?agentId=1001&clientId=1001"
        )

    record = await repository.create(agent_id, client_id)
    return NotifyResponse(
        success="Agent has been notified, client should get a response shortly.",
        notification_id=record.notification_id,
    )


@router.get(
    "/search",
    summary="Search notifications",
)
async def search(
    repository: Annotated[NotificationRepository, Depends(get_notification_repository)],
    query: Optional[str] = Query(
        None,
        description='JSON filter, e.g. {"agentId":"agent1001"}; omit for all records',
    ),
) -> list[dict]:
    """
    Search notification records with a MongoDB filter.

    Examples:
    - `/search` returns every record
    - `/search?query={"clientId":"client1003"}`
    - `/search?query={"agentId":"agent1001"}`
    """
    if not repository.connections.is_ready:
        raise NotReadyError()

    db_filter: dict = {}
    if query:
        logger.debug(f"Search query: {query}")
        try:
            db_filter = json.loads(query)
        except json.JSONDecodeError as e:
            raise InvalidFilterError(f"Query is not valid JSON: {e.msg}") from e
        if not isinstance(db_filter, dict):
            raise InvalidFilterError(
                f"Query filter must be a JSON object, got {type(db_filter).__name__}"
            )

    records = await repository.find_all(db_filter)
    return [record.to_document() for record in records]


@router.get(
    "/reset",
    response_model=ResetResponse,
    summary="Delete all notifications",
)
async def reset(
    repository: Annotated[NotificationRepository, Depends(get_notification_repository)],
):
    """
    Delete every notification record.

    **Warning**: This action cannot be undone.
    """
    deleted = await repository.delete_all()
    return ResetResponse(
        success="Notification collection is now empty!",
        deleted=deleted,
    )
