"""
Sequences router for id allocation and counter administration.
"""
from typing import Annotated

from fastapi import APIRouter, Depends

from notification_service.dependencies.store import get_sequence_allocator
from notification_service.schemas.responses import (
    ReturnCode,
    SequenceResponse,
    StatusResponse,
)
from notification_service.services.sequence_service import SequenceAllocator

router = APIRouter(prefix="/sequences", tags=["Sequences"])


@router.get(
    "/{sequence_name}/next",
    response_model=SequenceResponse,
    summary="Allocate the next id",
)
async def next_id(
    sequence_name: str,
    allocator: Annotated[SequenceAllocator, Depends(get_sequence_allocator)],
):
    """
    Allocate the next id from a named sequence (e.g. `agent`, `client`).
    """
    pk_id = await allocator.next_id(sequence_name)
    return SequenceResponse(
        success=f"pkId is {pk_id}",
        sequence=sequence_name,
        id=pk_id,
    )


@router.delete(
    "/{sequence_name}",
    response_model=StatusResponse,
    summary="Reset one sequence",
)
async def reset_sequence(
    sequence_name: str,
    allocator: Annotated[SequenceAllocator, Depends(get_sequence_allocator)],
):
    """
    Remove a sequence counter; its next id will be 1.

    Returns RC=1 (warning) when the sequence had never been used.
    """
    existed = await allocator.reset(sequence_name)
    if not existed:
        return StatusResponse(
            rc=ReturnCode.WARNING,
            success=f"Sequence '{sequence_name}' had no counter.",
        )
    return StatusResponse(success=f"Sequence '{sequence_name}' has been reset.")


@router.delete(
    "",
    response_model=StatusResponse,
    summary="Drop all sequence counters",
)
async def drop_sequences(
    allocator: Annotated[SequenceAllocator, Depends(get_sequence_allocator)],
):
    """
    Drop the counters collection.

    **Warning**: ids restart at 1 and may collide with stored records.
    """
    await allocator.drop_all()
    return StatusResponse(success="Counter collection has been dropped.")
