"""
Journal — Entry Route Handlers
===============================

What:  The five /api/entries endpoints.
How:   Handlers stay thin: they hand the raw path value and the parsed body
       to EntryService and return its result. Validation, status mapping of
       failures, and logging happen in the service and the global handlers.
Who:   Called by journal.client (EntryForm, EntryList) and any HTTP client.

The path parameter is declared as `str` so that malformed ids reach
EntryService and are answered with 400, not FastAPI's 422.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from journal.database import get_db_session
from journal.schemas.entry import EntryPayload, EntryResponse, ErrorResponse
from journal.services.entry_service import entry_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Entries"])

_BAD_REQUEST = {"description": "Invalid entryId or missing field", "model": ErrorResponse}
_NOT_FOUND = {"description": "Entry not found", "model": ErrorResponse}
_SERVER_ERROR = {"description": "Server error", "model": ErrorResponse}


@router.get(
    "/entries",
    response_model=List[EntryResponse],
    responses={500: _SERVER_ERROR},
    summary="List all entries",
)
async def list_entries(
    db: AsyncSession = Depends(get_db_session),
) -> List[EntryResponse]:
    return await entry_service.list_entries(db)


@router.get(
    "/entries/{entry_id}",
    response_model=EntryResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Get a single entry by ID",
)
async def get_entry(
    entry_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_service.get_entry(db, entry_id)


@router.post(
    "/entries",
    status_code=201,
    response_model=EntryResponse,
    responses={400: _BAD_REQUEST, 500: _SERVER_ERROR},
    summary="Create an entry",
    description="Requires non-empty title, notes and photoUrl. The store assigns entryId.",
)
async def create_entry(
    payload: EntryPayload,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_service.create_entry(db, payload)


@router.put(
    "/entries/{entry_id}",
    status_code=201,
    response_model=EntryResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Replace an entry",
    description=(
        "Overwrites title, notes and photoUrl together. All three are required; "
        "there is no partial update. Answers 201 with the updated entry."
    ),
)
async def update_entry(
    entry_id: str,
    payload: EntryPayload,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_service.update_entry(db, entry_id, payload)


@router.delete(
    "/entries/{entry_id}",
    response_model=EntryResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND, 500: _SERVER_ERROR},
    summary="Delete an entry",
    description="Returns the deleted entry.",
)
async def delete_entry(
    entry_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> EntryResponse:
    return await entry_service.delete_entry(db, entry_id)
