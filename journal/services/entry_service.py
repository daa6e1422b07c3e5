"""
Journal — Entry Service (Business Logic)
=========================================

What:  Validation and persistence for journal entries.
How:   Each public method validates its input first, then issues exactly one
       parameterized statement through the request's session. A failed
       validation never touches the session.
Who:   Called by the /api/entries route handlers.

Statement per operation:
    list_entries   SELECT ... ORDER BY "entryId"
    get_entry      SELECT ... WHERE "entryId" = :id
    create_entry   INSERT ... RETURNING *
    update_entry   UPDATE ... WHERE "entryId" = :id RETURNING *
    delete_entry   DELETE ... WHERE "entryId" = :id RETURNING *

The session dependency commits after the handler returns, so a write is
only durable once the response has been built without error.
"""

import logging
import re
from typing import List, Tuple

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.exceptions import DatabaseError, NotFoundError, ValidationError
from journal.models.entry import Entry
from journal.schemas.entry import EntryPayload, EntryResponse

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid entryId."
MISSING_FIELDS_MESSAGE = "title, notes and photoUrl is required."

_DIGITS = re.compile(r"[0-9]+")

# Largest value the INTEGER "entryId" column can hold
MAX_ENTRY_ID = 2**31 - 1


def parse_entry_id(raw: object) -> int:
    """
    Parse a path value into a positive integer entry id.

    Accepts only plain decimal digits (surrounding whitespace is ignored)
    denoting a value of at least 1. Signs, decimal points and exponents are
    rejected. Ids above MAX_ENTRY_ID cannot name a stored row, so they are
    reported as not found without a query.

    Raises:
        ValidationError: The value is not a positive integer (→ 400)
        NotFoundError: The value is beyond the column range (→ 404)
    """
    text = str(raw).strip() if raw is not None else ""
    if not _DIGITS.fullmatch(text):
        raise ValidationError(message=INVALID_ID_MESSAGE, field="entryId")
    entry_id = int(text)
    if entry_id < 1:
        raise ValidationError(message=INVALID_ID_MESSAGE, field="entryId")
    if entry_id > MAX_ENTRY_ID:
        raise NotFoundError(resource_id=str(entry_id))
    return entry_id


def require_fields(payload: EntryPayload) -> Tuple[str, str, str]:
    """
    Return (title, notes, photo_url), or raise if any is missing or empty.

    Raises:
        ValidationError: Any of the three fields is absent, null or "" (→ 400)
    """
    missing = [
        name
        for name, value in (
            ("title", payload.title),
            ("notes", payload.notes),
            ("photoUrl", payload.photo_url),
        )
        if not value
    ]
    if missing:
        raise ValidationError(
            message=MISSING_FIELDS_MESSAGE,
            context={"missing": missing},
        )
    return payload.title, payload.notes, payload.photo_url


class EntryService:
    """
    Business logic for entry CRUD.

    Stateless: every method receives the request's AsyncSession. SQLAlchemy
    failures are logged and re-raised as DatabaseError so the global
    handler answers with a generic 500.
    """

    async def list_entries(self, db: AsyncSession) -> List[EntryResponse]:
        """Return every entry, lowest id first."""
        try:
            result = await db.execute(select(Entry).order_by(Entry.entry_id))
            entries = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing entries: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve entries. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return [EntryResponse.model_validate(entry) for entry in entries]

    async def get_entry(self, db: AsyncSession, raw_id: object) -> EntryResponse:
        """
        Retrieve a single entry.

        Raises:
            ValidationError: raw_id is not a positive integer (→ 400)
            NotFoundError: No entry has that id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        entry_id = parse_entry_id(raw_id)

        try:
            result = await db.execute(select(Entry).where(Entry.entry_id == entry_id))
            entry = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching entry %s: %s", entry_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the entry. Please try again.",
                context={"entry_id": entry_id},
            ) from e

        if entry is None:
            raise NotFoundError(resource_id=str(entry_id))

        return EntryResponse.model_validate(entry)

    async def create_entry(self, db: AsyncSession, payload: EntryPayload) -> EntryResponse:
        """
        Insert a new entry and return it with its generated id.

        Raises:
            ValidationError: A required field is missing (→ 400)
            DatabaseError: The insert failed (→ 500)
        """
        title, notes, photo_url = require_fields(payload)

        try:
            result = await db.execute(
                insert(Entry).returning(Entry),
                [{"title": title, "notes": notes, "photo_url": photo_url}],
            )
            entry = result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("Database error creating entry: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the entry. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Entry %s created", entry.entry_id)
        return EntryResponse.model_validate(entry)

    async def update_entry(
        self,
        db: AsyncSession,
        raw_id: object,
        payload: EntryPayload,
    ) -> EntryResponse:
        """
        Replace title, notes and photo_url of an existing entry.

        All three fields are always overwritten; there is no partial update.

        Raises:
            ValidationError: Bad id or missing field (→ 400)
            NotFoundError: No entry has that id (→ 404)
            DatabaseError: The update failed (→ 500)
        """
        entry_id = parse_entry_id(raw_id)
        title, notes, photo_url = require_fields(payload)

        try:
            result = await db.execute(
                update(Entry)
                .where(Entry.entry_id == entry_id)
                .values({Entry.title: title, Entry.notes: notes, Entry.photo_url: photo_url})
                .returning(Entry)
            )
            entry = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error updating entry %s: %s", entry_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the entry. Please try again.",
                context={"entry_id": entry_id},
            ) from e

        if entry is None:
            raise NotFoundError(resource_id=str(entry_id))

        logger.info("Entry %s updated", entry_id)
        return EntryResponse.model_validate(entry)

    async def delete_entry(self, db: AsyncSession, raw_id: object) -> EntryResponse:
        """
        Delete an entry and return the row as it was.

        Raises:
            ValidationError: raw_id is not a positive integer (→ 400)
            NotFoundError: No entry has that id (→ 404)
            DatabaseError: The delete failed (→ 500)
        """
        entry_id = parse_entry_id(raw_id)

        try:
            result = await db.execute(
                delete(Entry).where(Entry.entry_id == entry_id).returning(Entry)
            )
            entry = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error deleting entry %s: %s", entry_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the entry. Please try again.",
                context={"entry_id": entry_id},
            ) from e

        if entry is None:
            raise NotFoundError(resource_id=str(entry_id))

        logger.info("Entry %s deleted", entry_id)
        return EntryResponse.model_validate(entry)


# ── Singleton Instance ────────────────────────────────────────────────────
entry_service = EntryService()
