"""
Journal — Pydantic Request/Response Schemas
============================================

What:  Pydantic models defining the API contract between client and server.
How:   FastAPI parses request bodies into EntryPayload and serializes
       EntryResponse by alias, so the wire format keeps the camelCase keys
       `entryId` and `photoUrl`.
Who:   Route handlers, EntryService, and journal.client.

Schemas are separate from the SQLAlchemy model: EntryPayload never has an
id, and EntryResponse always does.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EntryPayload(BaseModel):
    """
    What:  Body of POST /api/entries and PUT /api/entries/{entryId}.

    Every field is optional at the schema level so a missing field reaches
    EntryService, which answers with the 400 message the client expects
    instead of FastAPI's per-field 422. Unknown keys (an echoed `entryId`)
    are ignored.
    """
    title: Optional[str] = Field(default=None, description="Entry title")
    notes: Optional[str] = Field(default=None, description="Entry body text")
    photo_url: Optional[str] = Field(
        default=None,
        alias="photoUrl",
        description="URL of the entry's photo (format not validated)",
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EntryResponse(BaseModel):
    """
    What:  Full representation of a persisted entry.
    Who:   Returned by every /api/entries endpoint (alone or in a list).
    """
    entry_id: int = Field(alias="entryId", description="Store-generated identifier")
    title: str = Field(description="Entry title")
    notes: str = Field(description="Entry body text")
    photo_url: str = Field(alias="photoUrl", description="URL of the entry's photo")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump with the camelCase keys used on the wire."""
        return self.model_dump(by_alias=True)


# ══════════════════════════════════════════════════════════════════════════
# Error / Operational Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standard error body for every non-2xx response.

    Example:
        {
            "error": "not_found",
            "message": "entryId 7 does not exist.",
            "request_id": "550e8400"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """What:  Body of GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(
        alias="uptimeSeconds", description="Seconds since service started"
    )

    model_config = ConfigDict(populate_by_name=True)
