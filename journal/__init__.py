"""
Journal — Application Package
==============================

What: Personal journal service: a REST API over the `entries` table plus
      the client-side form and list controllers that consume it.
Who:  Imported by uvicorn (`journal.main:app`), Alembic, and pytest.

Layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, one statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    journal.client sits on the other side of HTTP: an httpx API client and
    the EntryForm / EntryList controllers.
"""

__version__ = "1.0.0"
