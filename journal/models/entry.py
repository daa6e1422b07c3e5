"""
Journal — Entry SQLAlchemy Model
=================================

What:  ORM model for the `entries` table.
Who:   Used by EntryService for CRUD statements and by Alembic for schema
       management.

Table Design:
    - "entryId": integer primary key generated by the store (SERIAL on
      PostgreSQL, ROWID alias on SQLite); never assigned by the API
    - "title", "notes", "photoUrl": required text, all rewritten together
      on update
    Column names are camelCase to match the JSON contract; Python
    attributes stay snake_case.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from journal.database import Base


class Entry(Base):
    """
    A single journal entry.

    Lifecycle:
        1. INSERT ... RETURNING assigns entry_id
        2. UPDATE ... RETURNING replaces title, notes and photo_url
        3. DELETE ... RETURNING removes the row (no soft delete)
    """

    __tablename__ = "entries"

    entry_id: Mapped[int] = mapped_column(
        "entryId",
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-generated identifier",
    )

    title: Mapped[str] = mapped_column(
        "title",
        Text,
        nullable=False,
    )

    notes: Mapped[str] = mapped_column(
        "notes",
        Text,
        nullable=False,
    )

    # Stored as given; the URL format is not validated
    photo_url: Mapped[str] = mapped_column(
        "photoUrl",
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Entry(entry_id={self.entry_id}, title='{self.title}')>"
