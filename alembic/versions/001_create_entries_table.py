"""Create entries table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `entries` table.
How:   "entryId" is an auto-generated integer primary key (SERIAL on
       PostgreSQL). Column names are quoted camelCase to match the JSON API.

Rollback: downgrade() drops the table (all entries are lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "entries",
        sa.Column(
            "entryId",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-generated identifier",
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("photoUrl", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("entryId"),
    )


def downgrade() -> None:
    op.drop_table("entries")
