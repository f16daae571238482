"""Create noteful_notes table

Revision ID: 002
Revises: 001
Create Date: 2020-01-28 00:00:01.000000+00:00

What:  Creates the notes table with its foreign key to noteful_folders.
How:   ON DELETE CASCADE: deleting a folder deletes the notes it owns.
       `modified` is filled by the database clock on insert.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "noteful_notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("folder_id", sa.Integer(), nullable=False),
        sa.Column(
            "modified",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["folder_id"],
            ["noteful_folders.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Matches index=True on Note.folder_id
    op.create_index("ix_noteful_notes_folder_id", "noteful_notes", ["folder_id"])


def downgrade() -> None:
    op.drop_index("ix_noteful_notes_folder_id", table_name="noteful_notes")
    op.drop_table("noteful_notes")
