"""
Noteful API — Note SQLAlchemy Model
===================================

What:  ORM model for the `noteful_notes` table.
Who:   Used by NoteStore for CRUD and by Alembic for schema management.

Column notes:
    - id:        integer identity assigned by the database, never updated
    - text:      free text, sanitized before it reaches the model
    - folder_id: owning folder; FK with ON DELETE CASCADE
    - modified:  CURRENT_TIMESTAMP on insert, left untouched by updates
"""

from datetime import datetime

from sqlalchemy import TIMESTAMP, ForeignKey, Integer, Text
from sqlalchemy import text as sql_text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.folder import Folder  # noqa: F401  (FK target table)


class Note(Base):
    """
    A text record owned by exactly one folder.

    Query Patterns:
        - List notes:   SELECT ... ORDER BY id
        - Get one note: SELECT ... WHERE id = :id  (primary key lookup)
    """

    __tablename__ = "noteful_notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    text: Mapped[str] = mapped_column(Text, nullable=False)

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("noteful_folders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Server-side default only: the timestamp comes from the database clock,
    # and the store refreshes the row after insert to read it back.
    modified: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sql_text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )
