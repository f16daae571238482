"""
Noteful API — Folder SQLAlchemy Model
=====================================

What:  ORM model for the `noteful_folders` table.
Who:   Used by FolderStore for CRUD and by Alembic for schema management.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """
    A named grouping container for notes.

    Deleting a folder deletes its notes through the ON DELETE CASCADE on
    noteful_notes.folder_id.
    """

    __tablename__ = "noteful_folders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
