"""
Noteful API — Note Store (Data Access)
======================================

What:  Translates note CRUD operations into SQLAlchemy queries.
How:   Holds the request's AsyncSession, handed in at construction time by
       the router's dependency provider. Writes are flushed, never committed:
       the session dependency owns the transaction.
Who:   Called by the notes router.

Contract:
    get_all()              every note, in id (insertion) order
    get_by_id(id)          the note or None; absence is not an error
    insert(record)         new note with database-assigned id and modified
    update(id, partial)    only the given columns change
    delete_by_id(id)       no-op when the id does not exist

Database errors (unknown folder_id, lost connection) propagate unchanged to
the global error handler.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """Data access for the noteful_notes table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Note]:
        result = await self.db.execute(select(Note).order_by(Note.id))
        return list(result.scalars().all())

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        result = await self.db.execute(select(Note).where(Note.id == note_id))
        return result.scalar_one_or_none()

    async def insert(self, record: Dict[str, Any]) -> Note:
        """
        Persist a new note and return it as stored.

        The row is refreshed after the flush so `id` and the database-side
        `modified` default are loaded before the caller serializes it.
        """
        note = Note(**record)
        self.db.add(note)
        await self.db.flush()
        await self.db.refresh(note)
        logger.info("Note %s created in folder %s", note.id, note.folder_id)
        return note

    async def update(self, note_id: int, partial_record: Dict[str, Any]) -> None:
        if not partial_record:
            return
        await self.db.execute(
            update(Note).where(Note.id == note_id).values(**partial_record)
        )
        logger.info("Note %s updated: %s", note_id, sorted(partial_record))

    async def delete_by_id(self, note_id: int) -> None:
        await self.db.execute(delete(Note).where(Note.id == note_id))
        logger.info("Note %s deleted", note_id)
