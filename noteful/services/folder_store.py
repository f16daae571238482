"""
Noteful API — Folder Store (Data Access)
========================================

What:  Translates folder CRUD operations into SQLAlchemy queries.
How:   Same shape as NoteStore: one AsyncSession per instance, flush only.

Deleting a folder removes its notes too; the database does it through the
foreign key's ON DELETE CASCADE.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.folder import Folder

logger = logging.getLogger(__name__)


class FolderStore:
    """Data access for the noteful_folders table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[Folder]:
        result = await self.db.execute(select(Folder).order_by(Folder.id))
        return list(result.scalars().all())

    async def get_by_id(self, folder_id: int) -> Optional[Folder]:
        result = await self.db.execute(select(Folder).where(Folder.id == folder_id))
        return result.scalar_one_or_none()

    async def insert(self, record: Dict[str, Any]) -> Folder:
        folder = Folder(**record)
        self.db.add(folder)
        await self.db.flush()
        await self.db.refresh(folder)
        logger.info("Folder %s created", folder.id)
        return folder

    async def update(self, folder_id: int, partial_record: Dict[str, Any]) -> None:
        if not partial_record:
            return
        await self.db.execute(
            update(Folder).where(Folder.id == folder_id).values(**partial_record)
        )
        logger.info("Folder %s updated", folder_id)

    async def delete_by_id(self, folder_id: int) -> None:
        await self.db.execute(delete(Folder).where(Folder.id == folder_id))
        logger.info("Folder %s deleted", folder_id)
