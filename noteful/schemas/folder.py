"""
Noteful API — Folder Request/Response Schemas
=============================================

What:  Pydantic models defining the JSON contract of /api/folders.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderCreate(BaseModel):
    """Body of POST /api/folders. `name` is required by the router."""
    name: Optional[str] = Field(default=None, description="Folder name")


class FolderUpdate(BaseModel):
    """Body of PATCH /api/folders/{id}."""
    name: Optional[str] = Field(default=None, description="New folder name")


class FolderResponse(BaseModel):
    """Full representation of a folder."""
    id: int = Field(description="Database-assigned folder ID")
    name: str = Field(description="Sanitized folder name")

    model_config = {"from_attributes": True}
