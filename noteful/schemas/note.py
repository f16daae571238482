"""
Noteful API — Note Request/Response Schemas
===========================================

What:  Pydantic models defining the JSON contract of /api/notes.
How:   Request models declare every field Optional so the router, not
       FastAPI, decides which absence is an error and with which message.
       Unknown keys are ignored (Pydantic's default `extra="ignore"`).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /api/notes. Both fields are required by the router."""
    text: Optional[str] = Field(default=None, description="Note text")
    folder_id: Optional[int] = Field(default=None, description="Owning folder ID")


class NoteUpdate(BaseModel):
    """Body of PATCH /api/notes/{id}. At least one field must be supplied."""
    text: Optional[str] = Field(default=None, description="New note text")
    folder_id: Optional[int] = Field(default=None, description="New owning folder ID")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a note, as stored."""
    id: int = Field(description="Database-assigned note ID")
    text: str = Field(description="Sanitized note text")
    folder_id: int = Field(description="Owning folder ID")
    modified: datetime = Field(description="Server-assigned creation timestamp")

    model_config = {"from_attributes": True}
