"""
Noteful API — Notes Route Handlers
==================================

What:  CRUD endpoints under /api/notes.
How:   Each handler receives a NoteStore built around the request's session,
       validates the body, calls the store and shapes the response.

Response contract:
    GET    /api/notes        200 [note, ...]
    GET    /api/notes/{id}   200 note | 404
    POST   /api/notes        201 note + Location | 400 missing/markup-only field
    PATCH  /api/notes/{id}   204 | 400 nothing to update / markup-only | 404
    DELETE /api/notes/{id}   204 | 404

For /{id} routes the 404 check runs before body validation.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import NotFoundError, ValidationError
from noteful.models.note import Note
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.note_store import NoteStore
from noteful.validation import (
    clean_text_field,
    is_storable_id,
    required_fields_present,
    supplied_fields,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])

REQUIRED_FIELDS = ("text", "folder_id")
UPDATABLE_FIELDS = ("text", "folder_id")
NOTHING_TO_UPDATE = "Request body must content either 'text' or 'folder_id'"


def get_note_store(db: AsyncSession = Depends(get_db_session)) -> NoteStore:
    """Dependency provider: one NoteStore per request, bound to its session."""
    return NoteStore(db)


async def _get_note_or_404(store: NoteStore, note_id: int) -> Note:
    # Ids beyond the INTEGER column range cannot exist; keep them away from the driver
    if not is_storable_id(note_id):
        logger.info("Note id %s is outside the storable range", note_id)
        raise NotFoundError(resource="Note", resource_id=note_id)

    note = await store.get_by_id(note_id)
    if note is None:
        logger.info("Note %s not found", note_id)
        raise NotFoundError(resource="Note", resource_id=note_id)
    return note


def _clean_text(value: str) -> str:
    cleaned = clean_text_field(value)
    if cleaned is None:
        logger.info("Rejected note text consisting only of markup")
        raise ValidationError(message="Invalid 'text' in request body", field="text")
    return cleaned


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[Note]:
    return await store.get_all()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by ID",
)
async def get_note(note_id: int, store: NoteStore = Depends(get_note_store)) -> Note:
    return await _get_note_or_404(store, note_id)


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses={400: {"description": "Missing required field", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    response: Response,
    payload: Optional[NoteCreate] = None,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    """
    Create a note in an existing folder.

    `text` is sanitized before it is stored; text that is nothing but markup
    is rejected with 400. An unknown `folder_id` is a foreign key violation
    and surfaces as a 500 from the database.
    """
    body = payload.model_dump() if payload else {}

    missing = required_fields_present(body, REQUIRED_FIELDS)
    if missing:
        raise ValidationError(message=f"Missing '{missing}' in request body", field=missing)

    note = await store.insert({
        "text": _clean_text(body["text"]),
        "folder_id": body["folder_id"],
    })

    response.headers["Location"] = f"{router.prefix}/{note.id}"
    return note


@router.patch(
    "/{note_id}",
    status_code=204,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note's text and/or folder",
)
async def update_note(
    note_id: int,
    payload: Optional[NoteUpdate] = None,
    store: NoteStore = Depends(get_note_store),
) -> Response:
    await _get_note_or_404(store, note_id)

    fields = supplied_fields(payload.model_dump() if payload else {}, UPDATABLE_FIELDS)
    if not fields:
        raise ValidationError(message=NOTHING_TO_UPDATE)

    if "text" in fields:
        fields["text"] = _clean_text(fields["text"])

    await store.update(note_id, fields)
    return Response(status_code=204)


@router.delete(
    "/{note_id}",
    status_code=204,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(note_id: int, store: NoteStore = Depends(get_note_store)) -> Response:
    await _get_note_or_404(store, note_id)
    await store.delete_by_id(note_id)
    return Response(status_code=204)
