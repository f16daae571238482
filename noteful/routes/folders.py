"""
Noteful API — Folders Route Handlers
====================================

What:  CRUD endpoints under /api/folders. Same contract as the notes routes;
       `name` is the only required and the only updatable field.

Deleting a folder also deletes the notes it owns (database cascade).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import NotFoundError, ValidationError
from noteful.models.folder import Folder
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.folder_store import FolderStore
from noteful.validation import (
    clean_text_field,
    is_storable_id,
    required_fields_present,
    supplied_fields,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/folders", tags=["Folders"])

REQUIRED_FIELDS = ("name",)
UPDATABLE_FIELDS = ("name",)
NOTHING_TO_UPDATE = "Request body must contain 'name'"


def get_folder_store(db: AsyncSession = Depends(get_db_session)) -> FolderStore:
    return FolderStore(db)


async def _get_folder_or_404(store: FolderStore, folder_id: int) -> Folder:
    if not is_storable_id(folder_id):
        logger.info("Folder id %s is outside the storable range", folder_id)
        raise NotFoundError(resource="Folder", resource_id=folder_id)

    folder = await store.get_by_id(folder_id)
    if folder is None:
        logger.info("Folder %s not found", folder_id)
        raise NotFoundError(resource="Folder", resource_id=folder_id)
    return folder


def _clean_name(value: str) -> str:
    cleaned = clean_text_field(value)
    if cleaned is None:
        logger.info("Rejected folder name consisting only of markup")
        raise ValidationError(message="Invalid 'name' in request body", field="name")
    return cleaned


@router.get("", response_model=List[FolderResponse], summary="List all folders")
async def list_folders(store: FolderStore = Depends(get_folder_store)) -> List[Folder]:
    return await store.get_all()


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a single folder by ID",
)
async def get_folder(folder_id: int, store: FolderStore = Depends(get_folder_store)) -> Folder:
    return await _get_folder_or_404(store, folder_id)


@router.post(
    "",
    status_code=201,
    response_model=FolderResponse,
    responses={400: {"description": "Missing required field", "model": ErrorResponse}},
    summary="Create a folder",
)
async def create_folder(
    response: Response,
    payload: Optional[FolderCreate] = None,
    store: FolderStore = Depends(get_folder_store),
) -> Folder:
    body = payload.model_dump() if payload else {}

    missing = required_fields_present(body, REQUIRED_FIELDS)
    if missing:
        raise ValidationError(message=f"Missing '{missing}' in request body", field=missing)

    folder = await store.insert({"name": _clean_name(body["name"])})

    response.headers["Location"] = f"{router.prefix}/{folder.id}"
    return folder


@router.patch(
    "/{folder_id}",
    status_code=204,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Folder not found", "model": ErrorResponse},
    },
    summary="Rename a folder",
)
async def update_folder(
    folder_id: int,
    payload: Optional[FolderUpdate] = None,
    store: FolderStore = Depends(get_folder_store),
) -> Response:
    await _get_folder_or_404(store, folder_id)

    fields = supplied_fields(payload.model_dump() if payload else {}, UPDATABLE_FIELDS)
    if not fields:
        raise ValidationError(message=NOTHING_TO_UPDATE)

    await store.update(folder_id, {"name": _clean_name(fields["name"])})
    return Response(status_code=204)


@router.delete(
    "/{folder_id}",
    status_code=204,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Delete a folder and its notes",
)
async def delete_folder(folder_id: int, store: FolderStore = Depends(get_folder_store)) -> Response:
    await _get_folder_or_404(store, folder_id)
    await store.delete_by_id(folder_id)
    return Response(status_code=204)
