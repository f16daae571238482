"""
Test data for folders and notes, plus helpers producing the JSON the API
is expected to return for them.
"""

from datetime import datetime

from noteful.schemas.folder import FolderResponse
from noteful.schemas.note import NoteResponse


def make_folders_array():
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "Spangley"},
    ]


def make_notes_array():
    return [
        {
            "id": 1,
            "text": "Corporis accusamus placeat quas non voluptas.",
            "folder_id": 1,
            "modified": datetime(2029, 1, 22, 16, 28, 32, 615000),
        },
        {
            "id": 2,
            "text": "Eos laudantium quia ab blanditiis temporibus necessitatibus.",
            "folder_id": 2,
            "modified": datetime(2018, 8, 15, 23, 0, 0),
        },
        {
            "id": 3,
            "text": "Possimus, voluptate?",
            "folder_id": 3,
            "modified": datetime(1919, 12, 22, 16, 28, 32, 615000),
        },
        {
            "id": 4,
            "text": "Natus consequuntur deserunt commodi, nobis qui inventore.",
            "folder_id": 1,
            "modified": datetime(2001, 1, 1, 0, 0, 0),
        },
    ]


def expected_note(note):
    return NoteResponse(**note).model_dump(mode="json")


def expected_folder(folder):
    return FolderResponse(**folder).model_dump(mode="json")
