"""
Noteful API — Notes Endpoint Tests
==================================

What:  HTTP-level tests for /api/notes against a real (SQLite) database.

What we test:
    ✅ GET list: empty table and seeded table
    ✅ GET by id: 404 envelope and seeded note
    ✅ POST: 201 + Location + server-assigned fields; 400 per missing field
    ✅ POST: markup sanitized, markup-only text rejected; unknown folder surfaces as 500
    ✅ DELETE: 404 and removal
    ✅ PATCH: 404 (before body checks), full update, partial update ignoring
              unknown fields, 400, sanitized text
    ✅ Ids outside the INTEGER range answer 404, never reach the database
"""

from datetime import datetime, timedelta, timezone

import pytest

from tests.fixtures import expected_note, make_folders_array, make_notes_array

NOT_FOUND = {"error": {"message": "Note doesn't exist"}}


class TestListNotes:

    @pytest.mark.asyncio
    async def test_empty_table_returns_empty_list(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_returns_all_notes(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)

        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == [expected_note(note) for note in notes]


class TestGetNote:

    @pytest.mark.asyncio
    async def test_missing_note_returns_404(self, test_client):
        response = await test_client.get("/api/notes/123456")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_returns_the_specified_note(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)

        response = await test_client.get("/api/notes/2")

        assert response.status_code == 200
        assert response.json() == expected_note(notes[1])

    @pytest.mark.asyncio
    async def test_non_integer_id_returns_400(self, test_client):
        response = await test_client.get("/api/notes/not-a-number")

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid 'note_id' in request path"}}


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_creates_note_and_returns_201(self, test_client, seed):
        await seed(folders=make_folders_array())
        new_note = {"text": "Test new note", "folder_id": 1}

        response = await test_client.post("/api/notes", json=new_note)

        assert response.status_code == 201
        body = response.json()
        assert body["text"] == new_note["text"]
        assert body["folder_id"] == new_note["folder_id"]
        assert "id" in body
        assert response.headers["location"] == f"/api/notes/{body['id']}"

        modified = datetime.fromisoformat(body["modified"])
        if modified.tzinfo is None:
            modified = modified.replace(tzinfo=timezone.utc)
        assert abs(datetime.now(timezone.utc) - modified) < timedelta(minutes=1)

        follow_up = await test_client.get(f"/api/notes/{body['id']}")
        assert follow_up.status_code == 200
        assert follow_up.json() == body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["text", "folder_id"])
    async def test_missing_required_field_returns_400(self, test_client, field):
        new_note = {"text": "Test new note", "folder_id": 1}
        del new_note[field]

        response = await test_client.post("/api/notes", json=new_note)

        assert response.status_code == 400
        assert response.json() == {"error": {"message": f"Missing '{field}' in request body"}}

    @pytest.mark.asyncio
    async def test_null_field_counts_as_missing(self, test_client):
        response = await test_client.post("/api/notes", json={"text": None, "folder_id": 1})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'text' in request body"}}

    @pytest.mark.asyncio
    async def test_empty_body_reports_first_required_field(self, test_client):
        response = await test_client.post("/api/notes")

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'text' in request body"}}

    @pytest.mark.asyncio
    async def test_wrongly_typed_folder_id_returns_400(self, test_client):
        response = await test_client.post(
            "/api/notes", json={"text": "Test new note", "folder_id": "abc"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid 'folder_id' in request body"}}

    @pytest.mark.asyncio
    async def test_removes_script_from_text(self, test_client, seed):
        await seed(folders=make_folders_array())
        malicious = {
            "text": 'Naughty <script>alert("xss");</script> note',
            "folder_id": 1,
        }

        response = await test_client.post("/api/notes", json=malicious)

        assert response.status_code == 201
        text = response.json()["text"]
        assert "<script>" not in text
        assert "alert" not in text
        assert text.startswith("Naughty")

    @pytest.mark.asyncio
    async def test_markup_only_text_returns_400(self, test_client, seed):
        await seed(folders=make_folders_array())

        response = await test_client.post(
            "/api/notes", json={"text": "<script>x</script>", "folder_id": 1}
        )

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid 'text' in request body"}}
        assert (await test_client.get("/api/notes")).json() == []

    @pytest.mark.asyncio
    async def test_unknown_folder_is_a_server_error(self, test_client):
        response = await test_client.post(
            "/api/notes", json={"text": "Orphan", "folder_id": 999}
        )

        assert response.status_code == 500
        assert (await test_client.get("/api/notes")).json() == []


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_missing_note_returns_404(self, test_client):
        response = await test_client.delete("/api/notes/123456")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_removes_the_note(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)

        response = await test_client.delete("/api/notes/2")

        assert response.status_code == 204
        assert response.content == b""
        remaining = await test_client.get("/api/notes")
        assert remaining.json() == [expected_note(n) for n in notes if n["id"] != 2]


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_missing_note_returns_404(self, test_client):
        response = await test_client.patch("/api/notes/123456", json={"text": "x"})

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_updates_the_note(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)
        update = {"text": "updated note text", "folder_id": 2}

        response = await test_client.patch("/api/notes/2", json=update)

        assert response.status_code == 204
        stored = await test_client.get("/api/notes/2")
        assert stored.json() == expected_note({**notes[1], **update})

    @pytest.mark.asyncio
    async def test_no_updatable_field_returns_400(self, test_client, seed):
        await seed(folders=make_folders_array(), notes=make_notes_array())

        response = await test_client.patch("/api/notes/2", json={"irrelevantField": "foo"})

        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "Request body must content either 'text' or 'folder_id'"}
        }

    @pytest.mark.asyncio
    async def test_partial_update_ignores_unknown_fields(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)
        update = {"text": "updated note text"}

        response = await test_client.patch(
            "/api/notes/2",
            json={**update, "fieldToIgnore": "should not be in GET response"},
        )

        assert response.status_code == 204
        stored = (await test_client.get("/api/notes/2")).json()
        assert stored == expected_note({**notes[1], **update})
        assert "fieldToIgnore" not in stored

    @pytest.mark.asyncio
    async def test_modified_is_not_refreshed(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)

        await test_client.patch("/api/notes/1", json={"folder_id": 3})

        stored = (await test_client.get("/api/notes/1")).json()
        assert stored["modified"] == expected_note(notes[0])["modified"]
        assert stored["folder_id"] == 3

    @pytest.mark.asyncio
    async def test_missing_note_is_checked_before_the_body(self, test_client):
        response = await test_client.patch("/api/notes/999", json={})

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_removes_script_from_updated_text(self, test_client, seed):
        await seed(folders=make_folders_array(), notes=make_notes_array())

        response = await test_client.patch(
            "/api/notes/2", json={"text": 'Edited <script>alert("xss");</script> note'}
        )

        assert response.status_code == 204
        text = (await test_client.get("/api/notes/2")).json()["text"]
        assert "<script" not in text
        assert "alert" not in text
        assert text.startswith("Edited")

    @pytest.mark.asyncio
    async def test_markup_only_update_returns_400_and_keeps_text(self, test_client, seed):
        notes = make_notes_array()
        await seed(folders=make_folders_array(), notes=notes)

        response = await test_client.patch("/api/notes/2", json={"text": "<script>x</script>"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid 'text' in request body"}}
        stored = (await test_client.get("/api/notes/2")).json()
        assert stored == expected_note(notes[1])


class TestIdsOutsideStorableRange:

    HUGE_ID = "99999999999999999999"

    @pytest.mark.asyncio
    async def test_get_returns_404(self, test_client):
        response = await test_client.get(f"/api/notes/{self.HUGE_ID}")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_patch_returns_404(self, test_client):
        response = await test_client.patch(f"/api/notes/{self.HUGE_ID}", json={"text": "x"})

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_returns_404(self, test_client):
        response = await test_client.delete(f"/api/notes/{self.HUGE_ID}")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("note_id", ["2147483648", "0", "-1"])
    async def test_just_outside_integer_range_returns_404(self, test_client, note_id):
        response = await test_client.get(f"/api/notes/{note_id}")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND
