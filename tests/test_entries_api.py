"""
Journal — Entries API Tests
============================

What:  The /api/entries endpoints end to end.
How:   Real app, real SQL against a per-test SQLite database, driven
       through httpx's ASGITransport (see conftest.py).
"""

import pytest
from unittest.mock import AsyncMock, patch
from httpx import ASGITransport, AsyncClient

from journal import database
from journal.exceptions import DatabaseError


async def _create(test_client, **overrides):
    body = {"title": "Trip", "notes": "Fun", "photoUrl": "http://x/y.jpg", **overrides}
    response = await test_client.post("/api/entries", json=body)
    assert response.status_code == 201
    return response.json()


class TestEntryLifecycle:

    @pytest.mark.asyncio
    async def test_create_get_delete_get(self, test_client, sample_entry_data):
        created = await test_client.post("/api/entries", json=sample_entry_data)
        assert created.status_code == 201
        assert created.json() == {"entryId": 1, **sample_entry_data}

        fetched = await test_client.get("/api/entries/1")
        assert fetched.status_code == 200
        assert fetched.json() == created.json()

        deleted = await test_client.delete("/api/entries/1")
        assert deleted.status_code == 200
        assert deleted.json() == created.json()

        gone = await test_client.get("/api/entries/1")
        assert gone.status_code == 404
        assert gone.json()["message"] == "entryId 1 does not exist."

    @pytest.mark.asyncio
    async def test_list_entries(self, test_client):
        assert (await test_client.get("/api/entries")).json() == []

        first = await _create(test_client, title="One")
        second = await _create(test_client, title="Two")

        response = await test_client.get("/api/entries")
        assert response.status_code == 200
        assert response.json() == [first, second]

    @pytest.mark.asyncio
    async def test_update_replaces_all_fields(self, test_client):
        created = await _create(test_client)
        replacement = {"title": "Hike", "notes": "Steep", "photoUrl": "http://x/z.png"}

        response = await test_client.put(f"/api/entries/{created['entryId']}", json=replacement)

        assert response.status_code == 201
        assert response.json() == {"entryId": created["entryId"], **replacement}
        fetched = await test_client.get(f"/api/entries/{created['entryId']}")
        assert fetched.json() == {"entryId": created["entryId"], **replacement}

    @pytest.mark.asyncio
    async def test_update_ignores_entry_id_in_body(self, test_client):
        created = await _create(test_client)
        body = {"entryId": 999, "title": "A", "notes": "B", "photoUrl": "C"}

        response = await test_client.put(f"/api/entries/{created['entryId']}", json=body)

        assert response.status_code == 201
        assert response.json()["entryId"] == created["entryId"]

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_across_entries(self, test_client):
        a = await _create(test_client)
        b = await _create(test_client)
        assert a["entryId"] != b["entryId"]


class TestValidation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["abc", "0", "-1", "1.5", "1e2"])
    async def test_bad_ids_are_rejected(self, test_client, bad_id, sample_entry_data):
        await _create(test_client)

        for response in (
            await test_client.get(f"/api/entries/{bad_id}"),
            await test_client.put(f"/api/entries/{bad_id}", json=sample_entry_data),
            await test_client.delete(f"/api/entries/{bad_id}"),
        ):
            assert response.status_code == 400
            assert response.json()["error"] == "validation_error"
            assert response.json()["message"] == "Invalid entryId."

        # The existing entry was untouched by the rejected PUT/DELETE
        assert (await test_client.get("/api/entries/1")).json()["title"] == "Trip"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"notes": "Fun", "photoUrl": "http://x/y.jpg"},
            {"title": "Trip", "photoUrl": "http://x/y.jpg"},
            {"title": "Trip", "notes": "Fun"},
            {"title": "", "notes": "Fun", "photoUrl": "http://x/y.jpg"},
            {"title": "Trip", "notes": None, "photoUrl": "http://x/y.jpg"},
            {},
        ],
    )
    async def test_create_missing_field(self, test_client, body):
        response = await test_client.post("/api/entries", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "title, notes and photoUrl is required."
        assert (await test_client.get("/api/entries")).json() == []

    @pytest.mark.asyncio
    async def test_update_missing_field_performs_no_write(self, test_client):
        created = await _create(test_client)

        response = await test_client.put(
            f"/api/entries/{created['entryId']}",
            json={"title": "Changed", "notes": "Changed"},
        )

        assert response.status_code == 400
        fetched = await test_client.get(f"/api/entries/{created['entryId']}")
        assert fetched.json() == created

    @pytest.mark.asyncio
    async def test_wrong_type_is_bad_request(self, test_client):
        response = await test_client.post(
            "/api/entries", json={"title": 5, "notes": "Fun", "photoUrl": "u"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_malformed_json_is_bad_request(self, test_client):
        response = await test_client.post(
            "/api/entries",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body."


class TestNotFound:

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get("/api/entries/42")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_update_unknown(self, test_client, sample_entry_data):
        response = await test_client.put("/api/entries/42", json=sample_entry_data)
        assert response.status_code == 404
        assert (await test_client.get("/api/entries")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown(self, test_client):
        response = await test_client.delete("/api/entries/42")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_id_beyond_column_range(self, test_client, sample_entry_data):
        path = "/api/entries/99999999999999999999"

        responses = [
            await test_client.get(path),
            await test_client.put(path, json=sample_entry_data),
            await test_client.delete(path),
        ]

        assert [r.status_code for r in responses] == [404, 404, 404]
        assert responses[0].json()["message"] == "entryId 99999999999999999999 does not exist."
        assert (await test_client.get("/api/entries")).json() == []


class TestServerErrors:

    @pytest.mark.asyncio
    async def test_database_error_is_generic_500(self, test_client):
        with patch(
            "journal.routes.entries.entry_service.list_entries",
            AsyncMock(side_effect=DatabaseError(context={"sql": "select secret"})),
        ):
            response = await test_client.get("/api/entries")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "secret" not in response.text

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic_500(self, app):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            with patch(
                "journal.routes.entries.entry_service.get_entry",
                AsyncMock(side_effect=RuntimeError("driver exploded")),
            ):
                response = await client.get("/api/entries/1")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert "driver exploded" not in response.text
        assert response.headers["X-Request-ID"] == body["request_id"]


class TestAmbient:

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/entries", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/api/entries/0")
        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client, db_engine, monkeypatch):
        monkeypatch.setattr(database, "engine", db_engine)

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert "uptimeSeconds" in body

    @pytest.mark.asyncio
    async def test_health_disconnected(self, test_client, monkeypatch, tmp_path):
        from sqlalchemy.ext.asyncio import create_async_engine
        from sqlalchemy.pool import NullPool

        broken = create_async_engine(
            f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nowhere.db'}",
            poolclass=NullPool,
        )
        monkeypatch.setattr(database, "engine", broken)

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"
        await broken.dispose()
