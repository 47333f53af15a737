"""
Integration tests for the saved searches endpoints.
"""

import pytest


class TestSavedSearchesEndpoints:
    """Tests for /searches endpoints."""

    @pytest.mark.asyncio
    async def test_greeting(self, async_client):
        response = await async_client.get("/searches/")

        assert response.status_code == 200
        assert response.text == "Hello from saved-searches.\n"

    @pytest.mark.asyncio
    async def test_get_without_searches(self, async_client, alice):
        response = await async_client.get("/searches/alice")

        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.asyncio
    async def test_put_then_get_verbatim(self, async_client, alice):
        body = '{"saved": [{"query": "fastq", "type": "file"}]}'

        response = await async_client.put("/searches/alice", content=body)

        assert response.status_code == 200
        assert response.json() == {
            "saved_searches": {"saved": [{"query": "fastq", "type": "file"}]}
        }
        response = await async_client.get("/searches/alice")
        assert response.text == body
        assert response.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_non_object_body(self, async_client, alice):
        response = await async_client.post("/searches/alice", content="[1, 2]")

        assert response.status_code == 200
        assert response.json() == {"saved_searches": [1, 2]}
        assert (await async_client.get("/searches/alice")).text == "[1, 2]"

    @pytest.mark.asyncio
    async def test_replace(self, async_client, alice):
        await async_client.put("/searches/alice", json={"v": 1})
        await async_client.post("/searches/alice", json={"v": 2})

        assert (await async_client.get("/searches/alice")).json() == {"v": 2}

    @pytest.mark.asyncio
    async def test_delete(self, async_client, alice):
        await async_client.put("/searches/alice", json={"v": 1})

        response = await async_client.delete("/searches/alice")

        assert response.status_code == 200
        assert response.content == b""
        assert (await async_client.get("/searches/alice")).json() == {}

    @pytest.mark.asyncio
    async def test_delete_without_searches(self, async_client, alice):
        response = await async_client.delete("/searches/alice")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_malformed_body(self, async_client, alice):
        response = await async_client.put("/searches/alice", content="{oops")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_user(self, async_client):
        response = await async_client.get("/searches/nobody")

        assert response.status_code == 404
        assert response.json() == {"user": "nobody"}
