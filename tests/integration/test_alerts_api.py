"""
Integration tests for the global alerts endpoints.

Dates are far in the past or future so the active window does not depend on
when the tests run.
"""

import uuid

import pytest

PAST = "2000-01-01T00:00:00Z"
FUTURE = "2099-01-01T00:00:00Z"
LATER_FUTURE = "2099-06-01T00:00:00Z"


async def _create(client, **body) -> dict:
    response = await client.post("/alerts/", json=body)
    assert response.status_code == 201
    return response.json()


class TestAlertGreeting:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/alerts/", "/alerts"])
    async def test_greeting(self, async_client, path):
        response = await async_client.get(path)

        assert response.status_code == 200
        assert response.text == "Hello from alerts.\n"


class TestCreateAlert:
    """Tests for POST /alerts."""

    @pytest.mark.asyncio
    async def test_create(self, async_client):
        alert = await _create(async_client, end_date=FUTURE, alert="Scheduled maintenance")

        assert alert["alert"] == "Scheduled maintenance"
        assert alert["start_date"] is None
        assert alert["end_date"].startswith("2099-01-01T00:00:00")
        uuid.UUID(alert["id"])

    @pytest.mark.asyncio
    async def test_create_without_trailing_slash(self, async_client):
        response = await async_client.post("/alerts", json={"end_date": FUTURE, "alert": "x"})

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_offset_dates_are_stored_in_utc(self, async_client):
        alert = await _create(async_client, end_date="2099-01-01T02:00:00+02:00", alert="x")

        assert alert["end_date"].startswith("2099-01-01T00:00:00")

    @pytest.mark.asyncio
    async def test_missing_end_date(self, async_client):
        response = await async_client.post("/alerts/", json={"alert": "no end"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "bad_request"

    @pytest.mark.asyncio
    async def test_invalid_date(self, async_client):
        response = await async_client.post("/alerts/", json={"end_date": "soon", "alert": "x"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_body(self, async_client):
        response = await async_client.post("/alerts/", content="{oops")

        assert response.status_code == 400


class TestListAlerts:
    """Tests for GET /alerts/all and /alerts/active."""

    @pytest.mark.asyncio
    async def test_empty(self, async_client):
        assert (await async_client.get("/alerts/all")).json() == {"alerts": []}
        assert (await async_client.get("/alerts/active")).json() == {"alerts": []}

    @pytest.mark.asyncio
    async def test_all_sorted_by_end_date(self, async_client):
        await _create(async_client, end_date=LATER_FUTURE, alert="later")
        await _create(async_client, end_date=PAST, alert="expired")
        await _create(async_client, end_date=FUTURE, alert="sooner")

        alerts = (await async_client.get("/alerts/all")).json()["alerts"]

        assert [a["alert"] for a in alerts] == ["expired", "sooner", "later"]

    @pytest.mark.asyncio
    async def test_active(self, async_client):
        await _create(async_client, end_date=LATER_FUTURE, alert="open-ended")
        await _create(async_client, start_date=PAST, end_date=FUTURE, alert="running")
        await _create(async_client, start_date=FUTURE, end_date=LATER_FUTURE, alert="scheduled")
        await _create(async_client, end_date=PAST, alert="expired")

        alerts = (await async_client.get("/alerts/active")).json()["alerts"]

        assert [a["alert"] for a in alerts] == ["running", "open-ended"]
        assert alerts[0]["start_date"].startswith("2000-01-01T00:00:00")


class TestDeleteAlert:
    """Tests for DELETE /alerts and /alerts/{alert_id}."""

    @pytest.mark.asyncio
    async def test_delete_by_end_date_and_text(self, async_client):
        await _create(async_client, end_date=FUTURE, alert="maintenance")
        await _create(async_client, end_date=FUTURE, alert="maintenance")
        await _create(async_client, end_date=FUTURE, alert="keep")

        response = await async_client.request(
            "DELETE", "/alerts/", json={"end_date": FUTURE, "alert": "maintenance"}
        )

        assert response.status_code == 200
        alerts = (await async_client.get("/alerts/all")).json()["alerts"]
        assert [a["alert"] for a in alerts] == ["keep"]

    @pytest.mark.asyncio
    async def test_delete_requires_exact_end_date(self, async_client):
        await _create(async_client, end_date=FUTURE, alert="maintenance")

        response = await async_client.request(
            "DELETE", "/alerts", json={"end_date": LATER_FUTURE, "alert": "maintenance"}
        )

        assert response.status_code == 200
        assert len((await async_client.get("/alerts/all")).json()["alerts"]) == 1

    @pytest.mark.asyncio
    async def test_delete_malformed_body(self, async_client):
        response = await async_client.request("DELETE", "/alerts/", content="{oops")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_by_id(self, async_client):
        alert = await _create(async_client, end_date=FUTURE, alert="maintenance")

        response = await async_client.delete(f"/alerts/{alert['id']}")

        assert response.status_code == 200
        assert (await async_client.get("/alerts/all")).json() == {"alerts": []}

    @pytest.mark.asyncio
    async def test_delete_by_id_missing(self, async_client):
        response = await async_client.delete(f"/alerts/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "alert_not_found"

    @pytest.mark.asyncio
    async def test_delete_by_invalid_id(self, async_client):
        response = await async_client.delete("/alerts/not-a-uuid")

        assert response.status_code == 400
