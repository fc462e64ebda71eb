"""
HTTP API tests.
"""

import pytest

from app.config import settings
from conftest import user_payload


async def register(client, **overrides):
    response = await client.post("/api/users", json=user_payload(**overrides))
    assert response.status_code == 200
    return response.json()


async def run_scan(client, user_id):
    response = await client.post("/api/scans", json={"user_id": user_id})
    assert response.status_code == 200
    return response.json()


class TestUsers:

    @pytest.mark.asyncio
    async def test_create_user_sets_session_cookie(self, make_client):
        client = make_client()

        response = await client.post("/api/users", json=user_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "j@d.com"
        assert data["first_name"] == "John"
        assert data["id"]
        assert settings.session_cookie_name in response.cookies

    @pytest.mark.asyncio
    async def test_duplicate_email(self, make_client):
        client = make_client()
        await register(client)

        response = await make_client().post("/api/users", json=user_payload(first_name="Jane"))

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_invalid_payload(self, make_client):
        client = make_client()

        missing = user_payload()
        del missing["city"]
        assert (await client.post("/api/users", json=missing)).status_code == 400
        assert (await client.post("/api/users", json=user_payload(email="not-an-email"))).status_code == 400
        assert (await client.post("/api/users", json=user_payload(first_name=""))).status_code == 400

    @pytest.mark.asyncio
    async def test_get_by_email(self, make_client):
        client = make_client()
        user = await register(client)

        response = await client.get("/api/users/by-email/j@d.com")
        assert response.status_code == 200
        assert response.json()["id"] == user["id"]

        assert (await client.get("/api/users/by-email/nobody@d.com")).status_code == 404

    @pytest.mark.asyncio
    async def test_get_by_email_of_other_user(self, make_client):
        await register(make_client())
        other = make_client()
        await register(other, email="other@d.com")

        assert (await other.get("/api/users/by-email/j@d.com")).status_code == 403

    @pytest.mark.asyncio
    async def test_latest_scan(self, make_client):
        client = make_client()
        user = await register(client)

        assert (await client.get(f"/api/users/{user['id']}/latest-scan")).status_code == 404

        scan = await run_scan(client, user["id"])
        response = await client.get(f"/api/users/{user['id']}/latest-scan")
        assert response.status_code == 200
        assert response.json()["id"] == scan["id"]

    @pytest.mark.asyncio
    async def test_latest_scan_of_other_user(self, make_client):
        user = await register(make_client())
        other = make_client()
        await register(other, email="other@d.com")

        assert (await other.get(f"/api/users/{user['id']}/latest-scan")).status_code == 403


class TestScans:

    @pytest.mark.asyncio
    async def test_scan_flow(self, make_client):
        from app.workers.runner import wait_for_background_tasks

        client = make_client()
        user = await register(client)

        scan = await run_scan(client, user["id"])
        assert scan["status"] == "running"
        assert scan["user_id"] == user["id"]

        await wait_for_background_tasks(timeout=10)
        response = await client.get(f"/api/scans/{scan['id']}/results")

        assert response.status_code == 200
        data = response.json()
        assert data["scan"]["status"] == "completed"
        assert data["scan"]["sites_scanned"] == 20
        assert data["scan"]["sites_found"] == len(data["exposures"]) == 11
        assert data["exposures"][0]["broker"]["name"] == "Spokeo"
        assert data["exposures"][0]["profile_url"] == "https://www.spokeo.com/profile/John-Doe"

    @pytest.mark.asyncio
    async def test_scan_requires_user_id(self, make_client):
        client = make_client()
        await register(client)

        assert (await client.post("/api/scans", json={})).status_code == 400

    @pytest.mark.asyncio
    async def test_scan_for_other_user(self, make_client):
        user = await register(make_client())
        other = make_client()
        await register(other, email="other@d.com")

        assert (await other.post("/api/scans", json={"user_id": user["id"]})).status_code == 403

    @pytest.mark.asyncio
    async def test_requires_session(self, make_client):
        client = make_client()
        user = await register(client)
        scan = await run_scan(client, user["id"])

        anonymous = make_client()
        assert (await anonymous.post("/api/scans", json={"user_id": user["id"]})).status_code == 401
        assert (await anonymous.get(f"/api/scans/{scan['id']}/results")).status_code == 401

    @pytest.mark.asyncio
    async def test_bearer_token(self, make_client):
        from app.api.session import create_session_token

        client = make_client()
        user = await register(client)
        scan = await run_scan(client, user["id"])

        anonymous = make_client()
        response = await anonymous.get(
            f"/api/scans/{scan['id']}/results",
            headers={"Authorization": f"Bearer {create_session_token(user['id'])}"},
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_garbage_session_cookie(self, make_client):
        client = make_client()
        client.cookies.set(settings.session_cookie_name, "not-a-jwt")

        assert (await client.post("/api/scans", json={"user_id": "x"})).status_code == 401

    @pytest.mark.asyncio
    async def test_results_of_other_user(self, make_client):
        client = make_client()
        user = await register(client)
        scan = await run_scan(client, user["id"])

        other = make_client()
        await register(other, email="other@d.com")

        assert (await other.get(f"/api/scans/{scan['id']}/results")).status_code == 403
        assert (await other.post(f"/api/scans/{scan['id']}/remove")).status_code == 403
        assert (await other.get(f"/api/scans/{scan['id']}/removal-progress")).status_code == 403

    @pytest.mark.asyncio
    async def test_missing_scan(self, make_client):
        client = make_client()
        await register(client)

        assert (await client.get("/api/scans/no-such-scan/results")).status_code == 404
        assert (await client.post("/api/scans/no-such-scan/remove")).status_code == 404


class TestRemoval:

    async def _scanned(self, make_client):
        from app.workers.runner import wait_for_background_tasks

        client = make_client()
        user = await register(client)
        scan = await run_scan(client, user["id"])
        await wait_for_background_tasks(timeout=10)
        return client, scan

    @pytest.mark.asyncio
    async def test_remove_and_progress(self, make_client):
        from app.workers.runner import wait_for_background_tasks

        client, scan = await self._scanned(make_client)

        response = await client.post(f"/api/scans/{scan['id']}/remove")
        assert response.status_code == 200
        assert response.json() == {"message": "Removal process started"}

        await wait_for_background_tasks(timeout=10)
        response = await client.get(f"/api/scans/{scan['id']}/removal-progress")

        assert response.status_code == 200
        data = response.json()
        assert data["stats"] == {
            "total": 11,
            "completed": 4,
            "in_progress": 6,
            "pending": 0,
            "action_required": 1,
            "failed": 0,
        }
        intelius = next(r for r in data["requests"] if r["broker"]["name"] == "Intelius")
        assert intelius["status"] == "action-required"
        assert intelius["action_required"] == "id-verification"
        assert intelius["exposure"]["scan_id"] == scan["id"]

    @pytest.mark.asyncio
    async def test_progress_without_requests(self, make_client):
        client, scan = await self._scanned(make_client)

        response = await client.get(f"/api/scans/{scan['id']}/removal-progress")

        assert response.status_code == 200
        assert response.json()["stats"]["total"] == 0
        assert response.json()["requests"] == []

    @pytest.mark.asyncio
    async def test_manual_status_update(self, make_client):
        from app.workers.runner import wait_for_background_tasks

        client, scan = await self._scanned(make_client)
        await client.post(f"/api/scans/{scan['id']}/remove")
        await wait_for_background_tasks(timeout=10)
        progress = (await client.get(f"/api/scans/{scan['id']}/removal-progress")).json()
        request_id = progress["requests"][0]["id"]

        response = await client.patch(
            f"/api/removal-requests/{request_id}",
            json={"status": "completed", "notes": "Confirmed by broker"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["notes"] == "Confirmed by broker"
        assert data["completed_at"] is not None

    @pytest.mark.asyncio
    async def test_manual_status_update_errors(self, make_client):
        client = make_client()

        missing = await client.patch("/api/removal-requests/no-such-request", json={"status": "completed"})
        assert missing.status_code == 404

        invalid = await client.patch("/api/removal-requests/no-such-request", json={"status": "done"})
        assert invalid.status_code == 400

        no_status = await client.patch("/api/removal-requests/no-such-request", json={})
        assert no_status.status_code == 400


class TestBrokers:

    @pytest.mark.asyncio
    async def test_list_in_catalog_order(self, make_client):
        response = await make_client().get("/api/data-brokers")

        assert response.status_code == 200
        brokers = response.json()
        assert len(brokers) == 20
        assert brokers[0]["name"] == "Whitepages"
        assert brokers[0]["required_info"][0] == "Full Name"

    @pytest.mark.asyncio
    async def test_get_one(self, make_client):
        client = make_client()
        first = (await client.get("/api/data-brokers")).json()[0]

        response = await client.get(f"/api/data-brokers/{first['id']}")
        assert response.status_code == 200
        assert response.json() == first

        assert (await client.get("/api/data-brokers/no-such-broker")).status_code == 404


class TestRemovalForm:

    @pytest.mark.asyncio
    async def test_removal_form(self, make_client):
        from app.workers.runner import wait_for_background_tasks

        client = make_client()
        user = await register(client)
        scan = await run_scan(client, user["id"])
        await wait_for_background_tasks(timeout=10)
        exposure = (await client.get(f"/api/scans/{scan['id']}/results")).json()["exposures"][0]

        response = await client.get(f"/api/exposures/{exposure['id']}/removal-form")

        assert response.status_code == 200
        form = response.json()
        assert form["broker"]["name"] == "Spokeo"
        assert form["user_data"]["full_name"] == "John Doe"
        assert form["profile_url"] == exposure["profile_url"]
        assert "Dear Spokeo Privacy Team," in form["form_template"]

        other = make_client()
        await register(other, email="other@d.com")
        assert (await other.get(f"/api/exposures/{exposure['id']}/removal-form")).status_code == 403

        assert (await client.get("/api/exposures/no-such-exposure/removal-form")).status_code == 404


@pytest.mark.asyncio
async def test_health(make_client):
    client = make_client()
    assert (await client.get("/health")).json() == {"status": "healthy"}
    assert (await client.get("/")).json()["name"] == settings.app_name
