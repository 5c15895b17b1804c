"""Integration tests for advertisement and tier endpoints."""

from datetime import UTC, datetime, timedelta

from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from bizhub.domain.advertising import ReviewStatus
from tests.conftest import create_test_advertisement, create_test_tier


class TestAdvertisementCrud:
    """Create, read, update and delete advertisements over HTTP."""

    async def test_create_returns_persisted_advertisement(self, client: AsyncClient) -> None:
        response = await client.put(
            "/api/advertisements",
            json={"title": "Grand Opening", "advertisement_type": "sidebar", "user_id": "u-1"},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["succeeded"] is True
        assert body["data"]["id"]
        assert body["data"]["status"] == "pending"
        assert body["data"]["advertisement_type"] == "sidebar"

    async def test_create_rejects_blank_title(self, client: AsyncClient) -> None:
        response = await client.put("/api/advertisements", json={"title": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_get_includes_tier(self, client: AsyncClient, db_session: AsyncSession) -> None:
        tier = await create_test_tier(db_session)
        advertisement = await create_test_advertisement(db_session, tier=tier)

        response = await client.get(f"/api/advertisements/{advertisement.id}")

        body = response.json()
        assert body["succeeded"] is True
        assert body["data"]["advertisement_tier"]["name"] == "Gold"

    async def test_get_missing_reports_failure(self, client: AsyncClient) -> None:
        response = await client.get("/api/advertisements/missing")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "succeeded": False,
            "messages": ["Advertisement not found."],
            "data": None,
        }

    async def test_update_keeps_tier_when_none_given(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        tier = await create_test_tier(db_session)
        advertisement = await create_test_advertisement(db_session, tier=tier, user_id="owner")

        response = await client.post(
            "/api/advertisements",
            json={"id": advertisement.id, "title": "Renamed", "user_id": ""},
        )

        data = response.json()["data"]
        assert data["title"] == "Renamed"
        assert data["advertisement_tier_id"] == tier.id
        assert data["user_id"] == "owner"

    async def test_delete_then_get_fails(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        advertisement = await create_test_advertisement(db_session)

        deleted = await client.delete(f"/api/advertisements/{advertisement.id}")
        fetched = await client.get(f"/api/advertisements/{advertisement.id}")

        assert deleted.json()["succeeded"] is True
        assert fetched.json()["succeeded"] is False

    async def test_delete_missing_reports_failure(self, client: AsyncClient) -> None:
        response = await client.delete("/api/advertisements/missing")

        assert response.json()["messages"] == ["Entity with ID missing not found."]


class TestAdvertisementModeration:
    async def test_approve_and_reject(self, client: AsyncClient, db_session: AsyncSession) -> None:
        advertisement = await create_test_advertisement(db_session)

        approved = await client.post(f"/api/advertisements/approve/{advertisement.id}")
        after_approve = await client.get(f"/api/advertisements/{advertisement.id}")
        rejected = await client.post(f"/api/advertisements/reject/{advertisement.id}")
        after_reject = await client.get(f"/api/advertisements/{advertisement.id}")

        assert approved.json()["succeeded"] is True
        assert after_approve.json()["data"]["status"] == "approved"
        assert rejected.json()["succeeded"] is True
        assert after_reject.json()["data"]["status"] == "rejected"

    async def test_approve_missing_fails(self, client: AsyncClient) -> None:
        response = await client.post("/api/advertisements/approve/missing")

        assert response.json()["succeeded"] is False
        assert response.json()["messages"] == ["Advertisement not found."]


class TestAdvertisementListings:
    async def test_active_only_returns_running_approved_advertisements(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        now = datetime.now(UTC)
        running = {"start_date": now - timedelta(days=1), "end_date": now + timedelta(days=1)}
        await create_test_advertisement(
            db_session, "Live", ReviewStatus.APPROVED, setup_completed=True, **running
        )
        await create_test_advertisement(
            db_session, "Awaiting review", ReviewStatus.PENDING, setup_completed=True, **running
        )
        await create_test_advertisement(
            db_session, "Not set up", ReviewStatus.APPROVED, setup_completed=False, **running
        )
        await create_test_advertisement(
            db_session,
            "Expired",
            ReviewStatus.APPROVED,
            setup_completed=True,
            start_date=now - timedelta(days=10),
            end_date=now - timedelta(days=5),
        )

        response = await client.get("/api/advertisements/active")

        assert [item["title"] for item in response.json()["data"]] == ["Live"]

    async def test_paged_filters_by_status(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        for index in range(3):
            await create_test_advertisement(db_session, f"Approved {index}", ReviewStatus.APPROVED)
        await create_test_advertisement(db_session, "Pending", ReviewStatus.PENDING)

        response = await client.get(
            "/api/advertisements/paged",
            params={"status": "approved", "page_size": 2, "order_by": "Title"},
        )

        body = response.json()
        assert body["succeeded"] is True
        assert body["total_count"] == 3
        assert body["total_pages"] == 2
        assert body["has_next"] is True
        assert [item["title"] for item in body["data"]] == ["Approved 0", "Approved 1"]

    async def test_paged_rejects_zero_page_size(self, client: AsyncClient) -> None:
        response = await client.get("/api/advertisements/paged", params={"page_size": 0})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestAdvertisementTiers:
    async def test_tier_crud(self, client: AsyncClient) -> None:
        created = await client.put(
            "/api/advertisement-tiers", json={"name": "Silver", "price": "49.99", "days": 14}
        )
        tier_id = created.json()["data"]["id"]

        updated = await client.post(
            "/api/advertisement-tiers",
            json={"id": tier_id, "name": "Silver Plus", "price": "59.99", "days": 21},
        )
        listed = await client.get("/api/advertisement-tiers")
        removed = await client.delete(f"/api/advertisement-tiers/{tier_id}")
        missing = await client.get(f"/api/advertisement-tiers/{tier_id}")

        assert updated.json()["data"]["name"] == "Silver Plus"
        assert [tier["name"] for tier in listed.json()["data"]] == ["Silver Plus"]
        assert removed.json()["messages"] == ["Advertisement tier was successfully removed"]
        assert missing.json()["messages"] == ["Advertisement tier not found."]

    async def test_deleting_tier_keeps_advertisements(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        tier = await create_test_tier(db_session)
        advertisement = await create_test_advertisement(db_session, tier=tier)

        await client.delete(f"/api/advertisement-tiers/{tier.id}")
        response = await client.get(f"/api/advertisements/{advertisement.id}")

        data = response.json()["data"]
        assert data["advertisement_tier_id"] is None
        assert data["advertisement_tier"] is None
