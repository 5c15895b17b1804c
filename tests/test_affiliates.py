"""Integration tests for affiliate endpoints."""

from httpx import AsyncClient


async def create_affiliate(client: AsyncClient, title: str) -> dict:
    response = await client.put("/api/affiliates", json={"title": title})
    assert response.json()["succeeded"] is True
    return response.json()["data"]


class TestAffiliateDisplayOrder:
    async def test_new_affiliates_are_appended(self, client: AsyncClient) -> None:
        first = await create_affiliate(client, "First")
        second = await create_affiliate(client, "Second")
        third = await create_affiliate(client, "Third")

        assert [first["display_order"], second["display_order"], third["display_order"]] == [
            1,
            2,
            3,
        ]

    async def test_reorder_updates_listing(self, client: AsyncClient) -> None:
        first = await create_affiliate(client, "First")
        second = await create_affiliate(client, "Second")

        response = await client.post(
            "/api/affiliates/order",
            json={
                "items": [
                    {"id": first["id"], "display_order": 2},
                    {"id": second["id"], "display_order": 1},
                ]
            },
        )
        listed = await client.get("/api/affiliates")

        assert response.json()["messages"] == ["Affiliates display order was updated successfully"]
        assert [item["title"] for item in listed.json()["data"]] == ["Second", "First"]

    async def test_reorder_with_unknown_id_changes_nothing(self, client: AsyncClient) -> None:
        first = await create_affiliate(client, "First")

        response = await client.post(
            "/api/affiliates/order",
            json={
                "items": [
                    {"id": first["id"], "display_order": 9},
                    {"id": "ghost", "display_order": 1},
                ]
            },
        )
        fetched = await client.get(f"/api/affiliates/{first['id']}")

        assert response.json()["succeeded"] is False
        assert response.json()["messages"] == ["Affiliate not found. (ghost)"]
        assert fetched.json()["data"]["display_order"] == 1


class TestAffiliateCrud:
    async def test_update_and_delete(self, client: AsyncClient) -> None:
        affiliate = await create_affiliate(client, "Partner")

        updated = await client.post(
            "/api/affiliates",
            json={"id": affiliate["id"], "title": "Partner Ltd", "featured": True},
        )
        deleted = await client.delete(f"/api/affiliates/{affiliate['id']}")
        missing = await client.get(f"/api/affiliates/{affiliate['id']}")

        assert updated.json()["data"]["title"] == "Partner Ltd"
        assert updated.json()["data"]["display_order"] == 1
        assert deleted.json()["succeeded"] is True
        assert missing.json()["messages"] == ["Affiliate not found."]

    async def test_paged_search(self, client: AsyncClient) -> None:
        for title in ["Acme Tools", "Acme Paint", "Bolt Hardware"]:
            await create_affiliate(client, title)

        response = await client.get("/api/affiliates/paged", params={"search_text": "acme"})

        body = response.json()
        assert body["total_count"] == 2
        assert [item["title"] for item in body["data"]] == ["Acme Tools", "Acme Paint"]
