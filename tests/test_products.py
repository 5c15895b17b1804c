"""Integration tests for product endpoints."""

from fastapi import status
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import create_test_product


class TestProductPaging:
    async def test_defaults_to_twelve_per_page_by_name(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        names = [f"Product {letter}" for letter in "MLKJIHGFEDCBA"]
        for name in names:
            await create_test_product(db_session, name)

        response = await client.get("/api/products/paged")

        body = response.json()
        assert body["page_size"] == 12
        assert body["total_count"] == 13
        assert body["has_next"] is True
        assert [item["name"] for item in body["data"]] == sorted(names)[:12]

    async def test_filters_by_featured_and_owner(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_product(db_session, "Featured Mine", featured=True, shop_owner_id="s1")
        await create_test_product(db_session, "Plain Mine", featured=False, shop_owner_id="s1")
        await create_test_product(db_session, "Featured Other", featured=True, shop_owner_id="s2")

        response = await client.get(
            "/api/products/paged", params={"featured": "true", "shop_owner_id": "s1"}
        )

        assert [item["name"] for item in response.json()["data"]] == ["Featured Mine"]

    async def test_search_matches_description(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_product(db_session, "Kettle", description="Stainless steel")
        await create_test_product(db_session, "Toaster", description="Four slots")

        response = await client.get("/api/products/paged", params={"search_text": "steel"})

        assert [item["name"] for item in response.json()["data"]] == ["Kettle"]

    async def test_search_treats_wildcards_literally(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_product(db_session, "50% Off Mug", slug="half-off-mug")
        await create_test_product(db_session, "500 Club Mug", slug="club-mug")
        await create_test_product(db_session, "Mug_Large", slug="mug-large")
        await create_test_product(db_session, "MugXLarge", slug="mug-xlarge")

        percent = await client.get("/api/products/paged", params={"search_text": "50%"})
        underscore = await client.get("/api/products/paged", params={"search_text": "mug_"})

        assert [item["name"] for item in percent.json()["data"]] == ["50% Off Mug"]
        assert [item["name"] for item in underscore.json()["data"]] == ["Mug_Large"]

    async def test_page_far_past_the_end_is_empty(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_product(db_session, "Only")

        response = await client.get("/api/products/paged", params={"page_nr": 10**19})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["succeeded"] is True
        assert body["data"] == []
        assert body["total_count"] == 1

    async def test_rejects_oversized_page(self, client: AsyncClient) -> None:
        response = await client.get("/api/products/paged", params={"page_size": 101})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestProductCrud:
    async def test_create_generates_slug_and_display_name(self, client: AsyncClient) -> None:
        response = await client.put(
            "/api/products",
            json={"name": "Red Running Shoes!", "pricing": {"selling_price": "120.00"}},
        )

        data = response.json()["data"]
        assert data["slug"] == "red-running-shoes"
        assert data["display_name"] == "Red Running Shoes!"
        assert data["pricing"]["selling_price"] == "120.00"

    async def test_update_creates_missing_pricing(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        product = await create_test_product(db_session, "Lamp")

        response = await client.post(
            "/api/products",
            json={
                "id": product.id,
                "name": "Desk Lamp",
                "pricing": {"cost_excl": "10.00", "selling_price": "25.00"},
            },
        )
        fetched = await client.get(f"/api/products/{product.id}")

        assert response.json()["succeeded"] is True
        data = fetched.json()["data"]
        assert data["name"] == "Desk Lamp"
        assert data["slug"] == "desk-lamp"
        assert data["pricing"]["selling_price"] == "25.00"

    async def test_missing_product_message(self, client: AsyncClient) -> None:
        response = await client.get("/api/products/abc")

        assert response.json()["messages"] == [
            "No product with id matching 'abc' was found in the database"
        ]

    async def test_variants_are_listed(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_product(db_session, "T-Shirt")
        await create_test_product(db_session, "T-Shirt Large", variant_parent_id=parent.id)
        await create_test_product(db_session, "T-Shirt Small", variant_parent_id=parent.id)

        listed = await client.get(f"/api/products/{parent.id}/variants")
        fetched = await client.get(f"/api/products/{parent.id}")

        assert [item["name"] for item in listed.json()["data"]] == [
            "T-Shirt Large",
            "T-Shirt Small",
        ]
        assert len(fetched.json()["data"]["variants"]) == 2

    async def test_delete(self, client: AsyncClient, db_session: AsyncSession) -> None:
        product = await create_test_product(db_session, "Old Stock")

        response = await client.delete(f"/api/products/{product.id}")

        assert response.json()["messages"] == ["Product was successfully removed"]
