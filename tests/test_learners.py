"""Integration tests for learner and parent endpoints."""

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizhub import models
from bizhub.domain.schools import Gender
from tests.conftest import create_test_learner, create_test_parent


class TestLearnerCrud:
    async def test_create_links_parents_with_their_consent_preference(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        asks = await create_test_parent(db_session, "Anna", require_consent=True)
        skips = await create_test_parent(db_session, "Ben", require_consent=False)

        response = await client.put(
            "/api/learners",
            json={"first_name": "Cara", "last_name": "Smith", "parent_ids": [asks.id, skips.id]},
        )
        learner_id = response.json()["data"]["id"]
        links = (
            await db_session.execute(
                select(models.LearnerParent).where(models.LearnerParent.learner_id == learner_id)
            )
        ).scalars().all()

        assert response.json()["succeeded"] is True
        assert {(link.parent_id, link.parent_consent_required) for link in links} == {
            (asks.id, True),
            (skips.id, False),
        }

    async def test_get_includes_parents_and_age(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(
            db_session, "Cara", [parent], id_number="0501015009087"
        )

        response = await client.get(f"/api/learners/{learner.id}")

        data = response.json()["data"]
        assert [item["first_name"] for item in data["parents"]] == ["Anna"]
        assert data["age"] >= 20

    async def test_missing_learner_message(self, client: AsyncClient) -> None:
        response = await client.get("/api/learners/missing")

        assert response.json()["messages"] == ["No learner matching id 'missing' found."]

    async def test_update_replaces_parent_links(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        old = await create_test_parent(db_session, "Old")
        new = await create_test_parent(db_session, "New")
        learner = await create_test_learner(db_session, "Cara", [old])

        response = await client.post(
            "/api/learners",
            json={
                "id": learner.id,
                "first_name": "Cara",
                "last_name": "Jones",
                "parent_ids": [new.id],
            },
        )
        parents = await client.get(f"/api/learners/{learner.id}/parents")

        assert response.json()["messages"] == ["Learner updated successfully"]
        assert response.json()["data"]["last_name"] == "Jones"
        assert [item["first_name"] for item in parents.json()["data"]] == ["New"]

    async def test_update_without_parent_ids_keeps_links(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(db_session, "Cara", [parent])

        await client.post(
            "/api/learners", json={"id": learner.id, "first_name": "Cora", "last_name": "Smith"}
        )
        parents = await client.get(f"/api/learners/{learner.id}/parents")

        assert [item["first_name"] for item in parents.json()["data"]] == ["Anna"]

    async def test_update_unknown_learner(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/learners", json={"id": "nope", "first_name": "A", "last_name": "B"}
        )

        assert response.json()["succeeded"] is False
        assert response.json()["messages"] == [
            "No learner matching id 'nope' found in the datastore"
        ]

    async def test_delete(self, client: AsyncClient, db_session: AsyncSession) -> None:
        learner = await create_test_learner(db_session, "Gone")

        response = await client.delete(f"/api/learners/{learner.id}")
        count = await client.get("/api/learners/count")

        assert response.json()["messages"] == ["Learner removed successfully"]
        assert count.json()["data"] == 0


class TestLearnerQueries:
    async def test_filters_by_gender_and_age(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        born_2020, born_1990 = "2001015009087", "9001015009087"
        await create_test_learner(db_session, "Young", gender=Gender.FEMALE, id_number=born_2020)
        await create_test_learner(db_session, "Older", gender=Gender.FEMALE, id_number=born_1990)
        await create_test_learner(db_session, "Boy", gender=Gender.MALE, id_number=born_2020)

        response = await client.get("/api/learners", params={"gender": "female", "max_age": 18})

        assert [item["first_name"] for item in response.json()["data"]] == ["Young"]

    async def test_gender_all_matches_everyone(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_learner(db_session, "Girl", gender=Gender.FEMALE)
        await create_test_learner(db_session, "Boy", gender=Gender.MALE)

        response = await client.get("/api/learners", params={"gender": "all"})

        assert len(response.json()["data"]) == 2

    async def test_paged_filters_by_parent(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        await create_test_learner(db_session, "Mine", [parent])
        await create_test_learner(db_session, "Other")

        response = await client.get("/api/learners/paged", params={"parent_id": parent.id})

        assert [item["first_name"] for item in response.json()["data"]] == ["Mine"]
        assert response.json()["total_count"] == 1

    async def test_lookup_by_email(self, client: AsyncClient, db_session: AsyncSession) -> None:
        learner = await create_test_learner(db_session, "Cara", email="cara@school.test")

        found = await client.get("/api/learners/byEmail/cara@school.test")
        exists = await client.get("/api/learners/exists/cara@school.test")
        unused = await client.get("/api/learners/exists/nobody@school.test")
        missing = await client.get("/api/learners/byEmail/nobody@school.test")

        assert found.json()["data"]["id"] == learner.id
        assert exists.json()["data"] == learner.id
        assert unused.json()["data"] is None
        assert missing.json()["messages"] == ["No learner found."]


class TestParents:
    async def test_update_carries_consent_preference_to_links(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna", require_consent=True)
        learner = await create_test_learner(db_session, "Cara", [parent])

        response = await client.post(
            "/api/parents",
            json={
                "id": parent.id,
                "first_name": "Anna",
                "last_name": "Smith",
                "require_consent": False,
            },
        )
        link = (
            await db_session.execute(
                select(models.LearnerParent)
                .where(models.LearnerParent.learner_id == learner.id)
                .execution_options(populate_existing=True)
            )
        ).scalar_one()

        assert response.json()["messages"] == ["Parent updated successfully."]
        assert link.parent_consent_required is False

    async def test_add_and_remove_learner(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(db_session, "Cara")

        added = await client.put(f"/api/parents/{parent.id}/learners/{learner.id}")
        linked = await client.get(f"/api/parents/{parent.id}/learners")
        removed = await client.delete(f"/api/parents/{parent.id}/learners/{learner.id}")
        again = await client.delete(f"/api/parents/{parent.id}/learners/{learner.id}")

        assert added.json()["succeeded"] is True
        assert [item["first_name"] for item in linked.json()["data"]] == ["Cara"]
        assert removed.json()["succeeded"] is True
        assert again.json()["succeeded"] is False

    async def test_search_and_lookup(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await create_test_parent(db_session, "Anna", email="anna@home.test")
        await create_test_parent(db_session, "Ben", email="ben@home.test")

        paged = await client.get("/api/parents/paged", params={"search_text": "anna"})
        by_email = await client.get("/api/parents/byEmail/ben@home.test")
        missing = await client.get("/api/parents/nope")

        assert [item["first_name"] for item in paged.json()["data"]] == ["Anna"]
        assert by_email.json()["data"]["first_name"] == "Ben"
        assert missing.json()["messages"] == ["No parent found"]

    async def test_delete_keeps_learner(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(db_session, "Cara", [parent])

        response = await client.delete(f"/api/parents/{parent.id}")
        fetched = await client.get(f"/api/learners/{learner.id}")

        assert response.json()["messages"] == ["Parent Removed successfully"]
        assert fetched.json()["data"]["parents"] == []
