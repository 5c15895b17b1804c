"""Integration tests for school events and parent consent."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import (
    create_test_learner,
    create_test_parent,
    create_test_school_event,
)


def today_at(hour: int, days: int = 0) -> datetime:
    start = datetime.now(UTC).replace(hour=0, minute=0, second=0, microsecond=0)
    return start + timedelta(days=days, hours=hour)


class TestSchoolEventListing:
    async def test_default_lists_published_upcoming_by_start(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_school_event(db_session, "Next week", today_at(9, days=7))
        await create_test_school_event(db_session, "Tomorrow", today_at(9, days=1))
        await create_test_school_event(db_session, "Last week", today_at(9, days=-7))
        await create_test_school_event(db_session, "Draft", today_at(9, days=2), published=False)

        response = await client.get("/api/school-events/paged")

        assert [item["heading"] for item in response.json()["data"]] == [
            "Tomorrow",
            "Next week",
        ]

    async def test_archived_lists_past_events_newest_first(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_school_event(db_session, "Last month", today_at(9, days=-30))
        await create_test_school_event(db_session, "Last week", today_at(9, days=-7))
        await create_test_school_event(db_session, "Tomorrow", today_at(9, days=1))

        response = await client.get("/api/school-events/paged", params={"archived": "true"})

        assert [item["heading"] for item in response.json()["data"]] == [
            "Last week",
            "Last month",
        ]

    async def test_active_lists_only_today(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        await create_test_school_event(db_session, "Today", today_at(0) + timedelta(minutes=1))
        await create_test_school_event(db_session, "Tomorrow", today_at(9, days=1))

        response = await client.get("/api/school-events/paged", params={"active": "true"})

        assert [item["heading"] for item in response.json()["data"]] == ["Today"]

    async def test_filters_by_learner_and_parent(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(db_session, "Cara", [parent])
        await create_test_school_event(db_session, "Hers", today_at(9, days=1), [learner])
        await create_test_school_event(db_session, "Others", today_at(9, days=1))

        by_learner = await client.get(
            "/api/school-events/paged", params={"learner_id": learner.id}
        )
        by_parent = await client.get("/api/school-events/paged", params={"parent_id": parent.id})

        assert [item["heading"] for item in by_learner.json()["data"]] == ["Hers"]
        assert [item["heading"] for item in by_parent.json()["data"]] == ["Hers"]


class TestSchoolEventCrud:
    async def test_create_with_participants(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        learner = await create_test_learner(db_session, "Cara")

        created = await client.put(
            "/api/school-events",
            json={
                "heading": "Museum trip",
                "start_date": today_at(9, days=3).isoformat(),
                "published": True,
                "learner_ids": [learner.id, "unknown"],
            },
        )
        fetched = await client.get(f"/api/school-events/{created.json()['data']['id']}")

        assert created.json()["succeeded"] is True
        assert [item["id"] for item in fetched.json()["data"]["participants"]] == [learner.id]

    async def test_update_replaces_participants(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        first = await create_test_learner(db_session, "First")
        second = await create_test_learner(db_session, "Second")
        event = await create_test_school_event(db_session, "Trip", today_at(9, days=3), [first])

        await client.post(
            "/api/school-events",
            json={
                "id": event.id,
                "heading": "Trip",
                "start_date": today_at(9, days=3).isoformat(),
                "learner_ids": [second.id],
            },
        )
        fetched = await client.get(f"/api/school-events/{event.id}")

        assert [item["first_name"] for item in fetched.json()["data"]["participants"]] == [
            "Second"
        ]

    async def test_update_messages(self, client: AsyncClient) -> None:
        body = {"heading": "Trip", "start_date": today_at(9).isoformat()}

        without_id = await client.post("/api/school-events", json=body)
        unknown = await client.post("/api/school-events", json={**body, "id": "nope"})

        assert without_id.json()["messages"] == ["EventId is required."]
        assert unknown.json()["messages"] == ["No School Event found for ID 'nope'."]

    async def test_missing_event_and_delete(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        event = await create_test_school_event(db_session, "Trip", today_at(9, days=1))

        missing = await client.get("/api/school-events/nope")
        deleted = await client.delete(f"/api/school-events/{event.id}")
        again = await client.delete(f"/api/school-events/{event.id}")

        assert missing.json()["messages"] == ["No event found with ID 'nope'."]
        assert deleted.json()["messages"] == ["Event successfully removed"]
        assert again.json()["messages"] == ["Event not found."]


class TestConsent:
    async def test_learner_answers_start_unanswered(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna", email="anna@home.test")
        learner = await create_test_learner(db_session, "Cara", [parent])
        event = await create_test_school_event(
            db_session,
            "Trip",
            today_at(9, days=1),
            [learner],
            attendance_consent_required=True,
        )

        response = await client.get(f"/api/school-events/{event.id}/permissions/{learner.id}")

        data = response.json()["data"]
        assert data["attendance_consent_required"] is True
        assert data["attendance_consent_given"] is None
        assert data["transport_consent_given"] is None

    async def test_give_consent_twice_keeps_one_answer(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(db_session, "Cara", [parent])
        event = await create_test_school_event(db_session, "Trip", today_at(9, days=1), [learner])
        consent = {
            "event_id": event.id,
            "parent_id": parent.id,
            "learner_id": learner.id,
            "consent_type": "transport",
            "consent_direction": "to",
        }

        first = await client.put("/api/school-events/permissions", json=consent)
        await client.put(
            "/api/school-events/permissions",
            json={**consent, "granted": False, "consent_direction": "to_and_from"},
        )
        answers = await client.get(f"/api/school-events/{event.id}/permissions")
        state = await client.get(f"/api/school-events/{event.id}/permissions/{learner.id}")

        assert first.json()["messages"] == ["Consent granted"]
        assert len(answers.json()["data"]) == 1
        assert answers.json()["data"][0]["learner_name"] == "Cara Smith"
        assert state.json()["data"]["transport_consent_given"] is False
        assert state.json()["data"]["consent_direction"] == "to_and_from"

    async def test_parents_without_consent_duty_are_ignored(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna", require_consent=False)
        learner = await create_test_learner(db_session, "Cara", [parent])
        event = await create_test_school_event(db_session, "Trip", today_at(9, days=1), [learner])

        await client.put(
            "/api/school-events/permissions",
            json={
                "event_id": event.id,
                "parent_id": parent.id,
                "learner_id": learner.id,
                "consent_type": "attendance",
            },
        )
        state = await client.get(f"/api/school-events/{event.id}/permissions/{learner.id}")

        assert state.json()["data"]["attendance_consent_given"] is None

    async def test_retract(self, client: AsyncClient, db_session: AsyncSession) -> None:
        parent = await create_test_parent(db_session, "Anna")
        learner = await create_test_learner(db_session, "Cara", [parent])
        event = await create_test_school_event(db_session, "Trip", today_at(9, days=1), [learner])
        consent = {
            "event_id": event.id,
            "parent_id": parent.id,
            "learner_id": learner.id,
            "consent_type": "attendance",
        }

        await client.put("/api/school-events/permissions", json=consent)
        retracted = await client.post("/api/school-events/permissions/retract", json=consent)
        again = await client.post("/api/school-events/permissions/retract", json=consent)

        assert retracted.json()["messages"] == ["Consent was successfully retracted"]
        assert again.json()["messages"] == ["No matching consent record found."]

    async def test_parent_view_lists_participating_learners(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        parent = await create_test_parent(db_session, "Anna", email="anna@home.test")
        going = await create_test_learner(db_session, "Going", [parent])
        await create_test_learner(db_session, "Staying", [parent])
        event = await create_test_school_event(db_session, "Trip", today_at(9, days=1), [going])
        await client.put(
            "/api/school-events/permissions",
            json={
                "event_id": event.id,
                "parent_id": parent.id,
                "learner_id": going.id,
                "consent_type": "attendance",
            },
        )

        response = await client.get(
            "/api/school-events/permissions",
            params={"parent_email": "anna@home.test", "event_id": event.id},
        )
        unknown = await client.get(
            "/api/school-events/permissions",
            params={"parent_email": "nobody@home.test", "event_id": event.id},
        )

        data = response.json()["data"]
        assert [item["learner"]["first_name"] for item in data] == ["Going"]
        assert data[0]["attendance_consent_given"] is True
        assert unknown.json()["succeeded"] is True
        assert unknown.json()["data"] == []

    async def test_required_arguments(self, client: AsyncClient) -> None:
        parent_view = await client.get(
            "/api/school-events/permissions", params={"parent_email": "", "event_id": "e"}
        )

        assert parent_view.json()["messages"] == ["ParentEmail and EventId are required."]

    async def test_unknown_learner(self, client: AsyncClient) -> None:
        response = await client.get("/api/school-events/event/permissions/nobody")

        assert response.json()["messages"] == ["Learner not found."]
