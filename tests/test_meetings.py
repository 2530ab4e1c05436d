"""
Meeting endpoint tests.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.models.activity_log import ActivityLog

pytestmark = pytest.mark.asyncio

BASE_TIME = datetime(2030, 3, 1, 9, 0, tzinfo=timezone.utc)


async def _create_meeting(
    client: AsyncClient,
    title: str = "Underwriting sync",
    start: datetime = BASE_TIME,
    **kwargs: Any,
) -> dict:
    payload = {
        "title": title,
        "start_time": start.isoformat(),
        "end_time": (start + timedelta(hours=1)).isoformat(),
        **kwargs,
    }
    response = await client.post("/api/meetings", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateMeeting:
    async def test_create_meeting(
        self, client: AsyncClient, db: AsyncSession, current_team: dict
    ) -> None:
        data = await _create_meeting(
            client, location="Room 4", meeting_link="https://meet.example.com/abc"
        )
        assert data["status"] == "scheduled"
        assert data["location"] == "Room 4"
        assert data["team_id"] == current_team["id"]

        entry = (await db.execute(select(ActivityLog))).scalar_one()
        assert entry.action == "create"
        assert entry.entity_type == "meeting"
        assert entry.description == "Meeting scheduled: Underwriting sync"

    async def test_offset_is_normalised_to_utc(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        response = await client.post(
            "/api/meetings",
            json={
                "title": "Tokyo call",
                "start_time": "2030-03-01T18:00:00+09:00",
                "end_time": "2030-03-01T19:00:00+09:00",
            },
        )
        start = datetime.fromisoformat(response.json()["start_time"])
        assert start.replace(tzinfo=None) == datetime(2030, 3, 1, 9, 0)

    async def test_missing_times_rejected(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        response = await client.post("/api/meetings", json={"title": "No time"})
        assert response.status_code == 400


class TestListMeetings:
    async def test_latest_start_first(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        await _create_meeting(client, title="early", start=BASE_TIME)
        await _create_meeting(client, title="late", start=BASE_TIME + timedelta(days=2))
        await _create_meeting(client, title="middle", start=BASE_TIME + timedelta(days=1))

        response = await client.get("/api/meetings")
        assert [m["title"] for m in response.json()] == ["late", "middle", "early"]


class TestUpdateMeeting:
    async def test_cancel_meeting(
        self, client: AsyncClient, db: AsyncSession, current_team: dict
    ) -> None:
        meeting = await _create_meeting(client)
        response = await client.patch(
            f"/api/meetings/{meeting['id']}", json={"status": "cancelled"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert response.json()["title"] == "Underwriting sync"

        result = await db.execute(select(ActivityLog).where(ActivityLog.action == "update"))
        assert result.scalar_one().description == "Meeting updated: Underwriting sync"

    async def test_unchanged_update_stamps_updated_at(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        meeting = await _create_meeting(client)
        response = await client.patch(
            f"/api/meetings/{meeting['id']}", json={"status": meeting["status"]}
        )
        assert response.status_code == 200
        assert datetime.fromisoformat(response.json()["updated_at"]) > datetime.fromisoformat(
            meeting["updated_at"]
        )

    async def test_get_and_update_unknown_meeting(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        missing = uuid.uuid4()
        assert (await client.get(f"/api/meetings/{missing}")).status_code == 404
        response = await client.patch(f"/api/meetings/{missing}", json={"status": "completed"})
        assert response.status_code == 404
