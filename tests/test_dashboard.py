"""
Dashboard tests.
Covers: metric counters, the day window, recent activity, today's meetings.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from httpx import AsyncClient

from teamdesk.core.config import settings
from teamdesk.services.metrics_service import day_window


async def _meeting(client: AsyncClient, title: str, start: datetime) -> dict:
    response = await client.post(
        "/api/meetings",
        json={
            "title": title,
            "start_time": start.isoformat(),
            "end_time": (start + timedelta(minutes=30)).isoformat(),
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
class TestMetrics:
    async def test_empty_team(self, client: AsyncClient, current_team: dict) -> None:
        response = await client.get("/api/dashboard/metrics")
        assert response.status_code == 200
        assert response.json() == {
            "active_tasks": 0,
            "documents_today": 0,
            "meetings_today": 0,
            "pending_reviews": 0,
        }

    async def test_active_tasks_counts_pending_only(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        for i in range(3):
            await client.post("/api/tasks", json={"title": f"pending {i}"})
        await client.post("/api/tasks", json={"title": "done", "status": "completed"})
        await client.post("/api/tasks", json={"title": "started", "status": "in_progress"})

        metrics = (await client.get("/api/dashboard/metrics")).json()
        assert metrics["active_tasks"] == 3

    async def test_documents_today_and_pending_reviews(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        files = [
            ("files", ("a.pdf", b"a", "application/pdf")),
            ("files", ("b.pdf", b"b", "application/pdf")),
        ]
        docs = (await client.post("/api/documents/upload", files=files)).json()
        await client.patch(f"/api/documents/{docs[0]['id']}", json={"status": "approved"})

        metrics = (await client.get("/api/dashboard/metrics")).json()
        assert metrics["documents_today"] == 2
        assert metrics["pending_reviews"] == 1

    async def test_meetings_today(self, client: AsyncClient, current_team: dict) -> None:
        start, end = day_window(tz=settings.dashboard_tzinfo)
        await _meeting(client, "standup", start + timedelta(minutes=1))
        await _meeting(client, "tomorrow", end + timedelta(hours=1))
        await _meeting(client, "yesterday", start - timedelta(hours=1))

        metrics = (await client.get("/api/dashboard/metrics")).json()
        assert metrics["meetings_today"] == 1

    async def test_other_team_not_counted(
        self, client: AsyncClient, default_teams: list[dict]
    ) -> None:
        await client.post(
            "/api/tasks",
            json={"title": "elsewhere"},
            headers={"X-Team-Id": default_teams[3]["id"]},
        )
        metrics = (await client.get("/api/dashboard/metrics")).json()
        assert metrics["active_tasks"] == 0


@pytest.mark.asyncio
class TestTodaysMeetings:
    async def test_ordered_by_start(self, client: AsyncClient, current_team: dict) -> None:
        start, end = day_window(tz=settings.dashboard_tzinfo)
        await _meeting(client, "afternoon", start + timedelta(hours=2))
        await _meeting(client, "morning", start + timedelta(hours=1))
        await _meeting(client, "next day", end)

        response = await client.get("/api/dashboard/todays-meetings")
        assert response.status_code == 200
        assert [m["title"] for m in response.json()] == ["morning", "afternoon"]


@pytest.mark.asyncio
class TestRecentActivity:
    async def test_limit_and_order(self, client: AsyncClient, current_team: dict) -> None:
        for i in range(12):
            await client.post("/api/tasks", json={"title": f"task {i}"})

        response = await client.get("/api/dashboard/recent-activity")
        assert response.status_code == 200
        entries = response.json()
        assert len(entries) == 10
        assert entries[0]["description"] == "Task created: task 11"
        assert entries[-1]["description"] == "Task created: task 2"

        limited = (await client.get("/api/dashboard/recent-activity?limit=3")).json()
        assert len(limited) == 3

    async def test_entries_include_actor(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        await client.post("/api/tasks", json={"title": "With actor"})
        entry = (await client.get("/api/dashboard/recent-activity")).json()[0]
        assert entry["user"]["first_name"] == settings.SYSTEM_USER_FIRST_NAME
        assert entry["action"] == "create"
        assert entry["entity_type"] == "task"


class TestDayWindow:
    def test_window_in_fixed_zone(self) -> None:
        tz = ZoneInfo("America/New_York")
        now = datetime(2030, 6, 15, 3, 30, tzinfo=timezone.utc)  # 23:30 on the 14th in New York
        start, end = day_window(now, tz)
        assert start == datetime(2030, 6, 14, 4, 0, tzinfo=timezone.utc)
        assert end == datetime(2030, 6, 15, 4, 0, tzinfo=timezone.utc)

    def test_window_across_dst_change(self) -> None:
        tz = ZoneInfo("America/New_York")
        # 2030-03-10 is the spring-forward day: only 23 hours long
        now = datetime(2030, 3, 10, 18, 0, tzinfo=timezone.utc)
        start, end = day_window(now, tz)
        assert end - start == timedelta(hours=23)

    def test_window_contains_now_in_local_time(self) -> None:
        now = datetime.now(timezone.utc)
        start, end = day_window(now)
        assert start <= now < end
        assert start.tzinfo is not None and end.tzinfo is not None
