"""
Tenancy guard tests.
Covers: no team selected, X-Team-Id header, membership re-validation,
cross-team isolation for reads and writes.
"""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.crud.document import crud_document
from teamdesk.crud.task import crud_task
from teamdesk.models.activity_log import ActivityLog
from teamdesk.models.task import Task

pytestmark = pytest.mark.asyncio

TEAM_SCOPED_GETS = [
    "/api/dashboard/metrics",
    "/api/dashboard/recent-activity",
    "/api/dashboard/todays-meetings",
    "/api/documents",
    "/api/documents/search?q=abc",
    "/api/tasks",
    "/api/tasks/assigned-to-me",
    "/api/meetings",
    "/api/email-archives",
    "/api/email-archives/search?q=abc",
]


class TestNoTeamSelected:
    @pytest.mark.parametrize("path", TEAM_SCOPED_GETS)
    async def test_reads_rejected(self, client: AsyncClient, path: str) -> None:
        response = await client.get(path)
        assert response.status_code == 400
        assert response.json() == {"message": "No team selected", "error": "NO_TEAM_SELECTED"}

    async def test_write_rejected_without_side_effects(
        self, client: AsyncClient, db: AsyncSession
    ) -> None:
        response = await client.post("/api/tasks", json={"title": "Orphan task"})
        assert response.status_code == 400
        assert response.json()["error"] == "NO_TEAM_SELECTED"

        tasks = (await db.execute(select(func.count()).select_from(Task))).scalar_one()
        entries = (
            await db.execute(select(func.count()).select_from(ActivityLog))
        ).scalar_one()
        assert tasks == 0
        assert entries == 0


class TestTeamHeader:
    async def test_header_overrides_current_team(
        self, client: AsyncClient, default_teams: list[dict]
    ) -> None:
        commercial = default_teams[1]
        response = await client.post(
            "/api/tasks",
            json={"title": "Renewal review"},
            headers={"X-Team-Id": commercial["id"]},
        )
        assert response.status_code == 201
        assert response.json()["team_id"] == commercial["id"]

        # The persisted current team is unchanged
        user = (await client.get("/api/auth/user")).json()
        assert user["current_team_id"] == default_teams[0]["id"]

        # And the default team does not see the task
        default_list = (await client.get("/api/tasks")).json()
        assert default_list == []

    async def test_header_for_foreign_team_forbidden(
        self, client: AsyncClient, default_teams: list[dict], outsider
    ) -> None:
        _, foreign_team = outsider
        response = await client.get(
            "/api/tasks", headers={"X-Team-Id": str(foreign_team.id)}
        )
        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"

    async def test_header_for_unknown_team_forbidden(
        self, client: AsyncClient, default_teams: list[dict]
    ) -> None:
        response = await client.get("/api/tasks", headers={"X-Team-Id": str(uuid.uuid4())})
        assert response.status_code == 403

    async def test_malformed_header(
        self, client: AsyncClient, default_teams: list[dict]
    ) -> None:
        response = await client.get("/api/tasks", headers={"X-Team-Id": "team-one"})
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    async def test_header_works_without_persisted_team(
        self, client: AsyncClient, act_as, outsider
    ) -> None:
        user, team = outsider
        user.current_team_id = None
        act_as(user)
        response = await client.get("/api/tasks", headers={"X-Team-Id": str(team.id)})
        assert response.status_code == 200


class TestMembershipRevalidation:
    async def test_stale_current_team_is_forbidden(
        self, client: AsyncClient, db: AsyncSession, act_as, outsider, default_teams
    ) -> None:
        # The outsider points at a team they were never a member of
        user, _ = outsider
        user.current_team_id = uuid.UUID(default_teams[0]["id"])
        await db.flush()
        act_as(user)

        response = await client.get("/api/documents")
        assert response.status_code == 403


class TestIsolation:
    async def test_lists_and_searches_never_leak(
        self,
        client: AsyncClient,
        db: AsyncSession,
        default_teams: list[dict],
        outsider,
    ) -> None:
        user, foreign_team = outsider
        await crud_task.create_from_dict(
            db,
            obj_in={"title": "Foreign claims task", "created_by": user.id, "team_id": foreign_team.id},
        )
        await crud_document.create_from_dict(
            db,
            obj_in={
                "name": "foreign-claims.pdf",
                "file_path": "/tmp/foreign-claims.pdf",
                "file_size": 10,
                "mime_type": "application/pdf",
                "category": "Claims",
                "uploaded_by": user.id,
                "team_id": foreign_team.id,
            },
        )
        await client.post("/api/tasks", json={"title": "Our task"})

        tasks = (await client.get("/api/tasks")).json()
        assert [t["title"] for t in tasks] == ["Our task"]
        assert (await client.get("/api/documents")).json() == []
        assert (await client.get("/api/documents/search?q=claims")).json() == []

    async def test_foreign_record_looks_missing(
        self,
        client: AsyncClient,
        db: AsyncSession,
        default_teams: list[dict],
        outsider,
    ) -> None:
        user, foreign_team = outsider
        task = await crud_task.create_from_dict(
            db,
            obj_in={"title": "Not yours", "created_by": user.id, "team_id": foreign_team.id},
        )

        get_response = await client.get(f"/api/tasks/{task.id}")
        assert get_response.status_code == 404

        patch_response = await client.patch(
            f"/api/tasks/{task.id}", json={"status": "completed"}
        )
        assert patch_response.status_code == 404

        await db.refresh(task)
        assert task.status == "pending"
