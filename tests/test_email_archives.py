"""
Email archive endpoint tests.
"""
from __future__ import annotations

import uuid
from typing import Any

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.models.activity_log import ActivityLog

pytestmark = pytest.mark.asyncio


async def _archive(
    client: AsyncClient,
    subject: str = "Claim #4411 update",
    email_date: str = "2030-02-01T10:00:00Z",
    **kwargs: Any,
) -> dict:
    payload = {
        "subject": subject,
        "sender": "adjuster@carrier.example",
        "recipient": "claims@agency.example",
        "body": "Please find the adjuster notes attached.",
        "email_date": email_date,
        **kwargs,
    }
    response = await client.post("/api/email-archives", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestArchiveEmail:
    async def test_archive_email(
        self, client: AsyncClient, db: AsyncSession, current_team: dict
    ) -> None:
        data = await _archive(
            client,
            tags=["claims", "urgent"],
            attachments=[{"name": "notes.pdf", "size": 2048}],
            category="Claims",
        )
        assert data["tags"] == ["claims", "urgent"]
        assert data["attachments"] == [{"name": "notes.pdf", "size": 2048}]
        assert data["team_id"] == current_team["id"]

        entry = (await db.execute(select(ActivityLog))).scalar_one()
        assert entry.action == "archive"
        assert entry.entity_type == "email"
        assert entry.entity_id == uuid.UUID(data["id"])
        assert entry.description == "Email archived: Claim #4411 update"

    async def test_tags_default_to_empty(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        data = await _archive(client)
        assert data["tags"] == []

    async def test_missing_sender_rejected(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        response = await client.post(
            "/api/email-archives",
            json={"subject": "x", "recipient": "y", "email_date": "2030-02-01T10:00:00Z"},
        )
        assert response.status_code == 400

    async def test_archives_are_immutable(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        data = await _archive(client)
        response = await client.patch(
            f"/api/email-archives/{data['id']}", json={"subject": "changed"}
        )
        assert response.status_code == 405


class TestListAndSearch:
    async def test_newest_email_first(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        await _archive(client, subject="older", email_date="2030-01-01T00:00:00Z")
        await _archive(client, subject="newest", email_date="2030-03-01T00:00:00Z")
        await _archive(client, subject="middle", email_date="2030-02-01T00:00:00Z")

        response = await client.get("/api/email-archives")
        assert [e["subject"] for e in response.json()] == ["newest", "middle", "older"]

    async def test_search_subject_sender_body(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        await _archive(client, subject="Flood claim")
        await _archive(client, subject="Renewal", sender="claimsdesk@carrier.example")
        await _archive(client, subject="Quote", body="The CLAIM history is clean")
        await _archive(client, subject="Invoice", body="nothing here")

        response = await client.get("/api/email-archives/search", params={"q": "claim"})
        assert response.status_code == 200
        subjects = {e["subject"] for e in response.json()}
        assert subjects == {"Flood claim", "Renewal", "Quote"}

    async def test_short_query_rejected(
        self, client: AsyncClient, current_team: dict
    ) -> None:
        for query in ("cl", "  cl  "):
            response = await client.get("/api/email-archives/search", params={"q": query})
            assert response.status_code == 400
            assert response.json()["error"] == "VALIDATION_ERROR"

    async def test_get_archive(self, client: AsyncClient, current_team: dict) -> None:
        data = await _archive(client)
        response = await client.get(f"/api/email-archives/{data['id']}")
        assert response.status_code == 200
        assert response.json()["subject"] == data["subject"]
        assert (await client.get(f"/api/email-archives/{uuid.uuid4()}")).status_code == 404
