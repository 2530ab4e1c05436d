"""
ActivityLog CRUD operations.
Entries are append-only: there is no update or delete path.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from teamdesk.crud.base import TeamScopedCRUD
from teamdesk.models.activity_log import ActivityLog


class CRUDActivityLog(TeamScopedCRUD[ActivityLog, BaseModel, BaseModel]):

    async def create_entry(
        self,
        db: AsyncSession,
        *,
        user_id: uuid.UUID,
        team_id: uuid.UUID,
        action: str,
        entity_type: str,
        entity_id: uuid.UUID | None,
        description: str,
    ) -> ActivityLog:
        entry = ActivityLog(
            user_id=user_id,
            team_id=team_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            description=description,
        )
        db.add(entry)
        await db.flush()
        await db.refresh(entry)
        return entry

    async def list_recent(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        limit: int,
    ) -> list[ActivityLog]:
        """Most recent entries first, each with its actor loaded."""
        query = (
            self._ordered(self._team_query(team_id))
            .options(selectinload(ActivityLog.user))
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


crud_activity_log = CRUDActivityLog(ActivityLog)
