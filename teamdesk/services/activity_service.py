"""
Activity recording service.
Appends audit records to the activity_logs table inside the caller's
transaction, so an entity write and its entry commit or roll back together.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.tenancy import TeamContext
from teamdesk.crud.activity_log import crud_activity_log
from teamdesk.models.activity_log import ActivityLog

logger = logging.getLogger(__name__)


class ActivityService:

    async def record(
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
        """
        Add one activity entry to the current transaction.
        A failure is logged and re-raised so the surrounding entity write
        rolls back with it.
        """
        try:
            return await crud_activity_log.create_entry(
                db,
                user_id=user_id,
                team_id=team_id,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                description=description,
            )
        except Exception as exc:
            logger.error(
                "Failed to write activity log: team_id=%s user_id=%s action=%s entity_type=%s: %s",
                team_id,
                user_id,
                action,
                entity_type,
                exc,
            )
            raise

    async def record_for(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        action: str,
        entity_type: str,
        entity_id: uuid.UUID | None,
        description: str,
    ) -> ActivityLog:
        """Shorthand for record() with the actor and team taken from the request context."""
        return await self.record(
            db,
            user_id=ctx.user.id,
            team_id=ctx.team_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            description=description,
        )

    async def list_recent(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        limit: int,
    ) -> list[ActivityLog]:
        return await crud_activity_log.list_recent(db, team_id=ctx.team_id, limit=limit)


activity_service = ActivityService()
