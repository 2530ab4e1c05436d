"""
Meeting service.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.exceptions import NotFoundException
from teamdesk.core.tenancy import TeamContext
from teamdesk.crud.meeting import crud_meeting
from teamdesk.models.meeting import Meeting
from teamdesk.schemas.meeting import MeetingCreate, MeetingUpdate
from teamdesk.services.activity_service import activity_service


class MeetingService:

    async def create_meeting(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        meeting_in: MeetingCreate,
    ) -> Meeting:
        data = meeting_in.model_dump()
        data.update(organizer=ctx.user.id, team_id=ctx.team_id)
        meeting = await crud_meeting.create_from_dict(db, obj_in=data)

        await activity_service.record_for(
            db,
            ctx=ctx,
            action="create",
            entity_type="meeting",
            entity_id=meeting.id,
            description=f"Meeting scheduled: {meeting.title}",
        )
        return meeting

    async def get_meeting(
        self, db: AsyncSession, *, ctx: TeamContext, meeting_id: uuid.UUID
    ) -> Meeting:
        meeting = await crud_meeting.get_for_team(db, id=meeting_id, team_id=ctx.team_id)
        if meeting is None:
            raise NotFoundException("Meeting", str(meeting_id))
        return meeting

    async def update_meeting(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        meeting_id: uuid.UUID,
        meeting_in: MeetingUpdate,
    ) -> Meeting:
        meeting = await self.get_meeting(db, ctx=ctx, meeting_id=meeting_id)
        updated = await crud_meeting.update(db, db_obj=meeting, obj_in=meeting_in)

        await activity_service.record_for(
            db,
            ctx=ctx,
            action="update",
            entity_type="meeting",
            entity_id=updated.id,
            description=f"Meeting updated: {updated.title}",
        )
        return updated

    async def list_meetings(
        self, db: AsyncSession, *, ctx: TeamContext, limit: int
    ) -> list[Meeting]:
        return await crud_meeting.list_for_team(db, team_id=ctx.team_id, limit=limit)


meeting_service = MeetingService()
