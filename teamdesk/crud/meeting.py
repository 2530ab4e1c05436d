"""
Meeting CRUD operations.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.crud.base import TeamScopedCRUD
from teamdesk.models.meeting import Meeting
from teamdesk.schemas.meeting import MeetingCreate, MeetingUpdate


class CRUDMeeting(TeamScopedCRUD[Meeting, MeetingCreate, MeetingUpdate]):
    order_field = "start_time"

    async def list_starting_between(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        start: datetime,
        end: datetime,
    ) -> list[Meeting]:
        """Meetings with start_time in [start, end), earliest first."""
        result = await db.execute(
            self._team_query(team_id)
            .where(Meeting.start_time >= start, Meeting.start_time < end)
            .order_by(Meeting.start_time.asc(), Meeting.id.asc())
        )
        return list(result.scalars().all())


crud_meeting = CRUDMeeting(Meeting)
