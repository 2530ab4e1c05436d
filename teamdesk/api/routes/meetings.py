"""
Meeting routes.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from teamdesk.core.config import settings
from teamdesk.core.dependencies import DBSession, TeamScope
from teamdesk.schemas.meeting import MeetingCreate, MeetingRead, MeetingUpdate
from teamdesk.services.meeting_service import meeting_service

router = APIRouter(prefix="/meetings", tags=["Meetings"])


@router.get(
    "",
    response_model=list[MeetingRead],
    summary="List the current team's meetings, latest start first",
)
async def list_meetings(
    ctx: TeamScope,
    db: DBSession,
    limit: int = Query(default=settings.DEFAULT_LIST_LIMIT, ge=1, le=settings.MAX_LIST_LIMIT),
) -> list[MeetingRead]:
    meetings = await meeting_service.list_meetings(db, ctx=ctx, limit=limit)
    return [MeetingRead.model_validate(m) for m in meetings]


@router.post(
    "",
    response_model=MeetingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a meeting",
)
async def create_meeting(
    meeting_in: MeetingCreate,
    ctx: TeamScope,
    db: DBSession,
) -> MeetingRead:
    meeting = await meeting_service.create_meeting(db, ctx=ctx, meeting_in=meeting_in)
    return MeetingRead.model_validate(meeting)


@router.get(
    "/{meeting_id}",
    response_model=MeetingRead,
    summary="Get a meeting",
)
async def get_meeting(
    meeting_id: uuid.UUID,
    ctx: TeamScope,
    db: DBSession,
) -> MeetingRead:
    meeting = await meeting_service.get_meeting(db, ctx=ctx, meeting_id=meeting_id)
    return MeetingRead.model_validate(meeting)


@router.patch(
    "/{meeting_id}",
    response_model=MeetingRead,
    summary="Partially update a meeting",
)
async def update_meeting(
    meeting_id: uuid.UUID,
    meeting_in: MeetingUpdate,
    ctx: TeamScope,
    db: DBSession,
) -> MeetingRead:
    meeting = await meeting_service.update_meeting(
        db, ctx=ctx, meeting_id=meeting_id, meeting_in=meeting_in
    )
    return MeetingRead.model_validate(meeting)
