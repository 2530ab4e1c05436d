"""
Dashboard routes: metrics, recent activity and today's meetings.
"""
from __future__ import annotations

from fastapi import APIRouter, Query

from teamdesk.core.config import settings
from teamdesk.core.dependencies import DBSession, TeamScope
from teamdesk.schemas.activity_log import ActivityLogRead
from teamdesk.schemas.dashboard import DashboardMetrics
from teamdesk.schemas.meeting import MeetingRead
from teamdesk.services.activity_service import activity_service
from teamdesk.services.metrics_service import metrics_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/metrics",
    response_model=DashboardMetrics,
    summary="Counters for the current team",
)
async def get_metrics(ctx: TeamScope, db: DBSession) -> DashboardMetrics:
    return await metrics_service.get_dashboard_metrics(db, ctx=ctx)


@router.get(
    "/recent-activity",
    response_model=list[ActivityLogRead],
    summary="Most recent activity in the current team",
)
async def get_recent_activity(
    ctx: TeamScope,
    db: DBSession,
    limit: int = Query(
        default=settings.RECENT_ACTIVITY_LIMIT, ge=1, le=settings.MAX_LIST_LIMIT
    ),
) -> list[ActivityLogRead]:
    entries = await activity_service.list_recent(db, ctx=ctx, limit=limit)
    return [ActivityLogRead.model_validate(e) for e in entries]


@router.get(
    "/todays-meetings",
    response_model=list[MeetingRead],
    summary="Meetings starting today, earliest first",
)
async def get_todays_meetings(ctx: TeamScope, db: DBSession) -> list[MeetingRead]:
    meetings = await metrics_service.todays_meetings(db, ctx=ctx)
    return [MeetingRead.model_validate(m) for m in meetings]
