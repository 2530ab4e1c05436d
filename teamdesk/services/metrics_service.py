"""
Dashboard metrics.
Read-only counters over the team's tasks, documents and meetings.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.config import settings
from teamdesk.core.tenancy import TeamContext
from teamdesk.crud.document import crud_document
from teamdesk.crud.meeting import crud_meeting
from teamdesk.crud.task import crud_task
from teamdesk.models.document import Document
from teamdesk.models.meeting import Meeting
from teamdesk.models.task import Task
from teamdesk.schemas.dashboard import DashboardMetrics


def day_window(
    now: datetime | None = None, tz: tzinfo | None = None
) -> tuple[datetime, datetime]:
    """
    Return [start of today, start of tomorrow) as UTC datetimes.

    "Today" is taken in ``tz`` when given, otherwise in the server's local
    timezone. Both boundaries are resolved separately, so DST days are 23 or
    25 hours long.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    local_now = now.astimezone(tz) if tz is not None else now.astimezone()
    midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    next_midnight = midnight + timedelta(days=1)
    if tz is not None:
        start, end = midnight.replace(tzinfo=tz), next_midnight.replace(tzinfo=tz)
    else:
        start, end = midnight.astimezone(), next_midnight.astimezone()
    return start.astimezone(timezone.utc), end.astimezone(timezone.utc)


class MetricsService:

    async def get_dashboard_metrics(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        now: datetime | None = None,
    ) -> DashboardMetrics:
        start, end = day_window(now, settings.dashboard_tzinfo)
        team_id = ctx.team_id

        active_tasks = await crud_task.count_for_team(
            db, team_id=team_id, conditions=(Task.status == "pending",)
        )
        documents_today = await crud_document.count_for_team(
            db,
            team_id=team_id,
            conditions=(Document.created_at >= start, Document.created_at < end),
        )
        meetings_today = await crud_meeting.count_for_team(
            db,
            team_id=team_id,
            conditions=(Meeting.start_time >= start, Meeting.start_time < end),
        )
        pending_reviews = await crud_document.count_for_team(
            db, team_id=team_id, conditions=(Document.status == "pending",)
        )

        return DashboardMetrics(
            active_tasks=active_tasks,
            documents_today=documents_today,
            meetings_today=meetings_today,
            pending_reviews=pending_reviews,
        )

    async def todays_meetings(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        now: datetime | None = None,
    ) -> list[Meeting]:
        start, end = day_window(now, settings.dashboard_tzinfo)
        return await crud_meeting.list_starting_between(
            db, team_id=ctx.team_id, start=start, end=end
        )


metrics_service = MetricsService()
