"""
Task CRUD operations.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.crud.base import TeamScopedCRUD
from teamdesk.models.task import Task
from teamdesk.schemas.task import TaskCreate, TaskUpdate


class CRUDTask(TeamScopedCRUD[Task, TaskCreate, TaskUpdate]):

    async def list_assigned(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        user_id: uuid.UUID,
        limit: int | None = None,
    ) -> list[Task]:
        query = self._ordered(
            self._team_query(team_id).where(Task.assigned_to == user_id)
        )
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())


crud_task = CRUDTask(Task)
