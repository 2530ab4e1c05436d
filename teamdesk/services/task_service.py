"""
Task business logic service.
Keeps completed_at in step with status and records create/update activity.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.exceptions import BadRequestException, NotFoundException
from teamdesk.core.tenancy import TeamContext
from teamdesk.crud.task import crud_task
from teamdesk.crud.team import crud_team
from teamdesk.db.base import utcnow
from teamdesk.models.task import Task
from teamdesk.schemas.task import TaskCreate, TaskUpdate
from teamdesk.services.activity_service import activity_service

COMPLETED = "completed"


class TaskService:

    async def _assert_assignable(
        self, db: AsyncSession, *, ctx: TeamContext, user_id: uuid.UUID | None
    ) -> None:
        if user_id is None:
            return
        member = await crud_team.get_member(db, team_id=ctx.team_id, user_id=user_id)
        if member is None:
            raise BadRequestException("Tasks can only be assigned to members of the team")

    async def create_task(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        task_in: TaskCreate,
    ) -> Task:
        await self._assert_assignable(db, ctx=ctx, user_id=task_in.assigned_to)

        data = task_in.model_dump()
        data.update(
            created_by=ctx.user.id,
            team_id=ctx.team_id,
            completed_at=utcnow() if task_in.status == COMPLETED else None,
        )
        task = await crud_task.create_from_dict(db, obj_in=data)

        await activity_service.record_for(
            db,
            ctx=ctx,
            action="create",
            entity_type="task",
            entity_id=task.id,
            description=f"Task created: {task.title}",
        )
        return task

    async def get_task(
        self, db: AsyncSession, *, ctx: TeamContext, task_id: uuid.UUID
    ) -> Task:
        task = await crud_task.get_for_team(db, id=task_id, team_id=ctx.team_id)
        if task is None:
            raise NotFoundException("Task", str(task_id))
        return task

    async def update_task(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        task_id: uuid.UUID,
        task_in: TaskUpdate,
    ) -> Task:
        task = await self.get_task(db, ctx=ctx, task_id=task_id)

        update_data = task_in.model_dump(exclude_unset=True)
        if "assigned_to" in update_data:
            await self._assert_assignable(db, ctx=ctx, user_id=update_data["assigned_to"])

        new_status = update_data.get("status")
        if new_status == COMPLETED and task.status != COMPLETED:
            update_data["completed_at"] = utcnow()
        elif new_status is not None and new_status != COMPLETED:
            update_data["completed_at"] = None

        updated = await crud_task.update(db, db_obj=task, obj_in=update_data)

        await activity_service.record_for(
            db,
            ctx=ctx,
            action="update",
            entity_type="task",
            entity_id=updated.id,
            description=f"Task updated: {updated.title}",
        )
        return updated

    async def list_tasks(
        self, db: AsyncSession, *, ctx: TeamContext, limit: int
    ) -> list[Task]:
        return await crud_task.list_for_team(db, team_id=ctx.team_id, limit=limit)

    async def list_assigned_to_me(
        self, db: AsyncSession, *, ctx: TeamContext, limit: int
    ) -> list[Task]:
        return await crud_task.list_assigned(
            db, team_id=ctx.team_id, user_id=ctx.user.id, limit=limit
        )


task_service = TaskService()
