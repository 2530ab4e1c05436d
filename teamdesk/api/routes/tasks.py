"""
Task routes.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from teamdesk.core.config import settings
from teamdesk.core.dependencies import DBSession, TeamScope
from teamdesk.schemas.task import TaskCreate, TaskRead, TaskUpdate
from teamdesk.services.task_service import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List the current team's tasks",
)
async def list_tasks(
    ctx: TeamScope,
    db: DBSession,
    limit: int = Query(default=settings.DEFAULT_LIST_LIMIT, ge=1, le=settings.MAX_LIST_LIMIT),
) -> list[TaskRead]:
    tasks = await task_service.list_tasks(db, ctx=ctx, limit=limit)
    return [TaskRead.model_validate(t) for t in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task in the current team",
)
async def create_task(
    task_in: TaskCreate,
    ctx: TeamScope,
    db: DBSession,
) -> TaskRead:
    task = await task_service.create_task(db, ctx=ctx, task_in=task_in)
    return TaskRead.model_validate(task)


@router.get(
    "/assigned-to-me",
    response_model=list[TaskRead],
    summary="List tasks assigned to the acting user",
)
async def list_my_tasks(
    ctx: TeamScope,
    db: DBSession,
    limit: int = Query(default=settings.DEFAULT_LIST_LIMIT, ge=1, le=settings.MAX_LIST_LIMIT),
) -> list[TaskRead]:
    tasks = await task_service.list_assigned_to_me(db, ctx=ctx, limit=limit)
    return [TaskRead.model_validate(t) for t in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Get a task",
)
async def get_task(
    task_id: uuid.UUID,
    ctx: TeamScope,
    db: DBSession,
) -> TaskRead:
    task = await task_service.get_task(db, ctx=ctx, task_id=task_id)
    return TaskRead.model_validate(task)


@router.patch(
    "/{task_id}",
    response_model=TaskRead,
    summary="Partially update a task",
)
async def update_task(
    task_id: uuid.UUID,
    task_in: TaskUpdate,
    ctx: TeamScope,
    db: DBSession,
) -> TaskRead:
    task = await task_service.update_task(db, ctx=ctx, task_id=task_id, task_in=task_in)
    return TaskRead.model_validate(task)
