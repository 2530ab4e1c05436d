"""
Team and membership CRUD operations.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.crud.base import CRUDBase
from teamdesk.models.team import Team, TeamMember


class CRUDTeam(CRUDBase[Team, BaseModel, BaseModel]):

    async def create_team(
        self,
        db: AsyncSession,
        *,
        name: str,
        description: str | None = None,
    ) -> Team:
        team = Team(name=name, description=description)
        db.add(team)
        await db.flush()
        await db.refresh(team)
        return team

    async def list_by_user(
        self, db: AsyncSession, *, user_id: uuid.UUID
    ) -> list[Team]:
        """Return the teams the user belongs to, ordered by name."""
        result = await db.execute(
            select(Team)
            .join(TeamMember, TeamMember.team_id == Team.id)
            .where(TeamMember.user_id == user_id)
            .order_by(Team.name.asc(), Team.id.asc())
        )
        return list(result.scalars().all())

    async def count_by_user(self, db: AsyncSession, *, user_id: uuid.UUID) -> int:
        result = await db.execute(
            select(func.count())
            .select_from(TeamMember)
            .where(TeamMember.user_id == user_id)
        )
        return result.scalar_one()

    async def get_member(
        self, db: AsyncSession, *, team_id: uuid.UUID, user_id: uuid.UUID
    ) -> TeamMember | None:
        result = await db.execute(
            select(TeamMember).where(
                TeamMember.team_id == team_id,
                TeamMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def add_member(
        self,
        db: AsyncSession,
        *,
        team_id: uuid.UUID,
        user_id: uuid.UUID,
        role: str = "member",
    ) -> TeamMember:
        member = TeamMember(team_id=team_id, user_id=user_id, role=role)
        db.add(member)
        await db.flush()
        await db.refresh(member)
        return member


crud_team = CRUDTeam(Team)
