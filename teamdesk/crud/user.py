"""
User CRUD operations.
Extends CRUDBase with user-specific queries.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.crud.base import CRUDBase
from teamdesk.models.user import User


class CRUDUser(CRUDBase[User, BaseModel, BaseModel]):

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_for_update(self, db: AsyncSession, user_id: uuid.UUID) -> User | None:
        """Fetch the user row with a row lock held until the transaction ends."""
        result = await db.execute(
            select(User).where(User.id == user_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def create_user(
        self,
        db: AsyncSession,
        *,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
        role: str = "member",
    ) -> User:
        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            role=role,
        )
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    async def set_current_team(
        self, db: AsyncSession, *, user: User, team_id: uuid.UUID | None
    ) -> User:
        user.current_team_id = team_id
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user


crud_user = CRUDUser(User)
