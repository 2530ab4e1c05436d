"""
Acting-user resolution.
Authentication is out of scope for now: the default resolver maps every
request to one system user. A real identity provider plugs in by overriding
get_identity_resolver.
"""
from __future__ import annotations

import logging
from typing import Annotated, Protocol

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.config import settings
from teamdesk.core.exceptions import UnauthorizedException
from teamdesk.crud.user import crud_user
from teamdesk.db.session import get_db
from teamdesk.models.user import User

logger = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    async def resolve_acting_user(
        self, request: Request, db: AsyncSession
    ) -> User | None:
        ...


class SystemUserResolver:
    """Resolves every request to the configured system user, creating it on first use."""

    async def resolve_acting_user(
        self, request: Request, db: AsyncSession
    ) -> User | None:
        user = await crud_user.get_by_email(db, settings.SYSTEM_USER_EMAIL)
        if user is not None:
            return user

        # Concurrent first requests: the unique email constraint rejects all
        # but one insert
        user = await crud_user.create_user(
            db,
            email=settings.SYSTEM_USER_EMAIL,
            first_name=settings.SYSTEM_USER_FIRST_NAME,
            last_name=settings.SYSTEM_USER_LAST_NAME,
            role="admin",
        )
        logger.info("System user created: email=%s id=%s", user.email, user.id)
        return user


_system_user_resolver = SystemUserResolver()


def get_identity_resolver() -> IdentityResolver:
    return _system_user_resolver


async def get_current_user(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
) -> User:
    user = await resolver.resolve_acting_user(request, db)
    if user is None:
        raise UnauthorizedException()
    return user
