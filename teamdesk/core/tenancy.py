"""
Tenancy guard.
Resolves the team a request acts on and checks the acting user belongs to it.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.exceptions import (
    BadRequestException,
    ForbiddenException,
    NoTeamSelectedException,
)
from teamdesk.core.identity import get_current_user
from teamdesk.crud.team import crud_team
from teamdesk.db.session import get_db
from teamdesk.models.team import TeamMember
from teamdesk.models.user import User

TEAM_HEADER = "X-Team-Id"


@dataclass(frozen=True)
class TeamContext:
    """The acting user and the team every query of this request is filtered on."""

    user: User
    team_id: uuid.UUID
    membership: TeamMember


def resolve_team_id(user: User, requested: str | None) -> uuid.UUID | None:
    """The header wins; the user's persisted current team is the fallback."""
    if requested is None or not requested.strip():
        return user.current_team_id
    try:
        return uuid.UUID(requested.strip())
    except ValueError:
        raise BadRequestException(f"Invalid {TEAM_HEADER} header: '{requested}'")


async def require_team(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
    x_team_id: Annotated[str | None, Header(alias=TEAM_HEADER)] = None,
) -> TeamContext:
    team_id = resolve_team_id(current_user, x_team_id)
    if team_id is None:
        raise NoTeamSelectedException()

    membership = await crud_team.get_member(
        db, team_id=team_id, user_id=current_user.id
    )
    if membership is None:
        raise ForbiddenException("You are not a member of this team")

    return TeamContext(user=current_user, team_id=team_id, membership=membership)
