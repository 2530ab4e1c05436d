"""
Team membership service.
Lists a user's teams, switches the persisted current team and runs the
first-use bootstrap that creates the default teams.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.exceptions import ForbiddenException, NotFoundException
from teamdesk.crud.team import crud_team
from teamdesk.crud.user import crud_user
from teamdesk.models.team import Team
from teamdesk.models.user import User
from teamdesk.schemas.team import SetupResult, TeamRead

logger = logging.getLogger(__name__)

# Created in this order; the first becomes the user's current team
DEFAULT_TEAMS: tuple[tuple[str, str], ...] = (
    ("Personal Lines", "Personal insurance operations"),
    ("Commercial", "Commercial insurance operations"),
    ("Corporate", "Corporate insurance operations"),
    ("Claims", "Claims processing and management"),
)

SETUP_DONE_MESSAGE = "Default teams created"
SETUP_SKIPPED_MESSAGE = "User already has teams"


class TeamService:

    async def list_user_teams(
        self, db: AsyncSession, *, user: User
    ) -> list[Team]:
        return await crud_team.list_by_user(db, user_id=user.id)

    async def get_current_team(
        self, db: AsyncSession, *, user: User
    ) -> Team | None:
        if user.current_team_id is None:
            return None
        return await crud_team.get(db, user.current_team_id)

    async def select_team(
        self,
        db: AsyncSession,
        *,
        user: User,
        team_id: uuid.UUID,
    ) -> Team:
        """Make team_id the user's default team. Writes no activity entry."""
        team = await crud_team.get(db, team_id)
        if team is None:
            raise NotFoundException("Team", str(team_id))

        member = await crud_team.get_member(db, team_id=team_id, user_id=user.id)
        if member is None:
            raise ForbiddenException("You are not a member of this team")

        await crud_user.set_current_team(db, user=user, team_id=team.id)
        logger.info("Team selected: user_id=%s team_id=%s", user.id, team.id)
        return team

    async def setup(self, db: AsyncSession, *, user: User) -> SetupResult:
        """
        First-use bootstrap: create the default teams and join the user to
        each of them. A no-op for a user who already belongs to any team.

        The user row stays locked until commit, so concurrent bootstraps
        for the same user run one after the other.
        """
        locked = await crud_user.get_for_update(db, user.id)
        if locked is None:
            raise NotFoundException("User", str(user.id))

        if await crud_team.count_by_user(db, user_id=locked.id) > 0:
            return SetupResult(message=SETUP_SKIPPED_MESSAGE, teams=[])

        teams: list[Team] = []
        for name, description in DEFAULT_TEAMS:
            team = await crud_team.create_team(db, name=name, description=description)
            await crud_team.add_member(
                db, team_id=team.id, user_id=locked.id, role="member"
            )
            teams.append(team)

        await crud_user.set_current_team(db, user=locked, team_id=teams[0].id)
        logger.info(
            "Default teams created: user_id=%s teams=%s",
            locked.id,
            [t.name for t in teams],
        )
        return SetupResult(
            message=SETUP_DONE_MESSAGE,
            teams=[TeamRead.model_validate(t) for t in teams],
        )


team_service = TeamService()
