"""
Team membership routes.
List the user's teams, select the current team, first-use setup.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter

from teamdesk.core.dependencies import CurrentUser, DBSession
from teamdesk.core.exceptions import NoTeamSelectedException
from teamdesk.schemas.team import SetupResult, TeamRead, TeamSelection
from teamdesk.services.team_service import team_service

router = APIRouter(tags=["Teams"])


@router.get(
    "/teams",
    response_model=list[TeamRead],
    summary="List the teams the user belongs to",
)
async def list_teams(current_user: CurrentUser, db: DBSession) -> list[TeamRead]:
    teams = await team_service.list_user_teams(db, user=current_user)
    return [TeamRead.model_validate(t) for t in teams]


@router.get(
    "/teams/current",
    response_model=TeamRead,
    summary="Get the user's current team",
)
async def get_current_team(current_user: CurrentUser, db: DBSession) -> TeamRead:
    team = await team_service.get_current_team(db, user=current_user)
    if team is None:
        raise NoTeamSelectedException()
    return TeamRead.model_validate(team)


@router.post(
    "/teams/{team_id}/select",
    response_model=TeamSelection,
    summary="Make a team the user's current team",
)
async def select_team(
    team_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
) -> TeamSelection:
    team = await team_service.select_team(db, user=current_user, team_id=team_id)
    return TeamSelection(success=True, team=TeamRead.model_validate(team))


@router.post(
    "/setup",
    response_model=SetupResult,
    summary="Create the default teams on first use",
)
async def setup(current_user: CurrentUser, db: DBSession) -> SetupResult:
    return await team_service.setup(db, user=current_user)
