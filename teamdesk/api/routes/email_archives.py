"""
Email archive routes. Archived emails cannot be edited.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from teamdesk.core.config import settings
from teamdesk.core.dependencies import DBSession, TeamScope
from teamdesk.schemas.email_archive import EmailArchiveCreate, EmailArchiveRead
from teamdesk.services.email_archive_service import email_archive_service

router = APIRouter(prefix="/email-archives", tags=["Email Archives"])


@router.get(
    "",
    response_model=list[EmailArchiveRead],
    summary="List the current team's archived emails, newest first",
)
async def list_email_archives(
    ctx: TeamScope,
    db: DBSession,
    limit: int = Query(default=settings.DEFAULT_LIST_LIMIT, ge=1, le=settings.MAX_LIST_LIMIT),
) -> list[EmailArchiveRead]:
    emails = await email_archive_service.list_emails(db, ctx=ctx, limit=limit)
    return [EmailArchiveRead.model_validate(e) for e in emails]


@router.post(
    "",
    response_model=EmailArchiveRead,
    status_code=status.HTTP_201_CREATED,
    summary="Archive an email",
)
async def archive_email(
    email_in: EmailArchiveCreate,
    ctx: TeamScope,
    db: DBSession,
) -> EmailArchiveRead:
    email = await email_archive_service.archive_email(db, ctx=ctx, email_in=email_in)
    return EmailArchiveRead.model_validate(email)


@router.get(
    "/search",
    response_model=list[EmailArchiveRead],
    summary="Search archived emails by subject, sender or body",
)
async def search_email_archives(
    ctx: TeamScope,
    db: DBSession,
    q: str = Query(min_length=settings.SEARCH_MIN_QUERY_LENGTH, max_length=200),
) -> list[EmailArchiveRead]:
    emails = await email_archive_service.search_emails(db, ctx=ctx, query=q)
    return [EmailArchiveRead.model_validate(e) for e in emails]


@router.get(
    "/{email_id}",
    response_model=EmailArchiveRead,
    summary="Get an archived email",
)
async def get_email_archive(
    email_id: uuid.UUID,
    ctx: TeamScope,
    db: DBSession,
) -> EmailArchiveRead:
    email = await email_archive_service.get_email(db, ctx=ctx, email_id=email_id)
    return EmailArchiveRead.model_validate(email)
