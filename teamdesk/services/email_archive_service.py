"""
Email archive service.
Archived emails are immutable once stored.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.config import settings
from teamdesk.core.exceptions import BadRequestException, NotFoundException
from teamdesk.core.tenancy import TeamContext
from teamdesk.crud.email_archive import crud_email_archive
from teamdesk.models.email_archive import EmailArchive
from teamdesk.schemas.email_archive import EmailArchiveCreate
from teamdesk.services.activity_service import activity_service


class EmailArchiveService:

    async def archive_email(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        email_in: EmailArchiveCreate,
    ) -> EmailArchive:
        data = email_in.model_dump()
        data.update(archived_by=ctx.user.id, team_id=ctx.team_id)
        email = await crud_email_archive.create_from_dict(db, obj_in=data)

        await activity_service.record_for(
            db,
            ctx=ctx,
            action="archive",
            entity_type="email",
            entity_id=email.id,
            description=f"Email archived: {email.subject}",
        )
        return email

    async def get_email(
        self, db: AsyncSession, *, ctx: TeamContext, email_id: uuid.UUID
    ) -> EmailArchive:
        email = await crud_email_archive.get_for_team(db, id=email_id, team_id=ctx.team_id)
        if email is None:
            raise NotFoundException("Email archive", str(email_id))
        return email

    async def list_emails(
        self, db: AsyncSession, *, ctx: TeamContext, limit: int
    ) -> list[EmailArchive]:
        return await crud_email_archive.list_for_team(db, team_id=ctx.team_id, limit=limit)

    async def search_emails(
        self, db: AsyncSession, *, ctx: TeamContext, query: str
    ) -> list[EmailArchive]:
        query = query.strip()
        if len(query) < settings.SEARCH_MIN_QUERY_LENGTH:
            raise BadRequestException(
                f"Search query must be at least {settings.SEARCH_MIN_QUERY_LENGTH} characters"
            )
        return await crud_email_archive.search_for_team(db, team_id=ctx.team_id, query=query)


email_archive_service = EmailArchiveService()
