"""
Document service.
Validates and stores uploaded files, records one activity entry per stored
document and handles status review.
"""
from __future__ import annotations

import logging
import mimetypes
import os
import uuid
from dataclasses import dataclass

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from teamdesk.core.config import settings
from teamdesk.core.exceptions import (
    BadRequestException,
    FileTooLargeException,
    NotFoundException,
    UploadRejectedException,
)
from teamdesk.core.storage import Storage, get_upload_storage
from teamdesk.core.tenancy import TeamContext
from teamdesk.crud.document import crud_document
from teamdesk.models.document import Document
from teamdesk.schemas.document import DocumentStatusUpdate
from teamdesk.services.activity_service import activity_service

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"
DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass
class _ValidatedFile:
    original_name: str
    content: bytes
    mime_type: str


def _basename(filename: str | None) -> str:
    # Browsers may send a full client-side path
    return os.path.basename((filename or "").replace("\\", "/")).strip()


def _extension(filename: str) -> str:
    return os.path.splitext(filename)[1].lower().lstrip(".")


class DocumentService:

    async def _validate(self, files: list[UploadFile]) -> list[_ValidatedFile]:
        """Check every file before anything is written."""
        if not files:
            raise UploadRejectedException("No files uploaded")

        max_bytes = settings.max_file_size_bytes
        validated: list[_ValidatedFile] = []
        for upload in files:
            name = _basename(upload.filename)
            if not name:
                raise UploadRejectedException("Uploaded file has no name")

            ext = _extension(name)
            if ext not in settings.ALLOWED_UPLOAD_EXTENSIONS:
                raise UploadRejectedException(
                    f"File type '.{ext}' is not allowed for '{name}'. "
                    f"Allowed: {', '.join(settings.ALLOWED_UPLOAD_EXTENSIONS)}"
                )

            # One byte past the limit is enough to reject
            content = await upload.read(max_bytes + 1)
            if len(content) > max_bytes:
                raise FileTooLargeException(name, settings.MAX_FILE_SIZE_MB)

            mime_type = (
                upload.content_type
                or mimetypes.guess_type(name)[0]
                or DEFAULT_MIME_TYPE
            )
            validated.append(_ValidatedFile(name, content, mime_type))
        return validated

    async def upload_documents(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        files: list[UploadFile],
        category: str | None = None,
        description: str | None = None,
        storage: Storage | None = None,
    ) -> list[Document]:
        validated = await self._validate(files)
        storage = storage or get_upload_storage()

        written: list[str] = []
        documents: list[Document] = []
        try:
            for item in validated:
                key = f"{uuid.uuid4()}_{item.original_name}"
                file_path = storage.put_bytes(key, item.content)
                written.append(key)

                document = await crud_document.create_from_dict(
                    db,
                    obj_in={
                        "name": item.original_name,
                        "file_path": file_path,
                        "file_size": len(item.content),
                        "mime_type": item.mime_type,
                        "category": category or DEFAULT_CATEGORY,
                        "description": description or "",
                        "status": "pending",
                        "uploaded_by": ctx.user.id,
                        "team_id": ctx.team_id,
                    },
                )
                await activity_service.record_for(
                    db,
                    ctx=ctx,
                    action="upload",
                    entity_type="document",
                    entity_id=document.id,
                    description=f"Document uploaded: {item.original_name}",
                )
                documents.append(document)
        except Exception:
            for key in written:
                try:
                    storage.delete(key)
                except OSError as exc:
                    logger.warning("Could not remove orphaned upload %s: %s", key, exc)
            raise

        logger.info(
            "Documents uploaded: team_id=%s user_id=%s count=%d",
            ctx.team_id,
            ctx.user.id,
            len(documents),
        )
        return documents

    async def list_documents(
        self, db: AsyncSession, *, ctx: TeamContext, limit: int
    ) -> list[Document]:
        return await crud_document.list_for_team(db, team_id=ctx.team_id, limit=limit)

    async def search_documents(
        self, db: AsyncSession, *, ctx: TeamContext, query: str
    ) -> list[Document]:
        query = query.strip()
        if len(query) < settings.SEARCH_MIN_QUERY_LENGTH:
            raise BadRequestException(
                f"Search query must be at least {settings.SEARCH_MIN_QUERY_LENGTH} characters"
            )
        return await crud_document.search_for_team(db, team_id=ctx.team_id, query=query)

    async def get_document(
        self, db: AsyncSession, *, ctx: TeamContext, document_id: uuid.UUID
    ) -> Document:
        document = await crud_document.get_for_team(db, id=document_id, team_id=ctx.team_id)
        if document is None:
            raise NotFoundException("Document", str(document_id))
        return document

    async def update_status(
        self,
        db: AsyncSession,
        *,
        ctx: TeamContext,
        document_id: uuid.UUID,
        status_in: DocumentStatusUpdate,
    ) -> Document:
        document = await self.get_document(db, ctx=ctx, document_id=document_id)
        updated = await crud_document.update(db, db_obj=document, obj_in=status_in)
        await activity_service.record_for(
            db,
            ctx=ctx,
            action="update",
            entity_type="document",
            entity_id=updated.id,
            description=f"Document status changed to {updated.status}: {updated.name}",
        )
        return updated


document_service = DocumentService()
