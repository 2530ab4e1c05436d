"""
Document routes.
Multipart upload, listing, search and status review.
"""
# No postponed annotations here: the rate-limit decorator wraps the endpoint,
# and FastAPI would resolve string annotations against the wrapper's module.
import uuid
from typing import Annotated

from fastapi import APIRouter, File, Form, Query, Request, UploadFile, status

from teamdesk.core.config import settings
from teamdesk.core.dependencies import DBSession, TeamScope
from teamdesk.core.limiter import limiter
from teamdesk.schemas.document import DocumentRead, DocumentStatusUpdate
from teamdesk.services.document_service import document_service

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get(
    "",
    response_model=list[DocumentRead],
    summary="List the current team's documents",
)
async def list_documents(
    ctx: TeamScope,
    db: DBSession,
    limit: int = Query(default=settings.DEFAULT_LIST_LIMIT, ge=1, le=settings.MAX_LIST_LIMIT),
) -> list[DocumentRead]:
    documents = await document_service.list_documents(db, ctx=ctx, limit=limit)
    return [DocumentRead.model_validate(d) for d in documents]


@router.post(
    "/upload",
    response_model=list[DocumentRead],
    status_code=status.HTTP_201_CREATED,
    summary="Upload one or more documents",
)
@limiter.limit(settings.RATE_LIMIT_UPLOAD)
async def upload_documents(
    request: Request,
    ctx: TeamScope,
    db: DBSession,
    files: Annotated[list[UploadFile] | None, File()] = None,
    category: Annotated[str | None, Form(max_length=200)] = None,
    description: Annotated[str | None, Form()] = None,
) -> list[DocumentRead]:
    documents = await document_service.upload_documents(
        db,
        ctx=ctx,
        files=files or [],
        category=category,
        description=description,
    )
    return [DocumentRead.model_validate(d) for d in documents]


@router.get(
    "/search",
    response_model=list[DocumentRead],
    summary="Search the current team's documents",
)
async def search_documents(
    ctx: TeamScope,
    db: DBSession,
    q: str = Query(min_length=settings.SEARCH_MIN_QUERY_LENGTH, max_length=200),
) -> list[DocumentRead]:
    documents = await document_service.search_documents(db, ctx=ctx, query=q)
    return [DocumentRead.model_validate(d) for d in documents]


@router.get(
    "/{document_id}",
    response_model=DocumentRead,
    summary="Get a document",
)
async def get_document(
    document_id: uuid.UUID,
    ctx: TeamScope,
    db: DBSession,
) -> DocumentRead:
    document = await document_service.get_document(db, ctx=ctx, document_id=document_id)
    return DocumentRead.model_validate(document)


@router.patch(
    "/{document_id}",
    response_model=DocumentRead,
    summary="Review a document (change its status)",
)
async def update_document_status(
    document_id: uuid.UUID,
    status_in: DocumentStatusUpdate,
    ctx: TeamScope,
    db: DBSession,
) -> DocumentRead:
    document = await document_service.update_status(
        db, ctx=ctx, document_id=document_id, status_in=status_in
    )
    return DocumentRead.model_validate(document)
