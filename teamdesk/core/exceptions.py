"""
Custom HTTP exceptions and global exception handlers for TeamDesk.
All application-level errors are defined here for consistency.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ── Custom exception classes ──────────────────────────────────────────────────

class TeamDeskException(Exception):
    """Base exception for all TeamDesk domain errors."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.error_code = error_code or "TEAMDESK_ERROR"
        super().__init__(detail)


class NotFoundException(TeamDeskException):
    def __init__(self, resource: str, resource_id: str | None = None) -> None:
        detail = f"{resource} not found"
        if resource_id:
            detail = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND",
        )


class UnauthorizedException(TeamDeskException):
    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
        )


class ForbiddenException(TeamDeskException):
    def __init__(self, detail: str = "You do not have permission to perform this action") -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code="FORBIDDEN",
        )


class BadRequestException(TeamDeskException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="VALIDATION_ERROR",
        )


class NoTeamSelectedException(TeamDeskException):
    def __init__(self, detail: str = "No team selected") -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="NO_TEAM_SELECTED",
        )


class UploadRejectedException(TeamDeskException):
    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        error_code: str = "UPLOAD_REJECTED",
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, error_code=error_code)


class FileTooLargeException(UploadRejectedException):
    def __init__(self, filename: str, max_mb: int) -> None:
        super().__init__(
            detail=f"File '{filename}' exceeds maximum allowed size of {max_mb} MB",
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            error_code="FILE_TOO_LARGE",
        )


# ── Exception handlers ────────────────────────────────────────────────────────

def _error_response(status_code: int, detail: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message": detail,
            "error": error_code,
        },
    )


async def teamdesk_exception_handler(
    request: Request, exc: TeamDeskException
) -> JSONResponse:
    return _error_response(exc.status_code, exc.detail, exc.error_code)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append({"field": field, "message": error["msg"]})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Request validation failed",
            "error": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return _error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected internal server error occurred",
        error_code="INTERNAL_SERVER_ERROR",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI application."""
    app.add_exception_handler(TeamDeskException, teamdesk_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
