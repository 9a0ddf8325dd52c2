"""
Router helpers shared by the form routers.
"""

import logging
from typing import Any, NoReturn

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from foundation_api.modules.submissions.schemas import (
    Pagination,
    SubmissionCreatedResponse,
    SubmissionReceipt,
)
from foundation_api.modules.submissions.service import SubmissionServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# Shared OpenAPI response docs
SUBMIT_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "detail": {
                        "error": "VALIDATION_ERROR",
                        "message": "Please enter a valid email address",
                        "field": "email",
                    }
                }
            }
        },
    },
    500: {"description": "Unexpected server error"},
}

ADMIN_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"description": "Missing or invalid token"},
    403: {"description": "Admin role required"},
    500: {"description": "Unexpected server error"},
}


def handle_service_error(e: SubmissionServiceError) -> NoReturn:
    """Convert service errors to HTTPExceptions."""
    raise HTTPException(
        status_code=e.status_code,
        detail={
            "error": e.error_code,
            "message": e.message,
        },
    )


def raise_internal_error(action: str, e: Exception) -> NoReturn:
    """Log an unexpected exception and raise a generic 500."""
    logger.exception(f"Error {action}: {e}")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error": "INTERNAL_ERROR",
            "message": INTERNAL_ERROR_MESSAGE,
        },
    ) from e


def client_info(request: Request) -> tuple[str | None, str | None]:
    """Submitter IP (honouring X-Forwarded-For) and User-Agent."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        client_ip = forwarded.split(",")[0].strip()
    else:
        client_ip = request.client.host if request.client else None
    return client_ip, request.headers.get("user-agent")


def created_response(message: str, record: Any) -> SubmissionCreatedResponse:
    return SubmissionCreatedResponse(
        message=message,
        data=SubmissionReceipt(reference=record.reference_code, submitted_at=record.created_at),
    )


def pagination(result: dict[str, Any]) -> Pagination:
    return Pagination(**result["pagination"])


def _error_field(error: dict[str, Any]) -> str | None:
    ctx = error.get("ctx") or {}
    if ctx.get("field"):
        return ctx["field"]
    if ctx.get("fields"):
        return ctx["fields"][0]
    parts = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    return ".".join(parts) or None


def _error_message(error: dict[str, Any], field: str | None) -> str:
    if error.get("type") == "enum":
        return f"Invalid value for {field}"
    message = error.get("msg", "Invalid request")
    return message.removeprefix("Value error, ")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Report the first validation error as a 400 with the offending field.

    Registered on the application for RequestValidationError.
    """
    errors = exc.errors()
    error = errors[0] if errors else {}
    field = _error_field(error)
    message = _error_message(error, field)
    logger.info(f"Validation failed on {request.method} {request.url.path}: {field}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "error": "VALIDATION_ERROR",
                "message": message,
                "field": field,
            }
        },
    )
