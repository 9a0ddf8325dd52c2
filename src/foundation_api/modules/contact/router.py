"""
Contact Router

Endpoints:
- POST /contact/submit - Submit a contact message (public)
- GET /contact/all - List messages with stats (admin)
- PATCH /contact/{id}/status - Update message status (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.contact.form import CONTACT_FORM
from foundation_api.modules.contact.models import ContactStatus
from foundation_api.modules.contact.schemas import ContactCreate, ContactItem, ContactStatusUpdate
from foundation_api.modules.submissions import service
from foundation_api.modules.submissions.routing import (
    ADMIN_RESPONSES,
    SUBMIT_RESPONSES,
    client_info,
    created_response,
    handle_service_error,
    pagination,
    raise_internal_error,
)
from foundation_api.modules.submissions.schemas import (
    SubmissionCreatedResponse,
    SubmissionListResponse,
    SubmissionUpdatedResponse,
)
from foundation_api.modules.submissions.service import SubmissionServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/submit",
    response_model=SubmissionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Contact Message",
    description="""
Send a message through the website contact form.

Only one message per email address is accepted every 5 minutes; a repeat
within that window returns 429.
""",
    responses={
        **SUBMIT_RESPONSES,
        429: {"description": "Another message from this email was received recently"},
    },
)
async def submit_contact(
    data: ContactCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            CONTACT_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(CONTACT_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting contact message", e)


@router.get(
    "/all",
    response_model=SubmissionListResponse[ContactItem],
    summary="List Contact Messages",
    responses=ADMIN_RESPONSES,
)
async def list_contacts(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: ContactStatus | None = Query(None, alias="status", description="Filter by status"),
    search: str | None = Query(None, max_length=100, description="Search name, email, message or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[ContactItem]:
    """List contact messages, newest first."""
    try:
        result = await service.list_submissions(
            db,
            CONTACT_FORM,
            status=status_filter.value if status_filter else None,
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[ContactItem](
            data=[ContactItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing contact messages", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[ContactItem],
    summary="Update Contact Message Status",
    description="Move a message to `new`, `in-progress` or `resolved`. Entering `resolved` stamps `resolved_at`.",
    responses={**ADMIN_RESPONSES, 404: {"description": "Contact message not found"}},
)
async def update_contact_status(
    id: str,
    data: ContactStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[ContactItem]:
    try:
        record = await service.update_status(
            db, CONTACT_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated contact message {record.reference_code}")
        return SubmissionUpdatedResponse[ContactItem](
            message="Contact status updated successfully",
            data=ContactItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating contact message", e)
