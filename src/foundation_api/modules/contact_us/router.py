"""
Contact Us Router

Endpoints:
- POST /contact-us/submit - Open a support ticket (public)
- GET /contact-us/all - List tickets with stats (admin)
- PATCH /contact-us/{id}/status - Triage a ticket (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.contact_us.form import CONTACT_US_FORM
from foundation_api.modules.contact_us.models import (
    ContactUsStatus,
    ContactUsSubject,
    TicketPriority,
)
from foundation_api.modules.contact_us.schemas import (
    ContactUsCreate,
    ContactUsItem,
    ContactUsStatusUpdate,
)
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
    summary="Submit Contact Us Request",
    description="""
Open a support ticket from the Contact Us page.

The ticket priority is derived from the subject: `donation` and
`partnership` are high, `general-inquiry` is low, everything else medium.
One request per email address is accepted every 15 minutes.
""",
    responses={
        **SUBMIT_RESPONSES,
        429: {"description": "Another request from this email was received recently"},
    },
)
async def submit_contact_us(
    data: ContactUsCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            CONTACT_US_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(CONTACT_US_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting contact-us request", e)


@router.get(
    "/all",
    response_model=SubmissionListResponse[ContactUsItem],
    summary="List Contact Us Tickets",
    description="Stats include totals per status and per subject.",
    responses=ADMIN_RESPONSES,
)
async def list_contact_us(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: ContactUsStatus | None = Query(None, alias="status", description="Filter by status"),
    subject: ContactUsSubject | None = Query(None, description="Filter by subject"),
    priority: TicketPriority | None = Query(None, description="Filter by priority"),
    search: str | None = Query(None, max_length=100, description="Search name, email, message or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[ContactUsItem]:
    try:
        result = await service.list_submissions(
            db,
            CONTACT_US_FORM,
            status=status_filter.value if status_filter else None,
            filters={
                "subject": subject.value if subject else None,
                "priority": priority.value if priority else None,
            },
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[ContactUsItem](
            data=[ContactUsItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing contact-us tickets", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[ContactUsItem],
    summary="Update Contact Us Ticket",
    description="""
Update status, priority, assignee or notes. Entering `resolved` or `closed`
stamps `resolved_at`.
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Contact submission not found"}},
)
async def update_contact_us_status(
    id: str,
    data: ContactUsStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[ContactUsItem]:
    try:
        record = await service.update_status(
            db, CONTACT_US_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated contact-us ticket {record.reference_code}")
        return SubmissionUpdatedResponse[ContactUsItem](
            message="Contact status updated successfully",
            data=ContactUsItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating contact-us ticket", e)
