"""
Event Registrations Router

Endpoints:
- POST /events/register - Register for an event (public)
- GET /events/registrations - List registrations with stats (admin)
- GET /events/{event_id}/stats - Registration totals for one event (admin)
- PATCH /events/registration/{id}/status - Update a registration (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.events import service as event_service
from foundation_api.modules.events.form import EVENT_REGISTRATION_FORM
from foundation_api.modules.events.models import RegistrationStatus
from foundation_api.modules.events.schemas import (
    EventRegistrationCreate,
    EventRegistrationCreatedResponse,
    EventRegistrationItem,
    EventRegistrationReceipt,
    EventRegistrationStatusUpdate,
    EventStatsResponse,
)
from foundation_api.modules.submissions import service
from foundation_api.modules.submissions.routing import (
    ADMIN_RESPONSES,
    SUBMIT_RESPONSES,
    client_info,
    handle_service_error,
    pagination,
    raise_internal_error,
)
from foundation_api.modules.submissions.schemas import (
    SubmissionListResponse,
    SubmissionUpdatedResponse,
)
from foundation_api.modules.submissions.service import SubmissionServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=EventRegistrationCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register for Event",
    description="""
Register for an event.

**Rules:**
- `mobile_number` must be 10-15 digits with no other characters
- `disability_type` is required when `is_person_with_disability` is `Yes`
- `other_disability_text` is required when `disability_type` is `Other (please specify)`
- An email address can register once per event (409 on repeat)
""",
    responses={
        **SUBMIT_RESPONSES,
        409: {
            "description": "Already registered for this event",
            "content": {
                "application/json": {
                    "example": {
                        "detail": {
                            "error": "ALREADY_EXISTS",
                            "message": "You are already registered for this event",
                        }
                    }
                }
            },
        },
    },
)
async def register_for_event(
    data: EventRegistrationCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> EventRegistrationCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            EVENT_REGISTRATION_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return EventRegistrationCreatedResponse(
            message=EVENT_REGISTRATION_FORM.submit_message,
            data=EventRegistrationReceipt(
                reference=record.reference_code,
                submitted_at=record.created_at,
                event_title=record.event_title,
                registration_status=record.status,
            ),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("registering for event", e)


@router.get(
    "/registrations",
    response_model=SubmissionListResponse[EventRegistrationItem],
    summary="List Event Registrations",
    description="Stats include totals per status and `with_disability`.",
    responses=ADMIN_RESPONSES,
)
async def list_registrations(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: RegistrationStatus | None = Query(None, alias="status", description="Filter by status"),
    event_id: int | None = Query(None, description="Filter by event"),
    search: str | None = Query(None, max_length=100, description="Search name, email, event title or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[EventRegistrationItem]:
    try:
        result = await service.list_submissions(
            db,
            EVENT_REGISTRATION_FORM,
            status=status_filter.value if status_filter else None,
            filters={"event_id": event_id},
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[EventRegistrationItem](
            data=[EventRegistrationItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing event registrations", e)


@router.get(
    "/{event_id}/stats",
    response_model=EventStatsResponse,
    summary="Get Event Statistics",
    description="Registrations for one event grouped by status and by disability type.",
    responses=ADMIN_RESPONSES,
)
async def get_event_stats(
    event_id: int,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> EventStatsResponse:
    try:
        stats = await event_service.get_event_stats(db, event_id)
        return EventStatsResponse(data=stats)
    except Exception as e:
        raise_internal_error(f"fetching stats for event {event_id}", e)


@router.patch(
    "/registration/{id}/status",
    response_model=SubmissionUpdatedResponse[EventRegistrationItem],
    summary="Update Event Registration",
    description="""
Update registration status, attendance or notes. Entering `confirmed`,
`waitlist` or `cancelled` emails the registrant.
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Event registration not found"}},
)
async def update_registration_status(
    id: str,
    data: EventRegistrationStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[EventRegistrationItem]:
    try:
        record = await service.update_status(
            db, EVENT_REGISTRATION_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated event registration {record.reference_code}")
        return SubmissionUpdatedResponse[EventRegistrationItem](
            message="Registration status updated successfully",
            data=EventRegistrationItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating event registration", e)
