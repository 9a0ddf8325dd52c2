"""
Volunteers Router

Endpoints:
- POST /volunteers/register - Register as a volunteer (public)
- GET /volunteers/all - List registrations with stats (admin)
- PATCH /volunteers/{id}/status - Review a registration (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
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
from foundation_api.modules.volunteers.form import VOLUNTEER_FORM
from foundation_api.modules.volunteers.models import VolunteerStatus
from foundation_api.modules.volunteers.schemas import (
    VolunteerCreate,
    VolunteerItem,
    VolunteerStatusUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=SubmissionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register as Volunteer",
    description="""
Register as a volunteer. Each email address can register once; a second
registration returns 409.
""",
    responses={
        **SUBMIT_RESPONSES,
        409: {"description": "A volunteer with this email already exists"},
    },
)
async def register_volunteer(
    data: VolunteerCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            VOLUNTEER_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(VOLUNTEER_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("registering volunteer", e)


@router.get(
    "/all",
    response_model=SubmissionListResponse[VolunteerItem],
    summary="List Volunteers",
    responses=ADMIN_RESPONSES,
)
async def list_volunteers(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: VolunteerStatus | None = Query(None, alias="status", description="Filter by status"),
    search: str | None = Query(None, max_length=100, description="Search name, email, description or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[VolunteerItem]:
    try:
        result = await service.list_submissions(
            db,
            VOLUNTEER_FORM,
            status=status_filter.value if status_filter else None,
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[VolunteerItem](
            data=[VolunteerItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing volunteers", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[VolunteerItem],
    summary="Update Volunteer Status",
    description="""
Review a volunteer registration.

- Any status change stamps `reviewed_at`; entering `approved` stamps `approved_at`
- `rejection_reason` is stored only together with status `rejected`
- Entering `approved`, `active` or `rejected` emails the volunteer
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Volunteer not found"}},
)
async def update_volunteer_status(
    id: str,
    data: VolunteerStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[VolunteerItem]:
    try:
        record = await service.update_status(
            db, VOLUNTEER_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated volunteer {record.reference_code}")
        return SubmissionUpdatedResponse[VolunteerItem](
            message="Volunteer status updated successfully",
            data=VolunteerItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating volunteer", e)
