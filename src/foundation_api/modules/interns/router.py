"""
Interns Router

Endpoints:
- POST /interns/apply - Apply for an internship (public)
- GET /interns/all - List applications with stats (admin)
- PATCH /interns/{id}/status - Review an application (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.interns.form import INTERN_FORM
from foundation_api.modules.interns.models import InternshipArea, InternStatus
from foundation_api.modules.interns.schemas import InternCreate, InternItem, InternStatusUpdate
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
    "/apply",
    response_model=SubmissionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply for Internship",
    description="""
Submit an internship application. Each email address can apply once; a
second application returns 409.
""",
    responses={
        **SUBMIT_RESPONSES,
        409: {"description": "An internship application with this email already exists"},
    },
)
async def apply_for_internship(
    data: InternCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            INTERN_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(INTERN_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting internship application", e)


@router.get(
    "/all",
    response_model=SubmissionListResponse[InternItem],
    summary="List Internship Applications",
    responses=ADMIN_RESPONSES,
)
async def list_interns(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: InternStatus | None = Query(None, alias="status", description="Filter by status"),
    internship_area: InternshipArea | None = Query(None, description="Filter by internship area"),
    search: str | None = Query(None, max_length=100, description="Search name, email, motivation or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[InternItem]:
    try:
        result = await service.list_submissions(
            db,
            INTERN_FORM,
            status=status_filter.value if status_filter else None,
            filters={"internship_area": internship_area.value if internship_area else None},
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[InternItem](
            data=[InternItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing internship applications", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[InternItem],
    summary="Update Internship Application",
    description="""
Review an internship application: status, interview and placement dates,
mentor, duration and notes.

- Any status change stamps `reviewed_at`
- `rejection_reason` is stored only together with status `rejected`
- Entering `interview-scheduled`, `accepted`, `rejected` or `completed`
  emails the applicant
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Internship application not found"}},
)
async def update_intern_status(
    id: str,
    data: InternStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[InternItem]:
    try:
        record = await service.update_status(
            db, INTERN_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated internship application {record.reference_code}")
        return SubmissionUpdatedResponse[InternItem](
            message="Intern status updated successfully",
            data=InternItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating internship application", e)
