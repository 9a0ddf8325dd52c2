"""
Collaborations Router

Endpoints:
- POST /collaborations/submit - Propose a partnership (public)
- GET /collaborations/all - List requests with stats (admin)
- PATCH /collaborations/{id}/status - Review a request (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.collaborations.form import COLLABORATION_FORM
from foundation_api.modules.collaborations.models import AreaOfInterest, CollaborationStatus
from foundation_api.modules.collaborations.schemas import (
    CollaborationCreate,
    CollaborationItem,
    CollaborationStatusUpdate,
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
    summary="Submit Collaboration Request",
    description="""
Propose a partnership.

A request with the same email **or** the same organization name within the
last 24 hours is rejected with 429.
""",
    responses={
        **SUBMIT_RESPONSES,
        429: {"description": "A request from this organization or email was received recently"},
    },
)
async def submit_collaboration(
    data: CollaborationCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            COLLABORATION_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(COLLABORATION_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting collaboration request", e)


@router.get(
    "/all",
    response_model=SubmissionListResponse[CollaborationItem],
    summary="List Collaboration Requests",
    responses=ADMIN_RESPONSES,
)
async def list_collaborations(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: CollaborationStatus | None = Query(None, alias="status", description="Filter by status"),
    area_of_interest: AreaOfInterest | None = Query(None, description="Filter by area of interest"),
    search: str | None = Query(None, max_length=100, description="Search name, organization, email or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[CollaborationItem]:
    try:
        result = await service.list_submissions(
            db,
            COLLABORATION_FORM,
            status=status_filter.value if status_filter else None,
            filters={"area_of_interest": area_of_interest.value if area_of_interest else None},
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[CollaborationItem](
            data=[CollaborationItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing collaboration requests", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[CollaborationItem],
    summary="Update Collaboration Request",
    description="""
Review a partnership request.

- Any status change stamps `reviewed_at`
- `decline_reason` is stored only together with status `declined`
- `partnership_start_date` is stored only together with `active-partnership`,
  and defaults to now when that status is entered without one
- Entering `meeting-scheduled`, `approved`, `active-partnership` or
  `declined` emails the requester
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Collaboration request not found"}},
)
async def update_collaboration_status(
    id: str,
    data: CollaborationStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[CollaborationItem]:
    try:
        record = await service.update_status(
            db, COLLABORATION_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated collaboration {record.reference_code}")
        return SubmissionUpdatedResponse[CollaborationItem](
            message="Collaboration status updated successfully",
            data=CollaborationItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating collaboration request", e)
