"""
Media Router

Endpoints:
- POST /media/submit - Share a photo or video link (public)
- GET /media/submissions - List submissions with stats (admin)
- PATCH /media/{id}/status - Review a submission (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.media.form import MEDIA_FORM
from foundation_api.modules.media.models import MediaStatus, MediaType
from foundation_api.modules.media.schemas import MediaCreate, MediaItem, MediaStatusUpdate
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
    summary="Submit Media",
    description="""
Share a photo or video as a link.

The URL must be http(s) and either end in a common image/video extension
or point at a supported platform (YouTube, Vimeo, Google Drive, Dropbox,
Imgur). The media type (`image`, `video` or `unknown`) is derived from the
URL. One submission per email address is accepted every hour.
""",
    responses={
        **SUBMIT_RESPONSES,
        429: {"description": "Another submission from this email was received recently"},
    },
)
async def submit_media(
    data: MediaCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            MEDIA_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(MEDIA_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting media", e)


@router.get(
    "/submissions",
    response_model=SubmissionListResponse[MediaItem],
    summary="List Media Submissions",
    description="Stats include totals per status plus `images` and `videos`.",
    responses=ADMIN_RESPONSES,
)
async def list_media(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: MediaStatus | None = Query(None, alias="status", description="Filter by status"),
    media_type: MediaType | None = Query(None, description="Filter by media type"),
    search: str | None = Query(None, max_length=100, description="Search name, email, description or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[MediaItem]:
    try:
        result = await service.list_submissions(
            db,
            MEDIA_FORM,
            status=status_filter.value if status_filter else None,
            filters={"media_type": media_type.value if media_type else None},
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[MediaItem](
            data=[MediaItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing media submissions", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[MediaItem],
    summary="Update Media Submission",
    description="""
Review a media submission.

- Any status change stamps `reviewed_at`; entering `featured` stamps `featured_at`
- `rejection_reason` is stored only together with status `rejected`
- Entering `approved`, `featured` or `rejected` emails the submitter
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Media submission not found"}},
)
async def update_media_status(
    id: str,
    data: MediaStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[MediaItem]:
    try:
        record = await service.update_status(
            db, MEDIA_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated media submission {record.reference_code}")
        return SubmissionUpdatedResponse[MediaItem](
            message="Media submission status updated successfully",
            data=MediaItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating media submission", e)
