"""
News Submissions Router

Endpoints:
- POST /news-submissions/submit - Propose a news update (public)
- GET /news-submissions/submissions - List submissions with stats (admin)
- PATCH /news-submissions/{id}/status - Review a submission (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.news_submissions.form import NEWS_SUBMISSION_FORM
from foundation_api.modules.news_submissions.models import NewsCategory, NewsStatus
from foundation_api.modules.news_submissions.schemas import (
    NewsSubmissionCreate,
    NewsSubmissionItem,
    NewsSubmissionStatusUpdate,
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
    summary="Submit News Update",
    description="Propose a news update. One submission per email address is accepted every hour.",
    responses={
        **SUBMIT_RESPONSES,
        429: {"description": "Another submission from this email was received recently"},
    },
)
async def submit_news(
    data: NewsSubmissionCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            NEWS_SUBMISSION_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(NEWS_SUBMISSION_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting news update", e)


@router.get(
    "/submissions",
    response_model=SubmissionListResponse[NewsSubmissionItem],
    summary="List News Submissions",
    responses=ADMIN_RESPONSES,
)
async def list_news_submissions(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: NewsStatus | None = Query(None, alias="status", description="Filter by status"),
    category: NewsCategory | None = Query(None, description="Filter by category"),
    search: str | None = Query(None, max_length=100, description="Search name, email, news text or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[NewsSubmissionItem]:
    try:
        result = await service.list_submissions(
            db,
            NEWS_SUBMISSION_FORM,
            status=status_filter.value if status_filter else None,
            filters={"category": category.value if category else None},
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[NewsSubmissionItem](
            data=[NewsSubmissionItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing news submissions", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[NewsSubmissionItem],
    summary="Update News Submission",
    description="""
Review a news submission.

- Any status change stamps `reviewed_at`; entering `published` stamps `published_at`
- `rejection_reason` is stored only together with status `rejected`
- Entering `approved`, `published` or `rejected` emails the submitter
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "News submission not found"}},
)
async def update_news_status(
    id: str,
    data: NewsSubmissionStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[NewsSubmissionItem]:
    try:
        record = await service.update_status(
            db, NEWS_SUBMISSION_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated news submission {record.reference_code}")
        return SubmissionUpdatedResponse[NewsSubmissionItem](
            message="News submission status updated successfully",
            data=NewsSubmissionItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating news submission", e)
