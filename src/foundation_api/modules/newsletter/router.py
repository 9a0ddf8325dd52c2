"""
Newsletter Router

Endpoints:
- POST /newsletter/subscribe - Subscribe or reactivate an email (public)
- GET /newsletter/unsubscribe/{token} - Unsubscribe via email link (public)
- GET /newsletter/subscribers - List subscribers with stats (admin)
- PATCH /newsletter/{id}/status - Change a subscriber's status (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.newsletter import service as newsletter_service
from foundation_api.modules.newsletter.form import (
    NEWSLETTER_FORM,
    REACTIVATED_MESSAGE,
    UNSUBSCRIBED_MESSAGE,
)
from foundation_api.modules.newsletter.models import SubscriberStatus
from foundation_api.modules.newsletter.schemas import (
    NewsletterSubscribe,
    SubscriberItem,
    SubscriberStatusUpdate,
    UnsubscribeResponse,
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
    "/subscribe",
    response_model=SubmissionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Subscribe to Newsletter",
    description="""
Subscribe an email address to the newsletter.

- New addresses are created (201)
- Addresses that previously unsubscribed are reactivated (200)
- Addresses that are already active are rejected (409)
""",
    responses={
        **SUBMIT_RESPONSES,
        200: {"description": "Subscription reactivated"},
        409: {"description": "Email is already subscribed"},
    },
)
async def subscribe(
    data: NewsletterSubscribe,
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        subscriber, reactivated = await newsletter_service.subscribe(
            db,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        if reactivated:
            response.status_code = status.HTTP_200_OK
            return created_response(REACTIVATED_MESSAGE, subscriber)
        return created_response(NEWSLETTER_FORM.submit_message, subscriber)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("subscribing to newsletter", e)


@router.get(
    "/unsubscribe/{token}",
    response_model=UnsubscribeResponse,
    summary="Unsubscribe from Newsletter",
    description="Target of the unsubscribe link included in every newsletter email.",
    responses={404: {"description": "Invalid or expired unsubscribe link"}},
)
async def unsubscribe(
    token: str,
    db: AsyncSession = Depends(get_db),
) -> UnsubscribeResponse:
    try:
        await newsletter_service.unsubscribe(db, token)
        return UnsubscribeResponse(message=UNSUBSCRIBED_MESSAGE)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("unsubscribing from newsletter", e)


@router.get(
    "/subscribers",
    response_model=SubmissionListResponse[SubscriberItem],
    summary="List Newsletter Subscribers",
    responses=ADMIN_RESPONSES,
)
async def list_subscribers(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: SubscriberStatus | None = Query(None, alias="status", description="Filter by status"),
    search: str | None = Query(None, max_length=100, description="Search email"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[SubscriberItem]:
    try:
        result = await service.list_submissions(
            db,
            NEWSLETTER_FORM,
            status=status_filter.value if status_filter else None,
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[SubscriberItem](
            data=[SubscriberItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing newsletter subscribers", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[SubscriberItem],
    summary="Update Subscriber Status",
    description="Entering `unsubscribed` stamps `unsubscribed_at`. No email is sent.",
    responses={**ADMIN_RESPONSES, 404: {"description": "Subscriber not found"}},
)
async def update_subscriber_status(
    id: str,
    data: SubscriberStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[SubscriberItem]:
    try:
        record = await service.update_status(
            db, NEWSLETTER_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated subscriber {record.reference_code}")
        return SubmissionUpdatedResponse[SubscriberItem](
            message="Subscriber status updated successfully",
            data=SubscriberItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating subscriber", e)
