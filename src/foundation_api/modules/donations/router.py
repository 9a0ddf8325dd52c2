"""
Donations Router

Endpoints:
- POST /donations/submit - Record a donation intention (public)
- GET /donations/all - List donations with stats (admin)
- PATCH /donations/{id}/status - Update follow-up and payment status (admin)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.auth import AdminUser, get_current_admin_user
from foundation_api.core.database import get_db
from foundation_api.modules.donations.form import DONATION_FORM
from foundation_api.modules.donations.models import DonationStatus, DonationType
from foundation_api.modules.donations.schemas import (
    DonationCreate,
    DonationItem,
    DonationStatusUpdate,
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
    summary="Submit Donation Intention",
    description="""
Record a donation intention. No payment is collected; the team follows up
with the donor.

**Rules:**
- `donation_amount` must be between 1 and 10,000,000
- One donation intention per email address; a repeat gets 409
""",
    responses={
        **SUBMIT_RESPONSES,
        409: {
            "description": "A donation with this email already exists",
            "content": {
                "application/json": {
                    "example": {
                        "detail": {
                            "error": "ALREADY_EXISTS",
                            "message": "A donation request with this email already exists. Our team will contact you shortly.",
                        }
                    }
                }
            },
        },
    },
)
async def submit_donation(
    data: DonationCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
) -> SubmissionCreatedResponse:
    client_ip, user_agent = client_info(request)
    try:
        record = await service.submit(
            db,
            DONATION_FORM,
            data,
            client_ip=client_ip,
            user_agent=user_agent,
            background_tasks=background_tasks,
        )
        return created_response(DONATION_FORM.submit_message, record)
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("submitting donation", e)


@router.get(
    "/all",
    response_model=SubmissionListResponse[DonationItem],
    summary="List Donations",
    description="Stats include `total_amount`, the sum of completed donations.",
    responses=ADMIN_RESPONSES,
)
async def list_donations(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Records per page"),
    status_filter: DonationStatus | None = Query(None, alias="status", description="Filter by status"),
    donation_type: DonationType | None = Query(None, description="Filter by donation type"),
    search: str | None = Query(None, max_length=100, description="Search name, email or reference"),
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionListResponse[DonationItem]:
    try:
        result = await service.list_submissions(
            db,
            DONATION_FORM,
            status=status_filter.value if status_filter else None,
            filters={"donation_type": donation_type.value if donation_type else None},
            search=search,
            page=page,
            limit=limit,
        )
        return SubmissionListResponse[DonationItem](
            data=[DonationItem.model_validate(record) for record in result["records"]],
            stats=result["stats"],
            pagination=pagination(result),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("listing donations", e)


@router.patch(
    "/{id}/status",
    response_model=SubmissionUpdatedResponse[DonationItem],
    summary="Update Donation Status",
    description="""
Update the follow-up status, payment status or notes. Entering `contacted`
stamps `contacted_at`; entering `completed` stamps `completed_at`.
""",
    responses={**ADMIN_RESPONSES, 404: {"description": "Donation not found"}},
)
async def update_donation_status(
    id: str,
    data: DonationStatusUpdate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin_user),
) -> SubmissionUpdatedResponse[DonationItem]:
    try:
        record = await service.update_status(
            db, DONATION_FORM, id, data.changes(), background_tasks=background_tasks
        )
        logger.info(f"Admin {admin.id} updated donation {record.reference_code}")
        return SubmissionUpdatedResponse[DonationItem](
            message="Donation status updated successfully",
            data=DonationItem.model_validate(record),
        )
    except SubmissionServiceError as e:
        handle_service_error(e)
    except Exception as e:
        raise_internal_error("updating donation", e)
