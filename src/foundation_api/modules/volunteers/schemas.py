"""
Volunteer Schemas
"""

from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator

from foundation_api.modules.submissions.schemas import (
    StatusUpdateForm,
    SubmissionForm,
    SubmissionRecord,
)
from foundation_api.modules.submissions.validators import (
    BoundedText,
    EmailAddress,
    FullName,
    MobileNumber,
    OptionalText,
)
from foundation_api.modules.volunteers.models import (
    VolunteerAvailability,
    VolunteerExpertise,
    VolunteerStatus,
)


class VolunteerCreate(SubmissionForm):
    """Body of POST /volunteers/register."""

    full_name: FullName
    email: EmailAddress
    mobile: MobileNumber
    how_to_help: BoundedText("Description", 10, 1000)
    expertise: Annotated[list[VolunteerExpertise], BeforeValidator(lambda v: v or [])] = []
    message: OptionalText("Message", 500) = None


class VolunteerStatusUpdate(StatusUpdateForm):
    status: VolunteerStatus | None = None
    availability: VolunteerAvailability | None = None
    reviewed_by: OptionalText("Reviewer", 100) = None
    notes: OptionalText("Notes", 1000) = None
    rejection_reason: OptionalText("Rejection reason", 1000) = None


class VolunteerItem(SubmissionRecord):
    full_name: str
    mobile: str
    expertise: list[str] = []
    how_to_help: str
    message: str | None = None
    availability: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    approved_at: datetime | None = None
    rejection_reason: str | None = None
    notes: str | None = None
