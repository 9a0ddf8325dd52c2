"""
Collaboration Schemas
"""

from datetime import datetime

from foundation_api.modules.collaborations.models import (
    AreaOfInterest,
    CollaborationPriority,
    CollaborationStatus,
    OrganizationType,
    PartnershipType,
)
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


class CollaborationCreate(SubmissionForm):
    """Body of POST /collaborations/submit."""

    full_name: FullName
    organization_name: BoundedText("Organization name", 2, 200)
    email: EmailAddress
    mobile: MobileNumber
    area_of_interest: AreaOfInterest
    message: OptionalText("Message", 2000) = None


class CollaborationStatusUpdate(StatusUpdateForm):
    status: CollaborationStatus | None = None
    organization_type: OrganizationType | None = None
    partnership_type: PartnershipType | None = None
    priority: CollaborationPriority | None = None
    reviewed_by: OptionalText("Reviewer", 100) = None
    notes: OptionalText("Notes", 1000) = None
    meeting_date: datetime | None = None
    partnership_start_date: datetime | None = None
    decline_reason: OptionalText("Decline reason", 1000) = None


class CollaborationItem(SubmissionRecord):
    full_name: str
    organization_name: str
    mobile: str
    area_of_interest: str
    message: str | None = None
    organization_type: str | None = None
    partnership_type: str | None = None
    priority: str
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    meeting_date: datetime | None = None
    partnership_start_date: datetime | None = None
    decline_reason: str | None = None
    notes: str | None = None
