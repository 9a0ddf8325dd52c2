"""
Internship Schemas
"""

from datetime import datetime

from foundation_api.modules.interns.models import InternshipArea, InternshipDuration, InternStatus
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


class InternCreate(SubmissionForm):
    """Body of POST /interns/apply."""

    full_name: FullName
    email: EmailAddress
    mobile: MobileNumber
    internship_area: InternshipArea
    motivation: BoundedText("Motivation", 20, 1000)
    education: OptionalText("Education background", 1000) = None


class InternStatusUpdate(StatusUpdateForm):
    status: InternStatus | None = None
    duration: InternshipDuration | None = None
    reviewed_by: OptionalText("Reviewer", 100) = None
    notes: OptionalText("Notes", 1000) = None
    mentor: OptionalText("Mentor", 100) = None
    interview_date: datetime | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    rejection_reason: OptionalText("Rejection reason", 1000) = None


class InternItem(SubmissionRecord):
    full_name: str
    mobile: str
    internship_area: str
    education: str | None = None
    motivation: str
    duration: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    interview_date: datetime | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    mentor: str | None = None
    rejection_reason: str | None = None
    notes: str | None = None
