"""
Contact Us Schemas
"""

from datetime import datetime
from typing import Any

from foundation_api.modules.contact_us.models import (
    ContactUsStatus,
    ContactUsSubject,
    TicketPriority,
    priority_for_subject,
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


class ContactUsCreate(SubmissionForm):
    """Body of POST /contact-us/submit."""

    full_name: FullName
    email: EmailAddress
    mobile: MobileNumber
    subject: ContactUsSubject
    message: BoundedText("Message", 10, 1500)

    def to_record_values(self) -> dict[str, Any]:
        values = self.model_dump()
        values["priority"] = priority_for_subject(self.subject)
        return values


class ContactUsStatusUpdate(StatusUpdateForm):
    status: ContactUsStatus | None = None
    priority: TicketPriority | None = None
    assigned_to: OptionalText("Assignee", 100) = None
    notes: OptionalText("Notes", 1000) = None


class ContactUsItem(SubmissionRecord):
    full_name: str
    mobile: str
    subject: str
    message: str
    priority: str
    assigned_to: str | None = None
    notes: str | None = None
    resolved_at: datetime | None = None
