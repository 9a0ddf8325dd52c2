"""
Contact Schemas
"""

from datetime import datetime

from foundation_api.modules.contact.models import ContactStatus
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
)


class ContactCreate(SubmissionForm):
    """Body of POST /contact/submit."""

    full_name: FullName
    email: EmailAddress
    mobile: MobileNumber
    message: BoundedText("Message", 10, 1000)


class ContactStatusUpdate(StatusUpdateForm):
    status: ContactStatus | None = None


class ContactItem(SubmissionRecord):
    full_name: str
    mobile: str
    message: str
    resolved_at: datetime | None = None
