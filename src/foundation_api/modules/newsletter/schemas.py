"""
Newsletter Schemas
"""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel

from foundation_api.modules.newsletter.models import SubscriberStatus
from foundation_api.modules.submissions.schemas import (
    StatusUpdateForm,
    SubmissionForm,
    SubmissionRecord,
)
from foundation_api.modules.submissions.validators import EmailAddress


class NewsletterSubscribe(SubmissionForm):
    """Body of POST /newsletter/subscribe."""

    required_message: ClassVar[str] = "Email is required"

    email: EmailAddress


class SubscriberStatusUpdate(StatusUpdateForm):
    status: SubscriberStatus | None = None


class SubscriberItem(SubmissionRecord):
    """Admin view of a subscriber. The unsubscribe token is never exposed."""

    subscribed_at: datetime
    unsubscribed_at: datetime | None = None


class UnsubscribeResponse(BaseModel):
    success: bool = True
    message: str
