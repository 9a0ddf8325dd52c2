"""
Newsletter Models

Newsletter subscribers. Each email address has exactly one row that moves
between active and unsubscribed; returning subscribers are reactivated
rather than duplicated.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class SubscriberStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    UNSUBSCRIBED = "unsubscribed"


class NewsletterSubscriber(SubmissionMixin, BaseModel):
    """A newsletter subscription."""

    __tablename__ = "newsletter_subscribers"

    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True, index=True)

    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    unsubscribed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    # 64 hex characters; embedded in every newsletter's unsubscribe link
    unsubscribe_token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<NewsletterSubscriber {self.reference_code} ({self.status})>"
