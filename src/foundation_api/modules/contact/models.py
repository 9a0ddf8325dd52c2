"""
Contact Models

Messages sent through the short website contact form.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class ContactStatus(str, enum.Enum):
    """Status of a contact message."""

    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"


class ContactMessage(SubmissionMixin, BaseModel):
    """A message from the website contact form."""

    __tablename__ = "contact_messages"

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile: Mapped[str] = mapped_column(String(15), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<ContactMessage {self.reference_code} ({self.status})>"
