"""
Contact Us Models

Support tickets from the full "Contact Us" page. Each ticket carries a
subject, a priority derived from it, and triage fields for the team.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class ContactUsSubject(str, enum.Enum):
    """What the ticket is about."""

    GENERAL_INQUIRY = "general-inquiry"
    VOLUNTEERING = "volunteering"
    INTERNSHIP = "internship"
    PARTNERSHIP = "partnership"
    DONATION = "donation"
    OTHER = "other"


class ContactUsStatus(str, enum.Enum):
    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# Subjects not listed here default to medium
SUBJECT_PRIORITY = {
    ContactUsSubject.DONATION.value: TicketPriority.HIGH.value,
    ContactUsSubject.PARTNERSHIP.value: TicketPriority.HIGH.value,
    ContactUsSubject.GENERAL_INQUIRY.value: TicketPriority.LOW.value,
}


def priority_for_subject(subject: str) -> str:
    return SUBJECT_PRIORITY.get(subject, TicketPriority.MEDIUM.value)


class ContactUsTicket(SubmissionMixin, BaseModel):
    """A ticket from the Contact Us page."""

    __tablename__ = "contact_us_tickets"

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile: Mapped[str] = mapped_column(String(15), nullable=False)
    subject: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    # Triage
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default=TicketPriority.MEDIUM.value, index=True
    )
    assigned_to: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<ContactUsTicket {self.reference_code} ({self.subject}, {self.priority})>"
