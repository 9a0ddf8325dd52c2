"""
Event Registration Models

Registrations for events published on the website. Events themselves are
managed elsewhere; a registration only records the event id and title.
An email address can register once per event.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class RegistrationStatus(str, enum.Enum):
    """Status of an event registration."""

    CONFIRMED = "confirmed"
    WAITLIST = "waitlist"
    CANCELLED = "cancelled"


class AttendanceStatus(str, enum.Enum):
    REGISTERED = "registered"
    ATTENDED = "attended"
    NO_SHOW = "no-show"


class DisabilityAnswer(str, enum.Enum):
    YES = "Yes"
    NO = "No"


class DisabilityType(str, enum.Enum):
    VISUAL = "Visual Impairment"
    HEARING = "Hearing Impairment"
    LOCOMOTOR = "Locomotor Disability"
    INTELLECTUAL = "Intellectual Disability"
    SPEECH_AND_LANGUAGE = "Speech & Language Disability"
    MULTIPLE = "Multiple Disabilities"
    OTHER = "Other (please specify)"


class EventRegistration(SubmissionMixin, BaseModel):
    """A registration for one event."""

    __tablename__ = "event_registrations"
    __table_args__ = (
        UniqueConstraint("email", "event_id", name="uq_event_registrations_email_event"),
    )

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile_number: Mapped[str] = mapped_column(String(15), nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    organization: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Accessibility
    is_person_with_disability: Mapped[str] = mapped_column(String(3), nullable=False)
    disability_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    other_disability_text: Mapped[str | None] = mapped_column(String(200), nullable=True)
    special_accommodations: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Event
    event_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    event_title: Mapped[str] = mapped_column(String(200), nullable=False)
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Admin
    attendance_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=AttendanceStatus.REGISTERED.value
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<EventRegistration {self.reference_code} event={self.event_id} ({self.status})>"
