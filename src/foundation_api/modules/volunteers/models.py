"""
Volunteer Models

Volunteer registrations. One registration per email address.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.dialects.postgresql import JSON
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class VolunteerExpertise(str, enum.Enum):
    EDUCATION = "Education"
    SKILL_DEVELOPMENT = "Skill Development"
    CONTENT_CREATION = "Content Creation"
    ADVOCACY = "Advocacy"
    EVENT_COORDINATION = "Event Coordination"
    RESEARCH_AND_POLICY = "Research & Policy"
    MORE = "More"


class VolunteerStatus(str, enum.Enum):
    """Status of a volunteer registration."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    APPROVED = "approved"
    ACTIVE = "active"
    INACTIVE = "inactive"
    REJECTED = "rejected"


class VolunteerAvailability(str, enum.Enum):
    PART_TIME = "part-time"
    FULL_TIME = "full-time"
    WEEKENDS = "weekends"
    FLEXIBLE = "flexible"


class Volunteer(SubmissionMixin, BaseModel):
    """A volunteer registration."""

    __tablename__ = "volunteers"

    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True, index=True)

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile: Mapped[str] = mapped_column(String(15), nullable=False)
    expertise: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    how_to_help: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Review
    availability: Mapped[str | None] = mapped_column(String(20), nullable=True)
    reviewed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Volunteer {self.reference_code} ({self.status})>"
