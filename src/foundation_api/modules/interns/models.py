"""
Internship Models

Internship applications. One application per email address; the review
fields track the interview and placement.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class InternshipArea(str, enum.Enum):
    RESEARCH_AND_POLICY = "Research & Policy"
    CONTENT_DEVELOPMENT = "Content Development"
    EVENT_COORDINATION = "Event Coordination"
    SOCIAL_MEDIA = "Social Media"
    ASSISTIVE_TECHNOLOGY = "Assistive Technology"
    MORE = "More"


class InternStatus(str, enum.Enum):
    """Status of an internship application."""

    PENDING = "pending"
    UNDER_REVIEW = "under-review"
    INTERVIEW_SCHEDULED = "interview-scheduled"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


class InternshipDuration(str, enum.Enum):
    ONE_MONTH = "1-month"
    THREE_MONTHS = "3-months"
    SIX_MONTHS = "6-months"
    FLEXIBLE = "flexible"


class InternApplication(SubmissionMixin, BaseModel):
    """An internship application."""

    __tablename__ = "intern_applications"

    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True, index=True)

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile: Mapped[str] = mapped_column(String(15), nullable=False)
    internship_area: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    education: Mapped[str | None] = mapped_column(Text, nullable=True)
    motivation: Mapped[str] = mapped_column(Text, nullable=False)

    # Review and placement
    duration: Mapped[str | None] = mapped_column(String(20), nullable=True)
    reviewed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    interview_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    mentor: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<InternApplication {self.reference_code} ({self.status})>"
