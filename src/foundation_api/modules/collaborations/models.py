"""
Collaboration Models

Partnership requests from organizations and individuals.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class AreaOfInterest(str, enum.Enum):
    EDUCATION = "Education"
    EMPLOYMENT = "Employment"
    SKILL_DEVELOPMENT = "Skill Development"
    LIVELIHOOD = "Livelihood"
    ASSISTIVE_TECHNOLOGY = "Assistive Technology"
    HEALTHCARE_AND_REHABILITATION = "Healthcare & Rehabilitation"
    ADVOCACY = "Advocacy"
    ACCESSIBILITY = "Accessibility"
    POLICY_DEVELOPMENT = "Policy Development"
    RESEARCH_AND_INNOVATION = "Research & Innovation"
    OTHER = "Other"


class CollaborationStatus(str, enum.Enum):
    """Status of a partnership request."""

    PENDING = "pending"
    UNDER_REVIEW = "under-review"
    MEETING_SCHEDULED = "meeting-scheduled"
    IN_DISCUSSION = "in-discussion"
    APPROVED = "approved"
    ACTIVE_PARTNERSHIP = "active-partnership"
    DECLINED = "declined"
    ON_HOLD = "on-hold"


class OrganizationType(str, enum.Enum):
    NGO = "ngo"
    CORPORATE = "corporate"
    GOVERNMENT = "government"
    INSTITUTION = "institution"
    INDIVIDUAL = "individual"
    STARTUP = "startup"
    OTHER = "other"


class PartnershipType(str, enum.Enum):
    PROJECT_BASED = "project-based"
    LONG_TERM = "long-term"
    FUNDING = "funding"
    RESOURCE_SHARING = "resource-sharing"
    KNOWLEDGE_EXCHANGE = "knowledge-exchange"
    ADVOCACY = "advocacy"
    OTHER = "other"


class CollaborationPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Collaboration(SubmissionMixin, BaseModel):
    """A partnership request."""

    __tablename__ = "collaborations"

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    organization_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    mobile: Mapped[str] = mapped_column(String(15), nullable=False)
    area_of_interest: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Classification (set by the team)
    organization_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    partnership_type: Mapped[str | None] = mapped_column(String(30), nullable=True)
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default=CollaborationPriority.MEDIUM.value
    )

    # Review
    reviewed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    meeting_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    partnership_start_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    decline_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Collaboration {self.reference_code} {self.organization_name!r} ({self.status})>"
