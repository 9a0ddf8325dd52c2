"""
Media Submission Models

Photos and videos shared by the community, submitted as links.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class MediaType(str, enum.Enum):
    IMAGE = "image"
    VIDEO = "video"
    UNKNOWN = "unknown"


class MediaStatus(str, enum.Enum):
    """Status of a media submission."""

    PENDING = "pending"
    UNDER_REVIEW = "under-review"
    APPROVED = "approved"
    FEATURED = "featured"
    REJECTED = "rejected"


class MediaCategory(str, enum.Enum):
    EVENT = "event"
    INITIATIVE = "initiative"
    TESTIMONIAL = "testimonial"
    ACHIEVEMENT = "achievement"
    OTHER = "other"


class MediaSubmission(SubmissionMixin, BaseModel):
    """A shared photo or video link."""

    __tablename__ = "media_submissions"

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    media_url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_type: Mapped[str] = mapped_column(
        String(10), nullable=False, default=MediaType.UNKNOWN.value, index=True
    )

    # Review
    category: Mapped[str | None] = mapped_column(String(20), nullable=True)
    reviewed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    featured_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<MediaSubmission {self.reference_code} {self.media_type} ({self.status})>"
