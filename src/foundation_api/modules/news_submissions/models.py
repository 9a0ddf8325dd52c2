"""
News Submission Models

Community news updates proposed for publication.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class NewsStatus(str, enum.Enum):
    """Status of a news submission."""

    PENDING = "pending"
    UNDER_REVIEW = "under-review"
    APPROVED = "approved"
    PUBLISHED = "published"
    REJECTED = "rejected"


class NewsCategory(str, enum.Enum):
    ANNOUNCEMENT = "announcement"
    EVENT = "event"
    ACHIEVEMENT = "achievement"
    ACCESSIBILITY = "accessibility"
    INCLUSION = "inclusion"
    OTHER = "other"


class NewsSubmission(SubmissionMixin, BaseModel):
    """A proposed news update."""

    __tablename__ = "news_submissions"

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    news_update: Mapped[str] = mapped_column(Text, nullable=False)

    # Review
    category: Mapped[str | None] = mapped_column(String(20), nullable=True, index=True)
    reviewed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<NewsSubmission {self.reference_code} ({self.status})>"
