"""
News Submission Schemas
"""

from datetime import datetime

from foundation_api.modules.news_submissions.models import NewsCategory, NewsStatus
from foundation_api.modules.submissions.schemas import (
    StatusUpdateForm,
    SubmissionForm,
    SubmissionRecord,
)
from foundation_api.modules.submissions.validators import (
    BoundedText,
    EmailAddress,
    FullName,
    OptionalText,
)


class NewsSubmissionCreate(SubmissionForm):
    """Body of POST /news-submissions/submit."""

    full_name: FullName
    email: EmailAddress
    news_update: BoundedText("News update", 10, 2000)


class NewsSubmissionStatusUpdate(StatusUpdateForm):
    status: NewsStatus | None = None
    category: NewsCategory | None = None
    reviewed_by: OptionalText("Reviewer", 100) = None
    rejection_reason: OptionalText("Rejection reason", 1000) = None


class NewsSubmissionItem(SubmissionRecord):
    full_name: str
    news_update: str
    category: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    published_at: datetime | None = None
    rejection_reason: str | None = None
