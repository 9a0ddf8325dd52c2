"""
Media Submission Schemas
"""

from datetime import datetime
from typing import Any

from foundation_api.modules.media.models import MediaCategory, MediaStatus
from foundation_api.modules.submissions.schemas import (
    StatusUpdateForm,
    SubmissionForm,
    SubmissionRecord,
)
from foundation_api.modules.submissions.validators import (
    EmailAddress,
    FullName,
    MediaUrl,
    OptionalText,
    detect_media_type,
)


class MediaCreate(SubmissionForm):
    """Body of POST /media/submit."""

    full_name: FullName
    email: EmailAddress
    media_url: MediaUrl
    description: OptionalText("Description", 1000) = None

    def to_record_values(self) -> dict[str, Any]:
        values = self.model_dump()
        values["media_type"] = detect_media_type(self.media_url)
        return values


class MediaStatusUpdate(StatusUpdateForm):
    status: MediaStatus | None = None
    category: MediaCategory | None = None
    reviewed_by: OptionalText("Reviewer", 100) = None
    rejection_reason: OptionalText("Rejection reason", 1000) = None


class MediaItem(SubmissionRecord):
    full_name: str
    media_url: str
    description: str | None = None
    media_type: str
    category: str | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    featured_at: datetime | None = None
    rejection_reason: str | None = None
