"""
Shared Submission Schemas

Base request schemas enforce the presence check before any field-level
validation runs. Response envelopes are shared by every form router.
"""

from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from foundation_api.modules.submissions.validators import is_blank

REQUIRED_FIELDS_MESSAGE = "All required fields must be provided"


class SubmissionForm(BaseModel):
    """
    Base class for public form bodies.

    Required fields are checked as a group first, so a body missing several
    fields gets a single generic message instead of one error per field.
    """

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    required_message: ClassVar[str] = REQUIRED_FIELDS_MESSAGE

    @model_validator(mode="before")
    @classmethod
    def check_required_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        missing = [
            name
            for name, field in cls.model_fields.items()
            if field.is_required() and is_blank(data.get(name))
        ]
        if missing:
            raise PydanticCustomError(
                "required_fields",
                cls.required_message,
                {"fields": missing},
            )
        return data

    def to_record_values(self) -> dict[str, Any]:
        """Column values for the new record. Forms with derived fields override this."""
        return self.model_dump()


class StatusUpdateForm(BaseModel):
    """
    Base class for admin status-update bodies.

    Only fields present in the request are applied; unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent with a non-null value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


# ============================================
# Response envelopes
# ============================================


class SubmissionReceipt(BaseModel):
    """Reference handed back to the submitter."""

    reference: str = Field(..., description="Human-shareable reference code")
    submitted_at: datetime = Field(..., description="When the submission was recorded")


class SubmissionCreatedResponse(BaseModel):
    """Response body for public create endpoints."""

    success: bool = True
    message: str
    data: SubmissionReceipt


class Pagination(BaseModel):
    current: int = Field(..., ge=1, description="Current page number")
    pages: int = Field(..., ge=0, description="Total number of pages")
    total: int = Field(..., ge=0, description="Total records matching the filters")


class SubmissionRecord(BaseModel):
    """Fields common to every admin list item. IP and user agent are never included."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    reference_code: str
    email: str
    status: str
    source: str
    created_at: datetime
    updated_at: datetime


RecordT = TypeVar("RecordT", bound=SubmissionRecord)


class SubmissionListResponse(BaseModel, Generic[RecordT]):
    """Paginated admin list with aggregate statistics."""

    success: bool = True
    data: list[RecordT]
    stats: dict[str, Any]
    pagination: Pagination


class SubmissionUpdatedResponse(BaseModel, Generic[RecordT]):
    """Response body for admin status updates."""

    success: bool = True
    message: str
    data: RecordT
