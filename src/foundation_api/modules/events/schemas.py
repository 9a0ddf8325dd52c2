"""
Event Registration Schemas
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic_core import PydanticCustomError

from foundation_api.modules.events.models import (
    AttendanceStatus,
    DisabilityAnswer,
    DisabilityType,
    RegistrationStatus,
)
from foundation_api.modules.submissions.schemas import (
    StatusUpdateForm,
    SubmissionCreatedResponse,
    SubmissionForm,
    SubmissionReceipt,
    SubmissionRecord,
)
from foundation_api.modules.submissions.validators import (
    BoundedText,
    EmailAddress,
    FullName,
    OptionalText,
    StrictMobileNumber,
)

# Upper bound of the INTEGER event_id column
MAX_EVENT_ID = 2_147_483_647


class EventRegistrationCreate(SubmissionForm):
    """Body of POST /events/register."""

    full_name: FullName
    email: EmailAddress
    mobile_number: StrictMobileNumber
    is_person_with_disability: DisabilityAnswer
    event_id: int = Field(..., ge=1, le=MAX_EVENT_ID)
    event_title: BoundedText("Event title", 1, 200)
    city: OptionalText("City name", 100) = None
    occupation: OptionalText("Occupation", 100) = None
    organization: OptionalText("Organization name", 200) = None
    disability_type: DisabilityType | None = None
    other_disability_text: OptionalText("Disability description", 200) = None
    special_accommodations: OptionalText("Special accommodations", 500) = None

    @model_validator(mode="before")
    @classmethod
    def blank_disability_type(cls, data: Any) -> Any:
        # The registration form posts "" when no disability type is selected
        if isinstance(data, dict) and data.get("disability_type") == "":
            data = {**data, "disability_type": None}
        return data

    @model_validator(mode="after")
    def check_disability_details(self) -> "EventRegistrationCreate":
        if self.is_person_with_disability == DisabilityAnswer.YES.value:
            if not self.disability_type:
                raise PydanticCustomError(
                    "conditional_required",
                    "Please select disability type",
                    {"field": "disability_type"},
                )
            if self.disability_type == DisabilityType.OTHER.value and not self.other_disability_text:
                raise PydanticCustomError(
                    "conditional_required",
                    "Please specify your disability type",
                    {"field": "other_disability_text"},
                )
        return self

    def to_record_values(self) -> dict[str, Any]:
        values = self.model_dump()
        if self.is_person_with_disability != DisabilityAnswer.YES.value:
            values["disability_type"] = None
        if values["disability_type"] != DisabilityType.OTHER.value:
            values["other_disability_text"] = None
        return values


class EventRegistrationStatusUpdate(StatusUpdateForm):
    status: RegistrationStatus | None = None
    attendance_status: AttendanceStatus | None = None
    notes: OptionalText("Notes", 1000) = None


class EventRegistrationItem(SubmissionRecord):
    full_name: str
    mobile_number: str
    city: str | None = None
    occupation: str | None = None
    organization: str | None = None
    is_person_with_disability: str
    disability_type: str | None = None
    other_disability_text: str | None = None
    special_accommodations: str | None = None
    event_id: int
    event_title: str
    registration_date: datetime
    attendance_status: str
    notes: str | None = None


class EventRegistrationReceipt(SubmissionReceipt):
    event_title: str
    registration_status: str


class EventRegistrationCreatedResponse(SubmissionCreatedResponse):
    data: EventRegistrationReceipt


class EventStats(BaseModel):
    event_id: int
    total_registrations: int = Field(..., ge=0)
    registration_stats: dict[str, int]
    disability_stats: dict[str, int]


class EventStatsResponse(BaseModel):
    success: bool = True
    data: EventStats
