"""
Donation Schemas
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator

from foundation_api.modules.donations.models import DonationStatus, DonationType, PaymentStatus
from foundation_api.modules.submissions.schemas import (
    StatusUpdateForm,
    SubmissionForm,
    SubmissionRecord,
)
from foundation_api.modules.submissions.validators import (
    EmailAddress,
    FullName,
    MobileNumber,
    OptionalText,
    validate_amount,
)

MIN_DONATION_AMOUNT = Decimal("1")
MAX_DONATION_AMOUNT = Decimal("10000000")

DonationAmount = Annotated[
    Decimal, BeforeValidator(validate_amount(MIN_DONATION_AMOUNT, MAX_DONATION_AMOUNT))
]


class DonationCreate(SubmissionForm):
    """Body of POST /donations/submit."""

    full_name: FullName
    email: EmailAddress
    mobile: MobileNumber
    donation_amount: DonationAmount
    donation_type: DonationType
    message: OptionalText("Message", 1000) = None


class DonationStatusUpdate(StatusUpdateForm):
    status: DonationStatus | None = None
    payment_status: PaymentStatus | None = None
    notes: OptionalText("Notes", 1000) = None


class DonationItem(SubmissionRecord):
    full_name: str
    mobile: str
    donation_amount: float
    donation_type: str
    message: str | None = None
    payment_status: str
    notes: str | None = None
    contacted_at: datetime | None = None
    completed_at: datetime | None = None
