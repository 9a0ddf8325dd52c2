"""
Donation Models

Donation intentions submitted from the website. One intention per email
address. No payment is taken here; the team contacts the donor and tracks
the payment status by hand.
"""

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from foundation_api.modules.shared import BaseModel, SubmissionMixin


class DonationType(str, enum.Enum):
    ONE_TIME = "One-Time"
    MONTHLY = "Monthly"
    SPONSOR_A_PROGRAM = "Sponsor a Program"
    CORPORATE_DONATION = "Corporate Donation"


class DonationStatus(str, enum.Enum):
    """Follow-up status of a donation intention."""

    PENDING = "pending"
    CONTACTED = "contacted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class Donation(SubmissionMixin, BaseModel):
    """A donation intention."""

    __tablename__ = "donations"

    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True, index=True)

    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile: Mapped[str] = mapped_column(String(15), nullable=False)
    donation_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    donation_type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    payment_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.PENDING.value
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    contacted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Donation {self.reference_code} {self.donation_amount} ({self.status})>"
