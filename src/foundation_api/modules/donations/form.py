from foundation_api.modules.donations.models import Donation, DonationStatus
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor

DONATION_FORM = FormDescriptor(
    key="donation",
    label="Donation",
    model=Donation,
    reference_prefix="DON",
    source="website-donation",
    statuses=DonationStatus,
    initial_status=DonationStatus.PENDING.value,
    submit_message=(
        "Thank you for your generous intention! Our team will contact you "
        "with donation details shortly."
    ),
    search_fields=("full_name", "email", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=None,
        message=(
            "A donation request with this email already exists. "
            "Our team will contact you shortly."
        ),
    ),
    filter_fields=("donation_type",),
    status_timestamps={
        DonationStatus.CONTACTED.value: "contacted_at",
        DonationStatus.COMPLETED.value: "completed_at",
    },
    stats_sums={
        "total_amount": ("donation_amount", {"status": DonationStatus.COMPLETED.value}),
    },
)
