from datetime import timedelta

from foundation_api.modules.contact_us.models import ContactUsStatus, ContactUsTicket
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor

CONTACT_US_FORM = FormDescriptor(
    key="contact_us",
    label="Contact submission",
    model=ContactUsTicket,
    reference_prefix="TICKET",
    source="website-contact-us",
    statuses=ContactUsStatus,
    initial_status=ContactUsStatus.NEW.value,
    submit_message=(
        "Thank you for contacting us! We have received your message "
        "and will get back to you soon."
    ),
    search_fields=("full_name", "email", "message", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=timedelta(minutes=15),
        message="Please wait at least 15 minutes before submitting another contact request",
    ),
    filter_fields=("subject", "priority"),
    status_timestamps={
        ContactUsStatus.RESOLVED.value: "resolved_at",
        ContactUsStatus.CLOSED.value: "resolved_at",
    },
    stats_group_by=("subject",),
)
