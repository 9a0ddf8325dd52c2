from datetime import timedelta

from foundation_api.modules.contact.models import ContactMessage, ContactStatus
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor

CONTACT_FORM = FormDescriptor(
    key="contact",
    label="Contact message",
    model=ContactMessage,
    reference_prefix="MSG",
    source="contact-form",
    statuses=ContactStatus,
    initial_status=ContactStatus.NEW.value,
    submit_message="Thank you for your message. We will get back to you soon!",
    search_fields=("full_name", "email", "message", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=timedelta(minutes=5),
        message="Please wait a few minutes before submitting another message",
    ),
    status_timestamps={ContactStatus.RESOLVED.value: "resolved_at"},
)
