from foundation_api.modules.newsletter.models import NewsletterSubscriber, SubscriberStatus
from foundation_api.modules.submissions.form import FormDescriptor

# Duplicate handling (reject active, reactivate the rest) lives in the newsletter service
NEWSLETTER_FORM = FormDescriptor(
    key="subscriber",
    label="Newsletter subscription",
    model=NewsletterSubscriber,
    reference_prefix="SUB",
    source="website-newsletter",
    statuses=SubscriberStatus,
    initial_status=SubscriberStatus.ACTIVE.value,
    submit_message="Thank you for subscribing! Check your email for confirmation.",
    search_fields=("email",),
    status_timestamps={SubscriberStatus.UNSUBSCRIBED.value: "unsubscribed_at"},
    name_field=None,
)

ALREADY_SUBSCRIBED_MESSAGE = "This email is already subscribed to our newsletter"
REACTIVATED_MESSAGE = "Welcome back! Your subscription has been reactivated."
UNSUBSCRIBED_MESSAGE = "You have been successfully unsubscribed from our newsletter."
INVALID_TOKEN_MESSAGE = "Invalid or expired unsubscribe link"
