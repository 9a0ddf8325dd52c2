from foundation_api.modules.events.models import (
    DisabilityAnswer,
    EventRegistration,
    RegistrationStatus,
)
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice

EVENT_REGISTRATION_FORM = FormDescriptor(
    key="registration",
    label="Event registration",
    model=EventRegistration,
    reference_prefix="REG",
    source="website-event-registration",
    statuses=RegistrationStatus,
    initial_status=RegistrationStatus.CONFIRMED.value,
    submit_message=(
        "Thank you for submitting your response. "
        "Your response has been submitted successfully."
    ),
    search_fields=("full_name", "email", "event_title", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email", "event_id"),
        window=None,
        message="You are already registered for this event",
        match_all=True,
    ),
    filter_fields=("event_id",),
    stats_counts={"with_disability": {"is_person_with_disability": DisabilityAnswer.YES.value}},
    status_notices={
        RegistrationStatus.CONFIRMED.value: StatusNotice(
            subject="Your event registration is confirmed",
            headline="Registration Confirmed",
            body="Your place at the event is confirmed. We look forward to seeing you there!",
        ),
        RegistrationStatus.WAITLIST.value: StatusNotice(
            subject="You are on the event waitlist",
            headline="You're on the Waitlist",
            body=(
                "The event is currently full, so your registration has been moved to the "
                "waitlist. We will let you know as soon as a place opens up."
            ),
        ),
        RegistrationStatus.CANCELLED.value: StatusNotice(
            subject="Your event registration was cancelled",
            headline="Registration Cancelled",
            body=(
                "Your event registration has been cancelled. If you think this is a "
                "mistake, please get in touch with us."
            ),
        ),
    },
)
