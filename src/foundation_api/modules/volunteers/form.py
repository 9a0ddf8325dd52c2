from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice
from foundation_api.modules.volunteers.models import Volunteer, VolunteerStatus

VOLUNTEER_FORM = FormDescriptor(
    key="volunteer",
    label="Volunteer registration",
    model=Volunteer,
    reference_prefix="VOL",
    source="website-volunteer",
    statuses=VolunteerStatus,
    initial_status=VolunteerStatus.PENDING.value,
    submit_message=(
        "Thank you for registering as a volunteer with MAD Foundation. Our team will "
        "connect with you soon to discuss how you can make an impact."
    ),
    search_fields=("full_name", "email", "how_to_help", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=None,
        message="A volunteer with this email already exists",
    ),
    review_timestamp="reviewed_at",
    status_timestamps={VolunteerStatus.APPROVED.value: "approved_at"},
    status_bound_fields={"rejection_reason": VolunteerStatus.REJECTED.value},
    status_notices={
        VolunteerStatus.APPROVED.value: StatusNotice(
            subject="Your volunteer application has been approved",
            headline="Welcome to the Volunteer Family!",
            body=(
                "Great news! Your volunteer application has been approved. "
                "Our volunteer coordinator will reach out shortly with next steps."
            ),
        ),
        VolunteerStatus.ACTIVE.value: StatusNotice(
            subject="You are now an active volunteer",
            headline="You're Active!",
            body=(
                "Your volunteer profile is now active. Thank you for giving your time "
                "to support our programs."
            ),
        ),
        VolunteerStatus.REJECTED.value: StatusNotice(
            subject="Update on your volunteer application",
            headline="Update on Your Volunteer Application",
            body=(
                "Thank you for your interest in volunteering with us. After reviewing "
                "your application, we are unable to take it forward at this time."
            ),
        ),
    },
)
