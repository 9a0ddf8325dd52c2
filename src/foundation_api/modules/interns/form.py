from foundation_api.modules.interns.models import InternApplication, InternStatus
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice

INTERN_FORM = FormDescriptor(
    key="intern",
    label="Internship application",
    model=InternApplication,
    reference_prefix="INT",
    source="website-internship",
    statuses=InternStatus,
    initial_status=InternStatus.PENDING.value,
    submit_message=(
        "Thank you for applying for an internship with MAD Foundation. Our team will "
        "review your application and get in touch with you soon."
    ),
    search_fields=("full_name", "email", "motivation", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=None,
        message="An internship application with this email already exists",
    ),
    filter_fields=("internship_area",),
    review_timestamp="reviewed_at",
    status_bound_fields={"rejection_reason": InternStatus.REJECTED.value},
    status_notices={
        InternStatus.INTERVIEW_SCHEDULED.value: StatusNotice(
            subject="Your internship interview has been scheduled",
            headline="Interview Scheduled",
            body=(
                "We would like to meet you! An interview has been scheduled for your "
                "internship application. Our team will share the details with you."
            ),
        ),
        InternStatus.ACCEPTED.value: StatusNotice(
            subject="Congratulations! Your internship application was accepted",
            headline="Welcome Aboard!",
            body=(
                "We are delighted to offer you an internship. Your mentor will contact "
                "you with your start date and onboarding details."
            ),
        ),
        InternStatus.REJECTED.value: StatusNotice(
            subject="Update on your internship application",
            headline="Update on Your Internship Application",
            body=(
                "Thank you for applying. After careful review we are unable to offer "
                "you an internship at this time."
            ),
        ),
        InternStatus.COMPLETED.value: StatusNotice(
            subject="Congratulations on completing your internship",
            headline="Internship Completed",
            body=(
                "Congratulations on completing your internship with us. Thank you for "
                "your contribution to our work."
            ),
        ),
    },
)
