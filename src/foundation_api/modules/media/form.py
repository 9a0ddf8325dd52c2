from datetime import timedelta

from foundation_api.modules.media.models import MediaStatus, MediaSubmission, MediaType
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice

MEDIA_FORM = FormDescriptor(
    key="media",
    label="Media submission",
    model=MediaSubmission,
    reference_prefix="MED",
    source="website-media-upload",
    statuses=MediaStatus,
    initial_status=MediaStatus.PENDING.value,
    submit_message=(
        "Thank you for sharing your experience with MAD Foundation. "
        "Your media submission has been received successfully."
    ),
    search_fields=("full_name", "email", "description", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=timedelta(hours=1),
        message="Please wait at least one hour before submitting another media upload",
    ),
    filter_fields=("media_type",),
    review_timestamp="reviewed_at",
    status_timestamps={MediaStatus.FEATURED.value: "featured_at"},
    status_bound_fields={"rejection_reason": MediaStatus.REJECTED.value},
    stats_counts={
        "images": {"media_type": MediaType.IMAGE.value},
        "videos": {"media_type": MediaType.VIDEO.value},
    },
    status_notices={
        MediaStatus.APPROVED.value: StatusNotice(
            subject="Your media submission has been approved",
            headline="Submission Approved",
            body=(
                "Thank you for sharing! Your media submission has been approved and may "
                "appear in our gallery and updates."
            ),
        ),
        MediaStatus.FEATURED.value: StatusNotice(
            subject="Your media is now featured",
            headline="You're Featured!",
            body=(
                "We loved your submission so much that we are featuring it. Thank you for "
                "helping us tell our story."
            ),
        ),
        MediaStatus.REJECTED.value: StatusNotice(
            subject="Update on your media submission",
            headline="Update on Your Media Submission",
            body=(
                "Thank you for your submission. Unfortunately we are unable to publish it "
                "at this time."
            ),
        ),
    },
)
