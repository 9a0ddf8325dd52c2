from datetime import timedelta

from foundation_api.modules.news_submissions.models import NewsStatus, NewsSubmission
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice

NEWS_SUBMISSION_FORM = FormDescriptor(
    key="news_submission",
    label="News submission",
    model=NewsSubmission,
    reference_prefix="NEWS",
    source="website-news-submission",
    statuses=NewsStatus,
    initial_status=NewsStatus.PENDING.value,
    submit_message=(
        "Thank you for sharing your news with MAD Foundation. We appreciate your "
        "contribution to our community updates."
    ),
    search_fields=("full_name", "email", "news_update", "reference_code"),
    duplicate_rule=DuplicateRule(
        fields=("email",),
        window=timedelta(hours=1),
        message="Please wait at least one hour before submitting another news update",
    ),
    filter_fields=("category",),
    review_timestamp="reviewed_at",
    status_timestamps={NewsStatus.PUBLISHED.value: "published_at"},
    status_bound_fields={"rejection_reason": NewsStatus.REJECTED.value},
    status_notices={
        NewsStatus.APPROVED.value: StatusNotice(
            subject="Your news submission has been approved",
            headline="News Approved",
            body=(
                "Thank you for your news update! It has been approved and will be "
                "published soon."
            ),
        ),
        NewsStatus.PUBLISHED.value: StatusNotice(
            subject="Your news update has been published",
            headline="Your News Is Live!",
            body=(
                "Your news update has been published on our website. Thank you for "
                "sharing it with the community."
            ),
        ),
        NewsStatus.REJECTED.value: StatusNotice(
            subject="Update on your news submission",
            headline="Update on Your News Submission",
            body=(
                "Thank you for your news update. Unfortunately we are unable to publish "
                "it at this time."
            ),
        ),
    },
)
