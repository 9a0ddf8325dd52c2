from datetime import timedelta

from foundation_api.modules.collaborations.models import Collaboration, CollaborationStatus
from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice

COLLABORATION_FORM = FormDescriptor(
    key="collaboration",
    label="Collaboration request",
    model=Collaboration,
    reference_prefix="COLLAB",
    source="website-collaboration",
    statuses=CollaborationStatus,
    initial_status=CollaborationStatus.PENDING.value,
    submit_message=(
        "Thank you for your interest in partnering with MAD Foundation. We're excited "
        "about the potential collaboration opportunities."
    ),
    search_fields=("full_name", "organization_name", "email", "reference_code"),
    # Either the person or the organization counts as the same requester
    duplicate_rule=DuplicateRule(
        fields=("email", "organization_name"),
        window=timedelta(hours=24),
        message=(
            "A collaboration request from this organization or email already "
            "exists within the last 24 hours"
        ),
    ),
    filter_fields=("area_of_interest",),
    review_timestamp="reviewed_at",
    status_timestamps={CollaborationStatus.ACTIVE_PARTNERSHIP.value: "partnership_start_date"},
    status_bound_fields={
        "decline_reason": CollaborationStatus.DECLINED.value,
        "partnership_start_date": CollaborationStatus.ACTIVE_PARTNERSHIP.value,
    },
    status_notices={
        CollaborationStatus.MEETING_SCHEDULED.value: StatusNotice(
            subject="Let's meet to discuss our partnership",
            headline="Meeting Scheduled",
            body=(
                "Thank you for your partnership proposal. We have scheduled a meeting to "
                "discuss it further; our partnerships team will share the details."
            ),
        ),
        CollaborationStatus.APPROVED.value: StatusNotice(
            subject="Your partnership request has been approved",
            headline="Partnership Approved",
            body=(
                "We are pleased to let you know that your partnership request has been "
                "approved. Our team will be in touch about the next steps."
            ),
        ),
        CollaborationStatus.ACTIVE_PARTNERSHIP.value: StatusNotice(
            subject="Our partnership is now active",
            headline="Welcome, Partner!",
            body=(
                "Our partnership is now active. We look forward to creating lasting impact "
                "together."
            ),
        ),
        CollaborationStatus.DECLINED.value: StatusNotice(
            subject="Update on your partnership request",
            headline="Update on Your Partnership Request",
            body=(
                "Thank you for reaching out. After careful consideration we are unable to "
                "take this partnership forward at this time."
            ),
        ),
    },
)
