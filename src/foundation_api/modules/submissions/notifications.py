"""
Submission Notifier

Best-effort emails sent after a submission is stored or changes status.
These run as background tasks once the response is ready; failures are
logged and never reach the client.
"""

import logging
from typing import Any

from foundation_api.core.config import settings
from foundation_api.core.email import (
    send_admin_submission_alert,
    send_status_update,
    send_submission_acknowledgement,
)
from foundation_api.modules.submissions.form import FormDescriptor

logger = logging.getLogger(__name__)

# Columns never included in admin alerts
_ALERT_EXCLUDED = {"id", "ip_address", "user_agent", "unsubscribe_token", "updated_at"}

REASON_FIELDS = ("rejection_reason", "decline_reason")


def _recipient_name(form: FormDescriptor, record: Any) -> str | None:
    if not form.name_field:
        return None
    return getattr(record, form.name_field, None)


def _alert_details(record: Any) -> dict[str, Any]:
    details = {}
    for column in record.__table__.columns.keys():
        if column in _ALERT_EXCLUDED:
            continue
        details[column] = getattr(record, column, None)
    return details


async def notify_submission_received(form: FormDescriptor, record: Any) -> None:
    """Acknowledge the submitter and alert the organization inbox."""
    if not settings.submission_emails_enabled:
        return

    try:
        sent = await send_submission_acknowledgement(
            to_email=record.email,
            recipient_name=_recipient_name(form, record),
            form_label=form.label,
            reference=record.reference_code,
        )
        if not sent:
            logger.error(f"Failed to send acknowledgement for {record.reference_code}")
    except Exception as e:
        logger.error(f"Exception sending acknowledgement for {record.reference_code}: {e}")

    try:
        sent = await send_admin_submission_alert(
            form_label=form.label,
            reference=record.reference_code,
            details=_alert_details(record),
        )
        if not sent:
            logger.error(f"Failed to send admin alert for {record.reference_code}")
    except Exception as e:
        logger.error(f"Exception sending admin alert for {record.reference_code}: {e}")


async def notify_status_change(form: FormDescriptor, record: Any, status: str) -> None:
    """Send the form's configured notice for the status the record just entered."""
    notice = form.status_notices.get(status)
    if notice is None:
        return

    reason = next(
        (getattr(record, field) for field in REASON_FIELDS if getattr(record, field, None)),
        None,
    )

    try:
        sent = await send_status_update(
            to_email=record.email,
            recipient_name=_recipient_name(form, record),
            subject=notice.subject,
            headline=notice.headline,
            body=notice.body,
            reference=record.reference_code,
            reason=reason,
        )
        if sent:
            logger.info(f"Sent '{status}' notice for {record.reference_code}")
        else:
            logger.error(f"Failed to send '{status}' notice for {record.reference_code}")
    except Exception as e:
        logger.error(f"Exception sending '{status}' notice for {record.reference_code}: {e}")
