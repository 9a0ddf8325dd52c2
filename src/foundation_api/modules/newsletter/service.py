"""
Newsletter Service

Subscription flow:
- New email: stored as active with a fresh unsubscribe token (201)
- Active email: rejected as already subscribed (409)
- Unsubscribed or inactive email: reactivated in place with a new token (200)

Unsubscribing uses the token from the email link; no login is involved.
"""

import logging
import secrets
from datetime import UTC, datetime

from fastapi import BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.config import settings
from foundation_api.core.email import send_admin_submission_alert, send_newsletter_welcome
from foundation_api.modules.newsletter.form import (
    ALREADY_SUBSCRIBED_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    NEWSLETTER_FORM,
)
from foundation_api.modules.newsletter.models import NewsletterSubscriber, SubscriberStatus
from foundation_api.modules.newsletter.schemas import NewsletterSubscribe
from foundation_api.modules.submissions import repository
from foundation_api.modules.submissions.service import (
    AlreadyExistsError,
    SubmissionServiceError,
    build_record,
    persist_new,
)

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class InvalidUnsubscribeTokenError(SubmissionServiceError):
    """Raised when an unsubscribe link does not match any subscriber."""

    def __init__(self):
        super().__init__(
            message=INVALID_TOKEN_MESSAGE,
            error_code="INVALID_TOKEN",
            status_code=404,
        )


def generate_unsubscribe_token() -> str:
    """64 hex characters from a CSPRNG."""
    return secrets.token_hex(TOKEN_BYTES)


async def notify_new_subscriber(subscriber: NewsletterSubscriber, alert_admin: bool) -> None:
    """Send the welcome email and, for brand-new subscribers, the admin alert."""
    if not settings.submission_emails_enabled:
        return

    try:
        sent = await send_newsletter_welcome(subscriber.email, subscriber.unsubscribe_token)
        if not sent:
            logger.error(f"Failed to send welcome email for {subscriber.reference_code}")
    except Exception as e:
        logger.error(f"Exception sending welcome email for {subscriber.reference_code}: {e}")

    if not alert_admin:
        return

    try:
        await send_admin_submission_alert(
            form_label=NEWSLETTER_FORM.label,
            reference=subscriber.reference_code,
            details={"email": subscriber.email, "subscribed_at": subscriber.subscribed_at},
        )
    except Exception as e:
        logger.error(f"Exception sending admin alert for {subscriber.reference_code}: {e}")


async def subscribe(
    db: AsyncSession,
    data: NewsletterSubscribe,
    *,
    client_ip: str | None = None,
    user_agent: str | None = None,
    background_tasks: BackgroundTasks | None = None,
) -> tuple[NewsletterSubscriber, bool]:
    """
    Subscribe an email address, reactivating it if it left before.

    Returns:
        Tuple of (subscriber, reactivated)

    Raises:
        AlreadyExistsError: If the email is already an active subscriber
    """
    existing = await repository.get_by_field(db, NewsletterSubscriber, "email", data.email)

    if existing is not None:
        if existing.status == SubscriberStatus.ACTIVE.value:
            logger.warning(f"Duplicate newsletter subscription: email={data.email}")
            raise AlreadyExistsError(ALREADY_SUBSCRIBED_MESSAGE)

        existing.status = SubscriberStatus.ACTIVE.value
        existing.subscribed_at = datetime.now(UTC)
        existing.unsubscribed_at = None
        existing.unsubscribe_token = generate_unsubscribe_token()
        subscriber = await repository.save(db, existing)
        logger.info(f"Reactivated newsletter subscription {subscriber.reference_code}")

        if background_tasks is not None:
            background_tasks.add_task(notify_new_subscriber, subscriber, False)
        return subscriber, True

    values = data.to_record_values()
    values["unsubscribe_token"] = generate_unsubscribe_token()
    subscriber = build_record(NEWSLETTER_FORM, values, client_ip, user_agent)
    subscriber = await persist_new(db, NEWSLETTER_FORM, subscriber)
    logger.info(f"Created newsletter subscription {subscriber.reference_code}")

    if background_tasks is not None:
        background_tasks.add_task(notify_new_subscriber, subscriber, True)
    return subscriber, False


async def unsubscribe(db: AsyncSession, token: str) -> NewsletterSubscriber:
    """
    Unsubscribe the holder of an unsubscribe token.

    Repeating the request for an already unsubscribed address succeeds
    without changing the original unsubscribe time.

    Raises:
        InvalidUnsubscribeTokenError: If no subscriber has this token
    """
    subscriber = await repository.get_by_field(
        db, NewsletterSubscriber, "unsubscribe_token", token
    )
    if subscriber is None:
        logger.warning("Unsubscribe attempted with unknown token")
        raise InvalidUnsubscribeTokenError()

    if subscriber.status != SubscriberStatus.UNSUBSCRIBED.value:
        subscriber.status = SubscriberStatus.UNSUBSCRIBED.value
        subscriber.unsubscribed_at = datetime.now(UTC)
        subscriber = await repository.save(db, subscriber)
        logger.info(f"Unsubscribed {subscriber.reference_code}")

    return subscriber
