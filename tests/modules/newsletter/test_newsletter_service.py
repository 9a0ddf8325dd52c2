"""
Unit tests for the newsletter service.

These tests cover:
- New subscriptions
- Rejecting already active subscribers
- Reactivating unsubscribed and inactive subscribers
- Token-based unsubscribe
"""

import re
from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch

import pytest

from foundation_api.modules.newsletter.models import NewsletterSubscriber
from foundation_api.modules.newsletter.schemas import NewsletterSubscribe, SubscriberItem
from foundation_api.modules.newsletter.service import (
    InvalidUnsubscribeTokenError,
    generate_unsubscribe_token,
    notify_new_subscriber,
    subscribe,
    unsubscribe,
)
from foundation_api.modules.submissions.service import AlreadyExistsError

NEWSLETTER_REPOSITORY = "foundation_api.modules.newsletter.service.repository"
SUBMISSIONS_REPOSITORY = "foundation_api.modules.submissions.service.repository"

OLD_TOKEN = "a" * 64


def _subscriber(status: str) -> NewsletterSubscriber:
    return NewsletterSubscriber(
        reference_code="SUB-12345678-ABCD",
        email="reader@example.org",
        status=status,
        source="website-newsletter",
        subscribed_at=datetime(2025, 1, 1, tzinfo=UTC),
        unsubscribed_at=datetime(2025, 6, 1, tzinfo=UTC) if status == "unsubscribed" else None,
        unsubscribe_token=OLD_TOKEN,
    )


class TestGenerateUnsubscribeToken:
    def test_token_is_64_hex_characters(self):
        token = generate_unsubscribe_token()
        assert re.fullmatch(r"[0-9a-f]{64}", token)

    def test_tokens_differ(self):
        assert generate_unsubscribe_token() != generate_unsubscribe_token()


class TestSubscribe:
    """Tests for subscribe."""

    @pytest.mark.asyncio
    async def test_new_subscriber_created(self, mock_db, background_tasks):
        data = NewsletterSubscribe(email=" Reader@Example.org ")
        with (
            patch(NEWSLETTER_REPOSITORY) as mock_repo,
            patch(SUBMISSIONS_REPOSITORY) as mock_submissions_repo,
        ):
            mock_repo.get_by_field = AsyncMock(return_value=None)
            mock_submissions_repo.create = AsyncMock(side_effect=lambda db, record: record)

            subscriber, reactivated = await subscribe(
                mock_db, data, background_tasks=background_tasks
            )

            assert not reactivated
            assert subscriber.email == "reader@example.org"
            assert subscriber.status == "active"
            assert subscriber.reference_code.startswith("SUB-")
            assert re.fullmatch(r"[0-9a-f]{64}", subscriber.unsubscribe_token)
            mock_submissions_repo.create.assert_awaited_once()
            background_tasks.add_task.assert_called_once_with(
                notify_new_subscriber, subscriber, True
            )

    @pytest.mark.asyncio
    async def test_active_subscriber_rejected(self, mock_db):
        with patch(NEWSLETTER_REPOSITORY) as mock_repo:
            mock_repo.get_by_field = AsyncMock(return_value=_subscriber("active"))
            mock_repo.save = AsyncMock()

            with pytest.raises(AlreadyExistsError) as exc_info:
                await subscribe(mock_db, NewsletterSubscribe(email="reader@example.org"))

            assert exc_info.value.status_code == 409
            assert "already subscribed" in exc_info.value.message
            mock_repo.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["unsubscribed", "inactive"])
    async def test_returning_subscriber_reactivated(self, mock_db, background_tasks, status):
        existing = _subscriber(status)
        with patch(NEWSLETTER_REPOSITORY) as mock_repo:
            mock_repo.get_by_field = AsyncMock(return_value=existing)
            mock_repo.save = AsyncMock(side_effect=lambda db, record: record)

            subscriber, reactivated = await subscribe(
                mock_db,
                NewsletterSubscribe(email="reader@example.org"),
                background_tasks=background_tasks,
            )

            assert reactivated
            assert subscriber is existing
            assert subscriber.status == "active"
            assert subscriber.unsubscribed_at is None
            assert subscriber.subscribed_at > datetime(2025, 1, 1, tzinfo=UTC)
            assert subscriber.unsubscribe_token != OLD_TOKEN
            assert subscriber.reference_code == "SUB-12345678-ABCD"
            background_tasks.add_task.assert_called_once_with(
                notify_new_subscriber, subscriber, False
            )


class TestUnsubscribe:
    """Tests for unsubscribe."""

    @pytest.mark.asyncio
    async def test_unknown_token_not_found(self, mock_db):
        with patch(NEWSLETTER_REPOSITORY) as mock_repo:
            mock_repo.get_by_field = AsyncMock(return_value=None)

            with pytest.raises(InvalidUnsubscribeTokenError) as exc_info:
                await unsubscribe(mock_db, "nope")

            assert exc_info.value.status_code == 404
            assert exc_info.value.message == "Invalid or expired unsubscribe link"

    @pytest.mark.asyncio
    async def test_active_subscriber_unsubscribed(self, mock_db):
        existing = _subscriber("active")
        with patch(NEWSLETTER_REPOSITORY) as mock_repo:
            mock_repo.get_by_field = AsyncMock(return_value=existing)
            mock_repo.save = AsyncMock(side_effect=lambda db, record: record)

            subscriber = await unsubscribe(mock_db, OLD_TOKEN)

            assert subscriber.status == "unsubscribed"
            assert subscriber.unsubscribed_at is not None
            mock_repo.get_by_field.assert_awaited_once_with(
                mock_db, NewsletterSubscriber, "unsubscribe_token", OLD_TOKEN
            )

    @pytest.mark.asyncio
    async def test_repeat_unsubscribe_keeps_original_time(self, mock_db):
        existing = _subscriber("unsubscribed")
        with patch(NEWSLETTER_REPOSITORY) as mock_repo:
            mock_repo.get_by_field = AsyncMock(return_value=existing)
            mock_repo.save = AsyncMock()

            subscriber = await unsubscribe(mock_db, OLD_TOKEN)

            assert subscriber.unsubscribed_at == datetime(2025, 6, 1, tzinfo=UTC)
            mock_repo.save.assert_not_called()


class TestNotifyNewSubscriber:
    """Tests for notify_new_subscriber."""

    @pytest.mark.asyncio
    async def test_welcome_failure_still_alerts_admin(self):
        subscriber = _subscriber("active")
        with (
            patch(
                "foundation_api.modules.newsletter.service.send_newsletter_welcome",
                new=AsyncMock(side_effect=RuntimeError("provider error")),
            ),
            patch(
                "foundation_api.modules.newsletter.service.send_admin_submission_alert",
                new=AsyncMock(return_value=True),
            ) as mock_alert,
        ):
            await notify_new_subscriber(subscriber, True)

            mock_alert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reactivation_skips_admin_alert(self):
        subscriber = _subscriber("active")
        with (
            patch(
                "foundation_api.modules.newsletter.service.send_newsletter_welcome",
                new=AsyncMock(return_value=True),
            ) as mock_welcome,
            patch(
                "foundation_api.modules.newsletter.service.send_admin_submission_alert",
                new=AsyncMock(),
            ) as mock_alert,
        ):
            await notify_new_subscriber(subscriber, False)

            mock_welcome.assert_awaited_once_with("reader@example.org", OLD_TOKEN)
            mock_alert.assert_not_called()


class TestSubscriberItem:
    def test_token_and_provenance_are_not_exposed(self):
        assert "unsubscribe_token" not in SubscriberItem.model_fields
        assert "ip_address" not in SubscriberItem.model_fields
        assert "user_agent" not in SubscriberItem.model_fields
