"""
Unit tests for the shared submissions service layer.

These tests cover:
- Submission flow (duplicate guard, record building, notification queueing)
- Admin list (pagination maths, filter whitelisting)
- Admin status updates (not found, invalid, notices)
- Best-effort notifications
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from foundation_api.modules.contact.form import CONTACT_FORM
from foundation_api.modules.contact.schemas import ContactCreate
from foundation_api.modules.contact_us.form import CONTACT_US_FORM
from foundation_api.modules.contact_us.schemas import ContactUsCreate
from foundation_api.modules.donations.form import DONATION_FORM
from foundation_api.modules.donations.schemas import DonationCreate
from foundation_api.modules.events.form import EVENT_REGISTRATION_FORM
from foundation_api.modules.events.schemas import EventRegistrationCreate
from foundation_api.modules.media.form import MEDIA_FORM
from foundation_api.modules.media.schemas import MediaCreate
from foundation_api.modules.submissions.notifications import (
    notify_status_change,
    notify_submission_received,
)
from foundation_api.modules.submissions.service import (
    AlreadyExistsError,
    DuplicateSubmissionError,
    InvalidUpdateError,
    SubmissionNotFoundError,
    list_submissions,
    submit,
    update_status,
)
from foundation_api.modules.volunteers.form import VOLUNTEER_FORM
from foundation_api.modules.volunteers.models import Volunteer

SERVICE_REPOSITORY = "foundation_api.modules.submissions.service.repository"


def _stored(db, record):
    """Mimic repository.create: the record comes back as stored."""
    record.created_at = datetime.now(UTC)
    return record


@pytest.fixture
def contact_form():
    return ContactCreate(
        full_name="Jane Doe",
        email="jane@example.org",
        mobile="9876543210",
        message="I would like to know more about your programs.",
    )


@pytest.fixture
def donation_form():
    return DonationCreate(
        full_name="Jane Doe",
        email="jane@example.org",
        mobile="9876543210",
        donation_amount="2500",
        donation_type="Monthly",
    )


def _registration(event_id: int) -> EventRegistrationCreate:
    return EventRegistrationCreate(
        full_name="Jane Doe",
        email="jane@example.org",
        mobile_number="9876543210",
        is_person_with_disability="No",
        event_id=event_id,
        event_title="Inclusion Summit",
    )


class TestSubmit:
    """Tests for submit."""

    @pytest.mark.asyncio
    async def test_submit_creates_record(self, mock_db, contact_form, background_tasks):
        """A fresh submission is stored with status, source and reference."""
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=_stored)

            record = await submit(
                mock_db,
                CONTACT_FORM,
                contact_form,
                client_ip="203.0.113.5",
                user_agent="pytest",
                background_tasks=background_tasks,
            )

            assert record.status == "new"
            assert record.source == "contact-form"
            assert record.reference_code.startswith("MSG-")
            assert record.ip_address == "203.0.113.5"
            assert record.user_agent == "pytest"
            mock_repo.create.assert_called_once()
            background_tasks.add_task.assert_called_once()
            task_args = background_tasks.add_task.call_args.args
            assert task_args[0] is notify_submission_received
            assert task_args[1] is CONTACT_FORM

    @pytest.mark.asyncio
    async def test_submit_within_window_rejected(self, mock_db, contact_form):
        """A second message inside the window is refused with 429 and nothing stored."""
        with patch(SERVICE_REPOSITORY) as mock_repo:
            existing = MagicMock(reference_code="MSG-00000001-AAAA")
            mock_repo.find_duplicate = AsyncMock(return_value=existing)
            mock_repo.create = AsyncMock()

            with pytest.raises(DuplicateSubmissionError) as exc_info:
                await submit(mock_db, CONTACT_FORM, contact_form)

            assert exc_info.value.status_code == 429
            assert exc_info.value.error_code == "DUPLICATE_SUBMISSION"
            mock_repo.create.assert_not_called()

            since = mock_repo.find_duplicate.call_args.kwargs["since"]
            assert since is not None

    @pytest.mark.asyncio
    async def test_unique_key_conflict_rejected(self, mock_db, donation_form):
        """Any earlier donation with the same email is refused with 409."""
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=MagicMock())
            mock_repo.create = AsyncMock()

            with pytest.raises(AlreadyExistsError) as exc_info:
                await submit(mock_db, DONATION_FORM, donation_form)

            assert exc_info.value.status_code == 409
            assert "already exists" in exc_info.value.message
            assert mock_repo.find_duplicate.call_args.kwargs["since"] is None
            mock_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_donation_amount_is_stored_as_decimal(self, mock_db, donation_form):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=_stored)

            record = await submit(mock_db, DONATION_FORM, donation_form)

            assert record.donation_amount == Decimal("2500")
            assert record.donation_type == "Monthly"

    @pytest.mark.asyncio
    async def test_same_event_registration_conflicts(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=MagicMock())
            mock_repo.create = AsyncMock()

            with pytest.raises(AlreadyExistsError) as exc_info:
                await submit(mock_db, EVENT_REGISTRATION_FORM, _registration(7))

            assert exc_info.value.message == "You are already registered for this event"
            values = mock_repo.find_duplicate.call_args.args[2]
            assert values["email"] == "jane@example.org"
            assert values["event_id"] == 7

    @pytest.mark.asyncio
    async def test_other_event_registration_accepted(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=_stored)

            record = await submit(mock_db, EVENT_REGISTRATION_FORM, _registration(8))

            assert record.event_id == 8
            assert record.status == "confirmed"
            assert record.reference_code.startswith("REG-")

    @pytest.mark.asyncio
    async def test_integrity_race_becomes_conflict(self, mock_db):
        """A unique-constraint race at insert time maps to 409."""
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(
                side_effect=IntegrityError("INSERT", {}, Exception("duplicate key"))
            )
            form = _registration(7)

            with pytest.raises(AlreadyExistsError):
                await submit(mock_db, EVENT_REGISTRATION_FORM, form)

            mock_db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_concurrent_donation_becomes_conflict(self, mock_db, donation_form):
        """The unique donor email turns a second concurrent pledge into 409."""
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(
                side_effect=IntegrityError("INSERT", {}, Exception("donations_email_key"))
            )

            with pytest.raises(AlreadyExistsError) as exc_info:
                await submit(mock_db, DONATION_FORM, donation_form)

            assert exc_info.value.message == DONATION_FORM.duplicate_rule.message
            mock_db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_contact_us_priority_derived_from_subject(self, mock_db):
        data = ContactUsCreate(
            full_name="Jane Doe",
            email="jane@example.org",
            mobile="9876543210",
            subject="partnership",
            message="We would like to partner on an accessibility project.",
        )
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=_stored)

            record = await submit(mock_db, CONTACT_US_FORM, data)

            assert record.priority == "high"
            assert record.reference_code.startswith("TICKET-")

    @pytest.mark.asyncio
    async def test_media_type_derived_from_url(self, mock_db):
        data = MediaCreate(
            full_name="Jane Doe",
            email="jane@example.org",
            media_url="https://youtu.be/abc123",
        )
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.find_duplicate = AsyncMock(return_value=None)
            mock_repo.create = AsyncMock(side_effect=_stored)

            record = await submit(mock_db, MEDIA_FORM, data)

            assert record.media_type == "video"


class TestListSubmissions:
    """Tests for list_submissions."""

    @pytest.mark.asyncio
    async def test_pagination_and_stats(self, mock_db):
        records = [MagicMock(), MagicMock()]
        stats = {"total": 23, "pending": 23}
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.list_records = AsyncMock(return_value=(records, 23))
            mock_repo.get_stats = AsyncMock(return_value=stats)

            result = await list_submissions(mock_db, DONATION_FORM, page=3, limit=10)

            assert result["records"] == records
            assert result["stats"] == stats
            assert result["pagination"] == {"current": 3, "pages": 3, "total": 23}
            assert mock_repo.list_records.call_args.kwargs["skip"] == 20
            assert mock_repo.list_records.call_args.kwargs["limit"] == 10

    @pytest.mark.asyncio
    async def test_empty_result_has_zero_pages(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.list_records = AsyncMock(return_value=([], 0))
            mock_repo.get_stats = AsyncMock(return_value={"total": 0})

            result = await list_submissions(mock_db, CONTACT_FORM)

            assert result["pagination"] == {"current": 1, "pages": 0, "total": 0}

    @pytest.mark.asyncio
    async def test_only_declared_filters_are_passed(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.list_records = AsyncMock(return_value=([], 0))
            mock_repo.get_stats = AsyncMock(return_value={})

            await list_submissions(
                mock_db,
                DONATION_FORM,
                status="pending",
                filters={"donation_type": "Monthly", "ip_address": "1.2.3.4", "email": None},
                search="jane",
            )

            kwargs = mock_repo.list_records.call_args.kwargs
            assert kwargs["filters"] == {"donation_type": "Monthly"}
            assert kwargs["status"] == "pending"
            assert kwargs["search"] == "jane"

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.list_records = AsyncMock(return_value=([], 0))
            mock_repo.get_stats = AsyncMock(return_value={})

            await list_submissions(mock_db, CONTACT_FORM, page=0, limit=500)

            kwargs = mock_repo.list_records.call_args.kwargs
            assert kwargs["limit"] == 100
            assert kwargs["skip"] == 0


class TestUpdateStatus:
    """Tests for update_status."""

    @pytest.mark.asyncio
    async def test_unknown_id_not_found(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            with pytest.raises(SubmissionNotFoundError) as exc_info:
                await update_status(mock_db, VOLUNTEER_FORM, "missing", {"status": "approved"})

            assert exc_info.value.status_code == 404
            assert exc_info.value.error_code == "VOLUNTEER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_status_change_queues_notice(self, mock_db, background_tasks):
        volunteer = Volunteer(status="pending", email="jane@example.org", full_name="Jane Doe")
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=volunteer)
            mock_repo.save = AsyncMock(side_effect=lambda db, record: record)

            result = await update_status(
                mock_db,
                VOLUNTEER_FORM,
                "some-id",
                {"status": "approved"},
                background_tasks=background_tasks,
            )

            assert result.status == "approved"
            mock_repo.save.assert_awaited_once()
            background_tasks.add_task.assert_called_once_with(
                notify_status_change, VOLUNTEER_FORM, volunteer, "approved"
            )

    @pytest.mark.asyncio
    async def test_same_status_does_not_notify(self, mock_db, background_tasks):
        volunteer = Volunteer(status="approved")
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=volunteer)
            mock_repo.save = AsyncMock(side_effect=lambda db, record: record)

            await update_status(
                mock_db,
                VOLUNTEER_FORM,
                "some-id",
                {"status": "approved", "notes": "Follow-up call done"},
                background_tasks=background_tasks,
            )

            background_tasks.add_task.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_status_not_saved(self, mock_db):
        volunteer = Volunteer(status="pending")
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=volunteer)
            mock_repo.save = AsyncMock()

            with pytest.raises(InvalidUpdateError) as exc_info:
                await update_status(mock_db, VOLUNTEER_FORM, "some-id", {"status": "archived"})

            assert exc_info.value.status_code == 400
            assert volunteer.status == "pending"
            mock_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_update_rejected(self, mock_db):
        with patch(SERVICE_REPOSITORY) as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=Volunteer(status="pending"))
            mock_repo.save = AsyncMock()

            with pytest.raises(InvalidUpdateError) as exc_info:
                await update_status(mock_db, VOLUNTEER_FORM, "some-id", {})

            assert exc_info.value.message == "No valid fields to update"
            mock_repo.save.assert_not_called()


class TestNotifications:
    """Tests for the best-effort notification helpers."""

    @pytest.mark.asyncio
    async def test_acknowledgement_failure_is_not_fatal(self):
        volunteer = Volunteer(
            reference_code="VOL-12345678-ABCD",
            email="jane@example.org",
            full_name="Jane Doe",
            status="pending",
        )
        with (
            patch(
                "foundation_api.modules.submissions.notifications.send_submission_acknowledgement",
                new=AsyncMock(side_effect=RuntimeError("smtp down")),
            ),
            patch(
                "foundation_api.modules.submissions.notifications.send_admin_submission_alert",
                new=AsyncMock(return_value=True),
            ) as mock_alert,
        ):
            await notify_submission_received(VOLUNTEER_FORM, volunteer)

            mock_alert.assert_awaited_once()
            details = mock_alert.call_args.kwargs["details"]
            assert details["email"] == "jane@example.org"
            assert "ip_address" not in details
            assert "user_agent" not in details

    @pytest.mark.asyncio
    async def test_disabled_emails_skip_everything(self):
        with (
            patch("foundation_api.modules.submissions.notifications.settings") as mock_settings,
            patch(
                "foundation_api.modules.submissions.notifications.send_submission_acknowledgement",
                new=AsyncMock(),
            ) as mock_ack,
        ):
            mock_settings.submission_emails_enabled = False

            await notify_submission_received(VOLUNTEER_FORM, Volunteer())

            mock_ack.assert_not_called()

    @pytest.mark.asyncio
    async def test_status_notice_includes_reason(self):
        volunteer = Volunteer(
            reference_code="VOL-12345678-ABCD",
            email="jane@example.org",
            full_name="Jane Doe",
            status="rejected",
            rejection_reason="Applications are closed",
        )
        with patch(
            "foundation_api.modules.submissions.notifications.send_status_update",
            new=AsyncMock(return_value=True),
        ) as mock_send:
            await notify_status_change(VOLUNTEER_FORM, volunteer, "rejected")

            kwargs = mock_send.call_args.kwargs
            assert kwargs["to_email"] == "jane@example.org"
            assert kwargs["reason"] == "Applications are closed"
            assert kwargs["subject"] == VOLUNTEER_FORM.status_notices["rejected"].subject

    @pytest.mark.asyncio
    async def test_status_without_notice_sends_nothing(self):
        with patch(
            "foundation_api.modules.submissions.notifications.send_status_update",
            new=AsyncMock(),
        ) as mock_send:
            await notify_status_change(VOLUNTEER_FORM, Volunteer(status="reviewed"), "reviewed")

            mock_send.assert_not_called()

    @pytest.mark.asyncio
    async def test_status_notice_failure_is_not_fatal(self):
        volunteer = Volunteer(reference_code="VOL-1", email="jane@example.org", status="approved")
        with patch(
            "foundation_api.modules.submissions.notifications.send_status_update",
            new=AsyncMock(side_effect=RuntimeError("provider error")),
        ):
            await notify_status_change(VOLUNTEER_FORM, volunteer, "approved")
