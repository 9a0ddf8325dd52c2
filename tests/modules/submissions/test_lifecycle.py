"""
Unit tests for the status lifecycle.

These tests focus on:
- Status membership checks and the optional transition graph
- Review and per-status timestamps
- Fields bound to a particular status (rejection/decline reasons)
- Records staying untouched when an update is rejected
"""

from dataclasses import replace
from datetime import UTC, datetime

import pytest

from foundation_api.modules.collaborations.form import COLLABORATION_FORM
from foundation_api.modules.collaborations.models import Collaboration
from foundation_api.modules.contact.form import CONTACT_FORM
from foundation_api.modules.contact.models import ContactMessage
from foundation_api.modules.donations.form import DONATION_FORM
from foundation_api.modules.donations.models import Donation
from foundation_api.modules.submissions.lifecycle import (
    InvalidStatusError,
    InvalidStatusTransitionError,
    NoValidFieldsError,
    apply_status_update,
    check_transition,
)
from foundation_api.modules.volunteers.form import VOLUNTEER_FORM
from foundation_api.modules.volunteers.models import Volunteer

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
EARLIER = datetime(2026, 2, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def volunteer():
    return Volunteer(
        reference_code="VOL-12345678-ABCD",
        email="jane@example.org",
        full_name="Jane Doe",
        status="pending",
    )


class TestCheckTransition:
    """Tests for check_transition."""

    def test_unknown_status_rejected(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            check_transition(VOLUNTEER_FORM, "pending", "archived")
        assert "archived" in str(exc_info.value)
        assert "approved" in exc_info.value.allowed

    def test_any_move_allowed_without_graph(self):
        check_transition(VOLUNTEER_FORM, "rejected", "pending")

    def test_graph_enforced_when_configured(self):
        form = replace(
            CONTACT_FORM,
            transitions={"new": {"in-progress"}, "in-progress": {"resolved"}, "resolved": set()},
        )
        check_transition(form, "new", "in-progress")
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            check_transition(form, "resolved", "new")
        assert "resolved -> new" in str(exc_info.value)

    def test_same_status_allowed_with_graph(self):
        form = replace(CONTACT_FORM, transitions={"resolved": set()})
        check_transition(form, "resolved", "resolved")


class TestApplyStatusUpdate:
    """Tests for apply_status_update."""

    def test_sets_status_and_review_time(self, volunteer):
        change = apply_status_update(VOLUNTEER_FORM, volunteer, {"status": "reviewed"}, now=NOW)

        assert volunteer.status == "reviewed"
        assert volunteer.reviewed_at == NOW
        assert change.previous_status == "pending"
        assert change.new_status == "reviewed"
        assert change.entered_new_status

    def test_entering_status_stamps_its_timestamp(self, volunteer):
        apply_status_update(VOLUNTEER_FORM, volunteer, {"status": "approved"}, now=NOW)
        assert volunteer.approved_at == NOW

    def test_repeating_status_keeps_original_timestamp(self):
        message = ContactMessage(status="resolved", resolved_at=EARLIER)

        change = apply_status_update(CONTACT_FORM, message, {"status": "resolved"}, now=NOW)

        assert message.resolved_at == EARLIER
        assert not change.entered_new_status

    def test_multiple_status_timestamps(self):
        donation = Donation(status="pending")

        apply_status_update(DONATION_FORM, donation, {"status": "contacted"}, now=EARLIER)
        apply_status_update(DONATION_FORM, donation, {"status": "completed"}, now=NOW)

        assert donation.contacted_at == EARLIER
        assert donation.completed_at == NOW

    def test_invalid_status_leaves_record_untouched(self, volunteer):
        with pytest.raises(InvalidStatusError):
            apply_status_update(
                VOLUNTEER_FORM,
                volunteer,
                {"status": "archived", "notes": "should not be saved"},
                now=NOW,
            )

        assert volunteer.status == "pending"
        assert volunteer.notes is None
        assert volunteer.reviewed_at is None

    def test_rejection_reason_stored_with_rejected(self, volunteer):
        apply_status_update(
            VOLUNTEER_FORM,
            volunteer,
            {"status": "rejected", "rejection_reason": "Not enough availability"},
            now=NOW,
        )
        assert volunteer.status == "rejected"
        assert volunteer.rejection_reason == "Not enough availability"

    def test_rejection_reason_ignored_for_other_statuses(self, volunteer):
        change = apply_status_update(
            VOLUNTEER_FORM,
            volunteer,
            {"status": "approved", "rejection_reason": "Stray reason"},
            now=NOW,
        )
        assert volunteer.rejection_reason is None
        assert "rejection_reason" not in change.updated_fields

    def test_decline_reason_bound_to_declined(self):
        collaboration = Collaboration(status="pending")

        apply_status_update(
            COLLABORATION_FORM,
            collaboration,
            {"status": "declined", "decline_reason": "Outside our focus areas"},
            now=NOW,
        )

        assert collaboration.decline_reason == "Outside our focus areas"
        assert collaboration.reviewed_at == NOW

    def test_explicit_partnership_start_date_wins(self):
        collaboration = Collaboration(status="approved")
        start = datetime(2026, 4, 1, tzinfo=UTC)

        apply_status_update(
            COLLABORATION_FORM,
            collaboration,
            {"status": "active-partnership", "partnership_start_date": start},
            now=NOW,
        )

        assert collaboration.partnership_start_date == start

    def test_partnership_start_date_defaults_to_now(self):
        collaboration = Collaboration(status="approved")

        apply_status_update(
            COLLABORATION_FORM, collaboration, {"status": "active-partnership"}, now=NOW
        )

        assert collaboration.partnership_start_date == NOW

    def test_auxiliary_fields_without_status(self, volunteer):
        change = apply_status_update(
            VOLUNTEER_FORM, volunteer, {"notes": "Called on Monday"}, now=NOW
        )

        assert volunteer.notes == "Called on Monday"
        assert volunteer.status == "pending"
        assert volunteer.reviewed_at is None
        assert not change.entered_new_status

    def test_empty_update_rejected(self, volunteer):
        with pytest.raises(NoValidFieldsError):
            apply_status_update(VOLUNTEER_FORM, volunteer, {}, now=NOW)

    def test_only_bound_field_without_status_rejected(self, volunteer):
        with pytest.raises(NoValidFieldsError):
            apply_status_update(
                VOLUNTEER_FORM, volunteer, {"rejection_reason": "Too late"}, now=NOW
            )
