"""
Unit tests for the shared submissions repository.

Queries are captured from the mocked session and compiled to SQL so the
duplicate and listing rules can be checked without a database.
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from foundation_api.modules.collaborations.form import COLLABORATION_FORM
from foundation_api.modules.donations.form import DONATION_FORM
from foundation_api.modules.donations.models import Donation
from foundation_api.modules.events.form import EVENT_REGISTRATION_FORM
from foundation_api.modules.newsletter.form import NEWSLETTER_FORM
from foundation_api.modules.submissions import repository
from foundation_api.modules.volunteers.form import VOLUNTEER_FORM
from foundation_api.modules.volunteers.models import Volunteer


def _sql(statement, literal: bool = True) -> str:
    compile_kwargs = {"literal_binds": True} if literal else {}
    return str(statement.compile(dialect=postgresql.dialect(), compile_kwargs=compile_kwargs))


def _executed_sql(mock_db, call_index: int = 0) -> str:
    return _sql(mock_db.execute.call_args_list[call_index].args[0])


class TestGetById:
    """Tests for get_by_id."""

    @pytest.mark.asyncio
    async def test_malformed_id_matches_nothing(self, mock_db):
        result = await repository.get_by_id(mock_db, Volunteer, "not-a-uuid")

        assert result is None
        mock_db.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_valid_id_is_loaded(self, mock_db):
        volunteer = Volunteer(status="pending")
        mock_db.get.return_value = volunteer
        record_id = "5f0c6a3e-8d2b-4a57-9a43-3f1e2b7c9d10"

        result = await repository.get_by_id(mock_db, Volunteer, record_id)

        assert result is volunteer
        mock_db.get.assert_awaited_once_with(Volunteer, record_id)


class TestFindDuplicate:
    """Tests for find_duplicate."""

    @pytest.mark.asyncio
    async def test_no_rule_skips_query(self, mock_db):
        result = await repository.find_duplicate(mock_db, NEWSLETTER_FORM, {"email": "a@b.co"})

        assert result is None
        mock_db.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_event_rule_requires_email_and_event(self, mock_db):
        mock_db.execute.return_value.scalar_one_or_none = MagicMock(return_value=None)

        await repository.find_duplicate(
            mock_db, EVENT_REGISTRATION_FORM, {"email": "jane@example.org", "event_id": 7}
        )

        sql = _executed_sql(mock_db)
        assert "event_registrations.email = 'jane@example.org' AND" in sql
        assert "event_registrations.event_id = 7" in sql
        assert "created_at >=" not in sql

    @pytest.mark.asyncio
    async def test_collaboration_rule_matches_either_field(self, mock_db):
        mock_db.execute.return_value.scalar_one_or_none = MagicMock(return_value=None)
        since = datetime(2026, 3, 1, tzinfo=UTC)

        await repository.find_duplicate(
            mock_db,
            COLLABORATION_FORM,
            {"email": "jane@example.org", "organization_name": "Able Org"},
            since=since,
        )

        sql = _sql(mock_db.execute.call_args.args[0], literal=False)
        assert " OR collaborations.organization_name = " in sql
        assert "collaborations.created_at >=" in sql

    @pytest.mark.asyncio
    async def test_donation_rule_matches_any_status(self, mock_db):
        mock_db.execute.return_value.scalar_one_or_none = MagicMock(return_value=None)

        await repository.find_duplicate(mock_db, DONATION_FORM, {"email": "jane@example.org"})

        sql = _executed_sql(mock_db)
        assert "donations.email = 'jane@example.org'" in sql
        assert "donations.status" not in sql
        assert "created_at >=" not in sql

    def test_donation_email_unique_in_storage(self):
        assert Donation.__table__.c.email.unique


class TestListRecords:
    """Tests for list_records."""

    @pytest.mark.asyncio
    async def test_filters_search_and_paging(self, mock_db):
        count_result = MagicMock()
        count_result.scalar.return_value = 12
        page_result = MagicMock()
        page_result.scalars.return_value.all.return_value = ["a", "b"]
        mock_db.execute.side_effect = [count_result, page_result]

        records, total = await repository.list_records(
            mock_db,
            VOLUNTEER_FORM,
            status="approved",
            search="jane",
            skip=10,
            limit=10,
        )

        assert records == ["a", "b"]
        assert total == 12

        page_sql = _executed_sql(mock_db, 1)
        assert "volunteers.status = 'approved'" in page_sql
        assert "volunteers.full_name ILIKE '%" in page_sql
        assert "jane" in page_sql
        assert "volunteers.reference_code ILIKE" in page_sql
        assert "ORDER BY volunteers.created_at DESC" in page_sql
        assert "LIMIT 10 OFFSET 10" in page_sql

    @pytest.mark.asyncio
    async def test_search_wildcards_matched_literally(self, mock_db):
        count_result = MagicMock()
        count_result.scalar.return_value = 0
        page_result = MagicMock()
        page_result.scalars.return_value.all.return_value = []
        mock_db.execute.side_effect = [count_result, page_result]

        await repository.list_records(mock_db, VOLUNTEER_FORM, search="50%_off\\")

        statement = mock_db.execute.call_args_list[1].args[0]
        compiled = statement.compile(dialect=postgresql.dialect())
        assert "ESCAPE" in str(compiled)
        patterns = {value for value in compiled.params.values() if isinstance(value, str)}
        assert "%50\\%\\_off\\\\%" in patterns

    @pytest.mark.asyncio
    async def test_lone_percent_does_not_match_everything(self, mock_db):
        count_result = MagicMock()
        count_result.scalar.return_value = 0
        page_result = MagicMock()
        page_result.scalars.return_value.all.return_value = []
        mock_db.execute.side_effect = [count_result, page_result]

        await repository.list_records(mock_db, VOLUNTEER_FORM, search="%")

        statement = mock_db.execute.call_args_list[1].args[0]
        patterns = statement.compile(dialect=postgresql.dialect()).params.values()
        assert "%\\%%" in patterns
        assert "%%%" not in patterns


class TestGetStats:
    """Tests for get_stats."""

    @pytest.mark.asyncio
    async def test_every_status_reported(self, mock_db):
        row = MagicMock()
        row.total = 3
        for index in range(len(VOLUNTEER_FORM.status_values)):
            setattr(row, f"status_{index}", 0)
        row.status_0 = 2
        row.status_2 = 1
        mock_db.execute.return_value.one = MagicMock(return_value=row)

        stats = await repository.get_stats(mock_db, VOLUNTEER_FORM)

        assert stats["total"] == 3
        assert stats["by_status"] == {
            "pending": 2,
            "reviewed": 0,
            "approved": 1,
            "active": 0,
            "inactive": 0,
            "rejected": 0,
        }

    @pytest.mark.asyncio
    async def test_completed_amount_summed(self, mock_db):
        row = MagicMock()
        row.total = 2
        for index in range(len(DONATION_FORM.status_values)):
            setattr(row, f"status_{index}", 1)
        row.total_amount = None
        mock_db.execute.return_value.one = MagicMock(return_value=row)

        stats = await repository.get_stats(mock_db, DONATION_FORM)

        assert stats["total_amount"] == 0.0
        sql = _executed_sql(mock_db)
        assert "donations.status = 'completed'" in sql
        assert "sum(" in sql
