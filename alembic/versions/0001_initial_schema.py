"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 09:00:00.000000

This migration creates:
1. The users table for admin accounts
2. One table per public form (contact, contact-us, donations, volunteers,
   interns, event registrations, collaborations, media, news submissions)
3. The newsletter_subscribers table

Statuses and other vocabularies are stored as strings; the allowed values
are enforced by the application.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _base_columns() -> list[sa.Column]:
    """Primary key and timestamps (from BaseModel)."""
    return [
        sa.Column("id", postgresql.UUID(as_uuid=False), primary_key=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _submission_columns() -> list[sa.Column]:
    """Columns from SubmissionMixin, except email which some tables make unique."""
    return [
        sa.Column("reference_code", sa.String(length=40), nullable=False, unique=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("source", sa.String(length=50), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
    ]


def _create_submission_table(
    name: str, *columns: sa.Column | sa.Constraint, unique_email: bool = False
) -> None:
    op.create_table(
        name,
        *_base_columns(),
        *_submission_columns(),
        sa.Column("email", sa.String(length=254), nullable=False),
        *columns,
    )
    op.create_index(f"ix_{name}_created_at", name, ["created_at"])
    op.create_index(f"ix_{name}_status", name, ["status"])
    op.create_index(f"ix_{name}_email", name, ["email"], unique=unique_email)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=True)


def upgrade() -> None:
    """Create all tables."""
    # Admin accounts
    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("role", sa.String(length=30), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
    )
    op.create_index("ix_users_created_at", "users", ["created_at"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    _create_submission_table(
        "contact_messages",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("mobile", sa.String(length=15), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        _timestamp("resolved_at"),
    )

    _create_submission_table(
        "contact_us_tickets",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("mobile", sa.String(length=15), nullable=False),
        sa.Column("subject", sa.String(length=30), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("priority", sa.String(length=10), nullable=False),
        sa.Column("assigned_to", sa.String(length=100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("resolved_at"),
    )
    op.create_index("ix_contact_us_tickets_subject", "contact_us_tickets", ["subject"])
    op.create_index("ix_contact_us_tickets_priority", "contact_us_tickets", ["priority"])

    _create_submission_table(
        "donations",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("mobile", sa.String(length=15), nullable=False),
        sa.Column("donation_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("donation_type", sa.String(length=30), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("payment_status", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("contacted_at"),
        _timestamp("completed_at"),
        unique_email=True,
    )
    op.create_index("ix_donations_donation_type", "donations", ["donation_type"])

    _create_submission_table(
        "volunteers",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("mobile", sa.String(length=15), nullable=False),
        sa.Column("expertise", sa.JSON(), nullable=False),
        sa.Column("how_to_help", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("availability", sa.String(length=20), nullable=True),
        sa.Column("reviewed_by", sa.String(length=100), nullable=True),
        _timestamp("reviewed_at"),
        _timestamp("approved_at"),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        unique_email=True,
    )

    _create_submission_table(
        "intern_applications",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("mobile", sa.String(length=15), nullable=False),
        sa.Column("internship_area", sa.String(length=40), nullable=False),
        sa.Column("education", sa.Text(), nullable=True),
        sa.Column("motivation", sa.Text(), nullable=False),
        sa.Column("duration", sa.String(length=20), nullable=True),
        sa.Column("reviewed_by", sa.String(length=100), nullable=True),
        _timestamp("reviewed_at"),
        _timestamp("interview_date"),
        _timestamp("start_date"),
        _timestamp("end_date"),
        sa.Column("mentor", sa.String(length=100), nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        unique_email=True,
    )
    op.create_index(
        "ix_intern_applications_internship_area", "intern_applications", ["internship_area"]
    )

    _create_submission_table(
        "event_registrations",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("mobile_number", sa.String(length=15), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("occupation", sa.String(length=100), nullable=True),
        sa.Column("organization", sa.String(length=200), nullable=True),
        sa.Column("is_person_with_disability", sa.String(length=3), nullable=False),
        sa.Column("disability_type", sa.String(length=50), nullable=True),
        sa.Column("other_disability_text", sa.String(length=200), nullable=True),
        sa.Column("special_accommodations", sa.Text(), nullable=True),
        sa.Column("event_id", sa.Integer(), nullable=False),
        sa.Column("event_title", sa.String(length=200), nullable=False),
        sa.Column(
            "registration_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("attendance_status", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("email", "event_id", name="uq_event_registrations_email_event"),
    )
    op.create_index("ix_event_registrations_event_id", "event_registrations", ["event_id"])

    _create_submission_table(
        "collaborations",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("organization_name", sa.String(length=200), nullable=False),
        sa.Column("mobile", sa.String(length=15), nullable=False),
        sa.Column("area_of_interest", sa.String(length=40), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("organization_type", sa.String(length=20), nullable=True),
        sa.Column("partnership_type", sa.String(length=30), nullable=True),
        sa.Column("priority", sa.String(length=10), nullable=False),
        sa.Column("reviewed_by", sa.String(length=100), nullable=True),
        _timestamp("reviewed_at"),
        _timestamp("meeting_date"),
        _timestamp("partnership_start_date"),
        sa.Column("decline_reason", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index(
        "ix_collaborations_organization_name", "collaborations", ["organization_name"]
    )
    op.create_index("ix_collaborations_area_of_interest", "collaborations", ["area_of_interest"])

    _create_submission_table(
        "media_submissions",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("media_url", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("media_type", sa.String(length=10), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=True),
        sa.Column("reviewed_by", sa.String(length=100), nullable=True),
        _timestamp("reviewed_at"),
        _timestamp("featured_at"),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
    )
    op.create_index("ix_media_submissions_media_type", "media_submissions", ["media_type"])

    _create_submission_table(
        "news_submissions",
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("news_update", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=True),
        sa.Column("reviewed_by", sa.String(length=100), nullable=True),
        _timestamp("reviewed_at"),
        _timestamp("published_at"),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
    )
    op.create_index("ix_news_submissions_category", "news_submissions", ["category"])

    _create_submission_table(
        "newsletter_subscribers",
        sa.Column(
            "subscribed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        _timestamp("unsubscribed_at"),
        sa.Column("unsubscribe_token", sa.String(length=64), nullable=False, unique=True),
        unique_email=True,
    )


def downgrade() -> None:
    """Drop all tables."""
    for table in (
        "newsletter_subscribers",
        "news_submissions",
        "media_submissions",
        "collaborations",
        "event_registrations",
        "intern_applications",
        "volunteers",
        "donations",
        "contact_us_tickets",
        "contact_messages",
        "users",
    ):
        op.drop_table(table)
