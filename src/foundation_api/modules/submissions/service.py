"""
Submissions Service Layer

Business logic shared by every public form:

1. Submission Flow:
   - Body already validated and sanitized by the form schema
   - Duplicate guard (time window -> 429, unique key -> 409)
   - Persist with a fresh reference code and request provenance
   - Acknowledgement and admin alert queued as background tasks

2. Admin Flow:
   - Paginated, filtered, searchable list with aggregate stats
   - Status updates validated by the lifecycle module, with the form's
     notice queued after commit
"""

import logging
import math
from datetime import UTC, datetime
from typing import Any

from fastapi import BackgroundTasks
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.modules.submissions import repository
from foundation_api.modules.submissions.form import FormDescriptor
from foundation_api.modules.submissions.lifecycle import (
    InvalidStatusError,
    InvalidStatusTransitionError,
    NoValidFieldsError,
    apply_status_update,
)
from foundation_api.modules.submissions.notifications import (
    notify_status_change,
    notify_submission_received,
)
from foundation_api.modules.submissions.reference import assign_reference
from foundation_api.modules.submissions.schemas import SubmissionForm

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class SubmissionServiceError(Exception):
    """Base exception for submission service errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class DuplicateSubmissionError(SubmissionServiceError):
    """Raised when the same submitter sends again within the form's window."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="DUPLICATE_SUBMISSION",
            status_code=429,
        )


class AlreadyExistsError(SubmissionServiceError):
    """Raised when a hard-unique key is already taken."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="ALREADY_EXISTS",
            status_code=409,
        )


class SubmissionNotFoundError(SubmissionServiceError):
    """Raised when a record id does not exist."""

    def __init__(self, form: FormDescriptor):
        super().__init__(
            message=form.not_found_message,
            error_code=form.not_found_code,
            status_code=404,
        )


class InvalidUpdateError(SubmissionServiceError):
    """Raised when an admin update cannot be applied."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
        )


async def check_duplicate(
    db: AsyncSession,
    form: FormDescriptor,
    values: dict[str, Any],
    now: datetime | None = None,
) -> None:
    """
    Apply the form's duplicate rule to incoming values.

    Raises:
        DuplicateSubmissionError: Match inside the look-back window
        AlreadyExistsError: Match on a hard-unique key
    """
    rule = form.duplicate_rule
    if rule is None:
        return

    since = None if rule.is_unique else (now or datetime.now(UTC)) - rule.window
    existing = await repository.find_duplicate(db, form, values, since=since)
    if existing is None:
        return

    logger.warning(
        f"Duplicate {form.key} submission: email={values.get('email')}, "
        f"existing={existing.reference_code}"
    )
    if rule.is_unique:
        raise AlreadyExistsError(rule.message)
    raise DuplicateSubmissionError(rule.message)


def build_record(
    form: FormDescriptor,
    values: dict[str, Any],
    client_ip: str | None = None,
    user_agent: str | None = None,
) -> Any:
    """Instantiate the form's model with provenance, initial status and reference."""
    record = form.model(
        **values,
        status=form.initial_status,
        source=form.source,
        ip_address=client_ip,
        user_agent=user_agent,
    )
    assign_reference(record, form.reference_prefix)
    return record


async def persist_new(db: AsyncSession, form: FormDescriptor, record: Any) -> Any:
    """
    Store a new record, turning a unique-constraint race into AlreadyExistsError.
    """
    try:
        return await repository.create(db, record)
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Integrity error creating {form.key} submission: {e.orig}")
        message = (
            form.duplicate_rule.message
            if form.duplicate_rule is not None
            else f"This {form.label.lower()} already exists"
        )
        raise AlreadyExistsError(message) from e


async def submit(
    db: AsyncSession,
    form: FormDescriptor,
    data: SubmissionForm,
    *,
    client_ip: str | None = None,
    user_agent: str | None = None,
    background_tasks: BackgroundTasks | None = None,
) -> Any:
    """
    Accept a validated public submission.

    Args:
        db: Database session
        form: Descriptor of the form being submitted
        data: Validated request body
        client_ip: Submitter's IP address
        user_agent: Submitter's User-Agent header
        background_tasks: Where to queue the acknowledgement emails

    Returns:
        The stored record

    Raises:
        DuplicateSubmissionError: Same submitter within the form's window
        AlreadyExistsError: Hard-unique key already taken
    """
    values = data.to_record_values()

    await check_duplicate(db, form, values)

    record = build_record(form, values, client_ip, user_agent)
    record = await persist_new(db, form, record)
    logger.info(f"Created {form.key} submission {record.reference_code}")

    if background_tasks is not None:
        background_tasks.add_task(notify_submission_received, form, record)

    return record


async def list_submissions(
    db: AsyncSession,
    form: FormDescriptor,
    *,
    status: str | None = None,
    filters: dict[str, Any] | None = None,
    search: str | None = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    """
    Get one page of a form's records plus aggregate stats.

    Returns:
        Dict with records, stats and pagination (current, pages, total)
    """
    page = max(1, page)
    limit = min(max(1, limit), MAX_PAGE_SIZE)
    filters = {
        column: value
        for column, value in (filters or {}).items()
        if column in form.filter_fields and value is not None
    }

    logger.info(
        f"Admin listing {form.key}: status={status}, filters={filters}, "
        f"search={search}, page={page}, limit={limit}"
    )

    records, total = await repository.list_records(
        db,
        form,
        status=status,
        filters=filters,
        search=search,
        skip=(page - 1) * limit,
        limit=limit,
    )
    stats = await repository.get_stats(db, form)

    return {
        "records": records,
        "stats": stats,
        "pagination": {
            "current": page,
            "pages": math.ceil(total / limit),
            "total": total,
        },
    }


async def update_status(
    db: AsyncSession,
    form: FormDescriptor,
    id: str,
    changes: dict[str, Any],
    *,
    background_tasks: BackgroundTasks | None = None,
) -> Any:
    """
    Apply an admin status update.

    Raises:
        SubmissionNotFoundError: Unknown id
        InvalidUpdateError: Empty body, unknown status or forbidden transition
    """
    record = await repository.get_by_id(db, form.model, id)
    if record is None:
        logger.warning(f"{form.label} not found: {id}")
        raise SubmissionNotFoundError(form)

    try:
        change = apply_status_update(form, record, changes)
    except (NoValidFieldsError, InvalidStatusError, InvalidStatusTransitionError) as e:
        logger.warning(f"Rejected update for {form.key} {id}: {e}")
        raise InvalidUpdateError(str(e)) from e

    record = await repository.save(db, record)
    logger.info(
        f"Updated {form.key} {record.reference_code}: "
        f"{change.previous_status} -> {change.new_status} ({', '.join(change.updated_fields)})"
    )

    if change.entered_new_status and background_tasks is not None:
        background_tasks.add_task(notify_status_change, form, record, change.new_status)

    return record
