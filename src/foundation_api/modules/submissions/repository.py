"""
Submissions Repository

Database operations shared by every form type. Each function takes the
form's descriptor (or its model) so one implementation serves all forms.
Only data access lives here; duplicate policy and status rules are applied
by the service and lifecycle modules.
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import and_, case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.modules.submissions.form import FormDescriptor


async def create(db: AsyncSession, record: Any) -> Any:
    """Persist a new record and reload server-generated columns."""
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def save(db: AsyncSession, record: Any) -> Any:
    """Commit pending changes on a loaded record."""
    await db.commit()
    await db.refresh(record)
    return record


async def get_by_id(db: AsyncSession, model: type, id: str) -> Any | None:
    """Get a record by primary key. Malformed ids simply match nothing."""
    try:
        uuid.UUID(str(id))
    except ValueError:
        return None
    return await db.get(model, id)


async def get_by_field(db: AsyncSession, model: type, column: str, value: Any) -> Any | None:
    """Get the first record whose column equals the value."""
    result = await db.execute(select(model).where(getattr(model, column) == value).limit(1))
    return result.scalar_one_or_none()


async def find_duplicate(
    db: AsyncSession,
    form: FormDescriptor,
    values: dict[str, Any],
    since: datetime | None = None,
) -> Any | None:
    """
    Look for an existing record matching the form's duplicate key.

    Args:
        db: Database session
        form: Descriptor carrying the duplicate rule
        values: Normalized values of the incoming submission
        since: Only consider records created at or after this time

    Returns:
        The most recent matching record, or None
    """
    rule = form.duplicate_rule
    if rule is None:
        return None

    model = form.model
    comparisons = [getattr(model, name) == values.get(name) for name in rule.fields]
    key_clause = and_(*comparisons) if rule.match_all else or_(*comparisons)

    query = select(model).where(key_clause)
    if since is not None:
        query = query.where(model.created_at >= since)

    result = await db.execute(query.order_by(model.created_at.desc()).limit(1))
    return result.scalar_one_or_none()


LIKE_ESCAPE = "\\"


def _contains_pattern(term: str) -> str:
    """Substring pattern with the term's own LIKE wildcards taken literally."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


async def list_records(
    db: AsyncSession,
    form: FormDescriptor,
    *,
    status: str | None = None,
    filters: dict[str, Any] | None = None,
    search: str | None = None,
    skip: int = 0,
    limit: int = 10,
) -> tuple[list[Any], int]:
    """
    Get records with filters, search and pagination, newest first.

    Search is a case-insensitive substring match OR-ed across the form's
    search fields.

    Returns:
        Tuple of (records on the requested page, total matching the filters)
    """
    model = form.model
    query = select(model)

    if status:
        query = query.where(model.status == status)

    for column, value in (filters or {}).items():
        if value is not None:
            query = query.where(getattr(model, column) == value)

    if search:
        search_pattern = _contains_pattern(search)
        query = query.where(
            or_(
                *[
                    getattr(model, column).ilike(search_pattern, escape=LIKE_ESCAPE)
                    for column in form.search_fields
                ]
            )
        )

    count_query = select(func.count()).select_from(query.subquery())
    total_result = await db.execute(count_query)
    total = total_result.scalar() or 0

    query = query.order_by(model.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all()), total


def _matches(model: type, conditions: dict[str, Any]):
    return and_(*[getattr(model, column) == value for column, value in conditions.items()])


async def get_stats(db: AsyncSession, form: FormDescriptor) -> dict[str, Any]:
    """
    Aggregate statistics over every record of the form.

    Returns:
        Dict with ``total``, ``by_status`` (every status, zero-filled),
        one ``by_<column>`` dict per group-by column, plus the form's
        filtered counts and sums under their own names
    """
    model = form.model

    columns = [func.count().label("total")]
    columns += [
        func.count(case((model.status == value, 1))).label(f"status_{index}")
        for index, value in enumerate(form.status_values)
    ]
    columns += [
        func.count(case((_matches(model, conditions), 1))).label(name)
        for name, conditions in form.stats_counts.items()
    ]
    columns += [
        func.coalesce(
            func.sum(case((_matches(model, conditions), getattr(model, column)), else_=0)),
            0,
        ).label(name)
        for name, (column, conditions) in form.stats_sums.items()
    ]

    result = await db.execute(select(*columns))
    row = result.one()

    stats: dict[str, Any] = {
        "total": row.total,
        "by_status": {
            value: getattr(row, f"status_{index}")
            for index, value in enumerate(form.status_values)
        },
    }
    for name in form.stats_counts:
        stats[name] = getattr(row, name)
    for name in form.stats_sums:
        stats[name] = float(getattr(row, name) or 0)

    for column in form.stats_group_by:
        group_column = getattr(model, column)
        grouped = await db.execute(
            select(group_column, func.count()).group_by(group_column)
        )
        stats[f"by_{column}"] = {key: count for key, count in grouped.all() if key is not None}

    return stats
