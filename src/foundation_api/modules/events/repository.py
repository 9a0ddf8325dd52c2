"""
Event Registrations Repository

Per-event aggregates. Generic list and status operations live in the
shared submissions repository.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import DisabilityAnswer, EventRegistration


async def count_for_event(db: AsyncSession, event_id: int) -> int:
    result = await db.execute(
        select(func.count()).select_from(EventRegistration).where(
            EventRegistration.event_id == event_id
        )
    )
    return result.scalar() or 0


async def count_by_status(db: AsyncSession, event_id: int) -> dict[str, int]:
    """Registrations for one event grouped by status."""
    result = await db.execute(
        select(EventRegistration.status, func.count())
        .where(EventRegistration.event_id == event_id)
        .group_by(EventRegistration.status)
    )
    return {status: count for status, count in result.all()}


async def count_by_disability_type(db: AsyncSession, event_id: int) -> dict[str, int]:
    """Registrants with a disability for one event, grouped by disability type."""
    result = await db.execute(
        select(EventRegistration.disability_type, func.count())
        .where(
            EventRegistration.event_id == event_id,
            EventRegistration.is_person_with_disability == DisabilityAnswer.YES.value,
        )
        .group_by(EventRegistration.disability_type)
    )
    return {disability_type or "Unspecified": count for disability_type, count in result.all()}
