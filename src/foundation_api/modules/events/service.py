"""
Event Registrations Service
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.modules.events import repository
from foundation_api.modules.events.schemas import EventStats

logger = logging.getLogger(__name__)


async def get_event_stats(db: AsyncSession, event_id: int) -> EventStats:
    """
    Registration totals for one event.

    Unknown events are not an error; they simply have no registrations.
    """
    total = await repository.count_for_event(db, event_id)
    by_status = await repository.count_by_status(db, event_id)
    by_disability = await repository.count_by_disability_type(db, event_id)

    logger.info(f"Computed stats for event {event_id}: total={total}")

    return EventStats(
        event_id=event_id,
        total_registrations=total,
        registration_stats=by_status,
        disability_stats=by_disability,
    )
