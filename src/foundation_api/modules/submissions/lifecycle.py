"""
Status Lifecycle

Applies an admin status update to a loaded record according to the form's
descriptor. Nothing is written to the record until every check passes, so a
rejected update leaves the record untouched.

Forms allow any status to follow any other unless their descriptor declares
a ``transitions`` graph, in which case the graph is enforced.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from foundation_api.modules.submissions.form import FormDescriptor


class InvalidStatusError(ValueError):
    """Raised when the target status is not part of the form's vocabulary."""

    def __init__(self, status: str, allowed: list[str]):
        self.status = status
        self.allowed = allowed
        super().__init__(f"Invalid status '{status}'. Allowed values: {', '.join(allowed)}")


class InvalidStatusTransitionError(ValueError):
    """Raised when the form's transition graph forbids the move."""

    def __init__(self, current_status: str, new_status: str, allowed: set[str]):
        self.current_status = current_status
        self.new_status = new_status
        super().__init__(
            f"Invalid status transition: {current_status} -> {new_status}. "
            f"Valid transitions: {sorted(allowed)}"
        )


class NoValidFieldsError(ValueError):
    """Raised when an update carries nothing that can be applied."""

    def __init__(self):
        super().__init__("No valid fields to update")


@dataclass
class StatusChange:
    """Outcome of an applied update."""

    previous_status: str
    new_status: str
    updated_fields: list[str]

    @property
    def entered_new_status(self) -> bool:
        return self.previous_status != self.new_status


def check_transition(form: FormDescriptor, current_status: str, new_status: str) -> None:
    """Validate membership and, when configured, the transition graph."""
    if new_status not in form.status_values:
        raise InvalidStatusError(new_status, form.status_values)

    if form.transitions is None or new_status == current_status:
        return

    allowed = form.transitions.get(current_status, set())
    if new_status not in allowed:
        raise InvalidStatusTransitionError(current_status, new_status, allowed)


def apply_status_update(
    form: FormDescriptor,
    record: Any,
    changes: dict[str, Any],
    now: datetime | None = None,
) -> StatusChange:
    """
    Apply validated admin changes to a record.

    Args:
        form: Descriptor of the record's form
        record: Loaded model instance
        changes: Field values sent by the admin (unset and null values removed)
        now: Timestamp used for stamping (defaults to the current UTC time)

    Returns:
        StatusChange describing what was written

    Raises:
        NoValidFieldsError: If nothing applicable was supplied
        InvalidStatusError: If the target status is unknown
        InvalidStatusTransitionError: If the transition graph forbids the move
    """
    now = now or datetime.now(UTC)
    pending = dict(changes)
    current_status = record.status
    new_status = pending.pop("status", None)

    # Fields that only make sense alongside a particular status
    for column, bound_status in form.status_bound_fields.items():
        if column in pending and new_status != bound_status:
            pending.pop(column)

    if new_status is None and not pending:
        raise NoValidFieldsError()

    if new_status is not None:
        check_transition(form, current_status, new_status)

    updates: dict[str, Any] = dict(pending)

    if new_status is not None:
        updates["status"] = new_status
        if form.review_timestamp:
            updates[form.review_timestamp] = now
        stamp_column = form.status_timestamps.get(new_status)
        if stamp_column and new_status != current_status and stamp_column not in pending:
            updates[stamp_column] = now

    for column, value in updates.items():
        setattr(record, column, value)

    return StatusChange(
        previous_status=current_status,
        new_status=new_status or current_status,
        updated_fields=sorted(updates),
    )
