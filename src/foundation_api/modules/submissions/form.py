"""
Form Descriptors

A FormDescriptor holds everything that differs between form types:
the model, reference prefix, status vocabulary, duplicate rule, search and
filter columns, status side effects and notification wording. The shared
repository, lifecycle and service functions are driven entirely by it.
"""

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any


@dataclass(frozen=True)
class DuplicateRule:
    """
    How to detect a near-duplicate submission.

    Attributes:
        fields: Columns compared against the incoming values
        window: Look-back period; None means the key must be unique forever
        message: Shown to the submitter when a duplicate is found
        match_all: Require every field to match (AND) instead of any (OR)
    """

    fields: tuple[str, ...]
    window: timedelta | None
    message: str
    match_all: bool = False

    @property
    def is_unique(self) -> bool:
        return self.window is None


@dataclass(frozen=True)
class StatusNotice:
    """Wording of the email sent when a record enters a status."""

    subject: str
    headline: str
    body: str


@dataclass(frozen=True)
class FormDescriptor:
    """Configuration for one form type."""

    key: str
    label: str
    model: type
    reference_prefix: str
    source: str
    statuses: type[enum.Enum]
    initial_status: str
    submit_message: str
    search_fields: tuple[str, ...]
    duplicate_rule: DuplicateRule | None = None
    filter_fields: tuple[str, ...] = ()
    # Stamped with the current time whenever any status is written
    review_timestamp: str | None = None
    # status -> column stamped when the record enters that status
    status_timestamps: dict[str, str] = field(default_factory=dict)
    # column -> status it may only be written with (e.g. rejection_reason)
    status_bound_fields: dict[str, str] = field(default_factory=dict)
    # Optional allowed-transition graph; None allows any move
    transitions: dict[str, set[str]] | None = None
    status_notices: dict[str, StatusNotice] = field(default_factory=dict)
    # Extra stats: group-by columns, filtered counts and filtered sums
    stats_group_by: tuple[str, ...] = ()
    stats_counts: dict[str, dict[str, Any]] = field(default_factory=dict)
    stats_sums: dict[str, tuple[str, dict[str, Any]]] = field(default_factory=dict)
    name_field: str | None = "full_name"

    @property
    def status_values(self) -> list[str]:
        return [member.value for member in self.statuses]

    @property
    def not_found_code(self) -> str:
        return f"{self.key.upper()}_NOT_FOUND"

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"


__all__ = ["DuplicateRule", "FormDescriptor", "StatusNotice"]
