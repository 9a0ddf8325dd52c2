"""
Unit tests for reference code generation.
"""

import re

from foundation_api.modules.donations.models import Donation
from foundation_api.modules.submissions.reference import assign_reference, generate_reference

REFERENCE_PATTERN = re.compile(r"^DON-\d{8}-[A-Z0-9]{4}$")


class TestGenerateReference:
    """Tests for generate_reference."""

    def test_format(self):
        assert REFERENCE_PATTERN.match(generate_reference("DON"))

    def test_uses_last_eight_digits_of_time(self):
        reference = generate_reference("VOL", now_ms=1718000123456789)
        assert reference.startswith("VOL-23456789-")

    def test_short_timestamps_are_zero_padded(self):
        reference = generate_reference("MSG", now_ms=42)
        assert reference.startswith("MSG-00000042-")

    def test_references_are_distinct_across_time(self):
        start = 1718000000000
        references = {generate_reference("DON", now_ms=start + i) for i in range(1000)}
        assert len(references) == 1000
        assert all(REFERENCE_PATTERN.match(reference) for reference in references)

    def test_suffix_varies_within_same_millisecond(self):
        references = {generate_reference("DON", now_ms=1718000000000) for _ in range(200)}
        # 36^4 possible suffixes; a handful of collisions at most
        assert len(references) > 190


class TestAssignReference:
    """Tests for assign_reference."""

    def test_assigns_when_missing(self):
        donation = Donation()
        reference = assign_reference(donation, "DON")
        assert donation.reference_code == reference
        assert REFERENCE_PATTERN.match(reference)

    def test_existing_reference_is_kept(self):
        donation = Donation(reference_code="DON-12345678-ABCD")
        assert assign_reference(donation, "DON") == "DON-12345678-ABCD"
        assert donation.reference_code == "DON-12345678-ABCD"

    def test_is_idempotent(self):
        donation = Donation()
        first = assign_reference(donation, "DON")
        second = assign_reference(donation, "DON")
        assert first == second
