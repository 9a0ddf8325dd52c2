"""
Reference Generator

Reference codes look like ``DON-12345678-AB3Z``: the form prefix, the last
eight digits of the current epoch time in milliseconds, and four random
uppercase alphanumerics.
"""

import secrets
import string
import time

REFERENCE_ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_LENGTH = 4


def generate_reference(prefix: str, now_ms: int | None = None) -> str:
    """
    Build a new reference code.

    Args:
        prefix: Form prefix, e.g. "DON"
        now_ms: Epoch milliseconds (defaults to the current time)

    Returns:
        Reference code string
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    time_fragment = str(now_ms)[-8:].zfill(8)
    suffix = "".join(secrets.choice(REFERENCE_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{prefix}-{time_fragment}-{suffix}"


def assign_reference(record, prefix: str) -> str:
    """
    Give a record its reference code if it does not have one yet.

    Existing codes are never replaced.
    """
    if not getattr(record, "reference_code", None):
        record.reference_code = generate_reference(prefix)
    return record.reference_code
