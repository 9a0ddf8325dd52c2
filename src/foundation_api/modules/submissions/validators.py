"""
Intake Validators

Sanitizers and field validators shared by every public form schema.
Each validator either returns the normalized value or raises ValueError
with a message that is shown to the submitter as-is.

The Annotated aliases at the bottom bundle sanitization (BeforeValidator)
and semantic checks (AfterValidator) so schemas declare a field once:

    class DonationCreate(SubmissionForm):
        full_name: FullName
        email: EmailAddress
        mobile: MobileNumber
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any
from urllib.parse import urlparse

from pydantic import AfterValidator, BeforeValidator

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

_ANGLE_BRACKETS = re.compile(r"[<>]")
_JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+=", re.IGNORECASE)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
STRICT_MOBILE_PATTERN = re.compile(r"^[0-9]{10,15}$")
DEGENERATE_PHONE_PATTERNS = (
    re.compile(r"^0{10,}$"),
    re.compile(r"^1{10,}$"),
    re.compile(r"^(.)\1{9,}$"),
)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp")
VIDEO_EXTENSIONS = (".mp4", ".mov", ".avi", ".wmv", ".flv", ".webm", ".mkv")
MEDIA_HOSTS = (
    "youtube.com",
    "youtu.be",
    "vimeo.com",
    "drive.google.com",
    "dropbox.com",
    "imgur.com",
)
VIDEO_HOSTS = ("youtube.com", "youtu.be", "vimeo.com")
IMAGE_HOSTS = ("imgur.com",)

MEDIA_URL_MESSAGE = (
    "Please provide a valid image/video URL or link from supported platforms "
    "(YouTube, Vimeo, Google Drive, etc.)"
)


def sanitize_input(value: Any) -> Any:
    """
    Strip markup-like content from a free-text value.

    Non-string values are returned unchanged so type validation can
    report them.
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    value = _ANGLE_BRACKETS.sub("", value)
    value = _JAVASCRIPT_SCHEME.sub("", value)
    value = _EVENT_HANDLER.sub("", value)
    return value


def is_blank(value: Any) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | dict):
        return len(value) == 0
    return False


def validate_name(value: str) -> str:
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"Name must be between {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters"
        )
    return value


def normalize_email(value: Any) -> Any:
    if isinstance(value, str):
        return sanitize_input(value.lower())
    return value


def validate_email(value: str) -> str:
    """Check email shape and length. Expects an already normalized value."""
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please enter a valid email address")
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError("Email is too long")
    return value


def _is_degenerate_phone(digits: str) -> bool:
    return any(pattern.match(digits) for pattern in DEGENERATE_PHONE_PATTERNS)


def coerce_phone(value: Any) -> Any:
    """Accept numeric JSON values for phone fields."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return sanitize_input(value)


def validate_mobile(value: str) -> str:
    """
    Reduce a phone number to its digits and check it.

    Returns:
        The digits-only canonical form
    """
    digits = re.sub(r"\D", "", value)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        raise ValueError(
            f"Mobile number must be between {PHONE_MIN_DIGITS}-{PHONE_MAX_DIGITS} digits"
        )
    if _is_degenerate_phone(digits):
        raise ValueError("Invalid mobile number format")
    return digits


def validate_strict_mobile(value: str) -> str:
    """Digits-only phone check used where formatting characters are not accepted."""
    if not STRICT_MOBILE_PATTERN.match(value):
        raise ValueError("Please enter a valid mobile number (10-15 digits)")
    if _is_degenerate_phone(value):
        raise ValueError("Invalid mobile number format")
    return value


def length_between(label: str, min_length: int, max_length: int):
    """Build a validator enforcing an inclusive length range."""

    def check(value: str) -> str:
        if not min_length <= len(value) <= max_length:
            raise ValueError(f"{label} must be between {min_length}-{max_length} characters")
        return value

    return check


def max_length(label: str, limit: int):
    """Build a validator enforcing an upper length bound."""

    def check(value: str | None) -> str | None:
        if value is not None and len(value) > limit:
            raise ValueError(f"{label} must be less than {limit} characters")
        return value

    return check


def validate_amount(min_amount: Decimal, max_amount: Decimal):
    """Build a validator for a positive numeric amount within [min, max]."""

    def check(value: Any) -> Decimal:
        if isinstance(value, bool):
            raise ValueError("Please enter a valid amount")
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as e:
            raise ValueError("Please enter a valid amount") from e
        if not amount.is_finite() or amount <= 0:
            raise ValueError("Please enter a valid amount")
        if amount < min_amount:
            raise ValueError(f"Minimum amount is {min_amount:,}")
        if amount > max_amount:
            raise ValueError(f"Maximum amount is {max_amount:,}")
        return amount

    return check


def validate_media_url(value: str) -> str:
    """Accept well-formed http(s) URLs pointing at a media file or a supported platform."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Please enter a valid URL")

    lowered = value.lower()
    has_media_extension = any(ext in lowered for ext in IMAGE_EXTENSIONS + VIDEO_EXTENSIONS)
    has_media_host = any(host in lowered for host in MEDIA_HOSTS)
    if not (has_media_extension or has_media_host):
        raise ValueError(MEDIA_URL_MESSAGE)
    return value


def detect_media_type(url: str) -> str:
    """Classify a media URL as "video", "image" or "unknown"."""
    lowered = url.lower()
    if any(host in lowered for host in VIDEO_HOSTS) or any(
        ext in lowered for ext in VIDEO_EXTENSIONS
    ):
        return "video"
    if any(ext in lowered for ext in IMAGE_EXTENSIONS) or any(
        host in lowered for host in IMAGE_HOSTS
    ):
        return "image"
    return "unknown"


# ============================================
# Annotated field types
# ============================================

FullName = Annotated[str, BeforeValidator(sanitize_input), AfterValidator(validate_name)]
EmailAddress = Annotated[str, BeforeValidator(normalize_email), AfterValidator(validate_email)]
MobileNumber = Annotated[str, BeforeValidator(coerce_phone), AfterValidator(validate_mobile)]
StrictMobileNumber = Annotated[
    str, BeforeValidator(coerce_phone), AfterValidator(validate_strict_mobile)
]
MediaUrl = Annotated[str, BeforeValidator(sanitize_input), AfterValidator(validate_media_url)]


def BoundedText(label: str, min_length: int, max_length_: int):  # noqa: N802
    """Sanitized text with an inclusive length range."""
    return Annotated[
        str,
        BeforeValidator(sanitize_input),
        AfterValidator(length_between(label, min_length, max_length_)),
    ]


def OptionalText(label: str, limit: int):  # noqa: N802
    """Optional sanitized text with an upper bound; blank input becomes None."""
    return Annotated[
        str | None,
        BeforeValidator(lambda v: sanitize_input(v) or None),
        AfterValidator(max_length(label, limit)),
    ]
