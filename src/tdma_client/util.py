"""URL and validation helpers used when building getter URLs."""

import re
from collections.abc import Iterable
from datetime import datetime
from enum import StrEnum
from typing import TypeVar
from urllib.parse import quote

from tdma_client.exceptions import TDMAValueError

_DATETIME_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})"
    r"(?:T(?P<time>\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)"
    r"(?P<tz>Z|[+-]\d{2}:?\d{2})?)?"
)


def url_encode(value: str) -> str:
    """Percent-encode everything except RFC 3986 unreserved characters."""
    return quote(value, safe="")


def build_encoded_query_str(params: Iterable[tuple[str, str]]) -> str:
    """Build a query string from ordered (key, value) pairs.

    Order is preserved and both keys and values are percent-encoded.
    """
    return "&".join(f"{url_encode(k)}={url_encode(v)}" for k, v in params)


def is_valid_iso8601_datetime(value: str) -> bool:
    """Check for an ISO-8601 date or date/time.

    Accepts ``YYYY-MM-DD`` optionally followed by ``THH:MM[:SS[.fff]]`` and
    a ``Z`` or ``+HH:MM`` offset. The whole string must match.
    """
    match = _DATETIME_RE.fullmatch(value)
    if not match:
        return False

    normalized = match.group("date")
    if match.group("time"):
        normalized += "T" + match.group("time")
        tz = match.group("tz")
        if tz == "Z":
            normalized += "+00:00"
        elif tz:
            normalized += tz if ":" in tz else f"{tz[:3]}:{tz[3:]}"

    try:
        datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return True


def require_non_empty(value: str, field: str) -> str:
    """Return ``value`` or raise if it is not a non-empty string."""
    if not isinstance(value, str) or not value:
        raise TDMAValueError(f"{field} is empty", field=field, value=value)
    return value


def require_iso8601_datetime(value: str, field: str, *, optional: bool = False) -> str:
    """Validate an ISO-8601 date/time; an empty string passes when ``optional``."""
    if isinstance(value, str) and optional and not value:
        return value
    if not isinstance(value, str) or not is_valid_iso8601_datetime(value):
        raise TDMAValueError(f"invalid ISO-8601 date/time: {value}", field=field, value=value)
    return value


E = TypeVar("E", bound=StrEnum)


def require_enum(enum_type: type[E], value: E | str, field: str) -> E:
    """Coerce ``value`` to a member of ``enum_type``."""
    try:
        return enum_type(value)
    except (TypeError, ValueError):
        msg = f"invalid {enum_type.__name__}: {value!r}"
        raise TDMAValueError(msg, field=field, value=value) from None


def require_bool(value: bool, field: str) -> bool:
    """Reject anything that is not an actual ``bool``."""
    if not isinstance(value, bool):
        raise TDMAValueError(f"{field} must be a bool, got {value!r}", field=field, value=value)
    return value


def require_positive_int(value: int, field: str) -> int:
    """Validate an integer ``>= 1``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TDMAValueError(f"{field} must be an int, got {value!r}", field=field, value=value)
    if value < 1:
        raise TDMAValueError(f"{field} < 1", field=field, value=value)
    return value
