"""
=============================================================================
HTTP DATES (RFC 1123)
=============================================================================

HTTP uses one fixed textual timestamp format for Date, Expires,
Last-Modified and friends:

    Thu, 02 May 2013 13:45:07 GMT
    ─┬─  ─┬ ─┬─ ─┬── ───┬──── ─┬─
     │    │  │   │      │      └── Always the literal "GMT" (= UTC)
     │    │  │   │      └───────── 24-hour time, zero padded
     │    │  │   └──────────────── Four-digit year
     │    │  └──────────────────── Three-letter English month
     │    └─────────────────────── Zero-padded day of month
     └──────────────────────────── Three-letter English weekday

The day and month names are always English. We use our own name tables
rather than strftime("%a"/"%b"), whose output depends on the process
locale.

=============================================================================
"""

import logging
import re
from datetime import datetime, timezone
from typing import Optional, Union

from .errors import FormatError

logger = logging.getLogger(__name__)


# datetime.weekday(): 0 = Monday
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_RFC1123_PATTERN = re.compile(
    r"(?P<dow>[A-Z][a-z]{2}), "
    r"(?P<day>\d{2}) (?P<month>[A-Z][a-z]{2}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) GMT",
    re.ASCII,
)

Timestamp = Union[datetime, int, float]


def _to_utc(timestamp: Optional[Timestamp]) -> datetime:
    if timestamp is None:
        return datetime.now(timezone.utc)

    if isinstance(timestamp, datetime):
        # Naive datetimes are taken to be UTC already
        if timestamp.tzinfo is None:
            return timestamp
        return timestamp.astimezone(timezone.utc)

    # bool is an int subclass but never a meaningful timestamp
    if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool):
        return datetime.fromtimestamp(timestamp, timezone.utc)

    raise TypeError(
        f"Expected datetime or POSIX timestamp, got {type(timestamp).__name__}"
    )


def format_rfc1123(timestamp: Optional[Timestamp] = None) -> str:
    """
    Format a timestamp as an RFC 1123 HTTP-date.

    Args:
        timestamp: A datetime (naive = UTC, aware = converted to UTC),
            a POSIX timestamp, or None for the current time.

    Returns:
        e.g. "Thu, 02 May 2013 13:45:07 GMT"

    Raises:
        TypeError: If `timestamp` is of any other type.
    """
    dt = _to_utc(timestamp)
    return (
        f"{DAY_NAMES[dt.weekday()]}, "
        f"{dt.day:02d} {MONTH_NAMES[dt.month - 1]} {dt.year:04d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


def now_rfc1123() -> str:
    """Current time as an RFC 1123 HTTP-date."""
    return format_rfc1123()


def parse_rfc1123(text: str) -> datetime:
    """
    Parse an RFC 1123 HTTP-date into an aware UTC datetime.

    Only the exact format produced by format_rfc1123() is accepted. The
    obsolete RFC 850 and asctime() forms are not.

    Raises:
        FormatError: If `text` is not a valid RFC 1123 date, or the
            weekday does not match the date.
    """
    match = _RFC1123_PATTERN.fullmatch(text)
    if match is None:
        logger.debug(f"Unparseable HTTP-date {text!r}")
        raise FormatError(f"Not an RFC 1123 date: {text!r}", field=text)

    if match["month"] not in MONTH_NAMES or match["dow"] not in DAY_NAMES:
        logger.debug(f"Unknown day or month name in {text!r}")
        raise FormatError(f"Unknown day or month name in {text!r}", field=text)

    try:
        dt = datetime(
            int(match["year"]),
            MONTH_NAMES.index(match["month"]) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone.utc,
        )
    except ValueError as e:
        logger.debug(f"Out-of-range field in HTTP-date {text!r}: {e}")
        raise FormatError(f"Invalid date {text!r}: {e}", field=text) from e

    if DAY_NAMES[dt.weekday()] != match["dow"]:
        raise FormatError(
            f"Weekday {match['dow']!r} does not match date in {text!r}",
            field=text,
        )

    return dt


# Legacy alias
RFC1123_datetime = format_rfc1123
