"""
Timestamp grammar for the bracketed CLF time field.

Two textual forms are accepted:
    RFC 3339:    1996-12-19T16:39:57-08:00
    native CLF:  19/Dec/1996:16:39:57 -0800

Month names are matched against a fixed English table; the process
locale is never consulted.
"""

import re
from datetime import datetime, timedelta, timezone


RFC3339_PATTERN = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})'             # date
    r'[Tt ]'                                # separator
    r'(\d{2}):(\d{2}):(\d{2})'              # time
    r'(?:\.(\d+))?'                         # optional fraction
    r'([Zz]|[+-]\d{2}:\d{2})$',             # offset
    re.ASCII
)

CLF_PATTERN = re.compile(
    r'^(\d{2})/([A-Za-z]{3})/(\d{4})'       # 19/Dec/1996
    r':(\d{2}):(\d{2}):(\d{2})'             # :16:39:57
    r' ([+-]\d{4})$',                       # -0800
    re.ASCII
)

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}


def _offset(sign: str, hours: str, minutes: str) -> timezone:
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    if int(minutes) > 59 or delta >= timedelta(hours=24):
        raise ValueError(f"UTC offset out of range: {sign}{hours}{minutes}")
    return timezone(-delta if sign == "-" else delta)


def _parse_rfc3339(match: re.Match) -> datetime:
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        tz = _offset(offset[0], offset[1:3], offset[4:6])
    # datetime has microsecond precision, extra digits are truncated
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second), microsecond,
        tzinfo=tz,
    )


def _to_utc(value: datetime) -> datetime:
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as e:
        # Local times within a day of datetime.min or datetime.max
        raise ValueError(f"timestamp out of range in UTC: {value.isoformat()}") from e


def _parse_clf(match: re.Match) -> datetime:
    day, month_name, year, hour, minute, second, offset = match.groups()
    month = MONTHS.get(month_name.lower())
    if month is None:
        raise ValueError(f"unknown month abbreviation: {month_name!r}")
    return datetime(
        int(year), month, int(day),
        int(hour), int(minute), int(second),
        tzinfo=_offset(offset[0], offset[1:3], offset[3:5]),
    )


def parse_timestamp(text: str) -> datetime:
    """
    Parse a CLF timestamp and normalize it to UTC.

    Args:
        text: Content found between the brackets

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If the text matches neither form or is out of range
    """
    match = RFC3339_PATTERN.match(text)
    if match:
        return _to_utc(_parse_rfc3339(match))

    match = CLF_PATTERN.match(text)
    if match:
        return _to_utc(_parse_clf(match))

    raise ValueError(f"unrecognized timestamp: {text!r}")
