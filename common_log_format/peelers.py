"""
Field peelers for Common Log Format lines.

Each peeler consumes one field from the start of ``line`` and returns
``(value, remainder)``. The value is None when the field is the ``-``
placeholder. The remainder has its leading whitespace stripped, so
peelers can be chained directly:

    host, rest = peel_ip(line)
    ident, rest = peel_string(rest)
"""

import ipaddress
import re
from datetime import datetime
from typing import Optional, Tuple, Union

from common_log_format.errors import LogEntryParseError, ParseErrorKind
from common_log_format.models.status import StatusCode
from common_log_format.timestamps import parse_timestamp


IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

ABSENT = "-"

_WHITESPACE = re.compile(r"\s")
_DIGITS = re.compile(r"[0-9]+")


def _split_token(line: str) -> Tuple[str, str]:
    """Split off everything up to the first whitespace character."""
    if not line:
        raise LogEntryParseError(ParseErrorKind.FIELD_NOT_FOUND)
    match = _WHITESPACE.search(line)
    end = match.start() if match else len(line)
    return line[:end], line[end:].lstrip()


def peel_ip(line: str) -> Tuple[Optional[IPAddress], str]:
    """Take an IPv4 or IPv6 address from the start of ``line``."""
    token, rest = _split_token(line)
    if token.startswith(ABSENT):
        return None, rest
    try:
        address = ipaddress.ip_address(token)
    except ValueError as e:
        raise LogEntryParseError(ParseErrorKind.IP_ADDR_PARSE, text=token) from e
    return address, rest


def peel_string(line: str) -> Tuple[Optional[str], str]:
    """Take a whitespace-delimited token from the start of ``line``."""
    token, rest = _split_token(line)
    if token.startswith(ABSENT):
        return None, rest
    return token, rest


def peel_quoted_string(line: str) -> Tuple[Optional[str], str]:
    """
    Take a double-quoted string from the start of ``line``.

    The string runs to the next double quote; no escapes are recognised.
    A bare ``-`` in place of the opening quote marks the field as absent.
    """
    if line.startswith(ABSENT):
        return None, line[1:].lstrip()
    if not line.startswith('"'):
        raise LogEntryParseError(ParseErrorKind.FIELD_NOT_FOUND, text=line[:1])

    end = line.find('"', 1)
    if end == -1:
        raise LogEntryParseError(ParseErrorKind.FIELD_NOT_FOUND, text=line)
    return line[1:end], line[end + 1:].lstrip()


def peel_timestamp(line: str) -> Tuple[Optional[datetime], str]:
    """
    Take a bracketed timestamp from the start of ``line``.

    Returns:
        The instant converted to UTC (or None) and the remainder
    """
    if line.startswith(ABSENT):
        return None, line[1:].lstrip()
    if not line.startswith("["):
        raise LogEntryParseError(ParseErrorKind.FIELD_NOT_FOUND, text=line[:1])

    end = line.find("]")
    if end == -1:
        raise LogEntryParseError(ParseErrorKind.FIELD_NOT_FOUND, text=line)

    content = line[1:end]
    try:
        time = parse_timestamp(content)
    except ValueError as e:
        raise LogEntryParseError(ParseErrorKind.DATE_TIME_PARSE, text=content) from e
    return time, line[end + 1:].lstrip()


def peel_status_code(line: str) -> Tuple[Optional[StatusCode], str]:
    """Take a three-digit HTTP status code from the start of ``line``."""
    token, rest = _split_token(line)
    if token.startswith(ABSENT):
        return None, rest
    try:
        status_code = StatusCode.parse(token)
    except ValueError as e:
        raise LogEntryParseError(ParseErrorKind.STATUS_CODE_PARSE, text=token) from e
    return status_code, rest


def peel_size(line: str) -> Tuple[Optional[int], str]:
    """Take a non-negative byte count from the start of ``line``."""
    token, rest = _split_token(line)
    if token.startswith(ABSENT):
        return None, rest
    if not _DIGITS.fullmatch(token):
        cause = ValueError(f"invalid digit found in size: {token!r}")
        raise LogEntryParseError(ParseErrorKind.SIZE_PARSE, text=token) from cause
    return int(token), rest
