"""
Record assembler: turns one CLF line into a LogEntry.
"""

from common_log_format.errors import LogEntryParseError
from common_log_format.models.log_entry import LogEntry
from common_log_format.peelers import (
    peel_ip,
    peel_quoted_string,
    peel_size,
    peel_status_code,
    peel_string,
    peel_timestamp,
)


# Fixed CLF field order: %h %l %u %t "%r" %>s %b
FIELDS = (
    ("host", peel_ip),
    ("ident", peel_string),
    ("authuser", peel_string),
    ("time", peel_timestamp),
    ("request_line", peel_quoted_string),
    ("status_code", peel_status_code),
    ("object_size", peel_size),
)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse(line: str) -> LogEntry:
    """
    Parse a single line of Common Log Format.

    Fields are peeled off in order and the first failure aborts the
    whole line. Anything left over after the object size is ignored.

    Args:
        line: One log line; a trailing newline is allowed

    Returns:
        The parsed LogEntry

    Raises:
        LogEntryParseError: If any field is malformed
    """
    remaining = _strip_line_ending(line)
    values = {}

    for name, peel in FIELDS:
        try:
            values[name], remaining = peel(remaining)
        except LogEntryParseError as e:
            e.field = name
            raise

    return LogEntry(**values)
