"""
Common Log Format parser.

Parses single lines of the web server Common Log Format into typed,
immutable LogEntry records, and exposes the per-field peelers for
callers that drive the parse themselves.
"""

from common_log_format.errors import LogEntryParseError, ParseErrorKind
from common_log_format.models import LogEntry, StatusCode
from common_log_format.parser import parse
from common_log_format.peelers import (
    peel_ip,
    peel_quoted_string,
    peel_size,
    peel_status_code,
    peel_string,
    peel_timestamp,
)

__version__ = "1.0.0"

__all__ = [
    "LogEntry",
    "LogEntryParseError",
    "ParseErrorKind",
    "StatusCode",
    "parse",
    "peel_ip",
    "peel_quoted_string",
    "peel_size",
    "peel_status_code",
    "peel_string",
    "peel_timestamp",
]
