"""
Parsed Common Log Format record.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, NonNegativeInt, field_validator

from common_log_format.models.status import StatusCode, STATUS_CODE_MAX, STATUS_CODE_MIN


class LogEntry(BaseModel):
    """
    A single line in Common Log Format.

    Any field may be missing, which the log line marks with a dash (``-``)
    and this model represents as ``None``.

    Example:
        127.0.0.1 user-identifier frank [1996-12-19T16:39:57-08:00] "GET /apache_pb.gif HTTP/1.0" 200 2326

    Serializing with ``model_dump_json()`` and reading back with
    ``model_validate_json()`` yields an equal entry.
    """

    host: Optional[IPvAnyAddress] = Field(
        default=None,
        description="Remote client address"
    )
    ident: Optional[str] = Field(
        default=None,
        description="RFC 1413 identity of the client"
    )
    authuser: Optional[str] = Field(
        default=None,
        description="Authenticated user name"
    )
    time: Optional[datetime] = Field(
        default=None,
        description="Time the request was received, in UTC"
    )
    request_line: Optional[str] = Field(
        default=None,
        description="Request line from the client, e.g. 'GET / HTTP/1.0'"
    )
    status_code: Optional[StatusCode] = Field(
        default=None,
        description="HTTP status code returned to the client"
    )
    object_size: Optional[NonNegativeInt] = Field(
        default=None,
        description="Size of the object returned, in bytes"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "host": "127.0.0.1",
                "ident": "user-identifier",
                "authuser": "frank",
                "time": "1996-12-20T00:39:57Z",
                "request_line": "GET /apache_pb.gif HTTP/1.0",
                "status_code": 200,
                "object_size": 2326,
            }
        }
    )

    @field_validator("time")
    @classmethod
    def _normalize_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_validator("status_code", mode="before")
    @classmethod
    def _drop_invalid_status(cls, value: Any) -> Any:
        # Out-of-range codes from interchange data become missing, not errors
        if isinstance(value, int) and not isinstance(value, bool):
            if not STATUS_CODE_MIN <= value <= STATUS_CODE_MAX:
                return None
        return value

    @classmethod
    def from_line(cls, line: str) -> "LogEntry":
        """Parse a CLF line. See ``common_log_format.parser.parse``."""
        # Import here to avoid circular imports
        from common_log_format.parser import parse

        return parse(line)
