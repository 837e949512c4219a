"""
Error taxonomy for Common Log Format parsing.
"""

from enum import Enum
from typing import Optional


class ParseErrorKind(str, Enum):
    """Closed set of reasons a CLF line can fail to parse."""
    FIELD_NOT_FOUND = "field_not_found"
    IP_ADDR_PARSE = "ip_addr_parse"
    DATE_TIME_PARSE = "date_time_parse"
    STATUS_CODE_PARSE = "status_code_parse"
    SIZE_PARSE = "size_parse"


class LogEntryParseError(ValueError):
    """
    Raised when a log line (or a single field of it) cannot be parsed.

    The low-level failure, if any, is chained as ``__cause__`` and is
    also available as ``cause``. ``FIELD_NOT_FOUND`` never has one.

    Attributes:
        kind: Which field grammar was violated
        field: CLF field name, filled in by the record assembler
        text: The offending fragment of input, when known
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        field: Optional[str] = None,
        text: Optional[str] = None,
    ):
        self.kind = kind
        self.field = field
        self.text = text
        super().__init__(kind, field, text)

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def __str__(self) -> str:
        message = "error parsing log entry: " + self.kind.value
        if self.field:
            message += f" (field {self.field!r})"
        if self.text is not None:
            message += f": {self.text!r}"
        return message
