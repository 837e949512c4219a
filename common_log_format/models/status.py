"""
HTTP status code type used by LogEntry.
"""

import re
from http import HTTPStatus
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


STATUS_CODE_MIN = 100
STATUS_CODE_MAX = 599

_STATUS_TEXT = re.compile(r"[0-9]{3}")


class StatusCode(int):
    """
    An HTTP status code in the range 100-599.

    Behaves as a plain ``int`` everywhere, and serializes as one.
    """

    def __new__(cls, value: int):
        code = super().__new__(cls, value)
        if not STATUS_CODE_MIN <= code <= STATUS_CODE_MAX:
            raise ValueError(f"invalid HTTP status code: {value!r}")
        return code

    @classmethod
    def parse(cls, text: str) -> "StatusCode":
        """Parse exactly three ASCII digits, e.g. ``"404"``."""
        if not _STATUS_TEXT.fullmatch(text):
            raise ValueError(f"invalid HTTP status code: {text!r}")
        return cls(int(text))

    @property
    def category(self) -> str:
        """Categorize HTTP status code."""
        if self >= 500:
            return "server_error"
        elif self >= 400:
            return "client_error"
        elif self >= 300:
            return "redirect"
        elif self >= 200:
            return "success"
        else:
            return "informational"

    @property
    def phrase(self) -> Optional[str]:
        """Registered reason phrase, or None for unregistered codes."""
        try:
            return HTTPStatus(int(self)).phrase
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"StatusCode({int(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(strict=False),
            serialization=core_schema.plain_serializer_function_ser_schema(
                int, return_schema=core_schema.int_schema(), when_used="always"
            ),
        )
