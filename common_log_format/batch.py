"""
Batch parsing of CLF content: many lines in, entries and errors out.

The line parser itself has no error policy; this layer decides whether
a bad line is skipped (and logged) or aborts the whole batch.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from pydantic import BaseModel, Field

from common_log_format.config import get_settings
from common_log_format.errors import LogEntryParseError, ParseErrorKind
from common_log_format.models.log_entry import LogEntry
from common_log_format.parser import parse


logger = logging.getLogger(__name__)


class BatchLimitExceeded(ValueError):
    """Raised when content has more lines than the configured maximum."""


class LineError(BaseModel):
    """A line that failed to parse."""

    line_number: int = Field(description="1-based line number in the content")
    kind: ParseErrorKind
    field: Optional[str] = None
    message: str
    raw_line: str


class BatchResult(BaseModel):
    """Outcome of parsing a block of log content."""

    entries: List[LogEntry] = Field(default_factory=list)
    errors: List[LineError] = Field(default_factory=list)
    total_lines: int = 0

    @property
    def parsed_count(self) -> int:
        return len(self.entries)

    @property
    def error_count(self) -> int:
        return len(self.errors)


class CommonLogParser:
    """
    Parses CLF lines in bulk.

    Blank lines are ignored. Malformed lines are either recorded and
    skipped or re-raised, depending on ``skip_invalid_lines``.
    """

    def __init__(
        self,
        skip_invalid_lines: Optional[bool] = None,
        max_lines: Optional[int] = None,
    ):
        """
        Initialize the batch parser.

        Args:
            skip_invalid_lines: Skip bad lines instead of raising. If None, uses settings.
            max_lines: Maximum non-blank lines per batch. If None, uses settings.
        """
        settings = get_settings()
        if skip_invalid_lines is None:
            skip_invalid_lines = settings.skip_invalid_lines
        if max_lines is None:
            max_lines = settings.max_batch_lines
        self.skip_invalid_lines = skip_invalid_lines
        self.max_lines = max_lines

    def parse_line(self, line: str) -> LogEntry:
        """Parse a single line, raising LogEntryParseError on failure."""
        return parse(line)

    def parse_content(self, content: str) -> BatchResult:
        """
        Parse multiple log lines from a content string.

        Args:
            content: Multi-line string of CLF entries

        Returns:
            BatchResult with parsed entries and per-line errors

        Raises:
            BatchLimitExceeded: If there are more than max_lines lines
            LogEntryParseError: On the first bad line, when not skipping
        """
        result = BatchResult()

        for line_number, line in enumerate(content.splitlines(), start=1):
            if not line.strip():
                continue

            result.total_lines += 1
            if result.total_lines > self.max_lines:
                raise BatchLimitExceeded(
                    f"batch exceeds {self.max_lines} lines"
                )

            try:
                result.entries.append(parse(line))
            except LogEntryParseError as e:
                self._skip_or_raise(e, line_number)
                result.errors.append(LineError(
                    line_number=line_number,
                    kind=e.kind,
                    field=e.field,
                    message=str(e),
                    raw_line=line,
                ))

        logger.debug(
            "Parsed %d of %d lines (%d errors)",
            result.parsed_count, result.total_lines, result.error_count,
        )
        return result

    def iter_file(self, path: Union[str, Path]) -> Iterator[LogEntry]:
        """
        Yield an entry for each good line of a UTF-8 log file.

        Bad lines follow the same skip policy as ``parse_content``.
        """
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    entry = parse(line)
                except LogEntryParseError as e:
                    self._skip_or_raise(e, line_number)
                    continue
                yield entry

    def _skip_or_raise(self, error: LogEntryParseError, line_number: int) -> None:
        if not self.skip_invalid_lines:
            raise error
        logger.warning(
            "Skipping line %d: %s (field %s)",
            line_number, error.kind.value, error.field,
        )
