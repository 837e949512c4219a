"""
Tests for batch parsing.
"""

import logging

import pytest

from common_log_format.batch import BatchLimitExceeded, CommonLogParser
from common_log_format.errors import LogEntryParseError, ParseErrorKind


GOOD = '127.0.0.1 - frank [1996-12-19T16:39:57-08:00] "GET /apache_pb.gif HTTP/1.0" 200 2326'
BAD_SIZE = '127.0.0.1 - frank [1996-12-19T16:39:57-08:00] "GET /apache_pb.gif HTTP/1.0" 200 big'
BAD_IP = 'example.org - - [15/Jan/2024:04:15:22 +0000] "GET / HTTP/1.1" 200 10'


class TestCommonLogParser:
    """Tests for CommonLogParser."""

    def setup_method(self):
        self.parser = CommonLogParser(skip_invalid_lines=True, max_lines=100)

    def test_parse_line(self):
        entry = self.parser.parse_line(GOOD)
        assert entry.authuser == "frank"

    def test_parse_content(self):
        result = self.parser.parse_content("\n".join([GOOD, GOOD]))

        assert result.parsed_count == 2
        assert result.error_count == 0
        assert result.total_lines == 2

    def test_blank_lines_ignored(self):
        result = self.parser.parse_content(f"\n{GOOD}\n   \n{GOOD}\n")

        assert result.parsed_count == 2
        assert result.total_lines == 2

    def test_bad_lines_recorded(self):
        content = "\n".join([GOOD, BAD_SIZE, "", BAD_IP])
        result = self.parser.parse_content(content)

        assert result.parsed_count == 1
        assert result.error_count == 2

        first, second = result.errors
        assert first.line_number == 2
        assert first.kind == ParseErrorKind.SIZE_PARSE
        assert first.field == "object_size"
        assert first.raw_line == BAD_SIZE
        assert second.line_number == 4
        assert second.kind == ParseErrorKind.IP_ADDR_PARSE

    def test_out_of_range_timestamp_skipped(self):
        bad_time = '127.0.0.1 - - [9999-12-31T23:59:59-01:00] "GET /" 200 1'
        result = self.parser.parse_content("\n".join([bad_time, GOOD]))

        assert result.parsed_count == 1
        assert result.errors[0].kind == ParseErrorKind.DATE_TIME_PARSE

    def test_bad_lines_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="common_log_format.batch"):
            self.parser.parse_content(BAD_SIZE)

        assert "Skipping line 1" in caplog.text
        assert "size_parse" in caplog.text

    def test_strict_mode_raises(self):
        parser = CommonLogParser(skip_invalid_lines=False, max_lines=100)

        with pytest.raises(LogEntryParseError) as exc_info:
            parser.parse_content("\n".join([GOOD, BAD_SIZE]))

        assert exc_info.value.kind == ParseErrorKind.SIZE_PARSE

    def test_line_limit(self):
        parser = CommonLogParser(skip_invalid_lines=True, max_lines=2)

        with pytest.raises(BatchLimitExceeded):
            parser.parse_content("\n".join([GOOD] * 3))

    def test_iter_file(self, tmp_path):
        log_file = tmp_path / "access.log"
        log_file.write_text(f"{GOOD}\n{BAD_IP}\n\n{GOOD}\n", encoding="utf-8")

        entries = list(self.parser.iter_file(log_file))

        assert len(entries) == 2
        assert all(e.status_code == 200 for e in entries)

    def test_iter_file_strict(self, tmp_path):
        log_file = tmp_path / "access.log"
        log_file.write_text(f"{GOOD}\n{BAD_IP}\n", encoding="utf-8")
        parser = CommonLogParser(skip_invalid_lines=False)

        with pytest.raises(LogEntryParseError):
            list(parser.iter_file(log_file))

    def test_defaults_from_settings(self, monkeypatch):
        from common_log_format.config import get_settings

        monkeypatch.setenv("CLF_SKIP_INVALID_LINES", "false")
        monkeypatch.setenv("CLF_MAX_BATCH_LINES", "5")
        get_settings.cache_clear()
        try:
            parser = CommonLogParser()
        finally:
            get_settings.cache_clear()

        assert parser.skip_invalid_lines is False
        assert parser.max_lines == 5
