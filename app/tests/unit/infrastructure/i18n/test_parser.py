"""Tests for infrastructure.i18n.parser module."""

import io

import pytest

from infrastructure.i18n.exceptions import MalformedLocaleFileError
from infrastructure.i18n.parser import parse_lines, parse_stream


class TestParseLines:
    """Tests for parse_lines()."""

    def test_comments_and_blank_lines_are_skipped(self):
        """Comment and blank lines contribute no entries."""
        table = parse_lines(["a = 1", "# comment", "", "b = two words"])
        assert table == {"a": "1", "b": "two words"}

    def test_whitespace_only_and_indented_comment(self):
        """Whitespace-only lines and indented comments are ignored."""
        table = parse_lines(["   \t", "   # indented comment", "key=value"])
        assert table == {"key": "value"}

    def test_splits_on_first_separator(self):
        """Only the first '=' separates key and value."""
        table = parse_lines(["equation = 1 + 1 = 2"])
        assert table == {"equation": "1 + 1 = 2"}

    def test_trims_key_and_value(self):
        """Surrounding whitespace and newlines are removed."""
        table = parse_lines(["  spaced key   =   spaced value  \n"])
        assert table == {"spaced key": "spaced value"}

    def test_empty_value(self):
        """A key with nothing after '=' maps to an empty string."""
        assert parse_lines(["empty ="]) == {"empty": ""}

    def test_placeholders_are_kept_verbatim(self):
        """Templates are stored without formatting."""
        assert parse_lines(["hello = Hello {0}"]) == {"hello": "Hello {0}"}

    def test_missing_separator_raises(self):
        """A data line without '=' fails the whole parse."""
        with pytest.raises(MalformedLocaleFileError) as exc_info:
            parse_lines(["a = 1", "no separator here"], source="Locales.en.txt")

        assert exc_info.value.line_number == 2
        assert exc_info.value.source == "Locales.en.txt"
        assert "Locales.en.txt:2" in str(exc_info.value)

    def test_duplicate_key_raises(self):
        """A key defined twice in one file is an error."""
        with pytest.raises(MalformedLocaleFileError) as exc_info:
            parse_lines(["a = 1", "a = 2"])

        assert exc_info.value.line_number == 2
        assert "duplicate key 'a'" in str(exc_info.value)

    def test_malformed_error_is_value_error(self):
        """MalformedLocaleFileError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_lines(["broken"])


class TestParseStream:
    """Tests for parse_stream()."""

    def test_decodes_utf8(self):
        """UTF-8 content is decoded."""
        stream = io.BytesIO("greeting = ¡Hola!\n".encode("utf-8"))
        assert parse_stream(stream) == {"greeting": "¡Hola!"}

    def test_strips_byte_order_mark(self):
        """A UTF-8 BOM does not end up in the first key."""
        stream = io.BytesIO("greeting = Hi\n".encode("utf-8-sig"))
        assert parse_stream(stream) == {"greeting": "Hi"}

    def test_windows_line_endings(self):
        """CRLF line endings are handled."""
        stream = io.BytesIO(b"a = 1\r\nb = 2\r\n")
        assert parse_stream(stream) == {"a": "1", "b": "2"}

    def test_stream_left_open(self):
        """parse_stream() does not close the caller's stream."""
        stream = io.BytesIO(b"a = 1\n")
        parse_stream(stream)
        assert not stream.closed

    def test_invalid_utf8_raises_malformed(self):
        """Undecodable bytes are reported as a malformed file."""
        stream = io.BytesIO(b"a = \xff\xfe\xfa\n")
        with pytest.raises(MalformedLocaleFileError):
            parse_stream(stream, source="Locales.en.txt")
