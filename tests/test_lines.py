"""
Tests for line splitting and file reading.
"""

from sii_catalog.parse.lines import decode_bytes, read_lines, split_lines


class TestSplitLines:
    """Tests for line-ending detection."""

    def test_split_lf(self):
        """Test splitting LF-only text."""
        assert split_lines("a\nb\nc") == ["a", "b", "c"]

    def test_split_crlf(self):
        """Test splitting CRLF text leaves no carriage returns behind."""
        lines = split_lines("a\r\nb\r\nc")

        assert lines == ["a", "b", "c"]
        assert not any("\r" in line for line in lines)

    def test_crlf_wins_over_bare_lf(self):
        """Test that CRLF is used when present, even with stray bare LFs."""
        lines = split_lines("a\r\nb\nc\r\nd")

        # The bare LF between b and c is not a split point
        assert lines == ["a", "b\nc", "d"]

    def test_trailing_terminator_keeps_empty_segment(self):
        """Test that a trailing newline yields a final empty line."""
        assert split_lines("a\nb\n") == ["a", "b", ""]

    def test_no_terminator_yields_no_lines(self):
        """Test single-line text without a terminator."""
        assert split_lines('name: "Foo"') == []

    def test_empty_text(self):
        """Test empty text."""
        assert split_lines("") == []

    def test_bare_cr_is_not_a_terminator(self):
        """Test that old Mac-style CR endings are not recognized."""
        assert split_lines("a\rb\rc") == []


class TestDecodeBytes:
    """Tests for lossy decoding."""

    def test_decode_utf8(self):
        """Test plain UTF-8 input."""
        assert decode_bytes("Mercedes-Benz Actros für".encode("utf-8")) == "Mercedes-Benz Actros für"

    def test_decode_invalid_bytes_replaced(self):
        """Test that invalid bytes become replacement characters."""
        text = decode_bytes(b'name: "Scania \xff"\n')

        assert "\ufffd" in text
        assert text.startswith('name: "Scania ')

    def test_decode_strips_bom(self):
        """Test that a UTF-8 BOM is dropped."""
        assert decode_bytes(b"\xef\xbb\xbfSiiNunit\n") == "SiiNunit\n"


class TestReadLines:
    """Tests for reading definition files."""

    def test_read_lines_crlf_file(self, tmp_path):
        """Test reading a CRLF file."""
        path = tmp_path / "engine.sii"
        path.write_bytes(b"SiiNunit\r\n{\r\n}\r\n")

        assert read_lines(path) == ["SiiNunit", "{", "}", ""]

    def test_read_lines_invalid_bytes(self, tmp_path):
        """Test that undecodable bytes do not abort reading."""
        path = tmp_path / "engine.sii"
        path.write_bytes(b'name: "\xe9\xe9"\ntorque: 2500\n')

        lines = read_lines(path)

        assert len(lines) == 3
        assert lines[1] == "torque: 2500"

    def test_read_lines_missing_file(self, tmp_path):
        """Test that a missing file yields no lines."""
        assert read_lines(tmp_path / "missing.sii") == []

    def test_read_lines_directory(self, tmp_path):
        """Test that a directory yields no lines."""
        assert read_lines(tmp_path) == []

    def test_read_lines_single_line_file(self, tmp_path):
        """Test that a file without terminators yields no lines."""
        path = tmp_path / "engine.sii"
        path.write_text("torque: 2500")

        assert read_lines(path) == []
