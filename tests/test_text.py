"""Tests for line-ending normalization and line splitting."""

from tome.text import decode_bytes, normalize_eol, to_lines


class TestNormalizeEol:
    """Tests for normalize_eol function."""

    def test_crlf_collapsed(self) -> None:
        assert normalize_eol("a\r\nb\r\nc") == "a\nb\nc"

    def test_lf_unchanged(self) -> None:
        assert normalize_eol("a\nb\n") == "a\nb\n"

    def test_lone_cr_is_kept(self) -> None:
        """Old Mac line endings are not rewritten."""
        assert normalize_eol("a\rb\r\nc") == "a\rb\nc"

    def test_cr_cr_lf(self) -> None:
        assert normalize_eol("a\r\r\nb") == "a\r\nb"

    def test_empty(self) -> None:
        assert normalize_eol("") == ""


class TestToLines:
    """Tests for to_lines function."""

    def test_mixed_line_endings(self) -> None:
        assert to_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_no_trailing_empty_line(self) -> None:
        assert to_lines("a\nb\n") == ["a", "b"]

    def test_blank_lines_kept(self) -> None:
        assert to_lines("a\n\nb") == ["a", "", "b"]

    def test_single_newline_is_one_empty_line(self) -> None:
        assert to_lines("\n") == [""]

    def test_empty_text_has_no_lines(self) -> None:
        assert to_lines("") == []

    def test_lone_cr_is_not_a_line_break(self) -> None:
        assert to_lines("a\rb\nc") == ["a\rb", "c"]

    def test_other_unicode_breaks_are_not_line_breaks(self) -> None:
        """Only LF splits lines, unlike str.splitlines()."""
        assert to_lines("a\x0bb c") == ["a\x0bb c"]


class TestDecodeBytes:
    """Tests for decode_bytes function."""

    def test_utf8(self) -> None:
        assert decode_bytes("héllo".encode("utf-8")) == "héllo"

    def test_invalid_bytes_replaced(self) -> None:
        assert decode_bytes(b"\xffa") == "�a"
