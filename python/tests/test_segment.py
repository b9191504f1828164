# this_file: python/tests/test_segment.py

"""Tests for UTF-8 codepoint and line segmentation."""

import types

import pytest

from autofit.segment import (
    codepoint_count,
    is_lead_byte,
    iter_codepoints,
    normalize_newlines,
    split_by_codepoint,
    split_by_line,
)


class TestLeadByte:
    """Test the continuation-byte rule."""

    @pytest.mark.parametrize("byte", [0x00, 0x41, 0x7F, 0xC3, 0xE3, 0xF0, 0xFF])
    def test_lead_bytes(self, byte):
        """Bytes outside 0b10xxxxxx start a codepoint."""
        assert is_lead_byte(byte)

    @pytest.mark.parametrize("byte", [0x80, 0x81, 0xA0, 0xBF])
    def test_continuation_bytes(self, byte):
        """Bytes of the form 0b10xxxxxx continue one."""
        assert not is_lead_byte(byte)


class TestSplitByCodepoint:
    """Test splitting into one unit per codepoint."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abあいう漢字", 7),
            ("𠮷", 1),
            ("😃😃", 2),
            ("テスト森鷗外", 6),
            ("", 0),
        ],
    )
    def test_counts(self, text, expected):
        """Unit count equals codepoint count for str and bytes input."""
        assert len(split_by_codepoint(text)) == expected
        assert len(split_by_codepoint(text.encode("utf-8"))) == expected
        assert codepoint_count(text) == expected
        assert codepoint_count(text.encode("utf-8")) == expected

    @pytest.mark.parametrize("text", ["plain ascii", "abあいう漢字", "𠮷野家", "😃x😃", "Ωмир"])
    def test_concatenation_round_trips(self, text):
        """Joining the units gives back the input."""
        data = text.encode("utf-8")
        assert b"".join(split_by_codepoint(data)) == data
        assert "".join(split_by_codepoint(text)) == text

    def test_units_hold_whole_encodings(self):
        """Each bytes unit holds a full multi-byte encoding."""
        units = split_by_codepoint("aあ😃".encode("utf-8"))
        assert units == [b"a", "あ".encode("utf-8"), "😃".encode("utf-8")]
        assert [len(unit) for unit in units] == [1, 3, 4]

    def test_str_units_are_codepoints(self):
        """Astral-plane characters stay whole in str input."""
        assert split_by_codepoint("a𠮷b") == ["a", "𠮷", "b"]

    def test_malformed_bytes_are_grouped_not_rejected(self):
        """Stray continuation bytes stick to the preceding unit."""
        data = b"\x80\x80a\xe3\x81z"
        units = split_by_codepoint(data)
        assert units == [b"\x80\x80", b"a", b"\xe3\x81", b"z"]
        assert b"".join(units) == data

    def test_iteration_is_lazy_and_restartable(self):
        """The iterator is a generator and calling again restarts it."""
        data = "漢字".encode("utf-8")
        first = iter_codepoints(data)
        assert isinstance(first, types.GeneratorType)
        assert list(first) == list(iter_codepoints(data))

    def test_rejects_non_text(self):
        """Input other than str or bytes raises TypeError."""
        with pytest.raises(TypeError):
            split_by_codepoint(42)


class TestSplitByLine:
    """Test line normalization and splitting."""

    def test_mixed_line_breaks(self):
        """CRLF, CR and LF all end a line."""
        assert split_by_line("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_empty_line_preserved(self):
        """Consecutive breaks yield an empty line."""
        assert split_by_line("a\n\nb") == ["a", "", "b"]

    def test_trailing_newline_gives_trailing_empty_line(self):
        """A final newline leaves an empty last line."""
        assert split_by_line("a\n") == ["a", ""]

    def test_empty_input(self):
        """Empty input is a single empty line."""
        assert split_by_line("") == [""]

    def test_crlf_collapsed_before_lone_cr(self):
        """``\\r\\r\\n`` is one lone CR followed by one CRLF: two breaks."""
        assert split_by_line("a\r\r\nb") == ["a", "", "b"]

    def test_bytes_input(self):
        """Bytes are split into bytes lines."""
        assert split_by_line("行1\r\n行2".encode("utf-8")) == [
            "行1".encode("utf-8"),
            "行2".encode("utf-8"),
        ]

    @pytest.mark.parametrize("text", ["a\r\nb\rc\nd", "\r\n\r\n", "x\ry", "none"])
    def test_normalization_is_idempotent(self, text):
        """Normalizing twice changes nothing and leaves no CR."""
        once = normalize_newlines(text)
        assert normalize_newlines(once) == once
        assert "\r" not in once
