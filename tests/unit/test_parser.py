# =============================================================================
# Unit Tests: Tabular Parser
# =============================================================================

import pytest

from csv_to_json.errors import RowShapeMismatch
from csv_to_json.parser import parse, split_lines


class TestSplitLines:
    """Tests for line splitting."""

    def test_mixed_line_endings(self):
        """CRLF and LF split identically."""
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_lone_carriage_return_is_not_a_break(self):
        """A bare CR stays inside the line."""
        assert split_lines("a\rb") == ["a\rb"]


class TestParse:
    """Tests for parse."""

    def test_example_document(self):
        """Parse header and two rows."""
        header, records = parse("id,city\n1,Bern\n2,Zurich\n")
        assert header == ["id", "city"]
        assert records == [["1", "Bern"], ["2", "Zurich"]]

    def test_crlf_matches_lf(self):
        """Mixed line endings parse like uniform ones."""
        assert parse("id,city\r\n1,Bern\n2,Zurich\r\n") == parse("id,city\n1,Bern\n2,Zurich\n")

    def test_header_only(self):
        """A header with no data yields no records."""
        header, records = parse("name,age\n")
        assert header == ["name", "age"]
        assert records == []

    def test_empty_text(self):
        """Empty input has a single empty header name and no records."""
        assert parse("") == ([""], [])

    def test_header_names_always_trimmed(self):
        """Header names are trimmed even when values are not."""
        header, records = parse(" name , age \n Alice , 30 ", trim_values=False)
        assert header == ["name", "age"]
        assert records == [[" Alice ", " 30 "]]

    def test_values_trimmed_when_enabled(self):
        """Values are trimmed in trimming mode."""
        _, records = parse("name,age\n Alice , 30 ", trim_values=True)
        assert records == [["Alice", "30"]]

    def test_blank_lines_skipped(self):
        """Empty and whitespace-only lines produce no records."""
        _, records = parse("a,b\n\n1,2\n   \n\t\n3,4\n\n")
        assert records == [["1", "2"], ["3", "4"]]

    def test_custom_delimiter(self):
        """Semicolon delimited input."""
        header, records = parse("a;b\n1;2", delimiter=";")
        assert header == ["a", "b"]
        assert records == [["1", "2"]]

    def test_multi_character_delimiter(self):
        """Delimiter is a literal substring."""
        _, records = parse("a||b\n1||2", delimiter="||")
        assert records == [["1", "2"]]

    def test_quotes_are_not_special(self):
        """Quoted delimiters still split."""
        with pytest.raises(RowShapeMismatch):
            parse('a,b\n"x,y",2')

    def test_duplicate_header_names_kept(self):
        """Repeated names are not deduplicated."""
        header, _ = parse("a,a\n1,2")
        assert header == ["a", "a"]

    def test_numbers_stay_strings(self):
        """No type coercion."""
        _, records = parse("n\n007\n1.50")
        assert records == [["007"], ["1.50"]]


class TestRowShapeMismatch:
    """Tests for row shape validation."""

    def test_extra_field(self):
        """Too many values reports line 2, expected 2, actual 3."""
        with pytest.raises(RowShapeMismatch) as exc:
            parse("name,age\nAlice,30,extra")
        assert exc.value.line_number == 2
        assert exc.value.expected == 2
        assert exc.value.actual == 3
        assert "Line 2 has 3 values but should have 2" in str(exc.value)

    def test_missing_field(self):
        """Too few values."""
        with pytest.raises(RowShapeMismatch) as exc:
            parse("a,b,c\n1,2,3\n4,5")
        assert exc.value.line_number == 3
        assert exc.value.actual == 2

    def test_blank_lines_do_not_shift_line_number(self):
        """Skipped blank lines are not counted in the reported line."""
        with pytest.raises(RowShapeMismatch) as exc:
            parse("a,b\n\n1,2\n\n\n3")
        assert exc.value.line_number == 3
