"""Tests for SimpleDateFormat-style date formatting."""

from datetime import date, datetime, timedelta, timezone

import pytest

from filelang.expressions.dateformat import (
    DateFormatError,
    DateToken,
    DateTokenType,
    format_date,
    tokenize,
)

# Tuesday, 65th day of a leap year
MOMENT = datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc)


class TestTokenize:
    def test_fields_and_literals(self):
        assert tokenize("yyyy-MM") == (
            DateToken(DateTokenType.FIELD, "yyyy", 0),
            DateToken(DateTokenType.LITERAL, "-", 4),
            DateToken(DateTokenType.FIELD, "MM", 5),
        )

    def test_adjacent_fields_split_on_letter_change(self):
        values = [t.value for t in tokenize("yyyyMMdd")]
        assert values == ["yyyy", "MM", "dd"]

    def test_quoted_literal(self):
        token = tokenize("'at'")[0]
        assert token == DateToken(DateTokenType.LITERAL, "at", 0)

    def test_escaped_quote(self):
        assert tokenize("''") == (DateToken(DateTokenType.LITERAL, "'", 0),)

    def test_illegal_letter(self):
        with pytest.raises(DateFormatError) as exc_info:
            tokenize("yyyyq")
        assert "Illegal pattern character 'q'" in str(exc_info.value)
        assert exc_info.value.position == 4

    def test_unterminated_quote(self):
        with pytest.raises(DateFormatError) as exc_info:
            tokenize("yyyy'abc")
        assert "Unterminated quote" in str(exc_info.value)

    def test_date_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            tokenize("b")


class TestFormatDate:
    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("yyyyMMdd", "20240305"),
            ("yyyy-MM-dd", "2024-03-05"),
            ("yy", "24"),
            ("y", "2024"),
            ("M/d", "3/5"),
            ("MMM", "Mar"),
            ("MMMM", "March"),
            ("EEE", "Tue"),
            ("EEEE", "Tuesday"),
            ("u", "2"),
            ("D", "65"),
            ("DDD", "065"),
            ("F", "1"),
            ("w", "10"),
            ("W", "2"),
            ("G", "AD"),
            ("HH:mm:ss", "14:07:09"),
            ("HH:mm:ss.SSS", "14:07:09.123"),
            ("hh a", "02 PM"),
            ("h", "2"),
            ("K", "2"),
            ("k", "14"),
            ("z", "UTC"),
            ("Z", "+0000"),
            ("X", "Z"),
        ],
    )
    def test_pattern_letters(self, pattern, expected):
        assert format_date(MOMENT, pattern) == expected

    def test_midnight_hours(self):
        midnight = datetime(2024, 3, 5, 0, 15, tzinfo=timezone.utc)

        assert format_date(midnight, "H") == "0"
        assert format_date(midnight, "k") == "24"
        assert format_date(midnight, "h a") == "12 AM"
        assert format_date(midnight, "K") == "0"

    def test_quoted_text(self):
        assert format_date(MOMENT, "yyyy'T'HH") == "2024T14"

    def test_quote_inside_quoted_text(self):
        assert format_date(MOMENT, "h 'o''clock'") == "2 o'clock"

    def test_unquoted_punctuation_is_literal(self):
        assert format_date(MOMENT, "yyyy/MM/dd_HH.mm") == "2024/03/05_14.07"

    def test_positive_offset(self):
        moment = MOMENT.astimezone(timezone(timedelta(hours=5, minutes=30)))

        assert format_date(moment, "Z") == "+0530"
        assert format_date(moment, "X") == "+05"
        assert format_date(moment, "XX") == "+0530"
        assert format_date(moment, "XXX") == "+05:30"

    def test_negative_offset(self):
        moment = MOMENT.astimezone(timezone(timedelta(hours=-8)))

        assert format_date(moment, "Z") == "-0800"
        assert format_date(moment, "XXX") == "-08:00"
        assert format_date(moment, "HH") == "06"

    def test_naive_datetime_keeps_wall_time(self):
        assert format_date(datetime(2024, 3, 5, 14, 7), "yyyyMMddHHmm") == "202403051407"

    def test_plain_date_is_midnight(self):
        assert format_date(date(2024, 3, 5), "yyyy-MM-dd HH") == "2024-03-05 00"

    def test_empty_pattern(self):
        assert format_date(MOMENT, "") == ""
