"""Parser tests."""

import pytest

from pyisodur import (
    Duration,
    GrammarError,
    MaxInputLengthExceededError,
    NumericFormatError,
    ParseError,
    SignPlacementError,
    parse,
)


class TestParse:
    def test_period_only(self):
        assert parse("P4Y") == Duration(years=4)

    def test_time_only_decimal(self):
        assert parse("PT2.5S") == Duration(seconds=2.5)

    def test_full(self):
        assert parse("P3Y6M4DT12H30M5.5S") == Duration(
            years=3, months=6, days=4, hours=12, minutes=30, seconds=5.5
        )

    def test_negative(self):
        assert parse("-PT5M") == Duration(minutes=5, negative=True)

    def test_weeks(self):
        assert parse("P2W") == Duration(weeks=2)

    def test_fraction_without_leading_digit(self):
        assert parse("PT.5S") == Duration(seconds=0.5)

    def test_fraction_without_trailing_digit(self):
        assert parse("P1.D") == Duration(days=1)

    def test_empty_period(self):
        assert parse("P") == Duration()

    def test_fields_are_floats(self):
        d = parse("P1Y")
        assert isinstance(d.years, float)
        assert isinstance(d.negative, bool)

    def test_keeps_original_text(self):
        assert parse("PT36H").original_text == "PT36H"


class TestDualMeaningM:
    def test_month_in_period(self):
        assert parse("P1M") == Duration(months=1)

    def test_minute_in_time(self):
        assert parse("PT1M") == Duration(minutes=1)

    def test_both(self):
        assert parse("P2MT3M") == Duration(months=2, minutes=3)

    def test_month_after_days(self):
        assert parse("P1D2M") == Duration(days=1, months=2)


class TestRejected:
    @pytest.mark.parametrize("text", ["T0S", "P-T0S", "PT0SP0D"])
    def test_grammar_errors(self, text):
        with pytest.raises(GrammarError):
            parse(text)

    def test_empty_string(self):
        with pytest.raises(GrammarError):
            parse("")

    def test_sign_only(self):
        with pytest.raises(GrammarError):
            parse("-")

    def test_missing_designator(self):
        with pytest.raises(GrammarError, match="number without designator"):
            parse("P4")

    def test_number_before_time_marker(self):
        with pytest.raises(GrammarError):
            parse("P1T2H")

    @pytest.mark.parametrize("text", ["PT1Y", "PT1W", "PT1D", "P1H", "P1S"])
    def test_designator_in_wrong_part(self, text):
        with pytest.raises(GrammarError, match="designator not allowed"):
            parse(text)

    @pytest.mark.parametrize("text", ["P1X", "p1y", "P 1Y", "P1,5Y", "P1e3Y"])
    def test_unexpected_character(self, text):
        with pytest.raises(GrammarError):
            parse(text)

    @pytest.mark.parametrize("text", ["P1Y2Y", "PT1H2H3H", "P1M2M", "PT1S1S"])
    def test_duplicate_designator(self, text):
        with pytest.raises(GrammarError, match="duplicate designator"):
            parse(text)

    def test_non_string(self):
        with pytest.raises(TypeError):
            parse(5)


class TestSignPlacement:
    def test_inside_period(self):
        with pytest.raises(SignPlacementError):
            parse("P-1Y")

    def test_inside_time(self):
        with pytest.raises(SignPlacementError):
            parse("PT1H-5M")

    def test_double_sign(self):
        with pytest.raises(SignPlacementError):
            parse("--P1Y")

    def test_is_grammar_error(self):
        with pytest.raises(GrammarError):
            parse("P-T0S")


class TestNumericFormat:
    def test_empty_number(self):
        with pytest.raises(NumericFormatError):
            parse("PY")

    def test_empty_number_in_time(self):
        with pytest.raises(NumericFormatError):
            parse("PTS")

    def test_multiple_points(self):
        with pytest.raises(NumericFormatError) as exc_info:
            parse("P1.2.3Y")
        assert isinstance(exc_info.value.wrapped, ValueError)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_lone_point(self):
        with pytest.raises(NumericFormatError):
            parse("PT.S")


class TestStrictOption:
    def test_lenient_overwrites(self):
        assert parse("P1Y2Y", strict=False) == Duration(years=2)

    def test_lenient_time_overwrites(self):
        assert parse("PT1H2H3H", strict=False) == Duration(hours=3)

    def test_lenient_still_rejects_grammar(self):
        with pytest.raises(GrammarError):
            parse("PT1Y", strict=False)


class TestMaxLength:
    def test_default_limit(self):
        with pytest.raises(MaxInputLengthExceededError):
            parse("P" + "1" * 300 + "Y")

    def test_custom_limit(self):
        with pytest.raises(MaxInputLengthExceededError, match="too long"):
            parse("P3Y6M4DT12H30M5.5S", max_length=10)

    def test_within_custom_limit(self):
        assert parse("P" + "1" * 300 + "Y", max_length=400).years == float("1" * 300)

    def test_is_parse_error(self):
        with pytest.raises(ParseError):
            parse("PT1S", max_length=2)
