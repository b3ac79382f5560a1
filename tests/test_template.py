"""Tests for DateTemplate construction.

Builder methods only; resolution and rendering live in
test_formatting_delegation.py.
"""

import dataclasses

import pytest

from datetemplates import DateTemplate, HourCycle, SymbolForm, TemplateSymbolError
from tests.strategies import DEFAULT_STEPS


class TestConstruction:
    """DateTemplate value semantics."""

    def test_empty_template(self) -> None:
        template = DateTemplate()
        assert template.template == ""
        assert str(template) == ""
        assert len(template) == 0
        assert not template

    def test_from_raw_text(self) -> None:
        template = DateTemplate("yMd")
        assert template.template == "yMd"
        assert template
        assert len(template) == 3

    @pytest.mark.parametrize("text", ["y-M-d", "yyyy MM", "'at'", "y年", "T"])
    def test_rejects_non_symbol_text(self, text: str) -> None:
        """Templates hold pattern letters only; literals come from the locale."""
        with pytest.raises(TemplateSymbolError) as exc_info:
            DateTemplate(text)
        assert exc_info.value.symbol == text

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TemplateSymbolError, match="must be a string"):
            DateTemplate(42)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        template = DateTemplate("y")
        with pytest.raises(dataclasses.FrozenInstanceError):
            template.template = "M"  # type: ignore[misc]

    def test_builder_returns_new_instance(self) -> None:
        base = DateTemplate()
        extended = base.year()
        assert base.template == ""
        assert extended.template == "y"
        assert extended is not base

    def test_equality_and_hash(self) -> None:
        assert DateTemplate().month().day() == DateTemplate("Md")
        assert hash(DateTemplate("Md")) == hash(DateTemplate().month().day())
        assert DateTemplate("Md") != DateTemplate("dM")

    def test_concatenation(self) -> None:
        date = DateTemplate().year().month().day()
        time = DateTemplate().time()
        assert (date + time).template == "yMdjmm"

    def test_concatenation_with_other_type(self) -> None:
        with pytest.raises(TypeError):
            DateTemplate("y") + "M"  # type: ignore[operator]


class TestDefaults:
    """Every symbol method appends its default run."""

    @pytest.mark.parametrize(("expected", "step"), DEFAULT_STEPS)
    def test_default_run(self, expected: str, step) -> None:  # noqa: ANN001
        assert step(DateTemplate()).template == expected

    def test_time_is_hours_then_minutes(self) -> None:
        assert DateTemplate().time() == DateTemplate().hours().minutes()
        assert DateTemplate().time().template == "jmm"


class TestSymbols:
    """Representative forms and lengths of individual symbols."""

    def test_era_forms(self) -> None:
        assert DateTemplate().era(SymbolForm.FULL).template == "GGGG"
        assert DateTemplate().era(SymbolForm.NARROW).template == "GGGGG"

    @pytest.mark.parametrize("form", [SymbolForm.NUMERIC, SymbolForm.ZERO_PADDED, SymbolForm.SHORT])
    def test_era_no_op_forms(self, form: SymbolForm) -> None:
        """Unsupported forms return the same instance."""
        template = DateTemplate("y")
        assert template.era(form) is template

    def test_year_lengths(self) -> None:
        assert DateTemplate().year(2).template == "yy"
        assert DateTemplate().year(4).template == "yyyy"
        assert DateTemplate().week_year(4).template == "YYYY"
        assert DateTemplate().extended_year(2).template == "uu"

    @pytest.mark.parametrize("length", [0, -3])
    def test_year_rejects_non_positive_length(self, length: int) -> None:
        with pytest.raises(TemplateSymbolError):
            DateTemplate().year(length)

    def test_quarter_forms(self) -> None:
        assert DateTemplate().quarter(SymbolForm.NUMERIC).template == "Q"
        assert DateTemplate().quarter(SymbolForm.ABBREVIATED).template == "QQQ"
        assert DateTemplate().stand_alone_quarter(SymbolForm.FULL).template == "qqqq"
        template = DateTemplate()
        assert template.quarter(SymbolForm.NARROW) is template

    def test_month_forms(self) -> None:
        assert DateTemplate().month(SymbolForm.ZERO_PADDED).template == "MM"
        assert DateTemplate().month(SymbolForm.ABBREVIATED).template == "MMM"
        assert DateTemplate().month(SymbolForm.FULL).template == "MMMM"
        assert DateTemplate().month(SymbolForm.NARROW).template == "MMMMM"
        assert DateTemplate().stand_alone_month(SymbolForm.FULL).template == "LLLL"
        template = DateTemplate()
        assert template.month(SymbolForm.SHORT) is template

    def test_day_of_week_forms(self) -> None:
        assert DateTemplate().day_of_week(SymbolForm.NUMERIC).template == "e"
        assert DateTemplate().day_of_week(SymbolForm.FULL).template == "eeee"
        assert DateTemplate().day_of_week(SymbolForm.SHORT).template == "eeeeee"
        assert DateTemplate().stand_alone_day_of_week(SymbolForm.NARROW).template == "ccccc"

    def test_julian_day(self) -> None:
        assert DateTemplate().julian_day(7).template == "ggggggg"
        with pytest.raises(TemplateSymbolError):
            DateTemplate().julian_day(0)

    def test_precision_fields(self) -> None:
        assert DateTemplate().fractional_seconds(1).template == "S"
        assert DateTemplate().milliseconds_in_day(8).template == "AAAAAAAA"

    def test_time_zone_offset_forms(self) -> None:
        assert DateTemplate().time_zone_offset(SymbolForm.FULL).template == "xx"
        assert DateTemplate().time_zone_offset(SymbolForm.NARROW).template == "xxx"
        template = DateTemplate()
        assert template.time_zone_offset(SymbolForm.NUMERIC) is template


class TestHours:
    """Hour cycle selects the hour letter."""

    @pytest.mark.parametrize(
        ("cycle", "expected"),
        [
            (HourCycle.AUTO, "j"),
            (HourCycle.H12, "h"),
            (HourCycle.H24, "H"),
            (HourCycle.H1_12, "h"),
            (HourCycle.H0_23, "H"),
            (HourCycle.H0_11, "K"),
            (HourCycle.H1_24, "k"),
        ],
    )
    def test_hours(self, cycle: HourCycle, expected: str) -> None:
        assert DateTemplate().hours(cycle).template == expected
        assert DateTemplate().padded_hours(cycle).template == expected * 2


class TestScenarios:
    """Multi-symbol templates built in one chain."""

    def test_numeric_date_and_time(self) -> None:
        template = DateTemplate().year().month().day().time()
        assert template.template == "yMdjmm"

    def test_full_weekday_and_time(self) -> None:
        template = DateTemplate().day_of_week(SymbolForm.FULL).time()
        assert template.template == "eeeejmm"

    def test_era_date(self) -> None:
        template = DateTemplate().day().month(SymbolForm.ABBREVIATED).year(2).era()
        assert template.template == "dMMMyyGGG"

    def test_no_op_in_chain_is_skipped(self) -> None:
        template = DateTemplate().month().era(SymbolForm.NUMERIC).day()
        assert template.template == "Md"


class TestAppending:
    """Raw run appending validates its input."""

    def test_appends_run(self) -> None:
        assert DateTemplate("y").appending("MMM").template == "yMMM"

    @pytest.mark.parametrize("run", ["", "yM", "--", "y ", "é"])
    def test_rejects_invalid_run(self, run: str) -> None:
        with pytest.raises(TemplateSymbolError) as exc_info:
            DateTemplate().appending(run)
        assert exc_info.value.symbol == run

    def test_allows_template_only_letters(self) -> None:
        assert DateTemplate().appending("J").appending("C").template == "JC"


class TestSymbolRuns:
    """symbols() splits a template into (letter, count) runs."""

    def test_empty(self) -> None:
        assert DateTemplate().symbols() == ()

    def test_runs(self) -> None:
        template = DateTemplate().year(4).month(SymbolForm.ABBREVIATED).padded_day().time()
        assert template.symbols() == (("y", 4), ("M", 3), ("d", 2), ("j", 1), ("m", 2))

    def test_adjacent_same_letter_merges(self) -> None:
        """Two day() calls read as one two-letter day field."""
        assert DateTemplate().day().day().symbols() == (("d", 2),)
