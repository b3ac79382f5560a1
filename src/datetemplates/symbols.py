"""LDML symbol tables for date templates.

Maps (symbol family, form or length) to the run of LDML pattern letters a
template gains. Three kinds of families exist:

- Form families: the form selects how many letters are appended
  (length encodes the display form). Forms a family does not list are
  no-ops and produce an empty run.
- Length families: the caller-supplied length is the repeat count
  (length encodes padding or precision).
- Fixed families: always append the same run.

Hours are separate: the hour cycle selects the letter, padding the count.

Reference:
    UTS #35 Part 4: Dates, Date Field Symbol Table
    https://www.unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType
from typing import Final

from .enums import HourCycle, SymbolFamily, SymbolForm
from .errors import TemplateSymbolError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tables
    "FAMILY_LETTERS",
    "FORM_LENGTHS",
    "DEFAULT_FORMS",
    "DEFAULT_LENGTHS",
    "FIXED_RUNS",
    # Run construction
    "symbol_run",
    "hour_run",
    "repeat_letter",
]

_F = SymbolFamily
_S = SymbolForm

FAMILY_LETTERS: Final = MappingProxyType({
    _F.ERA: "G",
    _F.YEAR: "y",
    _F.WEEK_YEAR: "Y",
    _F.EXTENDED_YEAR: "u",
    _F.CYCLIC_YEAR: "U",
    _F.QUARTER: "Q",
    _F.STAND_ALONE_QUARTER: "q",
    _F.MONTH: "M",
    _F.STAND_ALONE_MONTH: "L",
    _F.WEEK_OF_YEAR: "w",
    _F.PADDED_WEEK_OF_YEAR: "w",
    _F.WEEK_OF_MONTH: "W",
    _F.DAY: "d",
    _F.PADDED_DAY: "d",
    _F.DAY_OF_YEAR: "D",
    _F.DAY_OF_WEEK_IN_MONTH: "F",
    _F.JULIAN_DAY: "g",
    _F.DAY_OF_WEEK: "e",
    _F.STAND_ALONE_DAY_OF_WEEK: "c",
    _F.PERIOD: "a",
    _F.HOUR: "j",
    _F.PADDED_HOUR: "j",
    _F.MINUTE: "m",
    _F.NON_PADDED_MINUTE: "m",
    _F.SECOND: "s",
    _F.NON_PADDED_SECOND: "s",
    _F.FRACTIONAL_SECOND: "S",
    _F.MILLISECONDS_IN_DAY: "A",
    _F.TIME_ZONE_ABBREV: "z",
    _F.TIME_ZONE_NAME: "z",
    _F.TIME_ZONE_IDENTIFIER: "V",
    _F.TIME_ZONE_OFFSET: "x",
})
"""Base LDML letter of every family (HOUR letters are the AUTO cycle)."""

_TEXT_FORMS: Final = {_S.ABBREVIATED: 3, _S.FULL: 4, _S.NARROW: 5}
_NUMBER_AND_NAME_FORMS: Final = {_S.NUMERIC: 1, _S.ZERO_PADDED: 2, _S.ABBREVIATED: 3, _S.FULL: 4}
_MONTH_FORMS: Final = {**_NUMBER_AND_NAME_FORMS, _S.NARROW: 5}
_WEEKDAY_FORMS: Final = {form: form.width for form in SymbolForm}

FORM_LENGTHS: Final = MappingProxyType({
    _F.ERA: MappingProxyType(_TEXT_FORMS),
    _F.CYCLIC_YEAR: MappingProxyType(_TEXT_FORMS),
    _F.QUARTER: MappingProxyType(_NUMBER_AND_NAME_FORMS),
    _F.STAND_ALONE_QUARTER: MappingProxyType(_NUMBER_AND_NAME_FORMS),
    _F.MONTH: MappingProxyType(_MONTH_FORMS),
    _F.STAND_ALONE_MONTH: MappingProxyType(_MONTH_FORMS),
    _F.DAY_OF_WEEK: MappingProxyType(_WEEKDAY_FORMS),
    _F.STAND_ALONE_DAY_OF_WEEK: MappingProxyType(_WEEKDAY_FORMS),
    _F.TIME_ZONE_OFFSET: MappingProxyType({_S.ABBREVIATED: 1, _S.FULL: 2, _S.NARROW: 3}),
})
"""Repeat count per (form family, form). Missing forms are no-ops."""

DEFAULT_FORMS: Final = MappingProxyType({
    _F.ERA: _S.ABBREVIATED,
    _F.CYCLIC_YEAR: _S.ABBREVIATED,
    _F.QUARTER: _S.ZERO_PADDED,
    _F.STAND_ALONE_QUARTER: _S.ZERO_PADDED,
    _F.MONTH: _S.NUMERIC,
    _F.STAND_ALONE_MONTH: _S.NUMERIC,
    _F.DAY_OF_WEEK: _S.ABBREVIATED,
    _F.STAND_ALONE_DAY_OF_WEEK: _S.ABBREVIATED,
    _F.TIME_ZONE_OFFSET: _S.ABBREVIATED,
})

DEFAULT_LENGTHS: Final = MappingProxyType({
    _F.YEAR: 1,
    _F.WEEK_YEAR: 1,
    _F.EXTENDED_YEAR: 1,
    _F.JULIAN_DAY: None,  # required
    _F.FRACTIONAL_SECOND: 3,
    _F.MILLISECONDS_IN_DAY: 3,
})
"""Default repeat count of length families (None: caller must supply one)."""

FIXED_RUNS: Final = MappingProxyType({
    _F.WEEK_OF_YEAR: "w",
    _F.PADDED_WEEK_OF_YEAR: "ww",
    _F.WEEK_OF_MONTH: "W",
    _F.DAY: "d",
    _F.PADDED_DAY: "dd",
    _F.DAY_OF_YEAR: "D",
    _F.DAY_OF_WEEK_IN_MONTH: "F",
    _F.PERIOD: "a",
    _F.MINUTE: "mm",
    _F.NON_PADDED_MINUTE: "m",
    _F.SECOND: "ss",
    _F.NON_PADDED_SECOND: "s",
    _F.TIME_ZONE_ABBREV: "z",
    _F.TIME_ZONE_NAME: "zzzz",
    _F.TIME_ZONE_IDENTIFIER: "VV",
})

del _F, _S


def repeat_letter(letter: str, length: int) -> str:
    """Repeat a pattern letter length times.

    Args:
        letter: Single LDML pattern letter
        length: Positive repeat count

    Returns:
        The run, e.g. repeat_letter("y", 4) == "yyyy"

    Raises:
        TemplateSymbolError: If length is not a positive integer
    """
    # bool is an int subclass; year(length=True) is a caller bug
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        msg = f"Symbol length must be a positive integer, got {length!r}"
        raise TemplateSymbolError(msg, symbol=length)
    return letter * length


def symbol_run(
    family: SymbolFamily,
    form: SymbolForm | None = None,
    length: int | None = None,
) -> str:
    """Build the LDML run a symbol family contributes to a template.

    Args:
        family: Symbol family (hour families use hour_run instead)
        form: Form for form families (None: family default)
        length: Repeat count for length families (None: family default)

    Returns:
        Run of one repeated letter, or "" when the form is a no-op for
        the family.

    Raises:
        TemplateSymbolError: If a length family gets an invalid length or a
            form, or a form family gets a length.

    Examples:
        >>> symbol_run(SymbolFamily.MONTH, SymbolForm.ABBREVIATED)
        'MMM'
        >>> symbol_run(SymbolFamily.ERA, SymbolForm.NUMERIC)
        ''
        >>> symbol_run(SymbolFamily.FRACTIONAL_SECOND)
        'SSS'
    """
    if family in FORM_LENGTHS:
        if length is not None:
            msg = f"Symbol family '{family}' takes a form, not a length"
            raise TemplateSymbolError(msg, symbol=length)
        chosen = DEFAULT_FORMS[family] if form is None else form
        count = FORM_LENGTHS[family].get(chosen)
        if count is None:
            return ""
        return FAMILY_LETTERS[family] * count

    if form is not None:
        msg = f"Symbol family '{family}' does not take a form"
        raise TemplateSymbolError(msg, symbol=form)

    if family in DEFAULT_LENGTHS:
        chosen_length = DEFAULT_LENGTHS[family] if length is None else length
        if chosen_length is None:
            msg = f"Symbol family '{family}' requires an explicit length"
            raise TemplateSymbolError(msg, symbol=length)
        return repeat_letter(FAMILY_LETTERS[family], chosen_length)

    if length is not None:
        msg = f"Symbol family '{family}' does not take a length"
        raise TemplateSymbolError(msg, symbol=length)

    if family in FIXED_RUNS:
        return FIXED_RUNS[family]

    return hour_run(HourCycle.AUTO, padded=family is SymbolFamily.PADDED_HOUR)


def hour_run(cycle: HourCycle = HourCycle.AUTO, *, padded: bool = False) -> str:
    """Build the LDML run for hours in the given cycle.

    Examples:
        >>> hour_run(HourCycle.AUTO)
        'j'
        >>> hour_run(HourCycle.H0_11, padded=True)
        'KK'
    """
    return cycle.letter * (2 if padded else 1)
