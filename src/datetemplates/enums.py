"""Enumerations for date template symbols.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SymbolForm(StrEnum):
    """Rendering form of a template symbol.

    StrEnum provides automatic string conversion: str(SymbolForm.FULL) == "full"

    Not every symbol family accepts every form. Forms a family does not
    support are no-ops for that family (the template is left unchanged).
    """

    NUMERIC = "numeric"
    """Numeric form: 9"""

    ZERO_PADDED = "zero_padded"
    """Zero-padded numeric form: 09"""

    ABBREVIATED = "abbreviated"
    """Localized abbreviation: Tues, Sept, PDT"""

    FULL = "full"
    """Full localized name: Tuesday, September"""

    NARROW = "narrow"
    """One letter localized abbreviation: T, S, M"""

    SHORT = "short"
    """Short name (weekdays only): Tu, We"""

    @property
    def width(self) -> int:
        """Number of repeated letters this form encodes (1..6)."""
        return _FORM_WIDTHS[self]


_FORM_WIDTHS: dict[SymbolForm, int] = {
    SymbolForm.NUMERIC: 1,
    SymbolForm.ZERO_PADDED: 2,
    SymbolForm.ABBREVIATED: 3,
    SymbolForm.FULL: 4,
    SymbolForm.NARROW: 5,
    SymbolForm.SHORT: 6,
}


class HourCycle(StrEnum):
    """Hour cycle used for rendering hours.

    AUTO is a template-only symbol: resolved against a locale it becomes the
    locale's preferred cycle, but rendered as a strict pattern it produces
    no output. H0_11 and H1_24 resolve like H12 and H24 in templates and only
    differ when rendered as strict patterns.
    """

    AUTO = "auto"
    """Locale-preferred cycle (12 or 24 hours)"""

    H12 = "h12"
    """12-hour cycle (1-12), period shown"""

    H24 = "h24"
    """24-hour cycle (0-23), no period"""

    H1_12 = "h1_12"
    """Same as H12"""

    H0_23 = "h0_23"
    """Same as H24"""

    H0_11 = "h0_11"
    """Alternate 12-hour cycle (0-11), period shown"""

    H1_24 = "h1_24"
    """Alternate 24-hour cycle (1-24), no period"""

    @property
    def letter(self) -> str:
        """LDML hour letter for this cycle."""
        return _HOUR_LETTERS[self]


_HOUR_LETTERS: dict[HourCycle, str] = {
    HourCycle.AUTO: "j",
    HourCycle.H12: "h",
    HourCycle.H1_12: "h",
    HourCycle.H24: "H",
    HourCycle.H0_23: "H",
    HourCycle.H0_11: "K",
    HourCycle.H1_24: "k",
}


class SymbolFamily(StrEnum):
    """Conceptual date part a template symbol renders.

    StrEnum provides automatic string conversion:
    str(SymbolFamily.MONTH) == "month"
    """

    ERA = "era"
    YEAR = "year"
    WEEK_YEAR = "week_year"
    EXTENDED_YEAR = "extended_year"
    CYCLIC_YEAR = "cyclic_year"
    QUARTER = "quarter"
    STAND_ALONE_QUARTER = "stand_alone_quarter"
    MONTH = "month"
    STAND_ALONE_MONTH = "stand_alone_month"
    WEEK_OF_YEAR = "week_of_year"
    PADDED_WEEK_OF_YEAR = "padded_week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    DAY = "day"
    PADDED_DAY = "padded_day"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_WEEK_IN_MONTH = "day_of_week_in_month"
    JULIAN_DAY = "julian_day"
    DAY_OF_WEEK = "day_of_week"
    STAND_ALONE_DAY_OF_WEEK = "stand_alone_day_of_week"
    PERIOD = "period"
    HOUR = "hour"
    PADDED_HOUR = "padded_hour"
    MINUTE = "minute"
    NON_PADDED_MINUTE = "non_padded_minute"
    SECOND = "second"
    NON_PADDED_SECOND = "non_padded_second"
    FRACTIONAL_SECOND = "fractional_second"
    MILLISECONDS_IN_DAY = "milliseconds_in_day"
    TIME_ZONE_ABBREV = "time_zone_abbrev"
    TIME_ZONE_NAME = "time_zone_name"
    TIME_ZONE_IDENTIFIER = "time_zone_identifier"
    TIME_ZONE_OFFSET = "time_zone_offset"


__all__ = [
    "HourCycle",
    "SymbolFamily",
    "SymbolForm",
]
