"""Declarative date format templates built from LDML symbols.

DateTemplate lets callers state which date parts to show, and in which form,
without remembering LDML letters, their counts or their case. The resulting
template is locale independent; a pattern resolver turns it into the
concrete pattern a locale uses.

Examples:
    >>> DateTemplate().month().day().year().template
    'Mdy'
    >>> DateTemplate().month().day().year().localized_format("en_US")
    'M/d/y'
    >>> DateTemplate().month(SymbolForm.ABBREVIATED).template
    'MMM'

Architecture:
    - DateTemplate: immutable value, every append returns a new instance
    - Symbol runs come from the tables in datetemplates.symbols
    - Resolution and rendering are delegated to runtime collaborators
      (PatternResolver, DateFormatter), injectable per call

Thread Safety:
    DateTemplate is immutable. Instances can be shared between threads
    without synchronization.

Reference:
    UTS #35 Part 4: Dates
    https://www.unicode.org/reports/tr35/tr35-dates.html#Date_Format_Patterns

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import PATTERN_LETTERS
from .enums import HourCycle, SymbolFamily, SymbolForm
from .errors import TemplateSymbolError
from .symbols import hour_run, symbol_run

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

    from .runtime.protocols import DateFormatter, PatternResolver

__all__ = ["DateTemplate"]


def _check_template_text(text: str) -> None:
    """Reject template text that is not made of LDML pattern letters."""
    if not isinstance(text, str):
        msg = f"Template must be a string, got {type(text).__name__}"
        raise TemplateSymbolError(msg, symbol=text)
    invalid = sorted({char for char in text if char not in PATTERN_LETTERS})
    if invalid:
        msg = f"Template '{text}' contains non-symbol characters: {''.join(invalid)!r}"
        raise TemplateSymbolError(msg, symbol=text)


@dataclass(frozen=True, slots=True)
class DateTemplate:
    """Immutable LDML date template.

    Attributes:
        template: Accumulated template string (LDML pattern letters only)

    Every symbol method returns a new DateTemplate with the symbol's run
    appended, or this same instance when the given form is a no-op for
    the symbol. Templates never contain literals or separators; those come
    from the locale when the template is resolved.
    """

    template: str = ""

    def __post_init__(self) -> None:
        _check_template_text(self.template)

    def __str__(self) -> str:
        return self.template

    def __len__(self) -> int:
        return len(self.template)

    def __bool__(self) -> bool:
        return bool(self.template)

    def __add__(self, other: object) -> DateTemplate:
        if not isinstance(other, DateTemplate):
            return NotImplemented
        return DateTemplate(self.template + other.template)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def appending(self, run: str) -> DateTemplate:
        """Append a run of one repeated LDML pattern letter.

        Args:
            run: Non-empty run such as "MMM" or "j"

        Returns:
            New DateTemplate ending with run

        Raises:
            TemplateSymbolError: If run is empty, mixes letters, or uses a
                character that is not an LDML pattern letter
        """
        if not isinstance(run, str) or not run:
            msg = f"Symbol run must be a non-empty string, got {run!r}"
            raise TemplateSymbolError(msg, symbol=run)
        if run != run[0] * len(run) or run[0] not in PATTERN_LETTERS:
            msg = f"Symbol run must repeat a single LDML pattern letter, got {run!r}"
            raise TemplateSymbolError(msg, symbol=run)
        return DateTemplate(self.template + run)

    def _with(self, run: str) -> DateTemplate:
        # No-op forms produce an empty run and keep this instance
        if not run:
            return self
        return DateTemplate(self.template + run)

    def symbols(self) -> tuple[tuple[str, int], ...]:
        """Split the template into (letter, count) runs.

        Adjacent runs of the same letter read as one run, exactly as a
        resolver or formatter reads them.

        Example:
            >>> DateTemplate().year().month(SymbolForm.FULL).day().symbols()
            (('y', 1), ('M', 4), ('d', 1))
        """
        runs: list[tuple[str, int]] = []
        for char in self.template:
            if runs and runs[-1][0] == char:
                runs[-1] = (char, runs[-1][1] + 1)
            else:
                runs.append((char, 1))
        return tuple(runs)

    # ------------------------------------------------------------------
    # Era and year
    # ------------------------------------------------------------------

    def era(self, form: SymbolForm = SymbolForm.ABBREVIATED) -> DateTemplate:
        """Append era: GGG (AD), GGGG (Anno Domini), GGGGG (A).

        NUMERIC, ZERO_PADDED and SHORT leave the template unchanged.
        """
        return self._with(symbol_run(SymbolFamily.ERA, form))

    def year(self, length: int = 1) -> DateTemplate:
        """Append year.

        Normally the length specifies the padding, but for two letters it
        also specifies the maximum length (yy: 97).
        """
        return self._with(symbol_run(SymbolFamily.YEAR, length=length))

    def week_year(self, length: int = 1) -> DateTemplate:
        """Append year of the week-based calendar (ISO 8601 week-year).

        May differ from the calendar year near year boundaries.
        """
        return self._with(symbol_run(SymbolFamily.WEEK_YEAR, length=length))

    def extended_year(self, length: int = 1) -> DateTemplate:
        """Append extended year (1 BCE is year 0, 2 BCE is -1)."""
        return self._with(symbol_run(SymbolFamily.EXTENDED_YEAR, length=length))

    def cyclic_year(self, form: SymbolForm = SymbolForm.ABBREVIATED) -> DateTemplate:
        """Append cyclic year name (甲子) for calendars that have one.

        NUMERIC, ZERO_PADDED and SHORT leave the template unchanged.
        """
        return self._with(symbol_run(SymbolFamily.CYCLIC_YEAR, form))

    # ------------------------------------------------------------------
    # Quarter and month
    # ------------------------------------------------------------------

    def quarter(self, form: SymbolForm = SymbolForm.ZERO_PADDED) -> DateTemplate:
        """Append quarter: Q (2), QQ (02), QQQ (Q2), QQQQ (2nd quarter).

        NARROW and SHORT leave the template unchanged.
        """
        return self._with(symbol_run(SymbolFamily.QUARTER, form))

    def stand_alone_quarter(self, form: SymbolForm = SymbolForm.ZERO_PADDED) -> DateTemplate:
        """Append stand-alone quarter (q). Same forms as quarter()."""
        return self._with(symbol_run(SymbolFamily.STAND_ALONE_QUARTER, form))

    def month(self, form: SymbolForm = SymbolForm.NUMERIC) -> DateTemplate:
        """Append month: M (9), MM (09), MMM (Sep), MMMM (September), MMMMM (S).

        SHORT leaves the template unchanged.
        """
        return self._with(symbol_run(SymbolFamily.MONTH, form))

    def stand_alone_month(self, form: SymbolForm = SymbolForm.NUMERIC) -> DateTemplate:
        """Append stand-alone month (L). Same forms as month()."""
        return self._with(symbol_run(SymbolFamily.STAND_ALONE_MONTH, form))

    # ------------------------------------------------------------------
    # Week and day
    # ------------------------------------------------------------------

    def week_of_year(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.WEEK_OF_YEAR))

    def padded_week_of_year(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.PADDED_WEEK_OF_YEAR))

    def week_of_month(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.WEEK_OF_MONTH))

    def day(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.DAY))

    def padded_day(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.PADDED_DAY))

    def day_of_year(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.DAY_OF_YEAR))

    def day_of_week_in_month(self) -> DateTemplate:
        """Append day of week in month (2 for the 2nd Wednesday)."""
        return self._with(symbol_run(SymbolFamily.DAY_OF_WEEK_IN_MONTH))

    def julian_day(self, length: int) -> DateTemplate:
        """Append Julian day number (2451334), zero padded to length."""
        return self._with(symbol_run(SymbolFamily.JULIAN_DAY, length=length))

    # ------------------------------------------------------------------
    # Weekday and period
    # ------------------------------------------------------------------

    def day_of_week(self, form: SymbolForm = SymbolForm.ABBREVIATED) -> DateTemplate:
        """Append day of week: e (2), ee (02), eee (Tue), eeee (Tuesday),
        eeeee (T), eeeeee (Tu).

        NUMERIC and ZERO_PADDED are local day numbers: they depend on the
        first day of the week in the rendering locale.
        """
        return self._with(symbol_run(SymbolFamily.DAY_OF_WEEK, form))

    def stand_alone_day_of_week(self, form: SymbolForm = SymbolForm.ABBREVIATED) -> DateTemplate:
        """Append stand-alone day of week (c). Same forms as day_of_week()."""
        return self._with(symbol_run(SymbolFamily.STAND_ALONE_DAY_OF_WEEK, form))

    def period(self) -> DateTemplate:
        """Append period (AM/PM).

        Resolved as a template next to 24-hour hours, the period is dropped.
        """
        return self._with(symbol_run(SymbolFamily.PERIOD))

    # ------------------------------------------------------------------
    # Hours, minutes, seconds
    # ------------------------------------------------------------------

    def hours(self, cycle: HourCycle = HourCycle.AUTO) -> DateTemplate:
        """Append hours: j (AUTO), h (H12, H1_12), H (H24, H0_23), K (H0_11), k (H1_24).

        AUTO only works as a template; rendered as a strict pattern it
        produces no output. H0_11 and H1_24 resolve like H12 and H24 and only
        render differently as strict patterns.
        """
        return self._with(hour_run(cycle))

    def padded_hours(self, cycle: HourCycle = HourCycle.AUTO) -> DateTemplate:
        """Append zero-padded hours (jj, hh, HH, KK, kk). See hours()."""
        return self._with(hour_run(cycle, padded=True))

    def time(self) -> DateTemplate:
        """Append hours (AUTO) and minutes."""
        return self.hours().minutes()

    def minutes(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.MINUTE))

    def non_padded_minutes(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.NON_PADDED_MINUTE))

    def seconds(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.SECOND))

    def non_padded_seconds(self) -> DateTemplate:
        return self._with(symbol_run(SymbolFamily.NON_PADDED_SECOND))

    def fractional_seconds(self, length: int = 3) -> DateTemplate:
        """Append fractional seconds, truncated to length digits (SSSS: 3456)."""
        return self._with(symbol_run(SymbolFamily.FRACTIONAL_SECOND, length=length))

    def milliseconds_in_day(self, length: int = 3) -> DateTemplate:
        """Append milliseconds in day (69540000).

        Reflects DST discontinuities; combine with an offset field for a
        unique local time.
        """
        return self._with(symbol_run(SymbolFamily.MILLISECONDS_IN_DAY, length=length))

    # ------------------------------------------------------------------
    # Time zone
    # ------------------------------------------------------------------

    def time_zone(self) -> DateTemplate:
        """Append time zone abbreviation (PDT)."""
        return self._with(symbol_run(SymbolFamily.TIME_ZONE_ABBREV))

    def time_zone_name(self) -> DateTemplate:
        """Append time zone name (Pacific Daylight Time)."""
        return self._with(symbol_run(SymbolFamily.TIME_ZONE_NAME))

    def time_zone_identifier(self) -> DateTemplate:
        """Append time zone identifier (America/Los_Angeles)."""
        return self._with(symbol_run(SymbolFamily.TIME_ZONE_IDENTIFIER))

    def time_zone_offset(self, form: SymbolForm = SymbolForm.ABBREVIATED) -> DateTemplate:
        """Append time zone offset: x (-08, +0530), xx (-0800), xxx (-08:00).

        NUMERIC, ZERO_PADDED and SHORT leave the template unchanged.
        """
        return self._with(symbol_run(SymbolFamily.TIME_ZONE_OFFSET, form))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def localized_format(
        self,
        locale: str | None = None,
        *,
        resolver: PatternResolver | None = None,
    ) -> str:
        """Resolve this template into the concrete pattern a locale uses.

        Args:
            locale: Locale code (BCP-47 or POSIX). None uses the system locale.
            resolver: Pattern resolver (default: CLDR skeleton resolver)

        Returns:
            Best-fit localized pattern. When the resolver finds no fit, the
            template itself is returned unchanged.

        Example:
            >>> DateTemplate().year().month().day().time().localized_format("en_US")
            'M/d/y, h:mm a'
        """
        if resolver is None:
            from .runtime.resolver import get_default_resolver  # noqa: PLC0415

            resolver = get_default_resolver()
        pattern = resolver.resolve(self.template, locale)
        return self.template if pattern is None else pattern

    def localized_string(
        self,
        value: datetime,
        locale: str | None = None,
        time_zone: str | tzinfo | None = None,
        *,
        resolver: PatternResolver | None = None,
        formatter: DateFormatter | None = None,
    ) -> str:
        """Format value with the pattern this template resolves to.

        Args:
            value: Instant to format (naive datetimes are taken as UTC)
            locale: Locale code. None uses the system locale.
            time_zone: IANA zone name or tzinfo. None uses the local zone.
            resolver: Pattern resolver (default: CLDR skeleton resolver)
            formatter: Date formatter (default: Babel pattern formatter)

        Returns:
            Localized date string

        Raises:
            FormattingError: If the formatter cannot render the pattern
        """
        if formatter is None:
            from .runtime.formatter import get_default_formatter  # noqa: PLC0415

            formatter = get_default_formatter()
        pattern = self.localized_format(locale, resolver=resolver)
        return formatter.render(pattern, locale, time_zone, value)

    def non_localized_string(
        self,
        value: datetime,
        locale: str | None = None,
        time_zone: str | tzinfo | None = None,
        *,
        formatter: DateFormatter | None = None,
    ) -> str:
        """Format value using this template as a strict pattern.

        Discouraged: no locale reordering, separators or hour-cycle choice
        happens. Template-only symbols render differently than when resolved:
        AUTO hours (j) produce no output, H0_11 (K) and H1_24 (k) use their
        alternate numbering.

        Raises:
            FormattingError: If the formatter cannot render the template
        """
        if formatter is None:
            from .runtime.formatter import get_default_formatter  # noqa: PLC0415

            formatter = get_default_formatter()
        return formatter.render(self.template, locale, time_zone, value)
