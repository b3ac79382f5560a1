"""Strict LDML pattern rendering through Babel.

PatternFormatter renders a concrete pattern for an instant, field by field,
with Babel's DateTimeFormat. The pattern is taken literally: no locale
reordering or width adjustment happens here (that is the resolver's job).

Fields Babel does not render are handled locally:
    - j, J, C: template-only hour symbols, no output as strict patterns
    - g: Julian day number, zero padded to the field width
    - U: cyclic year; the Gregorian calendar has none, so the year number

Time Zones:
    Naive datetimes are taken as UTC (Babel convention) and converted into
    the requested zone. A None zone means the local zone.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from babel.dates import UTC, DateTimeFormat, get_timezone

from datetemplates.constants import JULIAN_DAY_OFFSET, TEMPLATE_ONLY_SYMBOLS
from datetemplates.errors import FormattingError

from .locale_context import LocaleContext
from .pattern import PatternToken, tokenize_pattern

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

__all__ = ["PatternFormatter", "get_default_formatter"]

logger = logging.getLogger(__name__)


def _localize(value: datetime, time_zone: str | tzinfo | None) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    zone = get_timezone(time_zone)
    value = value.astimezone(zone)
    if hasattr(zone, "normalize"):  # pytz
        value = zone.normalize(value)
    return value


def _render_field(token: PatternToken, fmt: DateTimeFormat) -> str:
    letter, width = token.text, token.width
    if letter in TEMPLATE_ONLY_SYMBOLS:
        return ""
    if letter == "g":
        return str(fmt.value.toordinal() + JULIAN_DAY_OFFSET).zfill(width)
    if letter == "U":
        return str(fmt.value.year)
    return fmt[letter * width]


class PatternFormatter:
    """DateFormatter that renders LDML patterns with Babel.

    Example:
        >>> from datetime import datetime, UTC
        >>> PatternFormatter().render("EEEE h:mm a", "en_US", "UTC",
        ...                           datetime(1970, 1, 1, tzinfo=UTC))
        'Thursday 12:00 AM'
        >>> PatternFormatter().render("j", "en_US", "UTC", datetime(1970, 1, 1, tzinfo=UTC))
        ''
    """

    __slots__ = ()

    def render(
        self,
        pattern: str,
        locale: str | None,
        time_zone: str | tzinfo | None,
        value: datetime,
    ) -> str:
        """Render value with pattern.

        Args:
            pattern: LDML pattern, interpreted strictly
            locale: Locale code, or None for the system locale. Unknown
                locales render with en_US data (warning logged).
            time_zone: IANA zone name or tzinfo, or None for the local zone
            value: Instant to render

        Returns:
            Formatted string

        Raises:
            FormattingError: If the zone is unknown or a field cannot be rendered
        """
        ctx = LocaleContext.create(locale)
        try:
            localized = _localize(value, time_zone)
            fmt = DateTimeFormat(localized, locale=ctx.babel_locale)
            return "".join(
                _render_field(token, fmt) if token.is_field else token.text
                for token in tokenize_pattern(pattern)
            )
        except (LookupError, ValueError, OverflowError, AttributeError) as e:
            fallback = value.isoformat()
            msg = f"Date formatting failed for '{fallback}' with pattern '{pattern}': {e}"
            logger.debug(msg)
            raise FormattingError(msg, fallback_value=fallback, pattern=pattern) from e


_DEFAULT_FORMATTER = PatternFormatter()


def get_default_formatter() -> PatternFormatter:
    """Shared formatter instance (stateless)."""
    return _DEFAULT_FORMATTER
