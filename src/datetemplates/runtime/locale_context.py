"""Locale context for thread-safe CLDR date pattern lookups.

This module provides the locale data template resolution and rendering need
without global state mutation. Uses Babel for CLDR availableFormats
(skeletons), dateTimeFormat glue patterns and preferred hour cycles.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Lookups use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per normalized locale code (LRU)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar, Literal, TypeAlias

from babel import Locale, UnknownLocaleError
from babel.numbers import get_decimal_symbol

from datetemplates.constants import (
    DEFAULT_DATETIME_GLUE,
    FALLBACK_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
)
from datetemplates.locale_utils import get_babel_locale, resolve_locale_code

from .pattern import tokenize_pattern

__all__ = ["GlueStyle", "LocaleContext"]

logger = logging.getLogger(__name__)

GlueStyle: TypeAlias = Literal["full", "long", "medium", "short"]

_TWELVE_HOUR_LETTERS = frozenset("hK")
_TWENTY_FOUR_HOUR_LETTERS = frozenset("Hk")


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for template resolution and rendering.

    Use LocaleContext.create() factory to construct instances with proper validation.
    Direct construction via __init__ is not recommended (bypasses validation).

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse. Use class
        methods for cache management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.preferred_hour_symbol
        'h'

        >>> LocaleContext.create('es-ES').preferred_hour_symbol
        'H'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.locale_code  # Original code preserved
        'invalid-locale'
        >>> ctx.is_fallback  # Programmatic detection of fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Multiple threads can
        share the same instance without synchronization. Cache operations
        are protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str | None = None) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds - use create_or_raise() if you need strict
        validation.

        Args:
            locale_code: BCP 47 or POSIX locale identifier. None uses the
                system locale.

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            fallback while preserving the original locale_code for debugging.
        """
        cache_key = resolve_locale_code(locale_code)
        display_code = cache_key if locale_code is None else locale_code

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", display_code, e, FALLBACK_LOCALE
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                display_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=display_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have cached the same key meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = get_babel_locale(resolve_locale_code(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def preferred_hour_symbol(self) -> str:
        """Hour letter the locale prefers: 'h' (12-hour) or 'H' (24-hour).

        Read from the CLDR short time format, which carries the locale's
        preferred hour cycle. Defaults to 'H' when no hour field is found.
        """
        short_format = self._babel_locale.time_formats.get("short")
        pattern = getattr(short_format, "pattern", str(short_format or ""))
        for token in tokenize_pattern(pattern):
            if token.is_field and token.text in _TWELVE_HOUR_LETTERS:
                return "h"
            if token.is_field and token.text in _TWENTY_FOUR_HOUR_LETTERS:
                return "H"
        return "H"

    @property
    def skeleton_patterns(self) -> dict[str, str]:
        """CLDR availableFormats: skeleton -> localized pattern."""
        return {
            skeleton: getattr(pattern, "pattern", str(pattern))
            for skeleton, pattern in self._babel_locale.datetime_skeletons.items()
        }

    @property
    def decimal_symbol(self) -> str:
        """CLDR decimal separator (Latin digits), used between seconds and fractions."""
        return get_decimal_symbol(self._babel_locale)

    def datetime_glue(self, style: GlueStyle) -> str:
        """CLDR dateTimeFormat for combining a date and a time pattern.

        The result uses {1} for the date and {0} for the time. Falls back
        through medium and short to a plain "{1} {0}".
        """
        formats = self._babel_locale.datetime_formats
        glue = formats.get(style) or formats.get("medium") or formats.get("short")
        if glue is None:
            return DEFAULT_DATETIME_GLUE
        return str(getattr(glue, "pattern", glue))
