"""Shared constants for datetemplates.

This module provides centralized configuration constants used across the
builder and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Symbol letters: LDML pattern letters and template-only symbols
- Cache limits: Memory bounds for caching subsystems
- Locale fallbacks: Locale and CLDR data used when lookups fail

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Symbol letters
    "PATTERN_LETTERS",
    "TEMPLATE_ONLY_SYMBOLS",
    "DATE_FIELD_LETTERS",
    "JULIAN_DAY_OFFSET",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "PATTERN_CACHE_SIZE",
    # Locale fallbacks
    "FALLBACK_LOCALE",
    "DEFAULT_DATETIME_GLUE",
    "APPEND_ITEM_SEPARATOR",
]

# ============================================================================
# SYMBOL LETTERS
# ============================================================================

# Every letter LDML assigns a date/time field to (UTS #35, Date Field Symbol
# Table). Templates are made of these letters only.
PATTERN_LETTERS: frozenset[str] = frozenset("GyYuUrQqMLlwWdDFgEecabBhHKkjJCmsSAzZOvVXx")

# Symbols that only mean something inside a template (resolved per locale).
# Rendered as a strict pattern they produce no output.
TEMPLATE_ONLY_SYMBOLS: frozenset[str] = frozenset("jJC")

# Split used when a template has no single best-fit skeleton: the date part
# and the time part are resolved separately and glued with dateTimeFormat.
DATE_FIELD_LETTERS: frozenset[str] = frozenset("GyYuUrQqMLlwWdDFgEec")

# Julian day number of 0001-01-01 minus its proleptic Gregorian ordinal (1).
JULIAN_DAY_OFFSET: int = 1721425

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances to cache.
# 128 covers every locale a typical application formats in.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum number of resolved (template, locale) patterns to memoize.
PATTERN_CACHE_SIZE: int = 1024

# ============================================================================
# LOCALE FALLBACKS
# ============================================================================

# Locale used when the requested locale is unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"

# dateTimeFormat used when CLDR has none for a style ({1} = date, {0} = time).
DEFAULT_DATETIME_GLUE: str = "{1} {0}"

# Separator for fields appended after a partial best-fit match.
APPEND_ITEM_SEPARATOR: str = " "
