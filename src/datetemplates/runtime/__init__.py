"""Runtime collaborators for date templates.

Provides the CLDR-backed pattern resolver, the Babel-backed pattern formatter
and the locale data they share. Depends on Babel.

Python 3.13+.
"""

from .formatter import PatternFormatter, get_default_formatter
from .locale_context import LocaleContext
from .protocols import DateFormatter, PatternResolver
from .resolver import SkeletonPatternResolver, clear_pattern_cache, get_default_resolver

__all__ = [
    "DateFormatter",
    "LocaleContext",
    "PatternFormatter",
    "PatternResolver",
    "SkeletonPatternResolver",
    "clear_pattern_cache",
    "get_default_formatter",
    "get_default_resolver",
]
