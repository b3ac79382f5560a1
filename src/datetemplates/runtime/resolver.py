"""Best-fit resolution of LDML templates against CLDR skeletons.

Turns a locale-independent template ("yMdjmm") into the concrete pattern a
locale uses ("M/d/y, h:mm a" for en_US), in the manner of ICU's
DateTimePatternGenerator:

1. Canonicalize: j becomes the locale's preferred hour letter, K/k fold into
   h/H, stand-alone letters (L, q, c) and textual e fold into their format
   counterparts (M, Q, E).
2. Match the whole skeleton against the locale's availableFormats with
   Babel's match_skeleton (UTS #35 distance rules).
3. Without a match, resolve the date fields and the time fields separately
   and join them with the locale's dateTimeFormat.
4. A part that still has no match drops fields one at a time until the rest
   matches; dropped fields are appended after it. A match only counts when
   its skeleton has every requested field (Babel ignores letters it does not
   know, such as U). The period is exempt: Babel drops it next to 24-hour
   hours on purpose.
5. Fractional seconds (S) follow the seconds field after the locale's
   decimal symbol ("h:mm:ss.SSS a"), or are appended when there is none.
6. Field widths of the matched pattern are adjusted to the requested ones.
   Hour, minute and second widths stay as the locale writes them; zone
   fields take the requested letter and width.

A miss (empty template, locale unknown to CLDR) returns None, and callers
fall back to the template itself.

Thread-safe. Results are memoized per (template, locale).

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from babel.dates import match_skeleton

from datetemplates.constants import (
    APPEND_ITEM_SEPARATOR,
    DATE_FIELD_LETTERS,
    PATTERN_CACHE_SIZE,
)
from datetemplates.locale_utils import resolve_locale_code

from .locale_context import GlueStyle, LocaleContext
from .pattern import PatternToken, field_widths, tokenize_pattern, untokenize_pattern

__all__ = [
    "SkeletonPatternResolver",
    "canonical_skeleton",
    "clear_pattern_cache",
    "get_default_resolver",
]

logger = logging.getLogger(__name__)

# Letters folded together for matching: availableFormats are keyed by
# format-context letters, and K/k are matched as h/H.
_FOLDED_LETTERS: dict[str, str] = {
    "L": "M",
    "q": "Q",
    "c": "E",
    "K": "h",
    "k": "H",
    "v": "z",
}

# Widths the locale's pattern decides; UTS #35 only adjusts these on request
_KEEP_WIDTH_LETTERS = frozenset("hHms")

_ZONE_LETTERS = frozenset("zvVOxXZ")

# Requested letters a match may leave out
_OPTIONAL_LETTERS = frozenset("a")

_FRACTION_LETTER = "S"
_SECOND_LETTER = "s"


def _fold(letter: str, width: int) -> str:
    if letter == "e" and width >= 3:
        return "E"
    return _FOLDED_LETTERS.get(letter, letter)


def canonical_skeleton(template: str, hour_symbol: str) -> list[PatternToken]:
    """Canonicalize template fields for skeleton matching.

    Args:
        template: LDML template
        hour_symbol: Letter AUTO hours (j) resolve to ('h' or 'H')

    Returns:
        Field tokens with folded letters, in template order

    Example:
        >>> [(t.text, t.width) for t in canonical_skeleton("LLLKccc", "H")]
        [('M', 3), ('h', 1), ('E', 3)]
    """
    fields: list[PatternToken] = []
    for token in tokenize_pattern(template):
        if not token.is_field:
            continue
        letter = hour_symbol if token.text == "j" else _fold(token.text, token.width)
        fields.append(PatternToken.field(letter, token.width))
    return fields


def _skeleton_text(fields: list[PatternToken]) -> str:
    return "".join(field.text * field.width for field in fields)


def _glue_style(date_fields: list[PatternToken]) -> GlueStyle:
    widths = field_widths(date_fields)
    month_width = widths.get("M", 0)
    if month_width >= 4:
        return "full" if "E" in widths else "long"
    if month_width == 3:
        return "medium"
    return "short"


class SkeletonPatternResolver:
    """PatternResolver backed by CLDR availableFormats through Babel.

    Example:
        >>> resolver = SkeletonPatternResolver()
        >>> resolver.resolve("yMdjmm", "en_US")
        'M/d/y, h:mm a'
        >>> resolver.resolve("", "en_US") is None
        True
    """

    __slots__ = ()

    def resolve(self, template: str, locale: str | None) -> str | None:
        """Resolve template for locale, or None when no fit exists."""
        return _resolve_cached(template, resolve_locale_code(locale))


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _resolve_cached(template: str, locale_code: str) -> str | None:
    if not template:
        return None

    ctx = LocaleContext.create(locale_code)
    if ctx.is_fallback:
        logger.debug(
            "No CLDR data for locale '%s'; template '%s' unresolved", locale_code, template
        )
        return None

    fields = canonical_skeleton(template, ctx.preferred_hour_symbol)
    return _Resolution(ctx).resolve(fields)


def clear_pattern_cache() -> None:
    """Clear memoized (template, locale) resolutions."""
    _resolve_cached.cache_clear()


class _Resolution:
    """Single resolution run against one locale's CLDR data."""

    __slots__ = ("_ctx", "_skeletons")

    def __init__(self, ctx: LocaleContext) -> None:
        self._ctx = ctx
        self._skeletons = ctx.skeleton_patterns

    def resolve(self, fields: list[PatternToken]) -> str | None:
        if not fields:
            return None

        fraction = [field for field in fields if field.text == _FRACTION_LETTER]
        rest = [field for field in fields if field.text != _FRACTION_LETTER]
        if fraction and rest:
            return self._attach_fraction(self._resolve_fields(rest), fraction[-1])
        return self._resolve_fields(fields)

    def _resolve_fields(self, fields: list[PatternToken]) -> str:
        pattern = self._match(fields)
        if pattern is not None:
            return pattern

        date_fields = [field for field in fields if field.text in DATE_FIELD_LETTERS]
        time_fields = [field for field in fields if field.text not in DATE_FIELD_LETTERS]
        if not date_fields or not time_fields:
            return self._resolve_part(fields)

        date_pattern = self._resolve_part(date_fields)
        time_pattern = self._resolve_part(time_fields)
        glue = self._ctx.datetime_glue(_glue_style(date_fields))
        return glue.replace("{1}", date_pattern).replace("{0}", time_pattern)

    def _match(self, fields: list[PatternToken]) -> str | None:
        skeleton = match_skeleton(_skeleton_text(fields), self._skeletons.keys())
        if skeleton is None or not _covers(skeleton, fields):
            return None
        return _adjust_widths(self._skeletons[skeleton], fields)

    def _resolve_part(self, fields: list[PatternToken]) -> str:
        pattern = self._match(fields)
        if pattern is not None:
            return pattern
        if len(fields) == 1:
            return untokenize_pattern(fields)

        logger.debug(
            "No skeleton for '%s' in locale '%s'; appending unmatched fields",
            _skeleton_text(fields),
            self._ctx.locale_code,
        )
        for index in reversed(range(len(fields))):
            rest = fields[:index] + fields[index + 1 :]
            pattern = self._match(rest)
            if pattern is not None:
                return pattern + APPEND_ITEM_SEPARATOR + untokenize_pattern([fields[index]])

        head = self._resolve_part(fields[:-1])
        return head + APPEND_ITEM_SEPARATOR + untokenize_pattern(fields[-1:])

    def _attach_fraction(self, pattern: str, fraction: PatternToken) -> str:
        """Place fractional seconds right after the seconds field."""
        tokens = tokenize_pattern(pattern)
        for index in reversed(range(len(tokens))):
            if tokens[index].is_field and tokens[index].text == _SECOND_LETTER:
                decimal = PatternToken.literal(self._ctx.decimal_symbol)
                tokens[index + 1 : index + 1] = [decimal, fraction]
                return untokenize_pattern(tokens)
        return pattern + APPEND_ITEM_SEPARATOR + untokenize_pattern([fraction])


def _covers(skeleton: str, requested: list[PatternToken]) -> bool:
    """Whether a matched skeleton has every requested field."""
    present = {_fold(token.text, token.width) for token in tokenize_pattern(skeleton)}
    return all(
        field.text in present or field.text in _OPTIONAL_LETTERS for field in requested
    )


def _adjust_widths(pattern: str, requested: list[PatternToken]) -> str:
    """Adjust field widths of a matched pattern to the requested fields."""
    wanted = {field.text: field for field in requested}
    tokens: list[PatternToken] = []
    for token in tokenize_pattern(pattern):
        if not token.is_field:
            tokens.append(token)
            continue
        request = wanted.get(_fold(token.text, token.width))
        if request is None or request.text in _KEEP_WIDTH_LETTERS:
            tokens.append(token)
        elif token.text in _ZONE_LETTERS:
            tokens.append(PatternToken.field(_zone_letter(request, token), request.width))
        else:
            tokens.append(PatternToken.field(token.text, request.width))
    return untokenize_pattern(tokens)


def _zone_letter(request: PatternToken, token: PatternToken) -> str:
    # Requested z folds to z; the matched pattern may carry generic v
    return "z" if request.text == "z" else token.text


_DEFAULT_RESOLVER = SkeletonPatternResolver()


def get_default_resolver() -> SkeletonPatternResolver:
    """Shared resolver instance (stateless; memoization is module-level)."""
    return _DEFAULT_RESOLVER
