"""LDML date pattern tokenizer.

Splits CLDR date patterns into field runs and literal text, and joins them
back. Used by the resolver (to read and adjust best-fit patterns) and the
formatter (to render patterns field by field).

CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

Only ASCII letters are field letters. Other letters (年, 月, 日 in CJK
patterns) are literal text even when unquoted.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "PatternToken",
    "field_widths",
    "tokenize_pattern",
    "untokenize_pattern",
]


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One token of an LDML pattern.

    Attributes:
        text: Field letter (for fields) or literal text
        width: Repeat count of the field letter; 0 for literal text
    """

    text: str
    width: int = 0

    @property
    def is_field(self) -> bool:
        return self.width > 0

    @classmethod
    def field(cls, letter: str, width: int) -> PatternToken:
        return cls(letter, width)

    @classmethod
    def literal(cls, text: str) -> PatternToken:
        return cls(text, 0)


def _is_field_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def tokenize_pattern(pattern: str) -> list[PatternToken]:
    """Tokenize an LDML pattern into field and literal tokens.

    Adjacent literal characters are merged into one literal token.

    Examples:
        "h 'o''clock' a" -> [h, " o'clock ", a]
        "d.MM.y" -> [d, ".", MM, ".", y]
        "y年M月d日" -> [y, "年", M, "月", d, "日"]

    Args:
        pattern: LDML date pattern

    Returns:
        List of PatternToken
    """
    tokens: list[PatternToken] = []
    literal_chars: list[str] = []
    i = 0
    n = len(pattern)

    def flush_literal() -> None:
        if literal_chars:
            tokens.append(PatternToken.literal("".join(literal_chars)))
            literal_chars.clear()

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal_chars.append("'")
                i += 2
                continue

            i += 1  # Skip opening quote
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1
            continue

        if _is_field_letter(char):
            flush_literal()
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append(PatternToken.field(char, j - i))
            i = j
            continue

        literal_chars.append(char)
        i += 1

    flush_literal()
    return tokens


def _quote_literal(text: str) -> str:
    # Only letter runs need quoting; an apostrophe joins an open quoted run
    parts: list[str] = []
    quoted: list[str] = []
    for char in text:
        if _is_field_letter(char) or (char == "'" and quoted):
            quoted.append("''" if char == "'" else char)
            continue
        if quoted:
            parts.append("'" + "".join(quoted) + "'")
            quoted.clear()
        parts.append("''" if char == "'" else char)
    if quoted:
        parts.append("'" + "".join(quoted) + "'")
    return "".join(parts)


def untokenize_pattern(tokens: list[PatternToken]) -> str:
    """Join tokens back into an LDML pattern, quoting literals as needed.

    Example:
        >>> untokenize_pattern(tokenize_pattern("HH 'h'"))
        "HH 'h'"
    """
    parts: list[str] = []
    for token in tokens:
        if token.is_field:
            parts.append(token.text * token.width)
        else:
            parts.append(_quote_literal(token.text))
    return "".join(parts)


def field_widths(tokens: list[PatternToken]) -> dict[str, int]:
    """Map each field letter to its width (last occurrence wins)."""
    return {token.text: token.width for token in tokens if token.is_field}
