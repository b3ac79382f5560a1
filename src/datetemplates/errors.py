"""Date template exception hierarchy.

Building templates never fails for well-typed input; errors are raised only
for malformed raw symbol runs and for failures of the rendering layer.
Resolver misses are not errors: the raw template is used instead.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DateTemplateError",
    "FormattingError",
    "TemplateSymbolError",
]


class DateTemplateError(Exception):
    """Base exception for all date template errors."""


class TemplateSymbolError(DateTemplateError, ValueError):
    """Invalid LDML symbol run, template text, or symbol length.

    Raised when raw text handed to DateTemplate is not made of LDML pattern
    letters, or a length-parameterized symbol receives a non-positive length.

    Attributes:
        symbol: The offending run, template or length (as given)
    """

    def __init__(self, message: str, *, symbol: object = None) -> None:
        """Initialize TemplateSymbolError.

        Args:
            message: Error message
            symbol: The offending input
        """
        super().__init__(message)
        self.symbol = symbol


class FormattingError(DateTemplateError):
    """Raised when rendering a pattern for an instant fails.

    The error carries a fallback_value (ISO 8601 text of the instant) that
    callers may show instead of the formatted string.

    Attributes:
        fallback_value: String to use in output when formatting fails
        pattern: The LDML pattern that failed to render
    """

    def __init__(self, message: str, fallback_value: str, *, pattern: str = "") -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string
            fallback_value: Value to use in output when formatting fails
            pattern: The LDML pattern being rendered
        """
        super().__init__(message)
        self.fallback_value = fallback_value
        self.pattern = pattern
