"""Collaborator protocols for template resolution and rendering.

DateTemplate does not resolve or render patterns itself. It delegates to two
capabilities, defined here as structural protocols so that any object with
the right methods can be injected (platform ICU bindings, test fakes, ...).

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

__all__ = ["DateFormatter", "PatternResolver"]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class PatternResolver(Protocol):
    """Resolves an LDML template into a locale's best-fit concrete pattern."""

    def resolve(self, template: str, locale: str | None) -> str | None:
        """Return the best-fit pattern, or None when no fit exists.

        Args:
            template: LDML template (pattern letters only)
            locale: Locale code, or None for the environment locale
        """
        ...


@runtime_checkable
class DateFormatter(Protocol):
    """Renders a concrete LDML pattern for an instant."""

    def render(
        self,
        pattern: str,
        locale: str | None,
        time_zone: str | tzinfo | None,
        value: datetime,
    ) -> str:
        """Render value with pattern under locale and time zone.

        Args:
            pattern: LDML pattern, interpreted strictly
            locale: Locale code, or None for the environment locale
            time_zone: IANA zone name or tzinfo, or None for the local zone
            value: Instant to render
        """
        ...
# pylint: enable=unnecessary-ellipsis
