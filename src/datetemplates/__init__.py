"""datetemplates - declarative, locale-independent LDML date format templates.

State which date parts to show and in which form; get a template that each
locale resolves to its own concrete pattern.

    >>> from datetemplates import DateTemplate, SymbolForm
    >>> template = DateTemplate().day_of_week(SymbolForm.FULL).time()
    >>> template.template
    'eeeejmm'
    >>> template.localized_format("en_US")
    'EEEE h:mm a'

Public API:
    DateTemplate - Immutable template builder
    SymbolForm - Rendering form of a symbol (numeric, abbreviated, ...)
    HourCycle - Hour cycle for hour symbols
    SymbolFamily - Conceptual date part of a symbol

Exceptions:
    DateTemplateError - Base exception class
    TemplateSymbolError - Invalid symbol run, template text or length
    FormattingError - Rendering failed

Submodules:
    datetemplates.symbols - Symbol mapping tables
    datetemplates.runtime - Pattern resolver, formatter and locale data
    datetemplates.locale_utils - Locale code normalization
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .enums import HourCycle, SymbolFamily, SymbolForm
from .errors import DateTemplateError, FormattingError, TemplateSymbolError
from .template import DateTemplate

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("datetemplates")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# LDML date pattern conformance
__ldml_spec_url__ = "https://www.unicode.org/reports/tr35/tr35-dates.html"

__all__ = [
    "DateTemplate",
    "DateTemplateError",
    "FormattingError",
    "HourCycle",
    "SymbolFamily",
    "SymbolForm",
    "TemplateSymbolError",
    "__ldml_spec_url__",
    "__version__",
]
