"""Enumerations for message-format type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR grammatical-number category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one".
    The values are the CLDR keywords, which are also the plural branch keys
    accepted in template text.
    """

    ZERO = "zero"
    """Value is 0 (or a locale-defined zero class, e.g. Latvian 10, 20, ...)."""

    ONE = "one"
    """Singular form. In English, exactly 1."""

    TWO = "two"
    """Dual form (Arabic, Slovenian, ...)."""

    FEW = "few"
    """Paucal form. Exact range depends on the locale."""

    MANY = "many"
    """Large-number form. Exact range depends on the locale."""

    OTHER = "other"
    """Everything else. In English, the plural form. Always available."""


class FormatKeyword(StrEnum):
    """Keyword following the variable name in a complex format.

    StrEnum provides automatic string conversion: str(FormatKeyword.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Plural dispatch: {count, plural, one {...} other {...}}"""

    SELECT = "select"
    """Select dispatch: {gender, select, female {...} other {...}}"""


class ParseErrorKind(StrEnum):
    """Classification of template parse failures.

    StrEnum provides automatic string conversion: str(ParseErrorKind.INCOMPLETE) == "incomplete"
    """

    INCOMPLETE = "incomplete"
    """End of input reached before a '{' was closed."""

    EXPECTED_TOKEN = "expected-token"
    """A required token was missing."""

    UNKNOWN_KEYWORD = "unknown-keyword"
    """Format keyword other than 'plural' or 'select'."""

    INVALID_BRANCH_KEY = "invalid-branch-key"
    """Plural branch key that is neither '=N' nor a CLDR category."""

    DUPLICATE_BRANCH = "duplicate-branch"
    """Same branch key given twice in one plural/select body."""

    MISSING_OTHER_BRANCH = "missing-other-branch"
    """Plural/select body without the mandatory 'other' branch."""

    NESTING_TOO_DEEP = "nesting-too-deep"
    """Branch bodies nested beyond the configured depth limit."""

    SOURCE_TOO_LARGE = "source-too-large"
    """Template longer than the configured size limit."""


__all__ = [
    "FormatKeyword",
    "ParseErrorKind",
    "PluralCategory",
]
