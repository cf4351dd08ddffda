"""Plural classifiers.

A classifier maps an integer to a PluralCategory. Plural formats hold one
and consult it after literal '=N' branches fail to match. Classifiers are
strategy objects: swapping one changes which branch is chosen, never how
branch selection works.

Two strategies ship:
    - english_cardinal_classifier: 1 -> one, everything else -> other
    - CldrPluralClassifier: per-locale CLDR rules from Babel

Python 3.13+. CldrPluralClassifier depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from babel.core import UnknownLocaleError

from message_format.enums import PluralCategory
from message_format.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = [
    "CldrPluralClassifier",
    "EnglishCardinalClassifier",
    "PluralClassifier",
    "english_cardinal_classifier",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class PluralClassifier(Protocol):
    """Pure function from an integer to its plural category."""

    def __call__(self, value: int) -> PluralCategory: ...


@dataclass(frozen=True, slots=True)
class EnglishCardinalClassifier:
    """English cardinal rule: exactly 1 is 'one', all else 'other'.

    Example:
        >>> english_cardinal_classifier(1)
        <PluralCategory.ONE: 'one'>
        >>> english_cardinal_classifier(0)
        <PluralCategory.OTHER: 'other'>
    """

    def __call__(self, value: int) -> PluralCategory:
        return PluralCategory.ONE if value == 1 else PluralCategory.OTHER


english_cardinal_classifier: PluralClassifier = EnglishCardinalClassifier()
"""Default classifier used by plural formats."""


@dataclass(frozen=True, slots=True)
class CldrPluralClassifier:
    """CLDR cardinal rules for a locale, using Babel's CLDR data.

    Babel handles all CLDR categories (zero, one, two, few, many, other) for
    200+ locales with automatic fallback to language-level rules. If the
    locale cannot be parsed, the English rule is used and a warning logged.

    Attributes:
        locale: Locale code (BCP-47 or POSIX, e.g. "pl-PL", "ar_SA")

    Example:
        >>> CldrPluralClassifier("pl")(2)
        <PluralCategory.FEW: 'few'>
        >>> CldrPluralClassifier("lv")(0)
        <PluralCategory.ZERO: 'zero'>
    """

    locale: str
    _rule: PluralRule | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Resolve the Babel plural rule once."""
        try:
            rule: PluralRule | None = get_babel_locale(self.locale).plural_form
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to English plural rule",
                self.locale,
                e,
            )
            rule = None
        object.__setattr__(self, "_rule", rule)

    def __call__(self, value: int) -> PluralCategory:
        if self._rule is None:
            return english_cardinal_classifier(value)
        return PluralCategory(self._rule(value))
