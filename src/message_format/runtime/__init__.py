"""Render runtime package.

Provides argument values, the argument chain, render context, and plural
classifiers. Depends on nothing in the syntax package, so AST nodes can
hold classifiers without an import cycle.

The renderer itself lives in message_format.runtime.renderer and is
imported from there (it needs the AST).

Python 3.13+.
"""

from .args import Args, arg
from .context import Context
from .plural_rules import (
    CldrPluralClassifier,
    EnglishCardinalClassifier,
    PluralClassifier,
    english_cardinal_classifier,
)
from .value_types import Number, Str, Value, as_value

__all__ = [
    "Args",
    "CldrPluralClassifier",
    "Context",
    "EnglishCardinalClassifier",
    "Number",
    "PluralClassifier",
    "Str",
    "Value",
    "arg",
    "as_value",
    "english_cardinal_classifier",
]
