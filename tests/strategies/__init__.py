"""Hypothesis strategies for message-format property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- messages: Message trees, argument chains, and raw template text

Usage:
    from tests.strategies import messages, args_for
    from tests.strategies.messages import plural_formats, select_keys
"""

from .messages import (
    SAFE_TEXT_CHARS,
    args_for,
    int64_values,
    messages,
    plural_formats,
    plural_names,
    safe_text,
    select_formats,
    select_keys,
    select_names,
    simple_names,
    template_chaos,
)

__all__ = [
    "SAFE_TEXT_CHARS",
    "args_for",
    "int64_values",
    "messages",
    "plural_formats",
    "plural_names",
    "safe_text",
    "select_formats",
    "select_keys",
    "select_names",
    "simple_names",
    "template_chaos",
]
