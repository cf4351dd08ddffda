"""message-format - ICU-style message formatting.

Parses templates such as "{count, plural, one {# file} other {# files}}"
into an immutable Message tree and renders them against named arguments.
Plural and select formats choose a branch from an argument; plural
categories come from a pluggable classifier (English by default, any CLDR
locale through Babel).

Public API:
    parse - Parse template text to a Message
    serialize - Write a Message back as template text
    Message - Renderable template (render, render_to_string, variables)
    arg - Start an argument chain: arg("name", "Ada").arg("count", 3)
    Context - Render-time state (language tag, plural placeholder value)
    CldrPluralClassifier - Per-locale plural rules from CLDR

Exceptions:
    MessageFormatError - Base exception class
    ParseError - Malformed template text
    RenderError - Render failures (missing/mistyped argument, stray '#', depth)
    SerializationError - Tree has no template text form

Submodules:
    message_format.syntax - Parser, AST nodes, serializer
    message_format.runtime - Values, arguments, context, classifiers
    message_format.runtime.renderer - MessageRenderer and the OutputSink protocol
    message_format.diagnostics - Diagnostics, error templates, formatters
"""

# Essential Public API
from .diagnostics import (
    DepthLimitExceededError,
    MessageFormatError,
    MissingArgumentError,
    MissingContextValueError,
    ParseError,
    RenderError,
    SerializationError,
    TypeMismatchError,
)
from .enums import ParseErrorKind, PluralCategory
from .syntax import (
    FormatNode,
    Message,
    MessageParser,
    PlaceholderFormat,
    PlainText,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
    parse,
    serialize,
)
from .runtime import (
    Args,
    CldrPluralClassifier,
    Context,
    Number,
    PluralClassifier,
    Str,
    Value,
    arg,
    as_value,
    english_cardinal_classifier,
)
from .runtime.renderer import MessageRenderer, OutputSink

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("message-format")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Args",
    "CldrPluralClassifier",
    "Context",
    "DepthLimitExceededError",
    "FormatNode",
    "Message",
    "MessageFormatError",
    "MessageParser",
    "MessageRenderer",
    "MissingArgumentError",
    "MissingContextValueError",
    "Number",
    "OutputSink",
    "ParseError",
    "ParseErrorKind",
    "PlaceholderFormat",
    "PlainText",
    "PluralCategory",
    "PluralClassifier",
    "PluralFormat",
    "RenderError",
    "SelectFormat",
    "SerializationError",
    "SimpleFormat",
    "Str",
    "TypeMismatchError",
    "Value",
    "__version__",
    "arg",
    "as_value",
    "english_cardinal_classifier",
    "parse",
    "serialize",
]
