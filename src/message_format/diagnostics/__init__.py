"""Diagnostic system for message-format errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DepthLimitExceededError,
    MessageFormatError,
    MissingArgumentError,
    MissingContextValueError,
    ParseError,
    RenderError,
    SerializationError,
    TypeMismatchError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MessageFormatError",
    "MissingArgumentError",
    "MissingContextValueError",
    "OutputFormat",
    "ParseError",
    "RenderError",
    "SerializationError",
    "SourceSpan",
    "TypeMismatchError",
]
