"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (missing or mistyped render arguments)
        2000-2999: Render errors (context and nesting failures)
        3000-3999: Syntax errors (template parse failures)
        4000-4999: Serialization errors (AST cannot be written as a template)
    """

    # Argument errors (1000-1999)
    ARGUMENT_MISSING = 1001
    ARGUMENT_TYPE_MISMATCH = 1002

    # Render errors (2000-2999)
    PLACEHOLDER_WITHOUT_VALUE = 2001
    MAX_DEPTH_EXCEEDED = 2002

    # Syntax errors (3000-3999)
    PARSE_INCOMPLETE = 3001
    PARSE_EXPECTED_TOKEN = 3002
    PARSE_UNKNOWN_KEYWORD = 3003
    PARSE_INVALID_BRANCH_KEY = 3004
    PARSE_DUPLICATE_BRANCH = 3005
    PARSE_MISSING_OTHER_BRANCH = 3006
    PARSE_NESTING_DEPTH_EXCEEDED = 3007
    PARSE_SOURCE_TOO_LARGE = 3008

    # Serialization errors (4000-4999)
    SERIALIZE_UNREPRESENTABLE_TEXT = 4001
    SERIALIZE_INVALID_NAME = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Template location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Template location (None for render errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        argument_name: Argument name that caused the error (render errors)
        expected_type: Expected value type (type mismatches)
        received_type: Actual value type received (type mismatches)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[ARGUMENT_MISSING]: Argument 'name' not provided
              = argument: name
              = help: Attach 'name' to the arguments with arg('name', ...)

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
