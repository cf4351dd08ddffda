"""Message-format exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Every error here is a contract violation between a template and its caller
(bad template text, missing or mistyped argument); none is transient.

Python 3.13+. Zero external dependencies.
"""

from message_format.enums import ParseErrorKind

from .codes import Diagnostic

__all__ = [
    "DepthLimitExceededError",
    "MessageFormatError",
    "MissingArgumentError",
    "MissingContextValueError",
    "ParseError",
    "RenderError",
    "SerializationError",
    "TypeMismatchError",
]


class MessageFormatError(Exception):
    """Base exception for all message-format errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseError(MessageFormatError):
    """Template text could not be parsed.

    Parsing stops at the first error; no partial Message is produced.

    Attributes:
        kind: Classification of the failure
        position: Character offset where parsing stopped
        expected: Tokens that would have been accepted (may be empty)
        source: Template text being parsed (empty if unknown)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: ParseErrorKind,
        position: int = 0,
        expected: tuple[str, ...] = (),
        source: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.position = position
        self.expected = expected
        self.source = source

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with template context and a caret pointer.

        Args:
            context_lines: Number of lines to show before/after the error line

        Returns:
            Multi-line formatted error

        Example:
            >>> try:
            ...     parse("Hello {name")
            ... except ParseError as e:
            ...     print(e.format_with_context())
            1:12: Unterminated '{' in template
            <BLANKLINE>
               1 | Hello {name
                 |            ^
        """
        source = self.source
        line = source.count("\n", 0, self.position) + 1
        last_newline = source.rfind("\n", 0, self.position)
        col = self.position - last_newline if last_newline >= 0 else self.position + 1
        lines = source.split("\n")

        summary = self.diagnostic.message if self.diagnostic else str(self)
        result_lines = [f"{line}:{col}: {summary}", ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)


class RenderError(MessageFormatError):
    """Runtime error while rendering a Message.

    Rendering is fail-fast: the first RenderError aborts the whole render
    and no partial output is returned by render_to_string().
    """


class MissingArgumentError(RenderError):
    """A node references a variable that is absent from the arguments.

    Attributes:
        variable_name: Name that could not be resolved
    """

    def __init__(self, message: str | Diagnostic, *, variable_name: str) -> None:
        super().__init__(message)
        self.variable_name = variable_name


class TypeMismatchError(RenderError):
    """Argument is present but holds the wrong Value variant.

    Example:
        A plural format whose variable holds Str("five") instead of Number(5).

    Attributes:
        variable_name: Name of the offending argument
        expected: Variant the node needs ("Number" or "Str")
        received: Variant that was supplied
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        variable_name: str,
        expected: str,
        received: str,
    ) -> None:
        super().__init__(message)
        self.variable_name = variable_name
        self.expected = expected
        self.received = received


class MissingContextValueError(RenderError):
    """Placeholder '#' rendered with no plural value in the Context."""


class DepthLimitExceededError(RenderError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Malformed programmatic tree construction
    """


class SerializationError(MessageFormatError):
    """Message tree cannot be written back as template text."""
