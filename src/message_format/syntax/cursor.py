"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from message_format.diagnostics import SourceSpan

__all__ = ["WHITESPACE", "Cursor", "ParseResult"]

# Pattern_White_Space subset accepted between tokens of a complex format.
WHITESPACE: str = " \t\n\r"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input. Callers check is_eof first.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def starts_with(self, text: str) -> bool:
        """Check whether the remaining input begins with text."""
        return self.source.startswith(text, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip spaces, tabs, and line endings.

        Example:
            >>> Cursor("  \\n\\t one", 0).skip_whitespace().current
            'o'
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE:
            c = c.advance()
        return c

    def skip_until(self, stop_chars: str) -> "Cursor":
        """Advance to the first character in stop_chars (or EOF).

        Example:
            >>> Cursor("abc{d", 0).skip_until("{").pos
            3
        """
        c = self
        while not c.is_eof and c.current not in stop_chars:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("{x}", 0).expect("{").pos
            1
            >>> Cursor("{x}", 0).expect("}") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only called for error reporting.

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end_pos: int) -> SourceSpan:
        """SourceSpan from current position to end_pos, with line:column."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(self.pos, end_pos), line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every grammar rule has the shape:
        def parse_foo(cursor: Cursor, ...) -> ParseResult[Foo]

    and raises ParseError on failure; the parser never backtracks.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
