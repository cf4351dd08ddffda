"""Primitive parsing utilities for the message template parser.

This module provides low-level parsers for variable names, keywords,
branch keys, and integers, plus the helper that turns a failure into a
ParseError with position information.
"""

from message_format.constants import INT64_MAX, INT64_MIN
from message_format.diagnostics import Diagnostic, ErrorTemplate, ParseError
from message_format.enums import ParseErrorKind
from message_format.syntax.cursor import WHITESPACE, Cursor, ParseResult

__all__ = [
    "incomplete",
    "int64_from_text",
    "parse_failure",
    "parse_integer",
    "parse_variable_name",
    "parse_word",
    "require",
]

# ASCII digits only. str.isdigit() accepts characters like '²' that int() rejects.
_ASCII_DIGITS: str = "0123456789"

# Characters that end a keyword or a branch key.
_WORD_TERMINATORS: str = WHITESPACE + "{},"

# Digits in INT64_MAX; longer runs (ignoring leading zeros) are out of range.
_INT64_MAX_DIGITS: int = len(str(INT64_MAX))


def parse_failure(
    kind: ParseErrorKind,
    diagnostic: Diagnostic,
    cursor: Cursor,
    expected: tuple[str, ...] = (),
) -> ParseError:
    """Build the ParseError for a failure at cursor.

    Returned rather than raised so call sites read `raise parse_failure(...)`.
    """
    return ParseError(
        diagnostic,
        kind=kind,
        position=cursor.pos,
        expected=expected,
        source=cursor.source,
    )


def incomplete(cursor: Cursor) -> ParseError:
    """ParseError for input that ended inside an open '{'."""
    return parse_failure(
        ParseErrorKind.INCOMPLETE,
        ErrorTemplate.parse_incomplete(cursor.span_to(cursor.pos)),
        cursor,
        ("}",),
    )


def require(cursor: Cursor, char: str) -> Cursor:
    """Consume char or raise.

    Raises:
        ParseError: incomplete at EOF, expected-token otherwise
    """
    if cursor.is_eof:
        raise incomplete(cursor)
    advanced = cursor.expect(char)
    if advanced is None:
        raise parse_failure(
            ParseErrorKind.EXPECTED_TOKEN,
            ErrorTemplate.parse_expected_token((char,), cursor.current, cursor.span_to(cursor.pos + 1)),
            cursor,
            (char,),
        )
    return advanced


def parse_variable_name(cursor: Cursor) -> ParseResult[str]:
    """Parse variable name: run of characters other than ',' and '}'.

    Surrounding whitespace is not part of the name.

    Examples:
        "name}"     -> "name"
        " count ,"  -> "count"

    Raises:
        ParseError: incomplete at EOF, expected-token if the name is empty
    """
    start = cursor
    end = cursor.skip_until(",}")
    if end.is_eof:
        raise incomplete(end)
    name = start.slice_to(end.pos).strip(WHITESPACE)
    if not name:
        raise parse_failure(
            ParseErrorKind.EXPECTED_TOKEN,
            ErrorTemplate.parse_expected_token(
                ("variable name",), end.current, end.span_to(end.pos + 1)
            ),
            end,
            ("variable name",),
        )
    return ParseResult(name, end)


def parse_word(cursor: Cursor) -> ParseResult[str]:
    """Parse a keyword or branch key: run of non-whitespace, non-brace characters.

    May return an empty string; callers decide whether that is an error.

    Raises:
        ParseError: incomplete if input ends inside the word
    """
    end = cursor.skip_until(_WORD_TERMINATORS)
    if end.is_eof:
        raise incomplete(end)
    return ParseResult(cursor.slice_to(end.pos), end)


def parse_integer(cursor: Cursor) -> ParseResult[int]:
    """Parse integer: '-'? [0-9]+

    Examples:
        "42 "  -> 42
        "-1{"  -> -1

    Raises:
        ParseError: incomplete at EOF, expected-token if no digits follow or
            the value is outside the 64-bit signed range
    """
    start = cursor
    if not cursor.is_eof and cursor.current == "-":
        cursor = cursor.advance()
    digits_start = cursor.pos
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()
    if cursor.pos == digits_start:
        if cursor.is_eof:
            raise incomplete(cursor)
        raise parse_failure(
            ParseErrorKind.EXPECTED_TOKEN,
            ErrorTemplate.parse_expected_token(("0-9",), cursor.current, cursor.span_to(cursor.pos + 1)),
            cursor,
            ("0-9",),
        )
    text = start.slice_to(cursor.pos)
    value = int64_from_text(text)
    if value is None:
        found = text if len(text) <= _INT64_MAX_DIGITS + 1 else f"{text[:_INT64_MAX_DIGITS]}..."
        raise parse_failure(
            ParseErrorKind.EXPECTED_TOKEN,
            ErrorTemplate.parse_expected_token(
                ("64-bit integer",), found, start.span_to(cursor.pos)
            ),
            start,
            ("64-bit integer",),
        )
    return ParseResult(value, cursor)


def int64_from_text(text: str) -> int | None:
    """Convert '-'? [0-9]+ (ASCII digits only) to an int in the 64-bit signed range.

    Returns None for any other text, including digit runs too long for int().

    Examples:
        "-12"                  -> -12
        "007"                  -> 7
        "9223372036854775808"  -> None
    """
    digits = text.removeprefix("-")
    if not digits or any(ch not in _ASCII_DIGITS for ch in digits):
        return None
    significant = digits.lstrip("0") or "0"
    if len(significant) > _INT64_MAX_DIGITS:
        return None
    value = -int(significant) if text.startswith("-") else int(significant)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value
