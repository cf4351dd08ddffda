"""Grammar rules for message templates.

Grammar:
    message       := part*
    part          := plain_text | format | placeholder
    format        := '{' variable_name (',' keyword ','? sub_body)? '}'
    plural_body   := ('offset:' integer)? (plural_key '{' message '}')+
    select_body   := (select_key '{' message '}')+
    placeholder   := '#'   (inside plural branches only)

Whitespace is allowed between the tokens of a format. Branch bodies are
messages parsed by the same rule, terminated by '}'. The parser never
backtracks: every rule either consumes input and returns a ParseResult or
raises ParseError.
"""

from dataclasses import dataclass, replace

from message_format.constants import MAX_DEPTH
from message_format.diagnostics import ErrorTemplate, ParseError
from message_format.enums import FormatKeyword, ParseErrorKind, PluralCategory
from message_format.runtime.plural_rules import (
    PluralClassifier,
    english_cardinal_classifier,
)
from message_format.syntax.ast import (
    FormatNode,
    Message,
    PlaceholderFormat,
    PlainText,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
)
from message_format.syntax.cursor import Cursor, ParseResult
from message_format.syntax.parser.primitives import (
    incomplete,
    int64_from_text,
    parse_failure,
    parse_integer,
    parse_variable_name,
    parse_word,
    require,
)

__all__ = [
    "ParseContext",
    "parse_format",
    "parse_message_parts",
    "parse_plain_text",
    "parse_plural_body",
    "parse_select_body",
]

_OFFSET_PREFIX: str = "offset:"
_PLACEHOLDER: str = "#"
_OTHER: str = PluralCategory.OTHER.value


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces thread-local state with explicit parameter passing, so the
    parser is reentrant and needs no reset between calls.

    Attributes:
        max_nesting_depth: Maximum allowed nesting of branch bodies
        current_depth: Current nesting depth (0 = top level)
        classifier: Classifier given to every PluralFormat built
        in_plural: Inside a plural branch ('#' is a placeholder)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0
    classifier: PluralClassifier = english_cardinal_classifier
    in_plural: bool = False

    @property
    def is_nested(self) -> bool:
        """Inside a branch body ('}' ends the message)."""
        return self.current_depth > 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_branch(self, keyword: FormatKeyword) -> "ParseContext":
        """Create new context for a branch body of a plural or select format.

        Select branches inherit in_plural, so '#' inside a select nested in a
        plural still refers to the plural value.
        """
        return replace(
            self,
            current_depth=self.current_depth + 1,
            in_plural=self.in_plural or keyword is FormatKeyword.PLURAL,
        )


# =============================================================================
# Message Parsing
# =============================================================================


def parse_message_parts(cursor: Cursor, context: ParseContext) -> ParseResult[Message]:
    """Parse message := part*

    At top level, parsing runs to end of input. Inside a branch body it
    stops before the closing '}' (not consumed).

    Raises:
        ParseError: On malformed formats, or incomplete if a branch body
            reaches end of input
    """
    parts: list[FormatNode] = []
    nested = context.is_nested

    while True:
        if cursor.is_eof:
            if nested:
                raise incomplete(cursor)
            break

        char = cursor.current
        if nested and char == "}":
            break

        if char == "{":
            format_result = parse_format(cursor, context)
            parts.append(format_result.value)
            cursor = format_result.cursor
        elif context.in_plural and char == _PLACEHOLDER:
            parts.append(PlaceholderFormat())
            cursor = cursor.advance()
        else:
            text_result = parse_plain_text(cursor, context)
            parts.append(text_result.value)
            cursor = text_result.cursor

    return ParseResult(Message(tuple(parts)), cursor)


def parse_plain_text(cursor: Cursor, context: ParseContext) -> ParseResult[PlainText]:
    """Parse plain_text: run of characters up to the next special character.

    Special characters:
        top level:      '{'
        branch body:    '{', '}'
        plural branch:  '{', '}', '#'

    At least one character is consumed.
    """
    stop_chars = "{"
    if context.is_nested:
        stop_chars += "}"
    if context.in_plural:
        stop_chars += _PLACEHOLDER
    end = cursor.advance().skip_until(stop_chars)
    return ParseResult(PlainText(cursor.slice_to(end.pos)), end)


# =============================================================================
# Format Parsing
# =============================================================================


def parse_format(cursor: Cursor, context: ParseContext) -> ParseResult[FormatNode]:
    """Parse format := '{' variable_name (',' keyword ','? sub_body)? '}'

    Examples:
        {host}                                      -> SimpleFormat
        {count, plural, one {# item} other {# items}} -> PluralFormat
        {kind, select, block {Block} other {Inline}}  -> SelectFormat

    Raises:
        ParseError: incomplete if no closing '}', or a more specific kind
            for a malformed keyword or body
    """
    cursor = require(cursor, "{").skip_whitespace()

    name_result = parse_variable_name(cursor)
    variable_name = name_result.value
    cursor = name_result.cursor

    if cursor.current == "}":
        return ParseResult(SimpleFormat(variable_name), cursor.advance())

    # At ',' (parse_variable_name stops only at ',' or '}')
    cursor = cursor.advance().skip_whitespace()
    keyword_result = _parse_keyword(cursor)
    keyword = keyword_result.value
    cursor = keyword_result.cursor.skip_whitespace()

    comma = cursor.expect(",")
    if comma is not None:
        cursor = comma.skip_whitespace()

    node: FormatNode
    match keyword:
        case FormatKeyword.PLURAL:
            plural_result = parse_plural_body(cursor, context, variable_name)
            node, cursor = plural_result.value, plural_result.cursor
        case FormatKeyword.SELECT:
            select_result = parse_select_body(cursor, context, variable_name)
            node, cursor = select_result.value, select_result.cursor

    return ParseResult(node, require(cursor, "}"))


def _parse_keyword(cursor: Cursor) -> ParseResult[FormatKeyword]:
    """Parse keyword := 'plural' | 'select'"""
    word_result = parse_word(cursor)
    word = word_result.value
    if not word:
        raise parse_failure(
            ParseErrorKind.EXPECTED_TOKEN,
            ErrorTemplate.parse_expected_token(
                ("plural", "select"), cursor.current, cursor.span_to(cursor.pos + 1)
            ),
            cursor,
            ("plural", "select"),
        )
    try:
        keyword = FormatKeyword(word)
    except ValueError:
        raise parse_failure(
            ParseErrorKind.UNKNOWN_KEYWORD,
            ErrorTemplate.parse_unknown_keyword(word, cursor.span_to(word_result.cursor.pos)),
            cursor,
            ("plural", "select"),
        ) from None
    return ParseResult(keyword, word_result.cursor)


# =============================================================================
# Branch Bodies
# =============================================================================


def parse_plural_body(
    cursor: Cursor, context: ParseContext, variable_name: str
) -> ParseResult[PluralFormat]:
    """Parse plural_body := ('offset:' integer)? (plural_key '{' message '}')+

    plural_key is '=N' (exact value after offset, 64-bit signed range) or a
    CLDR category keyword.
    Stops before the '}' that closes the format.

    Raises:
        ParseError: invalid-branch-key, duplicate-branch, missing-other-branch,
            or incomplete
    """
    offset = 0
    if cursor.starts_with(_OFFSET_PREFIX):
        offset_result = parse_integer(cursor.advance(len(_OFFSET_PREFIX)).skip_whitespace())
        offset = offset_result.value
        cursor = offset_result.cursor.skip_whitespace()

    literals: dict[int, Message] = {}
    categories: dict[PluralCategory, Message] = {}

    while not cursor.is_eof and cursor.current != "}":
        key_cursor = cursor
        key_result = _parse_branch_key(cursor, ("=N", *PluralCategory))
        key = key_result.value

        literal: int | None = None
        category: PluralCategory | None = None
        if key.startswith("="):
            literal = int64_from_text(key[1:])
        elif key in PluralCategory:
            category = PluralCategory(key)
        if literal is None and category is None:
            raise parse_failure(
                ParseErrorKind.INVALID_BRANCH_KEY,
                ErrorTemplate.parse_invalid_branch_key(key, key_cursor.span_to(key_result.cursor.pos)),
                key_cursor,
                ("=N", *PluralCategory),
            )

        if literal in literals or category in categories:
            raise _duplicate(key, key_cursor, key_result.cursor)

        body_result = _parse_branch_message(
            key_result.cursor.skip_whitespace(), context, FormatKeyword.PLURAL
        )
        if literal is not None:
            literals[literal] = body_result.value
        elif category is not None:
            categories[category] = body_result.value
        cursor = body_result.cursor.skip_whitespace()

    if cursor.is_eof:
        raise incomplete(cursor)

    other = categories.pop(PluralCategory.OTHER, None)
    if other is None:
        raise _missing_other(FormatKeyword.PLURAL, cursor)

    node = PluralFormat(
        variable_name,
        other,
        literals=literals,
        offset=offset,
        zero=categories.get(PluralCategory.ZERO),
        one=categories.get(PluralCategory.ONE),
        two=categories.get(PluralCategory.TWO),
        few=categories.get(PluralCategory.FEW),
        many=categories.get(PluralCategory.MANY),
        classifier=context.classifier,
    )
    return ParseResult(node, cursor)


def parse_select_body(
    cursor: Cursor, context: ParseContext, variable_name: str
) -> ParseResult[SelectFormat]:
    """Parse select_body := (select_key '{' message '}')+

    The 'other' branch becomes the default. Stops before the '}' that
    closes the format.

    Raises:
        ParseError: duplicate-branch, missing-other-branch, or incomplete
    """
    branches: dict[str, Message] = {}

    while not cursor.is_eof and cursor.current != "}":
        key_cursor = cursor
        key_result = _parse_branch_key(cursor, ("key",))
        key = key_result.value
        if key in branches:
            raise _duplicate(key, key_cursor, key_result.cursor)

        body_result = _parse_branch_message(
            key_result.cursor.skip_whitespace(), context, FormatKeyword.SELECT
        )
        branches[key] = body_result.value
        cursor = body_result.cursor.skip_whitespace()

    if cursor.is_eof:
        raise incomplete(cursor)

    default = branches.pop(_OTHER, None)
    if default is None:
        raise _missing_other(FormatKeyword.SELECT, cursor)

    return ParseResult(SelectFormat(variable_name, default, branches=branches), cursor)


def _parse_branch_key(cursor: Cursor, expected: tuple[str, ...]) -> ParseResult[str]:
    """Parse a non-empty branch key."""
    key_result = parse_word(cursor)
    if not key_result.value:
        raise parse_failure(
            ParseErrorKind.EXPECTED_TOKEN,
            ErrorTemplate.parse_expected_token(expected, cursor.current, cursor.span_to(cursor.pos + 1)),
            cursor,
            expected,
        )
    return key_result


def _parse_branch_message(
    cursor: Cursor, context: ParseContext, keyword: FormatKeyword
) -> ParseResult[Message]:
    """Parse '{' message '}' for one branch, consuming both braces."""
    if context.is_depth_exceeded():
        raise parse_failure(
            ParseErrorKind.NESTING_TOO_DEEP,
            ErrorTemplate.parse_nesting_too_deep(context.max_nesting_depth, cursor.span_to(cursor.pos)),
            cursor,
        )
    cursor = require(cursor, "{")
    message_result = parse_message_parts(cursor, context.enter_branch(keyword))
    return ParseResult(message_result.value, require(message_result.cursor, "}"))


def _duplicate(key: str, start: Cursor, end: Cursor) -> ParseError:
    return parse_failure(
        ParseErrorKind.DUPLICATE_BRANCH,
        ErrorTemplate.parse_duplicate_branch(key, start.span_to(end.pos)),
        start,
    )


def _missing_other(keyword: FormatKeyword, cursor: Cursor) -> ParseError:
    return parse_failure(
        ParseErrorKind.MISSING_OTHER_BRANCH,
        ErrorTemplate.parse_missing_other_branch(keyword, cursor.span_to(cursor.pos + 1)),
        cursor,
        (_OTHER,),
    )
