"""Message template syntax package.

Provides parser, AST definitions, and serialization.
Separate from rendering so tools can inspect and rewrite templates
without touching argument values.

Python 3.13+.
"""

from message_format.runtime.plural_rules import PluralClassifier

from .ast import (
    FormatNode,
    Message,
    PlaceholderFormat,
    PlainText,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
)
from .cursor import Cursor, ParseResult
from .parser import MessageParser
from .serializer import MessageSerializer, serialize

__all__ = [
    "Cursor",
    "FormatNode",
    "Message",
    "MessageParser",
    "MessageSerializer",
    "ParseResult",
    "PlaceholderFormat",
    "PlainText",
    "PluralFormat",
    "SelectFormat",
    "SimpleFormat",
    "parse",
    "serialize",
]


def parse(source: str, *, classifier: PluralClassifier | None = None) -> Message:
    """Parse template text into a Message.

    Convenience function for MessageParser.parse().

    Args:
        source: Template text
        classifier: Plural classifier for parsed plural formats
                    (default: English cardinal rule)

    Returns:
        Parsed Message

    Raises:
        ParseError: On the first malformed construct

    Example:
        >>> from message_format.syntax import parse
        >>> message = parse("Connecting to {host}...")
        >>> message.variables()
        frozenset({'host'})
    """
    parser = MessageParser(classifier=classifier)
    return parser.parse(source)
