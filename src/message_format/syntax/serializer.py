"""Serialize Message trees back to template text.

Converts AST nodes to template source. Useful for:
- Storing programmatically built messages
- Normalizing hand-written templates
- Property-based testing (roundtrip: parse -> serialize -> parse)

The template grammar has no escape mechanism, so some trees have no text
form (for example PlainText containing '{'). Those raise SerializationError
instead of producing text that would parse back differently.

Python 3.13+.
"""

from message_format.diagnostics import ErrorTemplate, SerializationError
from message_format.enums import FormatKeyword, PluralCategory

from .ast import (
    Message,
    PlaceholderFormat,
    PlainText,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
)
from .cursor import WHITESPACE

__all__ = ["MessageSerializer", "serialize"]

_OTHER: str = PluralCategory.OTHER.value

# Characters a variable name cannot contain (parser stops the name at them).
_NAME_TERMINATORS: frozenset[str] = frozenset(",}")

# Characters a select key cannot contain (parser stops the key at them).
_KEY_TERMINATORS: frozenset[str] = frozenset(WHITESPACE + "{},")


def _validate_variable_name(name: str) -> None:
    """Check name reads back unchanged from '{name}'.

    Raises:
        SerializationError: If the name is empty, has surrounding whitespace,
            or contains ',' or '}'
    """
    if (
        not name
        or name.strip(WHITESPACE) != name
        or any(ch in _NAME_TERMINATORS for ch in name)
    ):
        raise SerializationError(ErrorTemplate.invalid_name("variable name", name))


def _validate_select_key(key: str) -> None:
    """Check key reads back as one select branch key other than 'other'."""
    if not key or key == _OTHER or any(ch in _KEY_TERMINATORS for ch in key):
        raise SerializationError(ErrorTemplate.invalid_name("select key", key))


class MessageSerializer:
    """Converts a Message back to template text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from message_format.syntax import parse, MessageSerializer
        >>> message = parse("{count, plural, one {# file} other {# files}}")
        >>> MessageSerializer().serialize(message)
        '{count, plural, one {# file} other {# files}}'
    """

    def serialize(self, message: Message) -> str:
        """Serialize Message to template text.

        Pure function - builds output locally without mutating instance state.

        Args:
            message: Message tree (parsed or built by hand)

        Returns:
            Template text that parses back to an equal tree

        Raises:
            SerializationError: If the tree has no text form
        """
        output: list[str] = []
        self._serialize_message(message, output, nested=False, in_plural=False)
        return "".join(output)

    def _serialize_message(
        self, message: Message, output: list[str], *, nested: bool, in_plural: bool
    ) -> None:
        """Serialize message parts in order.

        Reserved characters in plain text depend on position:
            top level:      '{'
            branch body:    '{', '}'
            plural branch:  '{', '}', '#'
        """
        for node in message.parts:
            match node:
                case PlainText(text=text):
                    self._serialize_text(text, output, nested=nested, in_plural=in_plural)
                case SimpleFormat(variable_name=name):
                    _validate_variable_name(name)
                    output.append(f"{{{name}}}")
                case PlaceholderFormat():
                    if not in_plural:
                        raise SerializationError(ErrorTemplate.unrepresentable_text("#", "#"))
                    output.append("#")
                case PluralFormat():
                    self._serialize_plural(node, output)
                case SelectFormat():
                    self._serialize_select(node, output, in_plural=in_plural)

    def _serialize_text(
        self, text: str, output: list[str], *, nested: bool, in_plural: bool
    ) -> None:
        reserved = "{"
        if nested:
            reserved += "}"
        if in_plural:
            reserved += "#"
        for char in reserved:
            if char in text:
                raise SerializationError(ErrorTemplate.unrepresentable_text(text, char))
        output.append(text)

    def _serialize_plural(self, node: PluralFormat, output: list[str]) -> None:
        """Serialize PluralFormat.

        Branch order: '=N' literals (ascending), then categories in CLDR
        order with 'other' last.
        """
        _validate_variable_name(node.variable_name)
        output.append(f"{{{node.variable_name}, {FormatKeyword.PLURAL}, ")
        if node.offset != 0:
            output.append(f"offset:{node.offset} ")

        branches: list[tuple[str, Message]] = [
            (f"={value}", node.literals[value]) for value in sorted(node.literals)
        ]
        branches.extend((category.value, message) for category, message in node.categories())
        self._serialize_branches(branches, output, in_plural=True)

    def _serialize_select(self, node: SelectFormat, output: list[str], *, in_plural: bool) -> None:
        """Serialize SelectFormat, default written as the 'other' branch."""
        _validate_variable_name(node.variable_name)
        output.append(f"{{{node.variable_name}, {FormatKeyword.SELECT}, ")

        branches: list[tuple[str, Message]] = []
        for key, message in node.branches.items():
            _validate_select_key(key)
            branches.append((key, message))
        branches.append((_OTHER, node.default))
        self._serialize_branches(branches, output, in_plural=in_plural)

    def _serialize_branches(
        self, branches: list[tuple[str, Message]], output: list[str], *, in_plural: bool
    ) -> None:
        for i, (key, message) in enumerate(branches):
            if i > 0:
                output.append(" ")
            output.append(f"{key} {{")
            self._serialize_message(message, output, nested=True, in_plural=in_plural)
            output.append("}")
        output.append("}")


def serialize(message: Message) -> str:
    """Serialize Message to template text.

    Convenience function for MessageSerializer.serialize().

    Args:
        message: Message tree

    Returns:
        Template text

    Raises:
        SerializationError: If the tree has no text form

    Example:
        >>> from message_format.syntax import parse, serialize
        >>> serialize(parse("Hello, {name}!"))
        'Hello, {name}!'
    """
    return MessageSerializer().serialize(message)
