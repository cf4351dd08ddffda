"""Message AST (Abstract Syntax Tree) node definitions.

A Message is an ordered tuple of format nodes. The node set is closed:

    PlainText         - literal text
    SimpleFormat      - {name}: argument substitution
    PlaceholderFormat - #: the enclosing plural value
    PluralFormat      - {name, plural, ...}: branch on a number
    SelectFormat      - {name, select, ...}: branch on a string

All nodes are frozen; branch mappings are read-only views. A tree is built
once (by the parser or by hand) and never changes afterwards, so one tree
can be rendered from many threads at once.
Trees are hashable; branch mappings are left out of the hash but still
compared for equality.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from message_format.enums import PluralCategory
from message_format.runtime.plural_rules import (
    PluralClassifier,
    english_cardinal_classifier,
)

if TYPE_CHECKING:
    from message_format.runtime.args import Args
    from message_format.runtime.context import Context
    from message_format.runtime.renderer import OutputSink

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Container
    "Message",
    # Format nodes
    "PlainText",
    "SimpleFormat",
    "PlaceholderFormat",
    "PluralFormat",
    "SelectFormat",
    # Type aliases
    "FormatNode",
]


# ============================================================================
# MESSAGE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Message:
    """Parsed, renderable template.

    Attributes:
        parts: Format nodes in template order

    Example:
        >>> m = Message((SimpleFormat("name"), PlainText(" arrived.")))
        >>> m.render_to_string(args=arg("name", "Ada"))
        'Ada arrived.'
    """

    parts: tuple[FormatNode, ...] = ()

    def __post_init__(self) -> None:
        """Store parts as a tuple even when a list was passed."""
        if not isinstance(self.parts, tuple):
            object.__setattr__(self, "parts", tuple(self.parts))

    def render(self, context: Context, output: OutputSink, args: Args | None) -> None:
        """Write the rendered message to output.

        Nodes are rendered in order. The first failing node aborts the
        render and its error propagates; whatever was already written to
        output stays there.

        Args:
            context: Ambient render state
            output: Any object with a write(str) method
            args: Argument chain, or None when the message takes no arguments

        Raises:
            RenderError: On a missing or mistyped argument, a '#' outside a
                plural branch, or nesting beyond the depth limit
        """
        from message_format.runtime.renderer import MessageRenderer  # noqa: PLC0415 - circular

        MessageRenderer().render(self, context, output, args)

    def render_to_string(
        self, context: Context | None = None, args: Args | None = None
    ) -> str:
        """Render to a new string.

        Errors propagate exactly as in render(); no partial text is returned.

        Args:
            context: Ambient render state (default: Context())
            args: Argument chain (default: no arguments)

        Returns:
            The rendered text
        """
        from message_format.runtime.renderer import MessageRenderer  # noqa: PLC0415 - circular

        return MessageRenderer().render_to_string(self, context, args)

    def variables(self) -> frozenset[str]:
        """Names of all arguments referenced anywhere in the tree."""
        return frozenset(_iter_variables(self))


# ============================================================================
# FORMAT NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class PlainText:
    """Literal text, written verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class SimpleFormat:
    """Substitution of a named argument's display form.

    Example:
        {host} -> SimpleFormat(variable_name="host")
    """

    variable_name: str


@dataclass(frozen=True, slots=True)
class PlaceholderFormat:
    """'#' inside a plural branch: prints the offset-adjusted plural value."""


@dataclass(frozen=True, slots=True)
class PluralFormat:
    """Branch on a numeric argument.

    Branch choice for a value v, with offset_value = v - offset:
        1. literals[offset_value], if present
        2. the branch for classifier(offset_value), if set
        3. other

    The chosen branch renders with the Context's placeholder_value set to
    offset_value.

    Example:
        {count, plural, offset:1 =0 {nobody} one {# other} other {# others}}

    Attributes:
        variable_name: Argument holding the number
        other: Mandatory fallback branch
        literals: Exact-value branches ('=N'), keyed by offset-adjusted value
        offset: Subtracted from the argument before matching
        zero, one, two, few, many: Optional category branches
        classifier: Maps offset_value to a PluralCategory
    """

    variable_name: str
    other: Message
    literals: Mapping[int, Message] = field(default_factory=dict, hash=False)
    offset: int = 0
    zero: Message | None = None
    one: Message | None = None
    two: Message | None = None
    few: Message | None = None
    many: Message | None = None
    classifier: PluralClassifier = english_cardinal_classifier

    def __post_init__(self) -> None:
        """Freeze the literal branch mapping."""
        object.__setattr__(self, "literals", MappingProxyType(dict(self.literals)))

    def branch(self, category: PluralCategory) -> Message | None:
        """Return the explicit branch for category (None if unset)."""
        match category:
            case PluralCategory.ZERO:
                return self.zero
            case PluralCategory.ONE:
                return self.one
            case PluralCategory.TWO:
                return self.two
            case PluralCategory.FEW:
                return self.few
            case PluralCategory.MANY:
                return self.many
            case PluralCategory.OTHER:
                return self.other

    def lookup_message(self, offset_value: int) -> Message:
        """Given a value already adjusted by offset, pick the branch to render."""
        literal = self.literals.get(offset_value)
        if literal is not None:
            return literal
        return self.branch(self.classifier(offset_value)) or self.other

    def categories(self) -> Iterator[tuple[PluralCategory, Message]]:
        """Yield set category branches in CLDR order, 'other' last."""
        for category in PluralCategory:
            message = self.branch(category)
            if message is not None:
                yield category, message


@dataclass(frozen=True, slots=True)
class SelectFormat:
    """Branch on a string argument by exact match.

    Example:
        {gender, select, female {her} male {his} other {their}}

    Attributes:
        variable_name: Argument holding the string
        default: Branch used when no key matches (the 'other' branch)
        branches: Exact-match branches keyed by value
    """

    variable_name: str
    default: Message
    branches: Mapping[str, Message] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Freeze the branch mapping."""
        object.__setattr__(self, "branches", MappingProxyType(dict(self.branches)))

    def lookup_message(self, value: str) -> Message:
        """Given a value, pick the branch to render."""
        return self.branches.get(value, self.default)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type FormatNode = PlainText | SimpleFormat | PlaceholderFormat | PluralFormat | SelectFormat


def _iter_variables(message: Message) -> Iterator[str]:
    for node in message.parts:
        match node:
            case SimpleFormat(variable_name=name):
                yield name
            case PluralFormat():
                yield node.variable_name
                yield from _iter_variables(node.other)
                for literal in node.literals.values():
                    yield from _iter_variables(literal)
                for _, branch in node.categories():
                    yield from _iter_variables(branch)
            case SelectFormat():
                yield node.variable_name
                yield from _iter_variables(node.default)
                for branch in node.branches.values():
                    yield from _iter_variables(branch)
            case PlainText() | PlaceholderFormat():
                pass
