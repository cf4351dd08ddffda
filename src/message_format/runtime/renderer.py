"""Message renderer - writes Message trees as text.

Walks the AST in order, substituting arguments and choosing plural/select
branches. Rendering is fail-fast: the first error aborts the render and
propagates to the caller. There is no fallback text.

Python 3.13+. Indirect dependency: Babel (via plural_rules).

Thread Safety:
    Render state (depth guard, Context) is local to each call, so one
    renderer and one Message can serve many threads at once.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Protocol, assert_never, runtime_checkable

from message_format.constants import MAX_DEPTH
from message_format.core.depth_guard import DepthGuard, depth_clamp
from message_format.diagnostics import (
    ErrorTemplate,
    MissingArgumentError,
    RenderError,
    TypeMismatchError,
)
from message_format.enums import FormatKeyword
from message_format.runtime.context import Context
from message_format.runtime.value_types import Number, Str
from message_format.syntax.ast import (
    PlaceholderFormat,
    PlainText,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
)

if TYPE_CHECKING:
    from message_format.runtime.args import Args
    from message_format.runtime.value_types import Value
    from message_format.syntax.ast import FormatNode, Message

__all__ = ["MessageRenderer", "OutputSink", "render_node"]

logger = logging.getLogger(__name__)

# Stack frames per nested sub-message: render_node and _render_message.
_FRAMES_PER_LEVEL: int = 2

# Stack frames left for the caller, the sink, and classifier calls.
_RESERVE_FRAMES: int = 200


@runtime_checkable
class OutputSink(Protocol):
    """Anything text can be appended to: io.StringIO, a text file, sys.stdout."""

    def write(self, text: str, /) -> object: ...


class MessageRenderer:
    """Renders Message trees to an output sink.

    Attributes:
        max_depth: Maximum nesting of rendered sub-messages (default: 100)

    Example:
        >>> from message_format import parse, arg
        >>> renderer = MessageRenderer()
        >>> renderer.render_to_string(parse("{n} left"), args=arg("n", 3))
        '3 left'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize renderer.

        Args:
            max_depth: Nesting limit for sub-messages (default: MAX_DEPTH).
                       Clamped so the limit trips before RecursionError.
        """
        self._max_depth = depth_clamp(
            max_depth if max_depth is not None else MAX_DEPTH,
            reserve_frames=_RESERVE_FRAMES,
            frames_per_level=_FRAMES_PER_LEVEL,
        )

    @property
    def max_depth(self) -> int:
        """Maximum nesting of rendered sub-messages."""
        return self._max_depth

    def render(
        self,
        message: Message,
        context: Context,
        output: OutputSink,
        args: Args | None,
    ) -> None:
        """Write message to output.

        Whatever was written before a failing node stays in output.

        Raises:
            MissingArgumentError: Referenced argument absent
            TypeMismatchError: Plural needs Number, select needs Str
            MissingContextValueError: '#' with no enclosing plural value
            DepthLimitExceededError: Sub-messages nested beyond max_depth
        """
        guard = DepthGuard(max_depth=self._max_depth)
        try:
            _render_message(message, context, output, args, guard)
        except RenderError as e:
            logger.debug(
                "Render aborted with %s (variable: %s)",
                type(e).__name__,
                getattr(e, "variable_name", None),
            )
            raise

    def render_to_string(
        self,
        message: Message,
        context: Context | None = None,
        args: Args | None = None,
    ) -> str:
        """Render message to a new string.

        Errors propagate exactly as in render(); no partial text is returned.
        """
        buffer = io.StringIO()
        self.render(message, context if context is not None else Context(), buffer, args)
        return buffer.getvalue()


def render_node(
    node: FormatNode,
    context: Context,
    output: OutputSink,
    args: Args | None,
    guard: DepthGuard | None = None,
) -> None:
    """Render a single format node.

    Args:
        node: Node to render
        context: Ambient render state
        output: Sink receiving the text
        args: Argument chain
        guard: Depth guard shared with the enclosing render (default: new guard)
    """
    if guard is None:
        guard = DepthGuard()

    match node:
        case PlainText(text=text):
            output.write(text)
        case SimpleFormat(variable_name=name):
            output.write(str(_require_argument(name, args)))
        case PlaceholderFormat():
            output.write(str(context.require_placeholder()))
        case PluralFormat():
            number = _require_number(node.variable_name, args)
            offset_value = number.value - node.offset
            with guard:
                _render_message(
                    node.lookup_message(offset_value),
                    context.with_placeholder(offset_value),
                    output,
                    args,
                    guard,
                )
        case SelectFormat():
            text = _require_str(node.variable_name, args)
            with guard:
                _render_message(node.lookup_message(text.value), context, output, args, guard)
        case _:
            assert_never(node)


def _render_message(
    message: Message,
    context: Context,
    output: OutputSink,
    args: Args | None,
    guard: DepthGuard,
) -> None:
    for node in message.parts:
        render_node(node, context, output, args, guard)


def _require_argument(name: str, args: Args | None) -> Value:
    value = args.get(name) if args is not None else None
    if value is None:
        raise MissingArgumentError(ErrorTemplate.argument_missing(name), variable_name=name)
    return value


def _require_number(name: str, args: Args | None) -> Number:
    value = _require_argument(name, args)
    if not isinstance(value, Number):
        raise _type_mismatch(name, "Number", value, FormatKeyword.PLURAL)
    return value


def _require_str(name: str, args: Args | None) -> Str:
    value = _require_argument(name, args)
    if not isinstance(value, Str):
        raise _type_mismatch(name, "Str", value, FormatKeyword.SELECT)
    return value


def _type_mismatch(
    name: str, expected: str, value: Value, keyword: FormatKeyword
) -> TypeMismatchError:
    received = type(value).__name__
    return TypeMismatchError(
        ErrorTemplate.argument_type_mismatch(name, expected, received, keyword),
        variable_name=name,
        expected=expected,
        received=received,
    )
