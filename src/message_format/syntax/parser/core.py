"""Core message template parser.

This module provides the MessageParser class that orchestrates parsing of
template text into the Message trees defined in :mod:`message_format.syntax.ast`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~message_format.syntax.cursor.Cursor`)
    to traverse the template. Each grammar rule (in :mod:`~message_format.syntax.parser.rules`
    and :mod:`~message_format.syntax.parser.primitives`) returns a
    :class:`~message_format.syntax.cursor.ParseResult` containing the parsed node
    and updated cursor position, or raises :class:`~message_format.diagnostics.ParseError`.

Security:
    Includes configurable template size and nesting limits so that hostile
    template text cannot exhaust memory or the interpreter stack.
"""

import logging

from message_format.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from message_format.core.depth_guard import depth_clamp
from message_format.diagnostics import ErrorTemplate, ParseError
from message_format.enums import ParseErrorKind
from message_format.runtime.plural_rules import (
    PluralClassifier,
    english_cardinal_classifier,
)
from message_format.syntax.ast import Message
from message_format.syntax.cursor import Cursor
from message_format.syntax.parser.rules import ParseContext, parse_message_parts

__all__ = ["MessageParser"]

logger = logging.getLogger(__name__)

# Stack frames per nested branch body: parse_message_parts, parse_format,
# the plural/select body rule, and _parse_branch_message.
_FRAMES_PER_LEVEL: int = 4

# Stack frames left for the caller.
_RESERVE_FRAMES: int = 200


class MessageParser:
    """Template parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Non-backtracking: the first failure raises ParseError
    - Error messages include line:column of the failure

    Attributes:
        max_source_size: Maximum template length in characters (default: 1 MiB)
        max_nesting_depth: Maximum nesting of plural/select branch bodies (default: 100)
        classifier: Classifier attached to every PluralFormat produced
    """

    __slots__ = ("_classifier", "_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
        classifier: PluralClassifier | None = None,
    ) -> None:
        """Initialize parser with optional limits and plural classifier.

        Args:
            max_source_size: Maximum template length (default: 1 MiB).
                            Set to 0 to disable the size limit (not recommended).
            max_nesting_depth: Maximum branch nesting depth (default: 100).
                               Clamped so the limit trips before RecursionError.
            classifier: Plural classifier for parsed plural formats
                        (default: English cardinal rule).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH,
            reserve_frames=_RESERVE_FRAMES,
            frames_per_level=_FRAMES_PER_LEVEL,
        )
        self._classifier = classifier if classifier is not None else english_cardinal_classifier

    @property
    def max_source_size(self) -> int:
        """Maximum template length in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum branch nesting depth."""
        return self._max_nesting_depth

    @property
    def classifier(self) -> PluralClassifier:
        """Classifier attached to parsed plural formats."""
        return self._classifier

    def parse(self, source: str) -> Message:
        """Parse template text into a Message.

        Args:
            source: Template text. The empty string is valid (zero parts).

        Returns:
            :class:`~message_format.syntax.ast.Message` whose parts are, in order,
            :class:`~message_format.syntax.ast.PlainText`,
            :class:`~message_format.syntax.ast.SimpleFormat`,
            :class:`~message_format.syntax.ast.PluralFormat`, and
            :class:`~message_format.syntax.ast.SelectFormat` nodes.

        Raises:
            ParseError: On the first malformed construct. An unterminated
                '{' gives kind ``incomplete``; nothing is silently dropped.

        Example:
            >>> parser = MessageParser()
            >>> message = parser.parse("Connecting to {host}...")
            >>> [type(part).__name__ for part in message.parts]
            ['PlainText', 'SimpleFormat', 'PlainText']
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            raise ParseError(
                ErrorTemplate.parse_source_too_large(len(source), self._max_source_size),
                kind=ParseErrorKind.SOURCE_TOO_LARGE,
            )

        context = ParseContext(
            max_nesting_depth=self._max_nesting_depth,
            classifier=self._classifier,
        )
        try:
            result = parse_message_parts(Cursor(source, 0), context)
        except ParseError as e:
            logger.debug("Template parse failed (%s) at position %d", e.kind, e.position)
            raise

        logger.debug("Parsed template into %d part(s)", len(result.value.parts))
        return result.value
