"""Ambient render context.

Context carries state that is not a per-call argument: the language tag of
the render and, while inside a plural branch, the resolved plural value that
'#' placeholders print.

Contexts are immutable. Entering a plural branch derives a new Context;
the caller's Context is never modified, so concurrent renders can share one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from message_format.constants import DEFAULT_LANGUAGE_TAG
from message_format.diagnostics import ErrorTemplate, MissingContextValueError

__all__ = ["Context"]


@dataclass(frozen=True, slots=True)
class Context:
    """Render-time state threaded through nested sub-messages.

    Attributes:
        language_tag: Opaque locale tag (e.g. "en", "de-CH"); not interpreted
            by the engine
        placeholder_value: Offset-adjusted value of the innermost enclosing
            plural format, or None outside plural branches
    """

    language_tag: str = DEFAULT_LANGUAGE_TAG
    placeholder_value: int | None = None

    def with_placeholder(self, value: int) -> Context:
        """Return a copy whose placeholder_value is value."""
        return replace(self, placeholder_value=value)

    def require_placeholder(self) -> int:
        """Return placeholder_value.

        Raises:
            MissingContextValueError: If no plural value is set
        """
        if self.placeholder_value is None:
            raise MissingContextValueError(ErrorTemplate.placeholder_without_value())
        return self.placeholder_value
