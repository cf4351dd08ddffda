"""Named render arguments.

An Args chain is an immutable linked list of (name, Value) links. Attaching
an argument returns a new link that points at the existing chain; nothing
is copied, so building the arguments for one render is cheap and a shared
base chain can be extended independently by several callers.

Lookup walks from the newest link toward the root. Messages carry a handful
of arguments, so a linear scan beats building a dict per render.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .value_types import Value, as_value

__all__ = ["Args", "arg"]


@dataclass(frozen=True, slots=True)
class Args:
    """One link in an argument chain.

    Attributes:
        name: Argument name as referenced in the template
        value: Argument value
        prev: Previously attached link (None for the root)

    Example:
        >>> args = arg("name", "Hendrik").arg("city", "Berlin")
        >>> str(args.get("city"))
        'Berlin'
        >>> args.get("country") is None
        True
    """

    name: str
    value: Value
    prev: Args | None = None

    def arg(self, name: str, value: int | str | Value) -> Args:
        """Attach a named argument, returning the extended chain.

        The receiver is left unchanged. Attaching a name that already
        exists shadows the older value.

        Raises:
            TypeError: If value is not an int, str, or Value
            ValueError: If an int does not fit the signed 64-bit range
        """
        return Args(name, as_value(value), self)

    def get(self, name: str) -> Value | None:
        """Return the most recently attached value for name, or None."""
        link: Args | None = self
        while link is not None:
            if link.name == name:
                return link.value
            link = link.prev
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        """Yield (name, value) pairs, newest first, shadowed pairs included."""
        link: Args | None = self
        while link is not None:
            yield link.name, link.value
            link = link.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def to_dict(self) -> dict[str, Value]:
        """Return visible arguments by name (shadowed values dropped)."""
        result: dict[str, Value] = {}
        for name, value in self:
            result.setdefault(name, value)
        return result

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int | str | Value]) -> Args | None:
        """Build a chain from a mapping, attaching in iteration order.

        Returns:
            The chain, or None when mapping is empty
        """
        chain: Args | None = None
        for name, value in mapping.items():
            chain = Args(name, as_value(value), chain)
        return chain


def arg(name: str, value: int | str | Value) -> Args:
    """Start an argument chain with one named argument.

    Example:
        >>> args = arg("count", 3)
        >>> args.get("count")
        Number(value=3)
    """
    return Args(name, as_value(value))
