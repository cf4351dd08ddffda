"""Hypothesis strategies for message templates and Message trees.

Generated trees are canonical: no two PlainText nodes are adjacent and text
never holds characters the grammar reserves at its position. Such trees
serialize without error and parse back to an equal tree.

Variable names are namespaced by role so that generated arguments always
match what the tree expects:
    s_* - SimpleFormat (Number or Str)
    n_* - PluralFormat (Number)
    g_* - SelectFormat (Str)

Event-Emitting Strategies (HypoFuzz-Optimized):
    - msg_node: Node kind chosen at each position
    - msg_depth: Nesting depth of a generated tree
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st

from message_format.constants import INT64_MAX, INT64_MIN
from message_format.enums import PluralCategory
from message_format.runtime.args import Args
from message_format.runtime.value_types import Number, Str, Value
from message_format.syntax.ast import (
    FormatNode,
    Message,
    PlaceholderFormat,
    PlainText,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
)

# Text safe at every position (no braces, no '#').
SAFE_TEXT_CHARS: str = string.ascii_letters + string.digits + " .,!?:;'-()"

NAME_CHARS: str = string.ascii_lowercase + string.digits + "_"

OPTIONAL_CATEGORIES: tuple[PluralCategory, ...] = tuple(
    category for category in PluralCategory if category is not PluralCategory.OTHER
)


def safe_text() -> st.SearchStrategy[str]:
    """Non-empty text with no reserved characters."""
    return st.text(alphabet=SAFE_TEXT_CHARS, min_size=1, max_size=20)


def _names(prefix: str) -> st.SearchStrategy[str]:
    return st.text(alphabet=NAME_CHARS, min_size=1, max_size=6).map(lambda s: f"{prefix}_{s}")


def simple_names() -> st.SearchStrategy[str]:
    """Variable names used by SimpleFormat nodes."""
    return _names("s")


def plural_names() -> st.SearchStrategy[str]:
    """Variable names used by PluralFormat nodes."""
    return _names("n")


def select_names() -> st.SearchStrategy[str]:
    """Variable names used by SelectFormat nodes."""
    return _names("g")


def select_keys() -> st.SearchStrategy[str]:
    """Select branch keys (never 'other', which is the default)."""
    return st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8).filter(
        lambda key: key != PluralCategory.OTHER
    )


def int64_values() -> st.SearchStrategy[int]:
    """Integers in the signed 64-bit range."""
    return st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


def _merge_text(parts: list[FormatNode]) -> tuple[FormatNode, ...]:
    """Join adjacent PlainText nodes, as the parser would produce them."""
    merged: list[FormatNode] = []
    for part in parts:
        if merged and isinstance(part, PlainText) and isinstance(merged[-1], PlainText):
            merged[-1] = PlainText(merged[-1].text + part.text)
        else:
            merged.append(part)
    return tuple(merged)


@st.composite
def messages(draw: st.DrawFn, max_depth: int = 2, in_plural: bool = False) -> Message:
    """Generate canonical Message trees.

    Args:
        max_depth: Remaining plural/select nesting allowed
        in_plural: Inside a plural branch ('#' placeholders allowed)

    Events emitted:
    - msg_node={text|simple|placeholder|plural|select}
    """
    kinds = ["text", "simple"]
    if in_plural:
        kinds.append("placeholder")
    if max_depth > 0:
        kinds.extend(["plural", "select"])

    parts: list[FormatNode] = []
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        kind = draw(st.sampled_from(kinds))
        event(f"msg_node={kind}")
        match kind:
            case "text":
                parts.append(PlainText(draw(safe_text())))
            case "simple":
                parts.append(SimpleFormat(draw(simple_names())))
            case "placeholder":
                parts.append(PlaceholderFormat())
            case "plural":
                parts.append(draw(plural_formats(max_depth=max_depth - 1)))
            case _:
                parts.append(draw(select_formats(max_depth=max_depth - 1, in_plural=in_plural)))
    return Message(_merge_text(parts))


@st.composite
def plural_formats(draw: st.DrawFn, max_depth: int = 1) -> PluralFormat:
    """Generate PluralFormat nodes with random literals, categories and offset."""
    branch = messages(max_depth=max_depth, in_plural=True)
    literal_keys = draw(st.lists(st.integers(min_value=-3, max_value=10), max_size=2, unique=True))
    categories = draw(st.lists(st.sampled_from(OPTIONAL_CATEGORIES), max_size=2, unique=True))
    category_branches = {category.value: draw(branch) for category in categories}
    return PluralFormat(
        draw(plural_names()),
        draw(branch),
        literals={key: draw(branch) for key in literal_keys},
        offset=draw(st.integers(min_value=0, max_value=3)),
        **category_branches,
    )


@st.composite
def select_formats(
    draw: st.DrawFn, max_depth: int = 1, in_plural: bool = False
) -> SelectFormat:
    """Generate SelectFormat nodes."""
    branch = messages(max_depth=max_depth, in_plural=in_plural)
    keys = draw(st.lists(select_keys(), max_size=2, unique=True))
    return SelectFormat(
        draw(select_names()),
        draw(branch),
        branches={key: draw(branch) for key in keys},
    )


@st.composite
def args_for(draw: st.DrawFn, message: Message) -> Args | None:
    """Generate an argument chain supplying every variable message uses.

    Select variables get either one of their branch keys or a random word,
    so both matched and default branches are exercised.
    """
    chain: Args | None = None
    for name in sorted(message.variables()):
        value: Value
        match name[0]:
            case "n":
                value = Number(draw(st.integers(min_value=-5, max_value=25)))
            case "g":
                value = Str(draw(st.one_of(select_keys(), st.just(PluralCategory.OTHER.value))))
            case _:
                value = draw(st.one_of(int64_values().map(Number), safe_text().map(Str)))
        chain = Args(name, value, chain)
    event(f"msg_depth={_depth(message)}")
    return chain


def _depth(message: Message) -> int:
    depth = 0
    for node in message.parts:
        match node:
            case PluralFormat():
                branches = [node.other, *node.literals.values()]
                branches.extend(branch for _, branch in node.categories())
                depth = max(depth, 1 + max(_depth(branch) for branch in branches))
            case SelectFormat():
                branches = [node.default, *node.branches.values()]
                depth = max(depth, 1 + max(_depth(branch) for branch in branches))
            case _:
                pass
    return depth


# Template text built directly, for parser-only properties.
def template_chaos() -> st.SearchStrategy[str]:
    """Arbitrary text biased toward the tokens the grammar cares about."""
    tokens = [*"{}#,= \n", *"abcnoeth019", "plural", "select", "offset:", "other"]
    return st.lists(st.sampled_from(tokens), max_size=30).map("".join)
