"""Build a complex selector from a flat sequence of tokens.

Tokens are either parts written as ``kind=value`` or combinators::

    compose(["element=div", "class=menu", ">", "element=a"]).render()
    # 'div.menu > a'
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cssbuilder.builder import SelectorBuilder
from cssbuilder.errors import SelectorError
from cssbuilder.facade import combine
from cssbuilder.model import Combinator, PartKind, Renderable

__all__ = ["compose", "parse_part", "DEFAULT_COMBINATORS"]

DEFAULT_COMBINATORS: tuple[str, ...] = tuple(c.value for c in Combinator)

# Accepted spellings for each part kind.
_KIND_ALIASES: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo_class": PartKind.PSEUDO_CLASS,
    "pseudoclass": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
    "pseudo_element": PartKind.PSEUDO_ELEMENT,
    "pseudoelement": PartKind.PSEUDO_ELEMENT,
}


def parse_part(token: str) -> tuple[PartKind, str]:
    """Split a ``kind=value`` token into its kind and value.

    Only the first ``=`` separates, so attribute values such as
    ``attr=href$=".png"`` keep theirs.
    """
    name, sep, value = token.partition("=")
    if not sep:
        raise SelectorError(f"Expected kind=value, got {token!r}")
    kind = _KIND_ALIASES.get(name.strip().lower())
    if kind is None:
        raise SelectorError(f"Unknown selector part kind: {name!r}")
    return kind, value


def _split_compounds(
    tokens: Sequence[str], combinators: Iterable[str]
) -> tuple[list[list[str]], list[str]]:
    combinator_set = set(combinators)
    compounds: list[list[str]] = [[]]
    joins: list[str] = []
    for token in tokens:
        if token in combinator_set:
            if not compounds[-1]:
                raise SelectorError(f"Combinator {token!r} has no selector on its left")
            joins.append(token)
            compounds.append([])
        else:
            compounds[-1].append(token)
    if not compounds[-1]:
        if joins:
            raise SelectorError(f"Combinator {joins[-1]!r} has no selector on its right")
        raise SelectorError("No selector parts given")
    return compounds, joins


def compose(
    tokens: Sequence[str], combinators: Iterable[str] = DEFAULT_COMBINATORS
) -> Renderable:
    """Assemble *tokens* into a selector, folding combinators left to right."""
    compounds, joins = _split_compounds(tokens, combinators)

    selectors: list[SelectorBuilder] = []
    for parts in compounds:
        builder = SelectorBuilder()
        for token in parts:
            kind, value = parse_part(token)
            builder.append(kind, value)
        selectors.append(builder)

    result: Renderable = selectors[0]
    for combinator, selector in zip(joins, selectors[1:]):
        result = combine(result, combinator, selector)
    return result
