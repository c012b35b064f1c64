"""Selector model: part kinds, combinators, and the combined selector value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class PartKind(StrEnum):
    """Kind of a compound selector part.

    Members are declared in canonical order: a compound selector must list
    its parts element first and pseudo-element last.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def order(self) -> int:
        return CANONICAL_ORDER.index(self)

    @property
    def unique(self) -> bool:
        """True for kinds that may appear at most once per compound selector."""
        return self in _UNIQUE_KINDS

    def fragment(self, value: str) -> str:
        """Return the text fragment this kind contributes for *value*."""
        return _FORMATS[self].format(value)


CANONICAL_ORDER: tuple[PartKind, ...] = tuple(PartKind)

_UNIQUE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_FORMATS = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}


class Combinator(StrEnum):
    """The CSS combinators. ``combine`` accepts any text, these are the usual ones."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Renderable(Protocol):
    """Anything that renders to selector text."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, rendered once at construction."""

    value: str

    def render(self) -> str:
        return self.value

    stringify = render

    def __str__(self) -> str:
        return self.value
