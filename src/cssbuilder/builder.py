"""SelectorBuilder: accumulates one compound selector, one part at a time.

Example::

    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

import logging

from cssbuilder.errors import DuplicateKindError, OutOfOrderError
from cssbuilder.model import CANONICAL_ORDER, PartKind

__all__ = ["SelectorBuilder"]

log = logging.getLogger("cssbuilder")


class SelectorBuilder:
    """A compound selector under construction.

    Each append method validates the new part against the parts already
    present, extends the rendered text, and returns ``self`` so calls chain.
    ``element``, ``id`` and ``pseudo_element`` may appear once; all parts
    must follow the canonical order (element, id, class, attribute,
    pseudo-class, pseudo-element).
    """

    def __init__(self) -> None:
        self._rendered = ""
        self._seen: set[PartKind] = set()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._rendered!r})"

    def __str__(self) -> str:
        return self._rendered

    @property
    def kinds(self) -> tuple[PartKind, ...]:
        """Kinds appended so far, in canonical order."""
        return tuple(k for k in CANONICAL_ORDER if k in self._seen)

    # --- appending -------------------------------------------------------------

    def append(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a part of *kind*; raises before mutating if it is not allowed."""
        if kind.unique and kind in self._seen:
            log.debug("Rejected duplicate %s %r on %r", kind, value, self._rendered)
            raise DuplicateKindError(kind)

        later = [k for k in self._seen if k.order > kind.order]
        if later:
            after = max(later, key=lambda k: k.order)
            log.debug(
                "Rejected %s %r after %s on %r", kind, value, after, self._rendered
            )
            raise OutOfOrderError(kind, after)

        self._seen.add(kind)
        self._rendered += kind.fragment(value)
        log.debug("Appended %s %r -> %r", kind, value, self._rendered)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    # camelCase spellings of the JavaScript-style interface
    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    # --- rendering -------------------------------------------------------------

    def render(self) -> str:
        return self._rendered

    stringify = render
