"""Module-level entry points for building selectors.

Every part function starts a fresh :class:`SelectorBuilder`, so independent
selectors never share state::

    from cssbuilder import facade as css

    css.combine(css.element("ul").class_("menu"), ">", css.element("li")).render()
    # 'ul.menu > li'
"""

from __future__ import annotations

import logging

from cssbuilder.builder import SelectorBuilder
from cssbuilder.model import CombinedSelector, Renderable

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "pseudoClass",
    "pseudoElement",
    "combine",
]

log = logging.getLogger("cssbuilder")


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


pseudoClass = pseudo_class
pseudoElement = pseudo_element


def combine(
    selector1: Renderable, combinator: str, selector2: Renderable
) -> CombinedSelector:
    """Join two selectors with *combinator*, one space on each side.

    The combinator is used verbatim, so the descendant combinator ``" "``
    renders as three spaces. Neither operand is modified.
    """
    value = f"{selector1.render()} {combinator} {selector2.render()}"
    log.debug("Combined with %r -> %r", combinator, value)
    return CombinedSelector(value)
