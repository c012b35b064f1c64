"""cssbuilder: build CSS selectors from parts, with order and uniqueness checks."""

from cssbuilder.builder import SelectorBuilder
from cssbuilder.compose import compose, parse_part
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import DuplicateKindError, OutOfOrderError, SelectorError
from cssbuilder.facade import (
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
    pseudoClass,
    pseudoElement,
)
from cssbuilder.model import (
    CANONICAL_ORDER,
    Combinator,
    CombinedSelector,
    PartKind,
    Renderable,
)

__version__ = "0.1.0"

__all__ = [
    "SelectorBuilder",
    "CombinedSelector",
    "Renderable",
    "PartKind",
    "Combinator",
    "CANONICAL_ORDER",
    "SelectorError",
    "DuplicateKindError",
    "OutOfOrderError",
    "BuilderConfig",
    "compose",
    "parse_part",
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
