"""Selector builder error types."""

from __future__ import annotations

from cssbuilder.model import CANONICAL_ORDER, PartKind


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class DuplicateKindError(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (duplicate {kind.value})"
        )


class OutOfOrderError(SelectorError):
    """Raised when a part is appended after a part that must follow it."""

    def __init__(self, kind: PartKind, after: PartKind) -> None:
        self.kind = kind
        self.after = after
        self.order = CANONICAL_ORDER
        super().__init__(
            "Selector parts should be arranged in the following order: "
            + ", ".join(k.value for k in CANONICAL_ORDER)
        )
