"""Selector error types."""

from __future__ import annotations

from cssbuilder.model import PartKind


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is given more than once."""

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )


class InvalidSelectorOrderError(SelectorError):
    """Raised when a part is appended after a part that must follow it."""

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        self.kind = kind
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class SelectorSyntaxError(SelectorError):
    """Raised when selector source text cannot be parsed."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)
