"""Selector model: part kinds, fragments, and combinators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class PartKind(StrEnum):
    """Kind of a selector fragment.

    Declaration order is the canonical CSS order: a compound selector lists
    its parts as element, id, class, attribute, pseudo-class, pseudo-element.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the canonical order."""
        return CANONICAL_ORDER.index(self)

    @property
    def singular(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _SINGULAR

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


CANONICAL_ORDER: tuple[PartKind, ...] = tuple(PartKind)

_SINGULAR = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """Standard combinators. Any string is accepted where a combinator is."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class Fragment:
    """A single selector part, e.g. ``.foo`` or ``#bar``."""

    kind: PartKind
    value: str  # raw value, without prefix

    @property
    def text(self) -> str:
        return self.kind.render(self.value)


class Stringifiable(Protocol):
    """Anything that renders to a selector string."""

    def stringify(self) -> str: ...
