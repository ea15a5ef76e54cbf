"""Fluent CSS selector builder.

Example::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # -> 'a[href$=".png"]:focus'

    css_selector_builder.combine(
        css_selector_builder.element("div").id("main"),
        "+",
        css_selector_builder.element("table").id("data"),
    ).stringify()
    # -> 'div#main + table#data'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from cssbuilder.errors import DuplicateSelectorPartError, InvalidSelectorOrderError
from cssbuilder.model import Fragment, PartKind, Stringifiable

__all__ = [
    "SelectorBuilder",
    "CombinedSelector",
    "SelectorFactory",
    "combine",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorBuilder:
    """An immutable compound selector.

    Every appending call validates the new part against the parts already
    present and returns a new builder; the receiver is left untouched.
    """

    fragments: tuple[Fragment, ...] = ()

    # --- appending ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def append(self, kind: PartKind | str, value: str) -> SelectorBuilder:
        """Append a part by kind name, e.g. ``append("pseudo-class", "hover")``."""
        return self._append(PartKind(kind), value)

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        if kind.singular and any(f.kind is kind for f in self.fragments):
            logger.debug("Rejected duplicate %s part %r", kind, value)
            raise DuplicateSelectorPartError(kind)

        order = self.order
        # Consecutive parts of one kind share a single entry in the order.
        if order and order[-1] is not kind and kind.rank < order[-1].rank:
            logger.debug("Rejected %s part %r after %s", kind, value, order[-1])
            raise InvalidSelectorOrderError(kind, order[-1])

        fragment = Fragment(kind=kind, value=value)
        logger.debug("Appended %s part %r", kind, fragment.text)
        return replace(self, fragments=self.fragments + (fragment,))

    # --- inspection -----------------------------------------------------------

    @property
    def order(self) -> tuple[PartKind, ...]:
        """Kinds in the order first introduced, consecutive repeats collapsed."""
        kinds: list[PartKind] = []
        for fragment in self.fragments:
            if not kinds or kinds[-1] is not fragment.kind:
                kinds.append(fragment.kind)
        return tuple(kinds)

    def stringify(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    # --- plain-data form ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "fragments": [
                {"kind": str(f.kind), "value": f.value} for f in self.fragments
            ]
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SelectorBuilder:
        """Rebuild a builder, replaying each fragment through validation."""
        builder = cls()
        for item in data.get("fragments", []):
            builder = builder.append(item["kind"], item["value"])
        return builder


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator."""

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()

    # --- plain-data form ------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict(),
            "combinator": self.combinator,
            "right": self.right.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CombinedSelector:
        """Rebuild a combined selector, recursing into nested operands."""
        return cls(
            left=_operand_from_dict(data["left"]),
            combinator=data["combinator"],
            right=_operand_from_dict(data["right"]),
        )


def _operand_from_dict(data: dict[str, Any]) -> Stringifiable:
    # Combined selectors carry a combinator; compounds carry fragments.
    if "combinator" in data:
        return CombinedSelector.from_dict(data)
    return SelectorBuilder.from_dict(data)


def combine(
    left: Stringifiable, combinator: str, right: Stringifiable
) -> CombinedSelector:
    """Join two selectors with *combinator*, which is passed through as-is."""
    return CombinedSelector(left=left, combinator=combinator, right=right)


class SelectorFactory:
    """Entry points that each start a fresh selector."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = SelectorFactory()
