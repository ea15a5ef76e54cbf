"""Hand-written parser turning selector text back into builder values.

Syntax example:
    div#main.container[data-x]:hover::before
    ul.menu > li:nth-of-type(even) + li
    section article   p
"""

from __future__ import annotations

import logging
import re

from cssbuilder.builder import SelectorBuilder, combine
from cssbuilder.errors import SelectorSyntaxError
from cssbuilder.model import Combinator, PartKind, Stringifiable

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

# One token per match; alternatives are tried left to right.
_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<combinator>[+~>])                              # + ~ >
    | (?P<element>\*|[A-Za-z_][\w-]*)                   # div, *, my-widget
    | \#(?P<id>[\w-]+)                                   # #main
    | \.(?P<class_>[\w-]+)                               # .container
    | \[(?P<attr>(?:"[^"]*"|'[^']*'|[^\]"'])*)\]    # [title="]"]
    | ::(?P<pseudo_element>[\w-]+(?:\([^)]*\))?)         # ::before
    | :(?P<pseudo_class>[\w-]+(?:\([^)]*\))?)            # :nth-of-type(even)
    """,
    re.VERBOSE,
)

_KINDS: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class_": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo_element": PartKind.PSEUDO_ELEMENT,
    "pseudo_class": PartKind.PSEUDO_CLASS,
}


def parse_selector(source: str) -> Stringifiable:
    """Parse selector text into a SelectorBuilder or a CombinedSelector.

    Compounds are validated through SelectorBuilder, so ordering and
    duplicate violations raise the builder errors. Several compounds are
    folded right-nested: ``a + b ~ c`` is ``combine(a, "+", combine(b, "~", c))``.
    """
    compounds: list[tuple[SelectorBuilder, str]] = []
    current: SelectorBuilder | None = None
    pending: str | None = None  # combinator waiting for its right-hand side
    pos = 0

    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise SelectorSyntaxError(
                f"Unexpected character {source[pos]!r} at position {pos}", pos
            )
        group = match.lastgroup
        if group == "space":
            if current is not None and pending is None:
                pending = Combinator.DESCENDANT
        elif group == "combinator":
            if current is None:
                raise SelectorSyntaxError(
                    f"Combinator {match.group()!r} has no left-hand selector", pos
                )
            if pending not in (None, Combinator.DESCENDANT):
                raise SelectorSyntaxError(
                    f"Combinator {match.group()!r} follows "
                    f"combinator {str(pending)!r}",
                    pos,
                )
            pending = Combinator(match.group())
        else:
            if pending is not None:
                compounds.append((current, pending))
                current, pending = None, None
            current = (current or SelectorBuilder()).append(
                _KINDS[group], match.group(group)
            )
        pos = match.end()

    if current is None:
        raise SelectorSyntaxError("Empty selector", 0)
    if pending not in (None, Combinator.DESCENDANT):
        raise SelectorSyntaxError(
            f"Combinator {str(pending)!r} has no right-hand selector", len(source)
        )

    result: Stringifiable = current
    for left, combinator in reversed(compounds):
        result = combine(left, combinator, result)
    logger.debug("Parsed %r into %d compound(s)", source, len(compounds) + 1)
    return result
