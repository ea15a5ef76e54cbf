"""cssbuilder: fluent, validating CSS selector builder."""

from cssbuilder.builder import (
    CombinedSelector,
    SelectorBuilder,
    SelectorFactory,
    combine,
    css_selector_builder,
)
from cssbuilder.errors import (
    DuplicateSelectorPartError,
    InvalidSelectorOrderError,
    SelectorError,
    SelectorSyntaxError,
)
from cssbuilder.model import Combinator, Fragment, PartKind
from cssbuilder.parser import parse_selector
from cssbuilder.serialization import from_json, to_json
from cssbuilder.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "CombinedSelector",
    "SelectorFactory",
    "combine",
    "css_selector_builder",
    # model
    "PartKind",
    "Fragment",
    "Combinator",
    # errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "InvalidSelectorOrderError",
    "SelectorSyntaxError",
    # parser
    "parse_selector",
    # helpers
    "Rectangle",
    "to_json",
    "from_json",
]
