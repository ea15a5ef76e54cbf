"""JSON helpers that encode values and rebuild typed instances."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, indent: int | None = None) -> str:
    """Return the JSON representation of *value*.

    Dataclass instances are encoded by their fields, or by ``to_dict()``
    where the class defines one.
    """
    return json.dumps(value, indent=indent, default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Decode *text* and rebuild an instance of *cls* from it.

    Uses ``cls.from_dict`` when defined and ``cls(**data)`` for dataclasses.
    Any other class gets an instance created without calling ``__init__``,
    with the decoded mapping set as its attributes.
    """
    data = json.loads(text)
    if hasattr(cls, "from_dict"):
        return cls.from_dict(data)
    if dataclasses.is_dataclass(cls):
        return cls(**data)
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance
