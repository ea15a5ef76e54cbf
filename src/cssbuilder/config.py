from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CSSBuilderConfig:
    log_level: str = "WARNING"
    json_indent: int | None = 2
