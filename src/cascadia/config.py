from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CascadiaConfig:
    encoding: str = "utf-8"
    wrap_tag: str | None = None  # e.g. "html" to allow several top-level nodes
    indent: int = 2
    log_level: str = "WARNING"
