"""
records.py

Responsibility: the records that flow through a render pass.

Inputs (`ReleaseRecord`, `LimitsRecord`) are assumed already validated by
whoever supplies them; outputs (`RenderedLinkItem`, `LimitRow`) are built
fresh per call and never shared.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class InvalidInput(ValueError):
    pass


class StateClass(enum.Enum):
    NONE = "none"
    WARN = "warn"


@dataclass(frozen=True)
class ReleaseRecord:
    """One published version of a package."""

    version: str
    yanked: bool = False
    build_succeeded: bool = True
    is_library: bool = True


@dataclass(frozen=True)
class LimitsRecord:
    """Resource limits of the sandboxed build environment."""

    memory_bytes: int
    timeout_seconds: int
    max_log_size_bytes: int
    networking_allowed: bool
    max_build_targets: int


@dataclass(frozen=True)
class RenderedLinkItem:
    url: str
    label: str
    css_state_class: StateClass = StateClass.NONE
    tooltip: str | None = None


@dataclass(frozen=True)
class LimitRow:
    label: str
    value: str


def release_slug(name: str, version: str) -> str:
    return f"{name}-{version}"


def release_url(name: str, version: str) -> str:
    return f"/crate/{name}/{version}"
