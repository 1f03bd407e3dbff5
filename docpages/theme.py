"""
theme.py

Responsibility: the CSS classes and icon markup the fragments are dressed in.

These are configuration rather than template literals so a site built on a
different front-end framework can swap them (e.g. from a page data document's
`theme:` mapping) without touching the templates.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from docpages.records import InvalidInput, StateClass


@dataclass(frozen=True)
class Theme:
    list_class: str = "releases"
    item_class: str = "release"
    warn_class: str = "warn"
    # Trusted markup, emitted unescaped.
    warn_icon: str = '<i class="fa fa-fw fa-exclamation-triangle"></i>'
    table_class: str = "pure-table pure-table-horizontal"

    def css_class_for(self, state: StateClass) -> str:
        if state is StateClass.WARN:
            return self.warn_class
        return ""


DEFAULT_THEME = Theme()


def theme_from_mapping(data: dict[str, Any] | None, base: Theme = DEFAULT_THEME) -> Theme:
    """
    Apply overrides from a mapping (typically YAML) on top of `base`.
    """
    if data is None:
        return base
    if not isinstance(data, dict):
        raise InvalidInput("`theme` must be an object/mapping when provided.")
    if not data:
        return base

    known = {f.name for f in fields(Theme)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise InvalidInput(f"Unknown theme keys: {', '.join(unknown)}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise InvalidInput(f"Theme key `{key}` must be a string.")

    return replace(base, **data)
