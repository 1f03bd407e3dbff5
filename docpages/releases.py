"""
releases.py

Responsibility: turn a package's releases into link items for the release list.

Each release becomes one `RenderedLinkItem` whose warn state and tooltip come
from `RELEASE_RULES`, an ordered table evaluated top to bottom where the first
matching rule wins. The rules overlap (a non-library release may also be yanked
and broken), so their order is the user-facing priority and must not change.

Input order is preserved; callers sort releases before rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from docpages.records import (
    ReleaseRecord,
    RenderedLinkItem,
    StateClass,
    release_slug,
    release_url,
)


@dataclass(frozen=True)
class ReleaseRule:
    """A predicate over a release plus the tooltip it produces (`{slug}` placeholder)."""

    name: str
    matches: Callable[[ReleaseRecord], bool]
    state: StateClass
    tooltip: str | None


RELEASE_RULES: tuple[ReleaseRule, ...] = (
    ReleaseRule(
        name="not-a-library",
        matches=lambda r: not r.is_library,
        state=StateClass.WARN,
        tooltip="{slug} is not a library",
    ),
    ReleaseRule(
        name="yanked",
        matches=lambda r: r.yanked and r.build_succeeded,
        state=StateClass.WARN,
        tooltip="{slug} is yanked",
    ),
    ReleaseRule(
        name="yanked-and-failed",
        matches=lambda r: r.yanked and not r.build_succeeded,
        state=StateClass.WARN,
        tooltip="{slug} is yanked and failed to build",
    ),
    ReleaseRule(
        name="build-failed",
        matches=lambda r: not r.build_succeeded,
        state=StateClass.WARN,
        tooltip="failed to build {slug}",
    ),
    ReleaseRule(
        name="ok",
        matches=lambda r: True,
        state=StateClass.NONE,
        tooltip=None,
    ),
)


def classify_release(name: str, release: ReleaseRecord) -> tuple[StateClass, str | None]:
    """
    Return (state, tooltip) from the first rule in `RELEASE_RULES` that matches.
    """
    slug = release_slug(name, release.version)
    for rule in RELEASE_RULES:
        if rule.matches(release):
            tooltip = rule.tooltip.format(slug=slug) if rule.tooltip is not None else None
            return rule.state, tooltip
    # The last rule matches everything.
    raise AssertionError("RELEASE_RULES has no catch-all rule")


def render_release_list(name: str, releases: Iterable[ReleaseRecord]) -> list[RenderedLinkItem]:
    items: list[RenderedLinkItem] = []
    for release in releases:
        state, tooltip = classify_release(name, release)
        items.append(
            RenderedLinkItem(
                url=release_url(name, release.version),
                label=release.version,
                css_state_class=state,
                tooltip=tooltip,
            )
        )
    return items


class ReleaseListRenderer:
    def render(self, name: str, releases: Iterable[ReleaseRecord]) -> list[RenderedLinkItem]:
        return render_release_list(name, releases)
