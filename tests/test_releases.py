from __future__ import annotations

import pytest

from docpages.records import ReleaseRecord, RenderedLinkItem, StateClass
from docpages.releases import (
    RELEASE_RULES,
    ReleaseListRenderer,
    classify_release,
    render_release_list,
)


def _release(version: str = "1.0.0", *, yanked: bool = False, ok: bool = True, lib: bool = True) -> ReleaseRecord:
    return ReleaseRecord(version=version, yanked=yanked, build_succeeded=ok, is_library=lib)


def test_healthy_release_end_to_end() -> None:
    items = render_release_list("foo", [_release("1.0.0")])
    assert items == [
        RenderedLinkItem(url="/crate/foo/1.0.0", label="1.0.0", css_state_class=StateClass.NONE, tooltip=None)
    ]


@pytest.mark.parametrize("yanked", [False, True])
@pytest.mark.parametrize("ok", [False, True])
def test_non_library_always_wins(yanked: bool, ok: bool) -> None:
    state, tooltip = classify_release("foo", _release("0.1.0", yanked=yanked, ok=ok, lib=False))
    assert state is StateClass.WARN
    assert tooltip == "foo-0.1.0 is not a library"


def test_yanked_with_successful_build() -> None:
    assert classify_release("foo", _release("0.2.0", yanked=True, ok=True)) == (
        StateClass.WARN,
        "foo-0.2.0 is yanked",
    )


def test_yanked_with_failed_build_has_distinct_wording() -> None:
    state, tooltip = classify_release("foo", _release("0.2.0", yanked=True, ok=False))
    assert state is StateClass.WARN
    assert tooltip == "foo-0.2.0 is yanked and failed to build"
    assert tooltip != "foo-0.2.0 is yanked"


def test_failed_build_not_yanked() -> None:
    assert classify_release("foo", _release("0.3.0", ok=False)) == (
        StateClass.WARN,
        "failed to build foo-0.3.0",
    )


def test_empty_release_list() -> None:
    assert render_release_list("foo", []) == []


def test_output_preserves_input_order_and_length() -> None:
    releases = [
        _release("0.10.0"),
        _release("0.2.0", ok=False),
        _release("1.0.0", yanked=True),
        _release("0.9.0", lib=False),
    ]
    items = ReleaseListRenderer().render("foo", releases)
    assert [i.label for i in items] == ["0.10.0", "0.2.0", "1.0.0", "0.9.0"]
    assert [i.url for i in items] == [
        "/crate/foo/0.10.0",
        "/crate/foo/0.2.0",
        "/crate/foo/1.0.0",
        "/crate/foo/0.9.0",
    ]
    assert [i.css_state_class for i in items] == [
        StateClass.NONE,
        StateClass.WARN,
        StateClass.WARN,
        StateClass.WARN,
    ]


def test_render_accepts_any_iterable() -> None:
    items = render_release_list("foo", (r for r in [_release("1.0.0"), _release("1.1.0")]))
    assert len(items) == 2


def test_names_are_not_escaped_by_classification() -> None:
    _state, tooltip = classify_release("<b>", _release("1.0&2", ok=False))
    assert tooltip == "failed to build <b>-1.0&2"


def test_rules_end_with_catch_all() -> None:
    assert [rule.name for rule in RELEASE_RULES] == [
        "not-a-library",
        "yanked",
        "yanked-and-failed",
        "build-failed",
        "ok",
    ]
    assert RELEASE_RULES[-1].matches(_release(yanked=True, ok=False, lib=False))


def test_record_url_stays_literal() -> None:
    [item] = render_release_list("foo", [_release("1.0#beta")])
    assert item.url == "/crate/foo/1.0#beta"
