from __future__ import annotations

import pytest

from docpages.records import InvalidInput, StateClass
from docpages.theme import DEFAULT_THEME, Theme, theme_from_mapping


def test_css_class_for_states() -> None:
    assert DEFAULT_THEME.css_class_for(StateClass.NONE) == ""
    assert DEFAULT_THEME.css_class_for(StateClass.WARN) == "warn"


def test_theme_from_mapping_overrides_only_given_keys() -> None:
    theme = theme_from_mapping({"warn_class": "text-warning", "warn_icon": '<span class="bi bi-exclamation"></span>'})
    assert theme.warn_class == "text-warning"
    assert theme.warn_icon == '<span class="bi bi-exclamation"></span>'
    assert theme.list_class == DEFAULT_THEME.list_class
    assert theme.css_class_for(StateClass.WARN) == "text-warning"


def test_theme_from_mapping_empty_returns_base() -> None:
    base = Theme(item_class="entry")
    assert theme_from_mapping(None, base) is base
    assert theme_from_mapping({}, base) is base


def test_theme_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidInput, match="colour"):
        theme_from_mapping({"colour": "red"})


def test_theme_from_mapping_rejects_non_string_values() -> None:
    with pytest.raises(InvalidInput, match="warn_class"):
        theme_from_mapping({"warn_class": 3})


@pytest.mark.parametrize("bad", [["warn"], [], "", 0])
def test_theme_from_mapping_rejects_non_mapping(bad: object) -> None:
    with pytest.raises(InvalidInput):
        theme_from_mapping(bad)  # type: ignore[arg-type]
