"""
renderer.py

Responsibility: Turn rendered link items and limit rows into HTML fragments.

Rules:
- Templates are Jinja2 with autoescaping on, so package names, versions and
  tooltips can never inject markup.
- Theme markup (icons) is trusted configuration and is marked safe explicitly.
- Undefined template variables are errors, not empty strings.

This module intentionally does NOT know about page data files or CLI parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from markupsafe import Markup

from docpages.limits import render_limits_table
from docpages.page_data import PageData
from docpages.records import LimitsRecord, ReleaseRecord, StateClass
from docpages.releases import render_release_list
from docpages.theme import DEFAULT_THEME, Theme

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

RELEASE_LIST_TEMPLATE = "release_list.html"
LIMITS_TABLE_TEMPLATE = "limits_table.html"


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderResult:
    releases_html: str
    limits_html: str


class FragmentRenderer:
    def __init__(self, theme: Theme = DEFAULT_THEME, templates_dir: str | Path | None = None) -> None:
        tpl_dir = Path(templates_dir).resolve() if templates_dir is not None else DEFAULT_TEMPLATES_DIR
        if not tpl_dir.is_dir():
            raise RenderError(f"Template directory not found: {tpl_dir}")

        self.theme = theme
        self.templates_dir = tpl_dir
        self._env = Environment(
            loader=FileSystemLoader(str(tpl_dir)),
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise RenderError(f"Failed rendering template: {template_name}") from e

    def render_releases(self, name: str, releases: Iterable[ReleaseRecord]) -> str:
        """
        Render the release list as a `<ul>` of links, warned releases carrying
        the theme's warn class, icon and a `title` tooltip.
        Path segments in `href` are percent-encoded; `url` stays literal for
        custom templates.
        """
        items = [
            {
                "url": item.url,
                "name": name,
                "version": item.label,
                "label": item.label,
                "css_class": self.theme.css_class_for(item.css_state_class),
                "tooltip": item.tooltip,
                "warn": item.css_state_class is StateClass.WARN,
            }
            for item in render_release_list(name, releases)
        ]
        return self._render(
            RELEASE_LIST_TEMPLATE,
            {
                "items": items,
                "list_class": self.theme.list_class,
                "item_class": self.theme.item_class,
                "warn_icon": Markup(self.theme.warn_icon),
            },
        )

    def render_limits(self, limits: LimitsRecord) -> str:
        return self._render(
            LIMITS_TABLE_TEMPLATE,
            {
                "rows": render_limits_table(limits),
                "table_class": self.theme.table_class,
            },
        )

    def render_page(self, page: PageData) -> RenderResult:
        return RenderResult(
            releases_html=self.render_releases(page.name, page.releases),
            limits_html=self.render_limits(page.limits),
        )
