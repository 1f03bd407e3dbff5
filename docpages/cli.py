"""
cli.py

Responsibility: CLI entrypoint for docpages.

High-level flow (single command `render`):
1) Load page data -> `PageData`
2) Render fragments with the page's theme
3) Write `releases.html` / `limits.html` into --out-dir, or print to stdout

This module should orchestrate behavior but keep concerns isolated:
- Page data loading: `page_data.py`
- Classification and formatting: `releases.py`, `limits.py`
- HTML: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from docpages.page_data import PageData, load_page_data
from docpages.records import InvalidInput
from docpages.renderer import FragmentRenderer, RenderError

logger = logging.getLogger(__name__)

TEMPLATES_DIR_ENV = "DOCPAGES_TEMPLATES_DIR"

FRAGMENT_FILES = {
    "releases": "releases.html",
    "limits": "limits.html",
}


class CLIError(RuntimeError):
    pass


def _ensure_empty_dir(path: Path, *, overwrite: bool) -> None:
    path.mkdir(parents=True, exist_ok=True)
    if not overwrite:
        if any(path.iterdir()):
            raise CLIError(f"Output directory is not empty: {path} (use --overwrite to allow)")


def _render_fragments(renderer: FragmentRenderer, page: PageData, fragment: str) -> dict[str, str]:
    if fragment == "all":
        result = renderer.render_page(page)
        return {"releases": result.releases_html, "limits": result.limits_html}
    if fragment == "releases":
        return {"releases": renderer.render_releases(page.name, page.releases)}
    return {"limits": renderer.render_limits(page.limits)}


def render_cmd(args: argparse.Namespace) -> int:
    page = load_page_data(args.data_path)

    templates_dir = args.templates_dir or os.environ.get(TEMPLATES_DIR_ENV) or None
    renderer = FragmentRenderer(theme=page.theme, templates_dir=templates_dir)
    fragments = _render_fragments(renderer, page, args.fragment)

    if args.out_dir is None:
        for html in fragments.values():
            sys.stdout.write(html)
        return 0

    out_dir = Path(args.out_dir).resolve()
    _ensure_empty_dir(out_dir, overwrite=bool(args.overwrite))
    for key, html in fragments.items():
        dst_path = out_dir / FRAGMENT_FILES[key]
        dst_path.write_text(html, encoding="utf-8", newline="\n")
        logger.info("Wrote %s", dst_path)

    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="docpages", description="Render release list and build limits fragments")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("render", help="Render HTML fragments from a page data document")
    r.add_argument("data_path", help="Path to the page data file (YAML or Markdown with YAML frontmatter)")
    r.add_argument("--out-dir", default=None, help="Directory to write fragments into (default: print to stdout)")
    r.add_argument("--overwrite", action="store_true", help="Allow a non-empty output directory")
    r.add_argument(
        "--templates-dir",
        default=None,
        help=f"Templates directory (default: packaged templates, or env {TEMPLATES_DIR_ENV})",
    )
    r.add_argument(
        "--fragment",
        choices=["all", *FRAGMENT_FILES],
        default="all",
        help="Which fragment(s) to render (default: all)",
    )

    r.set_defaults(func=render_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.func(args))
    except (InvalidInput, RenderError, CLIError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
