"""
docpages package

Renders documentation-site fragments for a package's release list and its
sandboxed build limits.

Key responsibilities are split across modules:
- `records.py`: immutable input/output records and the `InvalidInput` error
- `formatting.py`: human-readable byte sizes and durations
- `releases.py`: release link classification (warn state + tooltip)
- `limits.py`: the fixed build-limits table rows
- `theme.py`: CSS classes and icon markup as configuration
- `page_data.py`: load page data documents (YAML or Markdown frontmatter)
- `renderer.py`: Jinja2 view layer producing the HTML fragments
- `cli.py`: CLI entrypoint (load -> render -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
