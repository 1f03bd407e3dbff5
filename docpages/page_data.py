"""
page_data.py

Responsibility: Load a page data document into typed records.

A document is either plain YAML or Markdown starting with YAML frontmatter
delimited by '---'. Recognised keys:
- name: str (required)
- releases: list of {version, yanked, build_succeeded, is_library}
- limits: {memory_bytes, timeout_seconds, max_log_size_bytes,
  networking_allowed, max_build_targets}
- theme: overrides for `docpages.theme.Theme`

This is the only place that checks input shape; the renderers trust what it returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from docpages.records import InvalidInput, LimitsRecord, ReleaseRecord
from docpages.theme import DEFAULT_THEME, Theme, theme_from_mapping

logger = logging.getLogger(__name__)

DEFAULT_LIMITS = LimitsRecord(
    memory_bytes=3 * 1024 * 1024 * 1024,
    timeout_seconds=15 * 60,
    max_log_size_bytes=100 * 1024,
    networking_allowed=False,
    max_build_targets=10,
)


@dataclass(frozen=True)
class PageData:
    """Everything needed to render one package's fragments."""

    name: str
    releases: tuple[ReleaseRecord, ...] = ()
    limits: LimitsRecord = DEFAULT_LIMITS
    theme: Theme = DEFAULT_THEME


def _split_frontmatter(text: str) -> str:
    """
    If the text begins with YAML frontmatter delimited by '---' lines, return just the
    frontmatter. Without a closing delimiter the leading '---' is a plain YAML
    document marker and the whole text is YAML.
    """
    if not text.startswith("---\n"):
        return text

    end = text.find("\n---\n", 4)
    if end == -1:
        if text.endswith("\n---"):
            return text[4 : len(text) - len("\n---")]
        return text
    return text[4:end]


def _bool_field(raw: dict[str, Any], key: str, default: bool, where: str) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise InvalidInput(f"{where}.{key} must be true or false.")
    return value


def _count_field(raw: dict[str, Any], key: str, where: str) -> int:
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInput(f"{where}.{key} must be a non-negative integer.")
    return value


def _parse_release(raw: Any, index: int) -> ReleaseRecord:
    where = f"releases[{index}]"
    if not isinstance(raw, dict):
        raise InvalidInput(f"{where} must be an object/mapping.")

    version = raw.get("version")
    if version is None:
        raise InvalidInput(f"{where}.version is required.")
    # Unquoted 1.10 loads as the float 1.1; refuse rather than guess.
    if not isinstance(version, str):
        raise InvalidInput(f"{where}.version must be a string (quote it).")
    if not version.strip():
        raise InvalidInput(f"{where}.version is required.")

    return ReleaseRecord(
        version=version.strip(),
        yanked=_bool_field(raw, "yanked", False, where),
        build_succeeded=_bool_field(raw, "build_succeeded", True, where),
        is_library=_bool_field(raw, "is_library", True, where),
    )


def _parse_limits(raw: Any) -> LimitsRecord:
    if raw is None:
        return DEFAULT_LIMITS
    if not isinstance(raw, dict):
        raise InvalidInput("`limits` must be an object/mapping when provided.")

    merged = {
        "memory_bytes": DEFAULT_LIMITS.memory_bytes,
        "timeout_seconds": DEFAULT_LIMITS.timeout_seconds,
        "max_log_size_bytes": DEFAULT_LIMITS.max_log_size_bytes,
        "networking_allowed": DEFAULT_LIMITS.networking_allowed,
        "max_build_targets": DEFAULT_LIMITS.max_build_targets,
        **raw,
    }
    known = {f.name for f in fields(LimitsRecord)}
    unknown = sorted(str(k) for k in merged if k not in known)
    if unknown:
        raise InvalidInput(f"Unknown limits keys: {', '.join(unknown)}")

    return LimitsRecord(
        memory_bytes=_count_field(merged, "memory_bytes", "limits"),
        timeout_seconds=_count_field(merged, "timeout_seconds", "limits"),
        max_log_size_bytes=_count_field(merged, "max_log_size_bytes", "limits"),
        networking_allowed=_bool_field(merged, "networking_allowed", False, "limits"),
        max_build_targets=_count_field(merged, "max_build_targets", "limits"),
    )


def parse_page_data(text: str) -> PageData:
    try:
        data = yaml.safe_load(_split_frontmatter(text)) or {}
    except yaml.YAMLError as e:
        raise InvalidInput(f"Page data is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInput("Page data must be a mapping/object at the top level.")

    name = str(data.get("name") or "").strip()
    if not name:
        raise InvalidInput("Page data must define `name`.")

    releases_raw = data.get("releases")
    if releases_raw is None:
        releases_raw = []
    if not isinstance(releases_raw, list):
        raise InvalidInput("`releases` must be a list when provided.")
    releases = tuple(_parse_release(raw, i) for i, raw in enumerate(releases_raw))

    return PageData(
        name=name,
        releases=releases,
        limits=_parse_limits(data.get("limits")),
        theme=theme_from_mapping(data.get("theme")),
    )


def load_page_data(path: str | Path) -> PageData:
    """
    Read and parse a page data document from `path`.
    """
    path = Path(path)
    if not path.exists():
        raise InvalidInput(f"Page data file does not exist: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInput(f"Cannot read page data file {path}: {e}") from e
    page = parse_page_data(text)
    logger.debug("Loaded %s: %d releases", path, len(page.releases))
    return page
