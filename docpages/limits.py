"""
limits.py

Responsibility: the build-limits table, always the same five rows in the same order.
"""

from __future__ import annotations

from docpages.formatting import format_byte_size, format_duration
from docpages.records import LimitRow, LimitsRecord


def render_limits_table(limits: LimitsRecord) -> list[LimitRow]:
    return [
        LimitRow("Available RAM", format_byte_size(limits.memory_bytes)),
        LimitRow("Maximum execution time", format_duration(limits.timeout_seconds)),
        LimitRow("Maximum size of a build log", format_byte_size(limits.max_log_size_bytes)),
        LimitRow("Network access", "allowed" if limits.networking_allowed else "blocked"),
        LimitRow("Maximum number of build targets", str(limits.max_build_targets)),
    ]


class LimitsTableRenderer:
    def render(self, limits: LimitsRecord) -> list[LimitRow]:
        return render_limits_table(limits)
