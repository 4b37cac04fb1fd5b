"""Fixed-width rendering of count statistics."""

from __future__ import annotations

from token_counter.models.display import DisplayConfig
from token_counter.models.stats import TokenStats

FIELD_WIDTH = 8


def format_stats(stats: TokenStats, display: DisplayConfig, label: str | None = None) -> str:
    """Render the enabled counts, right-aligned, followed by an optional label.

    Fields always appear in token, line, byte order.  No trailing newline.
    """
    values: list[int] = []
    if display.show_tokens:
        values.append(stats.tokens)
    if display.show_lines:
        values.append(stats.lines)
    if display.show_bytes:
        values.append(stats.bytes)

    counts = " ".join(f"{value:>{FIELD_WIDTH}}" for value in values)
    if label is None:
        return counts
    return f"{counts} {label}"
