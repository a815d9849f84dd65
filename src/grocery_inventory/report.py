from __future__ import annotations

from typing import Iterable, List, Sequence

from .items.models import Item

EMPTY_MESSAGE = "No data in inventory"
HEADERS = ("name", "sellIn", "quality")


def render_table(items: Iterable[Item]) -> str:
    """Render items as a plain-text table with name/sellIn/quality columns."""
    rows: List[Sequence[str]] = [
        (item.name, str(item.sell_in), str(item.quality)) for item in items
    ]
    if not rows:
        return EMPTY_MESSAGE
    widths = [
        max(len(HEADERS[col]), *(len(row[col]) for row in rows)) for col in range(len(HEADERS))
    ]
    lines = [_format_row(HEADERS, widths), "  ".join("-" * w for w in widths)]
    lines.extend(_format_row(row, widths) for row in rows)
    return "\n".join(lines)


def _format_row(row: Sequence[str], widths: Sequence[int]) -> str:
    # Name left-aligned, numbers right-aligned
    cells = [row[0].ljust(widths[0])]
    cells.extend(cell.rjust(width) for cell, width in zip(row[1:], widths[1:]))
    return "  ".join(cells).rstrip()
