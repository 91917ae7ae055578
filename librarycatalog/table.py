from __future__ import annotations

from typing import Iterable, List, Tuple

from librarycatalog.types import LibraryItem

COLUMNS: List[Tuple[str, int]] = [
    ("Category", 17),
    ("Title", 21),
    ("Author", 21),
    ("Release Date", 17),
    ("Item ID", 36),
    ("Date Added", 17),
]

BORDER = "+" + "+".join("-" * (width + 2) for _name, width in COLUMNS) + "+"


def format_row(values: Iterable[object]) -> str:
    # pad but never truncate
    cells = [f" {str(v):<{width}} " for v, (_name, width) in zip(values, COLUMNS)]
    return "|" + "|".join(cells) + "|"


def item_values(item: LibraryItem) -> list:
    return [
        item.category,
        item.title,
        item.author,
        item.release_date.isoformat(),
        item.item_id,
        item.date_added.isoformat(),
    ]


def render_table(items: Iterable[LibraryItem]) -> List[str]:
    """
    Returns the catalog table as lines:
      border, header, border, then one row + border per item.
    """
    lines = [BORDER, format_row(name for name, _width in COLUMNS), BORDER]
    for it in items:
        lines.append(format_row(item_values(it)))
        lines.append(BORDER)
    return lines
