"""Synthetic header and cell used by expanding tables.

An expanding table gets one extra column: a hidden header for column-count
alignment and, on every body row, a cell holding the row's expanded content.
"""

from typing import NamedTuple, Optional

from .models import RenderCell, RenderHeader, Row


class Expansion(NamedTuple):
    extra_header_needed: bool
    cell: Optional[RenderCell]


def expansion_header() -> RenderHeader:
    """The header placed above the expansion cells. Hidden from assistive technology."""
    return RenderHeader(content=None, aria_hidden=True)


def resolve(expanding: bool, row: Row) -> Expansion:
    """Determines the expansion metadata of a single row.

    The expanded content is only ever emitted for expanded rows. Collapsed
    rows still receive an (empty, hidden) cell so every row keeps the same
    number of cells.
    """
    if not expanding:
        return Expansion(False, None)
    if row.expanded:
        cell = RenderCell(content=row.expanded_content, expanding=True, hidden=False)
    else:
        cell = RenderCell(content=None, expanding=True, hidden=True)
    return Expansion(True, cell)
