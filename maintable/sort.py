"""
Single-column client-side sorting.

A sort key cycles through ascending, descending and back to unsorted each
time its header is activated. Activating a different header starts over at
ascending for that header.
"""

from functools import cmp_to_key, partial
from typing import Any, Callable, Iterable, Optional

from loguru import logger

from .exceptions import SortDataError
from .models import Header, Row, SortDirection, SortState

# Signature of a caller-supplied comparator: (a, b, direction, key) -> int
# It replaces the built-in comparator and must handle the direction itself.
SortFunction = Callable[[Row, Row, SortDirection, Optional[str]], int]
Comparator = Callable[[Row, Row], int]
UpdateSortCallback = Callable[[Optional[str]], Any]

UNSORTED = SortState()


def toggle(state: SortState, clicked_key: Optional[str]) -> SortState:
    """Computes the sort state following the activation of a header.

    Parameters
    ----------
    state : `SortState`
        The current sort state.
    clicked_key : `Optional[str]`
        Sort key of the activated header. None for non-sortable headers.

    Returns
    -------
    `SortState`
        The next sort state. Unchanged if `clicked_key` is None.
    """
    if clicked_key is None:
        return state
    if not state.active or clicked_key != state.key:
        return SortState(clicked_key, SortDirection.ASCENDING)
    if state.direction is SortDirection.ASCENDING:
        return SortState(clicked_key, SortDirection.DESCENDING)
    return UNSORTED


def default_state(
    default_sort: Optional[str],
    default_sort_direction: SortDirection = SortDirection.ASCENDING,
) -> SortState:
    """Sort state derived from a table's default sort configuration."""
    if default_sort is None:
        return UNSORTED
    return SortState(default_sort, SortDirection(default_sort_direction))


def get_sort_value(row: Row, key: str) -> Any:
    try:
        return row.sort_data[key]  # type: ignore[index]
    except (KeyError, TypeError) as e:
        msg = f"Row {row.key!r} has no sort data for key {key!r}"
        logger.error(msg)
        raise SortDataError(msg, key) from e


def compare(
    a: Row, b: Row, key: str, direction: SortDirection = SortDirection.ASCENDING
) -> int:
    """Compares two rows by their sort data at `key`.

    Values are compared with their natural ordering, so numbers compare
    numerically and strings case-sensitively.
    Returns a negative, zero or positive integer like a classic `cmp()`.
    """
    x = get_sort_value(a, key)
    y = get_sort_value(b, key)
    result = (x > y) - (x < y)
    if direction is SortDirection.DESCENDING:
        return -result
    return result


def make_comparator(
    state: SortState, sort_function: Optional[SortFunction] = None
) -> Optional[Comparator]:
    """Builds the row comparator for a sort state.

    Returns None when no sort is active, meaning input order is kept.
    """
    if not state.active:
        return None
    if sort_function is not None:
        return lambda a, b: sort_function(a, b, state.direction, state.key)
    return partial(compare, key=state.key, direction=state.direction)


def sort_rows(
    rows: Iterable[Row],
    state: SortState,
    sort_function: Optional[SortFunction] = None,
) -> list[Row]:
    """Returns the rows ordered by `state`.

    The sort is stable: rows with equal sort values keep their input order
    in both directions. The input is never reordered in place.
    """
    comparator = make_comparator(state, sort_function)
    if comparator is None:
        return list(rows)
    return sorted(rows, key=cmp_to_key(comparator))


class SortEngine:
    """Owns the sort state of one table instance."""

    def __init__(
        self,
        default_sort: Optional[str] = None,
        default_sort_direction: SortDirection = SortDirection.ASCENDING,
        on_update_sort: Optional[UpdateSortCallback] = None,
    ) -> None:
        self._defaults = (default_sort, SortDirection(default_sort_direction))
        self.state = default_state(*self._defaults)
        self.on_update_sort = on_update_sort

    def activate(self, sort_key: Optional[str]) -> SortState:
        """Handles the activation of the header with the given sort key."""
        if sort_key is None:
            logger.debug("Ignoring activation of a non-sortable header")
            return self.state
        self.state = toggle(self.state, sort_key)
        logger.debug(
            f"Sort changed to key={self.state.key!r} direction={self.state.direction.value}"
        )
        if self.on_update_sort is not None:
            self.on_update_sort(self.state.key)
        return self.state

    def sync_defaults(
        self,
        default_sort: Optional[str],
        default_sort_direction: SortDirection = SortDirection.ASCENDING,
    ) -> SortState:
        """Replaces the current state if the default sort configuration
        differs from the one seen on the previous render.

        Unchanged defaults never override a state produced by `activate()`.
        """
        defaults = (default_sort, SortDirection(default_sort_direction))
        if defaults != self._defaults:
            logger.debug(
                f"Default sort changed from {self._defaults} to {defaults}, resetting sort"
            )
            self._defaults = defaults
            self.state = default_state(*defaults)
        return self.state

    def header_sort(self, header: Header) -> Optional[SortDirection]:
        """The `sort` attribute rendered on a header.

        None for non-sortable headers, the active direction for the header
        being sorted on and `SortDirection.NONE` for every other sortable header.
        """
        if header.sort_key is None:
            return None
        if self.state.active and header.sort_key == self.state.key:
            return self.state.direction
        return SortDirection.NONE

    def sort(
        self, rows: Iterable[Row], sort_function: Optional[SortFunction] = None
    ) -> list[Row]:
        return sort_rows(rows, self.state, sort_function)
