import math
from typing import Any, Iterable, NamedTuple, Optional, Sequence, TypeVar

from loguru import logger

from .models import PageState

T = TypeVar("T")


class Page(NamedTuple):
    visible_rows: list[Any]
    page_count: int  # 0 when pagination is disabled
    current_page: int  # 0-based


def page_count(total: int, page_size: Optional[int]) -> int:
    """Number of pages needed to show `total` rows. 0 if pagination is disabled."""
    if not page_size:
        return 0
    return math.ceil(total / page_size)


def paginate(
    rows: Sequence[T], page_size: Optional[int], current_page: int = 0
) -> Page:
    """Slices an ordered row sequence into the page at index `current_page`.

    Parameters
    ----------
    rows : `Sequence[T]`
        The rows to paginate, already in display order.
    page_size : `Optional[int]`
        Maximum number of rows per page. If falsy, pagination is skipped
        and all rows are visible.
    current_page : `int`
        0-based index of the page to show.

    Returns
    -------
    `Page`
        The visible rows along with the page count.
    """
    if not page_size:
        return Page(list(rows), 0, 0)
    start = current_page * page_size
    return Page(
        list(rows[start : start + page_size]),
        page_count(len(rows), page_size),
        current_page,
    )


class Paginator:
    """Owns the page state of one table instance.

    With `clamp` enabled, a current page that lies outside the pages the
    rows allow (e.g. after the row count shrinks) is moved back to the
    nearest existing page on the next call to `paginate()`.
    """

    def __init__(self, page_size: Optional[int] = None, clamp: bool = True) -> None:
        self.state = PageState(page_size=page_size)
        self.clamp = clamp

    @property
    def enabled(self) -> bool:
        return self.state.enabled

    def set_page_size(self, page_size: Optional[int]) -> None:
        self.state.page_size = page_size

    def request_page(self, page_number: int) -> None:
        """Handles a request from the pagination control.

        `page_number` is 1-based. Requests are a no-op when pagination is disabled.
        """
        if not self.enabled:
            logger.debug(f"Ignoring request for page {page_number}, pagination is disabled")
            return
        logger.debug(f"Changing to page {page_number}")
        self.state.current_page = page_number - 1

    def paginate(self, rows: Iterable[T]) -> Page:
        rows = list(rows)
        if self.clamp and self.enabled:
            self._clamp(len(rows))
        return paginate(rows, self.state.page_size, self.state.current_page)

    def _clamp(self, total: int) -> None:
        last = max(page_count(total, self.state.page_size) - 1, 0)
        page = min(max(self.state.current_page, 0), last)
        if page != self.state.current_page:
            logger.debug(
                f"Page index {self.state.current_page} out of range for {total} rows, "
                f"moving to {page}"
            )
            self.state.current_page = page
