from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class SortDirection(str, Enum):
    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortState(NamedTuple):
    """The single active sort column and its direction."""

    key: Optional[str] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def active(self) -> bool:
        return self.key is not None and self.direction is not SortDirection.NONE


@dataclass
class PageState:
    """Current page index (0-based) and configured page size.

    A falsy `page_size` disables pagination.
    """

    page_size: Optional[int] = None
    current_page: int = 0

    @property
    def enabled(self) -> bool:
        return bool(self.page_size)
