from dataclasses import dataclass, field
from typing import Optional

from ..types.protocols import Renderable
from .state import SortDirection


@dataclass
class RenderHeader:
    content: Renderable = None
    class_name: Optional[str] = None
    sort_key: Optional[str] = None
    # None means the column is not sortable, as opposed to SortDirection.NONE
    sort: Optional[SortDirection] = None
    aria_hidden: bool = False


@dataclass
class RenderCell:
    content: Renderable = None
    class_name: Optional[str] = None
    role: Optional[str] = None
    icon: Optional[str] = None
    heading: Optional[str] = None  # omitted entirely when None
    expanding: bool = False
    hidden: bool = False


@dataclass
class RenderRow:
    key: str
    cells: list[RenderCell] = field(default_factory=list)
    expanded: bool = False
    class_name: Optional[str] = None
    # True when `key` is the row's position in this render rather than its own key
    positional_key: bool = False


@dataclass
class TablePresentation:
    """Render-ready output of a single table render pass."""

    headers: list[RenderHeader] = field(default_factory=list)
    rows: list[RenderRow] = field(default_factory=list)
    total_rows: int = 0
    paginated: bool = False
    page_count: int = 0
    current_page: int = 0  # 0-based
    sortable: bool = False
    expanding: bool = False
    responsive: bool = False
    empty_message: Optional[str] = None
    footer: Renderable = None

    @property
    def empty(self) -> bool:
        return len(self.rows) == 0

    @property
    def keys(self) -> list[str]:
        return [row.key for row in self.rows]
