"""
This module implements the presentation state of a table: given headers,
rows and configuration it decides which rows are visible, in what order
and with what per-cell metadata. Drawing the result is left to the
rendering layer, which wires user interaction back through
`MainTable.on_header_activate()` and `MainTable.on_page_request()`.
"""

from typing import Any, Iterable, Optional, Sequence, TypeVar, Union

from loguru import logger
from pydantic import BaseModel

from .config import AppConfig, TableConfig
from .expansion import expansion_header, resolve
from .models import (
    Cell,
    Header,
    RenderCell,
    RenderHeader,
    RenderRow,
    Row,
    TablePresentation,
)
from .pagination import Paginator
from .responsive import column_headings
from .sort import SortEngine

ICON_PLACEHOLDER_CLASS = "p-table__cell--icon-placeholder"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _as_models(
    model: type[ModelT], items: Optional[Iterable[Union[ModelT, dict[str, Any]]]]
) -> list[ModelT]:
    if not items:
        return []
    return [i if isinstance(i, model) else model.model_validate(i) for i in items]


def render_key(row: Row, index: int) -> str:
    """Render key of a row: its own key (0 included), else its position."""
    if row.key is not None:
        return str(row.key)
    return str(index)


def _cell_class(cell: Cell) -> Optional[str]:
    names = [cell.class_name, ICON_PLACEHOLDER_CLASS if cell.icon else None]
    return " ".join(n for n in names if n) or None


class MainTable:
    """A table instance owning its sort and page state.

    Call `present()` once per render pass with the current headers and rows.
    The sort and page state persist between calls and only change through
    `on_header_activate()`, `on_page_request()` or a changed default sort.
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        settings: Optional[AppConfig] = None,
    ) -> None:
        self.config = config or TableConfig()
        self.settings = settings or AppConfig()
        self.sorter = SortEngine(
            self.config.default_sort,
            self.config.default_sort_direction,
            self.config.on_update_sort,
        )
        self.paginator = Paginator(self.config.paginate, clamp=self.settings.clamp_page)
        # Sort keys of the last rendered headers. None until the first render.
        self._sort_keys: Optional[frozenset[str]] = None

    def configure(self, config: TableConfig) -> None:
        """Applies new configuration. A changed default sort replaces the sort state."""
        self.config = config
        self.sorter.on_update_sort = config.on_update_sort
        self.sorter.sync_defaults(config.default_sort, config.default_sort_direction)
        self.paginator.set_page_size(config.paginate)

    def on_header_activate(self, sort_key: Optional[str]) -> None:
        """Event handler for the activation (click) of a header."""
        if not self.config.sortable:
            logger.debug("Ignoring header activation, table is not sortable")
            return
        if self._sort_keys is not None and sort_key not in self._sort_keys:
            logger.debug(f"Ignoring header activation, {sort_key!r} is not a sort key")
            return
        self.sorter.activate(sort_key)

    def on_page_request(self, page_number: int) -> None:
        """Event handler for the pagination control. `page_number` is 1-based."""
        self.paginator.request_page(page_number)

    def present(
        self,
        headers: Optional[Sequence[Union[Header, dict[str, Any]]]] = None,
        rows: Optional[Sequence[Union[Row, dict[str, Any]]]] = None,
        config: Optional[TableConfig] = None,
    ) -> TablePresentation:
        """Computes the render-ready table.

        Parameters
        ----------
        headers : `Optional[Sequence[Header]]`
            Column headers. A table without headers has no header row.
        rows : `Optional[Sequence[Row]]`
            The rows to display, in input order.
        config : `Optional[TableConfig]`
            New configuration for this render. Keeps the current
            configuration if omitted.

        Returns
        -------
        `TablePresentation`
            Sorted, paginated and annotated rows along with header and
            pagination metadata.
        """
        if config is not None:
            self.configure(config)
        header_models = _as_models(Header, headers)
        row_models = _as_models(Row, rows)
        self._sort_keys = frozenset(
            h.sort_key for h in header_models if h.sort_key is not None
        )

        # Sorting must happen before pagination so pages follow the sorted order
        ordered = row_models
        if self.config.sortable:
            ordered = self.sorter.sort(row_models, self.config.sort_function)
        page = self.paginator.paginate(ordered)

        presentation = TablePresentation(
            headers=self._render_headers(header_models),
            rows=[
                self._render_row(row, index, header_models)
                for index, row in enumerate(page.visible_rows)
            ],
            total_rows=len(row_models),
            paginated=self.paginator.enabled,
            page_count=page.page_count,
            current_page=page.current_page,
            sortable=self.config.sortable,
            expanding=self.config.expanding,
            responsive=self.config.responsive,
            empty_message=self.config.empty_state_msg if not row_models else None,
            footer=self.config.footer,
        )
        if self.settings.debug:
            logger.debug(
                f"Rendered {len(presentation.rows)}/{presentation.total_rows} rows "
                f"(sort={self.sorter.state.key!r} {self.sorter.state.direction.value}, "
                f"page={page.current_page + 1}/{page.page_count})"
            )
        return presentation

    def _render_headers(self, headers: list[Header]) -> list[RenderHeader]:
        rendered = [
            RenderHeader(
                content=header.content,
                class_name=header.class_name,
                sort_key=header.sort_key,
                sort=self.sorter.header_sort(header) if self.config.sortable else None,
            )
            for header in headers
        ]
        if rendered and self.config.expanding:
            rendered.append(expansion_header())
        return rendered

    def _render_row(self, row: Row, index: int, headers: list[Header]) -> RenderRow:
        headings = column_headings(headers, len(row.columns), self.config.responsive)
        cells = [
            RenderCell(
                content=cell.content,
                class_name=_cell_class(cell),
                role=cell.role,
                icon=cell.icon,
                heading=heading,
            )
            for cell, heading in zip(row.columns, headings)
        ]
        expansion = resolve(self.config.expanding, row)
        if expansion.cell is not None:
            cells.append(expansion.cell)
        return RenderRow(
            key=render_key(row, index),
            cells=cells,
            expanded=row.expanded,
            class_name=row.class_name,
            positional_key=row.key is None,
        )


def present(
    headers: Optional[Sequence[Union[Header, dict[str, Any]]]] = None,
    rows: Optional[Sequence[Union[Row, dict[str, Any]]]] = None,
    config: Optional[TableConfig] = None,
) -> TablePresentation:
    """Presents a table once, with fresh (default) sort and page state."""
    return MainTable(config).present(headers, rows)
