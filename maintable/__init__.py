"""Presentation state for tables with client-side sorting, pagination,
row expansion and responsive headings."""

from .config import AppConfig, TableConfig
from .exceptions import MainTableError, SortDataError
from .models import (
    Cell,
    Header,
    Hyperlink,
    Markup,
    RenderCell,
    RenderHeader,
    RenderRow,
    Row,
    SortDirection,
    SortState,
    TablePresentation,
)
from .table import MainTable, present

__all__ = [
    "AppConfig",
    "Cell",
    "Header",
    "Hyperlink",
    "MainTable",
    "MainTableError",
    "Markup",
    "RenderCell",
    "RenderHeader",
    "RenderRow",
    "Row",
    "SortDataError",
    "SortDirection",
    "SortState",
    "TableConfig",
    "TablePresentation",
    "present",
]
