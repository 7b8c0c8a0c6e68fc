"""
Models for the data flowing in and out of a table: the caller-supplied
headers and rows, the engine-owned sort and page state, and the
render-ready output consumed by the rendering layer.
"""

from .content import Hyperlink, Markup, content_as_text
from .render import RenderCell, RenderHeader, RenderRow, TablePresentation
from .state import PageState, SortDirection, SortState
from .table import Cell, Header, Row, RowKey

__all__ = [
    "Cell",
    "Header",
    "Hyperlink",
    "Markup",
    "PageState",
    "RenderCell",
    "RenderHeader",
    "RenderRow",
    "Row",
    "RowKey",
    "SortDirection",
    "SortState",
    "TablePresentation",
    "content_as_text",
]
