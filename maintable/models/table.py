"""Input models describing a table: its headers and its rows.

Headers and rows are supplied fresh by the caller on every render and are
never mutated by the table. Fields accept both snake_case names and the
camelCase names used by component props in front-end code.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..types.protocols import Renderable

RowKey = Union[int, str]


class _TableModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
    )


class Header(_TableModel):
    """A column descriptor controlling label, sortability and styling."""

    content: Renderable = Field(
        ..., description="The header label, text or content handle."
    )
    class_name: Optional[str] = Field(None, alias="className")
    sort_key: Optional[str] = Field(
        None,
        alias="sortKey",
        description="Key into each row's sort data. Marks the column as sortable.",
    )
    heading: Optional[str] = Field(
        None,
        description="Label used for responsive headings when `content` is not text.",
    )


class Cell(_TableModel):
    content: Renderable = Field(...)
    class_name: Optional[str] = Field(None, alias="className")
    role: Optional[str] = None
    icon: Optional[str] = Field(
        None, description="Name of an icon displayed in front of the content."
    )


class Row(_TableModel):
    """One record to display.

    `key` identifies the row across renders and may legitimately be 0.
    `sort_data` holds the values compared when sorting, independently of
    what is rendered in `columns`.
    """

    key: Optional[RowKey] = None
    columns: list[Cell] = Field(default_factory=list)
    sort_data: Optional[dict[str, Any]] = Field(None, alias="sortData")
    expanded: bool = False
    expanded_content: Renderable = Field(None, alias="expandedContent")
    class_name: Optional[str] = Field(None, alias="className")
