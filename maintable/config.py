from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import SortDirection
from .sort import SortFunction, UpdateSortCallback
from .types.protocols import Renderable


class AppConfig(BaseSettings):
    """Process-wide settings, read from `MAINTABLE_*` environment variables."""

    model_config = SettingsConfigDict(env_prefix="MAINTABLE_")

    # Move the current page back into range when it no longer exists
    clamp_page: bool = True
    # Log a summary of every render
    debug: bool = False


class TableConfig(BaseModel):
    """Options of a single table."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
    )

    sortable: bool = False
    default_sort: Optional[str] = Field(None, alias="defaultSort")
    default_sort_direction: SortDirection = Field(
        SortDirection.ASCENDING, alias="defaultSortDirection"
    )
    paginate: Optional[int] = Field(
        None, ge=0, description="Number of rows per page. Disabled if 0 or None."
    )
    expanding: bool = False
    responsive: bool = False
    empty_state_msg: Optional[str] = Field(None, alias="emptyStateMsg")
    footer: Renderable = Field(
        None, description="Extra content shown underneath the table body."
    )
    sort_function: Optional[SortFunction] = Field(None, alias="sortFunction")
    on_update_sort: Optional[UpdateSortCallback] = Field(None, alias="onUpdateSort")

    @field_validator("default_sort_direction")
    @classmethod
    def check_default_direction(cls, v: SortDirection) -> SortDirection:
        if v is SortDirection.NONE:
            raise ValueError("default sort direction must be ascending or descending")
        return v
