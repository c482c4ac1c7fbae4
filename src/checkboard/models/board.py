"""Board state models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .checkboard_config import CheckboardConfig, ColumnConfig
from .task import Task


class Board(BaseModel):
    """Tasks grouped into configured columns, already filtered and sorted."""

    columns: dict[str, list[Task]] = Field(default_factory=dict)
    config: CheckboardConfig = Field(default_factory=CheckboardConfig.default)

    def get_column(self, column_id: str) -> list[Task]:
        """Get tasks for a specific column."""
        return self.columns.get(column_id, [])

    def get_visible_columns(self) -> list[tuple[ColumnConfig, list[Task]]]:
        """
        Get columns with their config in display order.

        Returns:
            List of (column, tasks) tuples.
        """
        return [(col, self.columns.get(col.id, [])) for col in self.config.columns]
