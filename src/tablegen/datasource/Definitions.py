from __future__ import annotations

from pydantic import BaseModel, Field


class ReferencedTable(BaseModel):
    table_name: str
    column_name: str


class ColumnDefinition(BaseModel):
    name: str
    index: int = Field(0, ge=0)
    size: int = Field(0, ge=0)
    type: str = "varchar"
    is_nullable: bool = True
    is_primary_key: bool = False
    is_index: bool = False
    referenced_tables: list[ReferencedTable] = Field(default_factory=list)


class TableDefinition(BaseModel):
    """Schema metadata for one table; drives one rendering pass."""

    name: str
    columns: list[ColumnDefinition] = Field(default_factory=list)
    indexes: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def primary_key(self) -> list[ColumnDefinition]:
        return [column for column in self.columns if column.is_primary_key]
