from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger
from pydantic import TypeAdapter

from .Definitions import TableDefinition

_TABLES = TypeAdapter(list[TableDefinition])


class DataSourceStrategyBase(ABC):
    LOGGER: logger = logger

    def __init__(self, ignore_tables: Optional[Iterable[str]] = None):
        self.ignore_tables: set[str] = {name.lower() for name in ignore_tables or ()}

    def get_all_tables(self) -> list[TableDefinition]:
        tables = [table for table in self._load_tables() if table.name.lower() not in self.ignore_tables]
        self.LOGGER.debug(f"{self.__class__.__name__} supplied {len(tables)} tables")
        return tables

    @abstractmethod
    def _load_tables(self) -> list[TableDefinition]: pass


class InMemoryDataSource(DataSourceStrategyBase):
    def __init__(self, tables: Iterable[TableDefinition | dict], ignore_tables: Optional[Iterable[str]] = None):
        super().__init__(ignore_tables)
        self.tables = [TableDefinition.model_validate(table) for table in tables]

    def _load_tables(self) -> list[TableDefinition]:
        return list(self.tables)


class JsonDataSource(DataSourceStrategyBase):
    """A JSON file holding a list of table definitions."""

    def __init__(self, path: str | Path, ignore_tables: Optional[Iterable[str]] = None):
        super().__init__(ignore_tables)
        self.path = Path(path)

    def _load_tables(self) -> list[TableDefinition]:
        return _TABLES.validate_json(self.path.read_text(encoding="utf-8"))
