from .Definitions import ColumnDefinition, ReferencedTable, TableDefinition
from .DataSource import DataSourceStrategyBase, InMemoryDataSource, JsonDataSource
