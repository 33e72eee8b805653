from importlib.metadata import version as _v

from .exceptions import *
from .config import GeneratorConfig, CodeFileConfig, load_config, save_config
from .interpreter.CommandInterpreter import CommandInterpreter
from .templates.Template import TemplateBase, StaticTemplate, DynamicTemplate
from .codefiles.CodeFile import CodeFileBase
from .datasource.DataSource import InMemoryDataSource, JsonDataSource
from .datasource.Definitions import TableDefinition, ColumnDefinition

__version__ = _v(__name__)
