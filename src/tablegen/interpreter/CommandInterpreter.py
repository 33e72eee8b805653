from __future__ import annotations
from typing import Iterable, Optional, Type

from loguru import logger

from .Literal import Value, VariableKind
from .Variable import Variable, VariableStack
from ..codefiles.CodeFile import CodeFileBase
from ..commands import DEFAULT_EXPRESSION_COMMANDS, DEFAULT_TEMPLATE_COMMANDS
from ..commands.CommandBase import CommandBase
from ..config import GeneratorConfig
from ..datasource.DataSource import DataSourceStrategyBase
from ..datasource.Definitions import TableDefinition
from ..parser.TemplateParser import TemplateParser
from ..templates.Template import DynamicTemplate, StaticTemplate, TemplateBase

TABLE_NAME = "TableName"
COLUMN_COUNT = "ColumnCount"


class CommandInterpreter:
    """
    Renders templates against the tables of a data source.

    One interpreter owns one variable stack and renders one template at a
    time. Dynamic templates are parsed once; then, for every table, the table
    name is bound globally, a table frame is pushed, a fresh code file is
    created for the template's file type and every command runs against it.
    Build separate interpreters to render independently.
    """

    LOGGER: logger = logger

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        expression_commands: Iterable[Type[CommandBase]] = DEFAULT_EXPRESSION_COMMANDS,
        template_commands: Iterable[Type[CommandBase]] = DEFAULT_TEMPLATE_COMMANDS,
    ):
        self.config = config or GeneratorConfig()
        self.variable_stack = VariableStack()
        self.code_file: Optional[CodeFileBase] = None
        self.expression_parser = TemplateParser(self, expression_commands)
        self.template_parser = TemplateParser(self, template_commands)

    # ------------------------------------------------------------------ #
    # RENDERING
    # ------------------------------------------------------------------ #
    def run(self, data_source: DataSourceStrategyBase, templates: Iterable[TemplateBase]) -> list[CodeFileBase]:
        tables = data_source.get_all_tables()
        generated = []
        for template in templates:
            generated.extend(self.run_template(tables, template))
        return generated

    def run_template(self, tables: list[TableDefinition], template: TemplateBase) -> list[CodeFileBase]:
        self.LOGGER.info(f"Rendering {template.name} for {len(tables)} tables")
        if isinstance(template, StaticTemplate):
            return [self._finish(template.generate(self._new_code_file(template, table))) for table in tables]
        if isinstance(template, DynamicTemplate):
            commands = self.parse_template(template)
            return [self._render_table(commands, template, table) for table in tables]
        raise TypeError(f"Unsupported template type {type(template).__name__}")

    def parse_template(self, template: TemplateBase) -> list[CommandBase]:
        return self.template_parser.parse(template)

    def parse_expression(self, expression: str) -> CommandBase:
        return self.expression_parser.parse_line(expression)

    def execute(self, expression: str) -> str:
        """Parse and run one expression, returning what it renders to."""
        command = self.parse_expression(expression)
        command.execute()
        return command.render()

    def _render_table(self, commands: list[CommandBase], template: TemplateBase, table: TableDefinition) -> CodeFileBase:
        self.set_global_variable(TABLE_NAME, VariableKind.STRING, table.name)
        self.set_global_variable(COLUMN_COUNT, VariableKind.INT, len(table.columns))

        self.code_file = self._new_code_file(template, table)
        with self.variable_stack.stack_frame():
            self.LOGGER.debug(f"Rendering {template.name} for table {table.name}")
            for command in commands:
                command.execute()
            self.code_file.flush()
        return self._finish(self.code_file)

    def _new_code_file(self, template: TemplateBase, table: TableDefinition) -> CodeFileBase:
        options = self.config.code_file_options(template.file_type)
        return CodeFileBase.create(template.file_type, filename=table.name, **options)

    def _finish(self, code_file: CodeFileBase) -> CodeFileBase:
        if self.config.write_output:
            code_file.write_using_overwrite_strategy()
        return code_file

    # ------------------------------------------------------------------ #
    # VARIABLES
    # ------------------------------------------------------------------ #
    def create_stack_frame(self) -> None:
        self.variable_stack.create_stack_frame()

    def destroy_stack_frame(self) -> None:
        self.variable_stack.destroy_stack_frame()

    def set_variable(self, name: str, *args) -> Variable:
        return self.variable_stack.set_variable(name, *args)

    def get_variable(self, name: str) -> Optional[Variable]:
        return self.variable_stack.get_variable(name)

    def get_variable_value(self, name: str) -> Optional[Value]:
        return self.variable_stack.get_variable_value(name)

    def set_global_variable(self, name: str, *args) -> Variable:
        return self.variable_stack.set_global_variable(name, *args)

    def get_global_variable(self, name: str) -> Optional[Variable]:
        return self.variable_stack.get_global_variable(name)

    def get_global_variable_value(self, name: str) -> Optional[Value]:
        return self.variable_stack.get_global_variable_value(name)

    def has_variable(self, name: str) -> bool:
        return self.variable_stack.has_variable(name)
