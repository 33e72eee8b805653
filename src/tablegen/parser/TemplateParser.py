from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Type

from loguru import logger

from ..exceptions import *

if TYPE_CHECKING:
    from ..commands.CommandBase import CommandBase
    from ..interpreter.CommandInterpreter import CommandInterpreter
    from ..templates.Template import TemplateBase


class TemplateParser:
    """Turns template lines into commands by asking each candidate command in turn."""

    LOGGER: logger = logger

    def __init__(self, interpreter: CommandInterpreter, candidates: Iterable[Type[CommandBase]]):
        self.interpreter = interpreter
        self.candidates: tuple[Type[CommandBase], ...] = tuple(candidates)

    def parse_line(self, line: str, line_number: int | None = None) -> CommandBase:
        for candidate in self.candidates:
            instance = candidate(self.interpreter)
            if instance.can_parse(line):
                return instance.parse(line)

        where = f" (line {line_number})" if line_number is not None else ""
        self.LOGGER.error(f"No command matches '{line}'{where}")
        raise UnknownCommandError(f"No command matches '{line}'{where}")

    def parse(self, template: TemplateBase) -> list[CommandBase]:
        commands = []
        for line_number, line in enumerate(template.lines, start=1):
            try:
                commands.append(self.parse_line(line, line_number))
            except TemplateParseError as exc:
                self.LOGGER.error(f"{template.name}:{line_number}: {exc}")
                raise
        self.LOGGER.debug(f"Parsed {template.name} into {len(commands)} commands")
        return commands
