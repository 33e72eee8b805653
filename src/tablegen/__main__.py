from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from .codefiles.CodeFile import CodeFileBase
from .codefiles.OutputStrategy import OutputStrategyBase
from .codefiles.OverwriteStrategy import OverwriteStrategyBase
from .config import GeneratorConfig, load_config
from .datasource.DataSource import JsonDataSource
from .interpreter.CommandInterpreter import CommandInterpreter
from .templates.Template import TemplateBase
from .exceptions import *


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablegen",
        description="Render line templates once per table of a schema.",
    )
    parser.add_argument("--schema", required=True, type=Path, help="JSON file with the table definitions")
    parser.add_argument("--template", required=True, type=Path, action="append",
                        help="template file; may be given more than once")
    parser.add_argument("--file-type", required=True, choices=CodeFileBase.file_types(),
                        help="code file type the templates generate")
    parser.add_argument("--config", type=Path, help="generator configuration (JSON)")
    parser.add_argument("--output-root", type=Path, help="directory generated files are written under")
    parser.add_argument("--output-strategy", choices=OutputStrategyBase.strategy_types(),
                        help="where generated files go (default: file)")
    parser.add_argument("--overwrite-strategy", choices=OverwriteStrategyBase.strategy_types(),
                        help="what to do with files that already exist")
    parser.add_argument("--ignore-table", action="append", default=[], help="table to skip")
    parser.add_argument("-v", "--verbose", action="store_true", help="log rendering progress")
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _make_config(ns: argparse.Namespace) -> GeneratorConfig:
    config = load_config(ns.config) if ns.config else GeneratorConfig(output_strategy="file")
    updates = {"write_output": True}
    if ns.output_root is not None:
        updates["output_root"] = ns.output_root
    if ns.output_strategy is not None:
        updates["output_strategy"] = ns.output_strategy
    if ns.overwrite_strategy is not None:
        updates["overwrite_strategy"] = ns.overwrite_strategy
    return config.model_copy(update=updates)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _configure_logging(ns.verbose)

    try:
        config = _make_config(ns)
        templates = [TemplateBase.load(path, ns.file_type) for path in ns.template]
        interpreter = CommandInterpreter(config)
        generated = interpreter.run(JsonDataSource(ns.schema, ns.ignore_table), templates)
    except (TableGenError, OSError, ValueError) as exc:
        logger.error(f"Generation failed: {exc}")
        return 1

    logger.info(f"Generated {len(generated)} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
