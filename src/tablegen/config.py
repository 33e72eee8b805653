from __future__ import annotations
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from .codefiles.IndentRule import IndentRuleConfig


class CodeFileConfig(BaseModel):
    """Per file-type overrides; anything left unset keeps the file type's default."""

    extension: Optional[str] = None
    indent_amount: Optional[int] = Field(None, ge=0)
    rules: Optional[list[IndentRuleConfig]] = None


class GeneratorConfig(BaseModel):
    output_root: Path = Path(".")
    output_path: str = ""
    output_strategy: str = "string"
    overwrite_strategy: str = "always"
    write_output: bool = False
    code_files: dict[str, CodeFileConfig] = Field(default_factory=dict)

    def code_file_options(self, file_type: str) -> dict[str, Any]:
        options: dict[str, Any] = {
            "root_path": self.output_root,
            "path": self.output_path,
            "output_strategy": self.output_strategy,
            "overwrite_strategy": self.overwrite_strategy,
        }
        overrides = {k.lower(): v for k, v in self.code_files.items()}.get(file_type.lower())
        if overrides is not None:
            if overrides.extension is not None:
                options["extension"] = overrides.extension
            if overrides.indent_amount is not None:
                options["indent_amount"] = overrides.indent_amount
            if overrides.rules is not None:
                options["rules"] = [rule.to_rule() for rule in overrides.rules]
        return options


def load_config(path: str | Path) -> GeneratorConfig:
    return GeneratorConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))


def save_config(config: GeneratorConfig, path: str | Path) -> None:
    with open(str(path), "w", encoding="utf-8") as fh:
        fh.write(config.model_dump_json(indent=2))
