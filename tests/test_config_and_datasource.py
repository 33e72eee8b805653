import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tablegen.codefiles.IndentRule import IndentAction, IndentRule, IndentRuleConfig
from tablegen.config import CodeFileConfig, GeneratorConfig, load_config, save_config
from tablegen.datasource.DataSource import JsonDataSource
from tablegen.matching.StringMatchRule import PrefixMatchRule


# --------------------------------------------------------------------------- #
def test_code_file_options_apply_overrides():
    config = GeneratorConfig(
        output_root=Path("generated"),
        output_strategy="file",
        code_files={"CSharp": CodeFileConfig(
            extension="g.cs",
            indent_amount=2,
            rules=[IndentRuleConfig(match="prefix", value="}", action="pre-deindent", case_sensitive=True)],
        )},
    )

    options = config.code_file_options("csharp")
    assert options["root_path"] == Path("generated")
    assert options["output_strategy"] == "file"
    assert options["extension"] == "g.cs"
    assert options["indent_amount"] == 2
    assert options["rules"] == [IndentRule(PrefixMatchRule("}", case_sensitive=True), IndentAction.PRE_DEINDENT)]

    assert "rules" not in config.code_file_options("sql")


def test_config_file(tmp_path):
    config = GeneratorConfig(
        write_output=True,
        overwrite_strategy="create-only",
        code_files={"sql": CodeFileConfig(indent_amount=8)},
    )
    path = tmp_path / "tablegen.json"
    save_config(config, path)

    loaded = load_config(path)
    assert loaded == config
    assert loaded.code_files["sql"].rules is None


def test_invalid_rules_are_rejected():
    with pytest.raises(ValidationError):
        IndentRuleConfig(match="regex", value=".*", action="post-indent")
    with pytest.raises(ValidationError):
        IndentRuleConfig(match="prefix", value="}", action="outdent")
    with pytest.raises(ValidationError):
        CodeFileConfig(indent_amount=-1)


# --------------------------------------------------------------------------- #
def test_json_data_source(tmp_path):
    schema = tmp_path / "schema.json"
    schema.write_text(json.dumps([
        {
            "name": "Orders",
            "columns": [
                {"name": "Id", "index": 0, "type": "int", "is_nullable": False, "is_primary_key": True},
                {"name": "CustomerId", "index": 1, "type": "int",
                 "referenced_tables": [{"table_name": "Customers", "column_name": "Id"}]},
            ],
            "indexes": {"IX_Orders_Customer": ["CustomerId"]},
        },
        {"name": "Customers", "columns": [{"name": "Id", "is_primary_key": True}]},
        {"name": "__migrations"},
    ]), encoding="utf-8")

    tables = JsonDataSource(schema, ignore_tables=["__MIGRATIONS"]).get_all_tables()
    assert [table.name for table in tables] == ["Orders", "Customers"]

    orders = tables[0]
    assert [column.name for column in orders.primary_key] == ["Id"]
    assert orders.columns[1].referenced_tables[0].table_name == "Customers"
    assert orders.columns[1].is_nullable
    assert orders.indexes == {"IX_Orders_Customer": ["CustomerId"]}
