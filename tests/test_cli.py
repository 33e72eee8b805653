import json

from tablegen.__main__ import main


# --------------------------------------------------------------------------- #
def _schema(tmp_path):
    schema = tmp_path / "schema.json"
    schema.write_text(json.dumps([{"name": "Orders", "columns": [{"name": "Id"}]}, {"name": "Items"}]),
                      encoding="utf-8")
    return schema


def test_generates_one_file_per_table(tmp_path):
    template = tmp_path / "Entity.tpl"
    template.write_text("public class !@TableName@! {\n}\n", encoding="utf-8")
    out = tmp_path / "out"

    code = main(["--schema", str(_schema(tmp_path)), "--template", str(template),
                 "--file-type", "csharp", "--output-root", str(out)])

    assert code == 0
    assert (out / "Orders.cs").read_text(encoding="utf-8") == "public class Orders {\n}\n"
    assert (out / "Items.cs").read_text(encoding="utf-8") == "public class Items {\n}\n"


def test_broken_template_fails(tmp_path):
    template = tmp_path / "Broken.tpl"
    template.write_text("class !@TableName {\n", encoding="utf-8")
    out = tmp_path / "out"

    code = main(["--schema", str(_schema(tmp_path)), "--template", str(template),
                 "--file-type", "csharp", "--output-root", str(out)])

    assert code == 1
    assert not out.exists()
