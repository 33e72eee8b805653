import tablegen
import pkgutil
import importlib


def test_subpackages_import():
    # Dynamically detect subpackages inside tablegen
    modules = [
        name for _, name, ispkg in pkgutil.iter_modules(tablegen.__path__)
        if not name.startswith('_') and ispkg
    ]
    assert {"codefiles", "commands", "datasource", "interpreter", "matching", "parser", "templates"} <= set(modules)

    for module_name in modules:
        full_name = f"tablegen.{module_name}"
        module = importlib.import_module(full_name)
        assert module.__name__ == full_name


def test_version():
    assert tablegen.__version__ == "0.1.0"
