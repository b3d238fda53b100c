import importlib

CORE_MODULES = [
    "toolgraph.config",
    "toolgraph.errors",
    "toolgraph.graph",
    "toolgraph.models",
    "toolgraph.observability",
    "toolgraph.registry",
    "toolgraph.report",
    "toolgraph.rules",
    "toolgraph.toolchain",
]


def test_core_package_layout_modules_importable() -> None:
    for module_name in CORE_MODULES:
        module = importlib.import_module(module_name)
        assert module is not None
