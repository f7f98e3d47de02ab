"""Architecture validation tests.

radarweb.core and radarweb.common must stay importable without Kivy.
"""

import ast
from pathlib import Path
from typing import List

import pytest

_TEST_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _TEST_DIR.parent
_PACKAGE_ROOT = _PROJECT_ROOT / "radarweb"


class ModuleLevelImportCollector(ast.NodeVisitor):
    """Collects module-level imports; imports inside functions are lazy and skipped."""

    def __init__(self) -> None:
        self.imports: List[str] = []
        self._function_depth = 0

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._function_depth += 1
        self.generic_visit(node)
        self._function_depth -= 1

    visit_AsyncFunctionDef = visit_FunctionDef

    def visit_Import(self, node: ast.Import) -> None:
        if self._function_depth == 0:
            self.imports.extend(alias.name for alias in node.names)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        if self._function_depth == 0 and node.module:
            self.imports.append(node.module)


def _module_imports(py_file: Path) -> List[str]:
    collector = ModuleLevelImportCollector()
    collector.visit(ast.parse(py_file.read_text(encoding="utf-8")))
    return collector.imports


def _kivy_free_files() -> List[Path]:
    files = []
    for sub in ("core", "common"):
        files.extend(p for p in (_PACKAGE_ROOT / sub).rglob("*.py") if "__pycache__" not in str(p))
    return sorted(files)


class TestLayerBoundaries:
    @pytest.mark.parametrize("py_file", _kivy_free_files(), ids=lambda p: str(p.relative_to(_PACKAGE_ROOT)))
    def test_no_kivy_or_gui_imports(self, py_file):
        bad = [m for m in _module_imports(py_file) if m.startswith(("kivy", "radarweb.gui"))]
        assert bad == [], f"{py_file.name} imports {bad}"

    def test_widgets_package_is_lazy(self):
        imports = _module_imports(_PACKAGE_ROOT / "gui" / "widgets" / "__init__.py")
        assert not any(m.startswith("kivy") or m.endswith("radar_chart") for m in imports)
