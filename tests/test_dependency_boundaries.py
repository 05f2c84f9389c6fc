import ast
import unittest
from pathlib import Path
from typing import Iterator


REPO_ROOT = Path(__file__).resolve().parents[1]

# Layering, innermost first: ts_baselines.domain -> ts_baselines -> pipeline -> cli.
# Each directory lists the module prefixes its files may not import.
LAYER_RULES = {
    "ts_baselines/domain": ("ts_baselines.io", "ts_baselines.report", "ts_baselines.review", "pipeline", "cli"),
    "ts_baselines": ("pipeline", "cli"),
    "pipeline": ("cli",),
}


def _module_name(py_file: Path) -> str:
    parts = list(py_file.relative_to(REPO_ROOT).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def _imported_modules(py_file: Path) -> Iterator[str]:
    """Yield absolute module names imported by *py_file*, relative imports resolved."""
    tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    package = _module_name(py_file).split(".")
    if py_file.name != "__init__.py":
        package.pop()

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            base = package[: len(package) - node.level + 1] if node.level else []
            yield ".".join([*base, node.module] if node.module else base)


def _is_under(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


class TestDependencyBoundaries(unittest.TestCase):
    def test_layers_only_import_inward(self) -> None:
        for rel_dir, forbidden in LAYER_RULES.items():
            layer_dir = REPO_ROOT / rel_dir
            self.assertTrue(layer_dir.is_dir(), f"Missing layer directory: {layer_dir}")

            for py_file in sorted(layer_dir.rglob("*.py")):
                if "__pycache__" in py_file.parts:
                    continue
                rel = py_file.relative_to(REPO_ROOT).as_posix()
                with self.subTest(file=rel):
                    bad = sorted(
                        {m for m in _imported_modules(py_file) if any(_is_under(m, f) for f in forbidden)}
                    )
                    self.assertEqual([], bad, f"{rel} reaches outward into {bad}")

    def test_relative_imports_are_resolved(self) -> None:
        variants = REPO_ROOT / "ts_baselines" / "domain" / "variants.py"
        self.assertIn("ts_baselines.domain.test_ids", set(_imported_modules(variants)))


if __name__ == "__main__":
    unittest.main()
