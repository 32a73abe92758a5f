#!/usr/bin/env python3
"""Enforce the reader_telemetry layering.

    domain          imports nothing from the package
    application     domain
    config          domain
    infrastructure  domain, application
    bootstrap       everything

Run from the repository root, optionally with the package directory:

    python scripts/check_imports.py [reader_telemetry]

Exits 1 when any import crosses a boundary.
"""
import ast
import sys
from pathlib import Path
from typing import NamedTuple

PACKAGE_NAME = "reader_telemetry"

# Lower is further inside
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "application": 1,
    "config": 1,
    "infrastructure": 2,
    "bootstrap": 3,
}

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "config": {"domain"},
    "infrastructure": {"domain", "application"},
    "bootstrap": {"domain", "application", "config", "infrastructure"},
}


class Violation(NamedTuple):
    path: str
    line: int
    message: str


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """First absolute module named by an import, None for relative imports."""
    if isinstance(node, ast.ImportFrom):
        return node.module if node.level == 0 else None
    return node.names[0].name if node.names else None


def _imported_modules(node: ast.Import | ast.ImportFrom) -> list[str]:
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    module = get_import_module(node)
    return [module] if module else []


def _target_layer(module: str) -> str | None:
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE_NAME:
        return None
    return parts[1] if parts[1] in LAYER_HIERARCHY else None


def _layer_of(py_file: Path, package_dir: Path) -> str | None:
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    # Top-level modules such as __init__.py belong to no layer
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in LAYER_HIERARCHY else None


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Return every boundary violation in one file."""
    layer = _layer_of(py_file, package_dir)
    if layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: skipping {py_file}: {e}", file=sys.stderr)
        return []

    allowed = ALLOWED_IMPORTS[layer]
    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for module in _imported_modules(node):
            target = _target_layer(module)
            if target is None or target == layer or target in allowed:
                continue
            violations.append(
                Violation(
                    str(py_file),
                    node.lineno,
                    f"{layer} layer cannot import from {target} ({module})",
                )
            )
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    if not package_dir.is_dir():
        print(f"Error: no package directory at {package_dir}", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    if not violations:
        return ""
    lines = [f"  {v.path}:{v.line}: {v.message}" for v in sorted(violations)]
    return "\n".join(
        ["Import boundary violations found:", "", *lines, "", f"Total: {len(violations)}"]
    )


def main() -> int:
    package_dir = (
        Path(sys.argv[1])
        if len(sys.argv) > 1
        else Path(__file__).resolve().parent.parent / PACKAGE_NAME
    )

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
