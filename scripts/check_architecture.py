#!/usr/bin/env python3
"""Layer boundary checks for the converter package."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/vue_converter"

# Pure conversion layers must stay free of transport and CLI frameworks.
PURE_LAYERS = ("application", "converters")
PURE_MODULES = ("sfc.py", "text.py", "extractors.py", "assembly.py", "types.py", "errors.py")
TRANSPORT_PACKAGES = {"typer", "click", "fastapi", "starlette", "uvicorn"}


def _imported_roots(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    roots: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            roots.update(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            roots.add(node.module.split(".")[0])
    return roots


def _check(path: Path, banned: set[str]) -> None:
    found = sorted(_imported_roots(path) & banned)
    if found:
        raise SystemExit(f"Architecture violation in {path}: imports {', '.join(found)}")


def main() -> None:
    """Run repository architecture boundary checks."""
    for layer in PURE_LAYERS:
        for path in (PACKAGE / layer).glob("*.py"):
            _check(path, TRANSPORT_PACKAGES)
    for name in PURE_MODULES:
        _check(PACKAGE / name, TRANSPORT_PACKAGES)

    _check(PACKAGE / "cli/cli.py", {"fastapi", "starlette", "uvicorn"})
    _check(PACKAGE / "converter/http_server.py", {"typer", "click"})

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
