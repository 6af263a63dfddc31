"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import ast
import tomllib
from pathlib import Path

import shifted_grid

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _load_pyproject() -> dict:
    with (PROJECT_ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "shifted-grid"
    assert poetry["version"] == shifted_grid.__version__
    assert poetry["scripts"]["shifted-grid"] == "shifted_grid.__main__:main"

    dependencies = poetry["dependencies"]
    for dependency in ("numpy", "pydantic", "platformdirs", "rich", "textual"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"


def test_public_names_are_exported() -> None:
    missing = [name for name in shifted_grid.__all__ if not hasattr(shifted_grid, name)]
    assert not missing, f"names listed in __all__ but not defined: {missing}"


def test_package_modules_have_docstrings() -> None:
    missing = []
    for path in sorted((PROJECT_ROOT / "shifted_grid").rglob("*.py")):
        module = ast.parse(path.read_text(encoding="utf-8"))
        if ast.get_docstring(module) is None:
            missing.append(str(path.relative_to(PROJECT_ROOT)))
    assert not missing, f"modules without a docstring: {missing}"
