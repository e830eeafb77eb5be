"""Architecture enforcement tests for the layered toolgate package.

This module provides lightweight, repository-local invariants to ensure that
the resolution core remains decoupled from outer layers. It focuses on import
boundaries only and is designed to fail fast if a forbidden dependency is
introduced.

Rules validated here:
1) Core packages (``base``, ``catalog``, ``policy``, ``hub``, ``config``) must
   not import the presentation layer (``crux_toolgate.service``).
2) Core packages must not import web frameworks (FastAPI, Starlette, uvicorn);
   resolution stays a pure synchronous function usable without a server.

These tests are intentionally static-file scans to avoid import-time side
effects, and they emit clear failure messages for quick remediation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

CORE_PACKAGES = ("base", "catalog", "policy", "hub", "config")


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under a root directory.

    Parameters
    ----------
    root: Path
        The directory to scan recursively.

    Yields
    ------
    Path
        Paths to ``.py`` files under the provided root, skipping
        ``__pycache__`` directories.
    """

    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _scan(forbidden_snippets: List[str]) -> List[str]:
    package_root = Path(__file__).resolve().parent.parent / "crux_toolgate"
    if not package_root.is_dir():
        pytest.skip("crux_toolgate package not found; skipping boundary check")
    offenders: List[str] = []
    for name in CORE_PACKAGES:
        for py in _iter_python_files(package_root / name):
            src = _read_text(py)
            offenders.extend(f"{py}: contains '{s}'" for s in forbidden_snippets if s in src)
    return offenders


def test_core_does_not_import_service_layer() -> None:
    """Core modules must not depend on the CLI or HTTP presentation layer."""

    offenders = _scan(
        [
            "from crux_toolgate.service",
            "import crux_toolgate.service",
            "from ..service",
            "from ...service",
        ]
    )
    if offenders:
        pytest.fail("Core packages must not import the service layer.\n" + "\n".join(offenders))


def test_core_does_not_import_web_frameworks() -> None:
    """Resolution must stay usable without FastAPI/uvicorn installed at runtime."""

    offenders = _scan(["import fastapi", "from fastapi", "import uvicorn", "from starlette"])
    if offenders:
        pytest.fail("Core packages must not import web frameworks.\n" + "\n".join(offenders))
