"""Shared fixtures for end-to-end CLI tests.

Every test runs the real entry point (``python -m cargo_linker``) in a
subprocess, inside an isolated temporary directory, exactly as a user would
run ``cargo-link`` from a workspace root. The repository root is put on
``PYTHONPATH`` so the tests also work without ``pip install -e .``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Type alias for the callable fixture.
RunCargoLink = Callable[..., subprocess.CompletedProcess[str]]

_REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty project directory and cd into it.

    Yields:
        Path to the temporary project root.
    """
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_cargo_link(isolated_project: Path) -> RunCargoLink:
    """Return a helper that invokes ``cargo-link <args>`` in a subprocess.

    Usage in tests::

        def test_link(run_cargo_link: RunCargoLink) -> None:
            result = run_cargo_link("crates/")
            assert result.returncode == 0

    Returns:
        A callable ``(*args) -> CompletedProcess[str]``.
    """
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = (
        f"{_REPO_ROOT}{os.pathsep}{existing}" if existing else str(_REPO_ROOT)
    )

    def _run(*args: str) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [sys.executable, "-m", "cargo_linker", *args],
            cwd=isolated_project,
            capture_output=True,
            text=True,
            check=False,
            env=env,
        )

    return _run
