"""Shared fixtures for the cargo-link test suite.

Provides a composable ``make_workspace`` factory that lays out Cargo
manifests and a ``.vscode/settings.json`` under ``tmp_path`` and moves the
working directory into it for the duration of the test.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Workspace factory
# ---------------------------------------------------------------------------

_MISSING = object()

_DEFAULT_MANIFESTS = ("a/Cargo.toml", "b/c/Cargo.toml")

_CARGO_TOML = '[package]\nname = "demo"\nversion = "0.1.0"\nedition = "2021"\n'

MakeWorkspace = Callable[..., Path]


def _write_settings(root: Path, settings: object) -> Path:
    """Write ``settings`` as JSON to ``root/.vscode/settings.json``."""
    settings_path = root / ".vscode" / "settings.json"
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
    return settings_path


def _build_workspace(
    root: Path,
    *,
    manifests: tuple[str, ...] | list[str] = _DEFAULT_MANIFESTS,
    settings: object = _MISSING,
    raw_settings: str | None = None,
) -> Path:
    """Create manifests and settings under root.

    Args:
        root: Workspace directory.
        manifests: Relative Cargo.toml paths to create.
        settings: JSON value for settings.json (default ``{"foo": 1}``),
            or None to skip creating the file.
        raw_settings: Literal settings.json text, overrides ``settings``.

    Returns:
        The workspace root ``Path``.
    """
    for manifest in manifests:
        manifest_path = root / manifest
        manifest_path.parent.mkdir(parents=True, exist_ok=True)
        manifest_path.write_text(_CARGO_TOML, encoding="utf-8")

    if raw_settings is not None:
        settings_path = root / ".vscode" / "settings.json"
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(raw_settings, encoding="utf-8")
    elif settings is _MISSING:
        _write_settings(root, {"foo": 1})
    elif settings is not None:
        _write_settings(root, settings)

    return root


@pytest.fixture()
def make_workspace(tmp_path: Path) -> Iterator[MakeWorkspace]:
    """Return a factory building a workspace in ``tmp_path`` and cd into it.

    Usage::

        def test_x(make_workspace: MakeWorkspace) -> None:
            root = make_workspace(manifests=["Cargo.toml"], settings={})
    """
    original_cwd = Path.cwd()
    os.chdir(tmp_path)

    def _make(**kwargs: object) -> Path:
        return _build_workspace(tmp_path, **kwargs)  # type: ignore[arg-type]

    try:
        yield _make
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def workspace(make_workspace: MakeWorkspace) -> Path:
    """Default workspace: ``a/Cargo.toml``, ``b/c/Cargo.toml``, ``{"foo": 1}``."""
    return make_workspace()
