"""Regenerate rust-analyzer linked projects from the manifests on disk.

A run is one linear pass:

1. discover every ``Cargo.toml`` under the workspace root
2. keep the paths matching the optional filter pattern
3. load ``.vscode/settings.json``
4. replace ``rust-analyzer.linkedProjects`` with the kept paths
5. write the document back atomically

Every failure is fatal and leaves the settings file as it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cargo_linker.config import LINKED_PROJECTS_KEY, get_settings_path
from cargo_linker.core.manifest_scanner import discover_manifests
from cargo_linker.core.settings_io import (
    SettingsDocument,
    load_settings,
    save_settings,
)
from cargo_linker.helpers.helpers_pattern_matcher import (
    compile_filter_pattern,
    filter_paths,
)


@dataclass(frozen=True)
class LinkResult:
    """Outcome of a single run."""

    settings_path: Path
    discovered: list[str]
    linked: list[str]
    previous: object | None
    changed: bool
    written: bool


def build_settings(
    existing: SettingsDocument,
    linked: list[str],
) -> SettingsDocument:
    """Return a copy of existing with the linked projects key replaced.

    The input document is not modified. An existing key keeps its position,
    a new key is appended last. An empty list is stored as-is; the key is
    never dropped.

    Examples:
        >>> build_settings({"foo": 1}, ["a/Cargo.toml"])
        {'foo': 1, 'rust-analyzer.linkedProjects': ['a/Cargo.toml']}
        >>> build_settings({"foo": 1}, [])
        {'foo': 1, 'rust-analyzer.linkedProjects': []}
    """
    updated = dict(existing)
    updated[LINKED_PROJECTS_KEY] = list(linked)
    return updated


def run(
    pattern: str | None = None,
    *,
    root: Path | None = None,
    settings_path: Path | None = None,
    dry_run: bool = False,
) -> LinkResult:
    """Link every matching Cargo manifest under root in the settings file.

    Args:
        pattern: Optional regex/substring filter (None or '' keeps all)
        root: Workspace root to scan (default: current working directory)
        settings_path: Settings file (default: root/.vscode/settings.json)
        dry_run: Compute the result without writing the file

    Returns:
        LinkResult describing what was found and written

    Raises:
        PatternError: If pattern is not a valid regular expression
        ScanError: If the directory tree cannot be scanned
        ConfigLoadError: If the settings file is missing or invalid
        WriteError: If the settings file cannot be written
    """
    base = Path.cwd() if root is None else root
    target = get_settings_path(base) if settings_path is None else settings_path

    # Reject a bad pattern before touching the filesystem.
    compile_filter_pattern(pattern)

    discovered = discover_manifests(base)
    linked = filter_paths(discovered, pattern)

    existing = load_settings(target)
    previous = existing.get(LINKED_PROJECTS_KEY)
    updated = build_settings(existing, linked)
    changed = previous != updated[LINKED_PROJECTS_KEY]

    if not dry_run:
        save_settings(target, updated)

    return LinkResult(
        settings_path=target,
        discovered=discovered,
        linked=linked,
        previous=previous,
        changed=changed,
        written=not dry_run,
    )
