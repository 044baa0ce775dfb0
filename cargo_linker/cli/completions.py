"""Shell completion callbacks for the cargo-link CLI.

Each function follows the Click shell_complete callback signature:
    (ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.shell_completion import CompletionItem

from cargo_linker.core.errors import ScanError
from cargo_linker.core.manifest_scanner import (
    discover_manifests,
    manifest_directories,
)

if TYPE_CHECKING:
    import click


def _filter(items: list[str], incomplete: str) -> list[CompletionItem]:
    """Filter a list of strings by prefix and wrap as CompletionItem."""
    normalized_incomplete = incomplete.casefold()
    return [
        CompletionItem(s)
        for s in items
        if s.casefold().startswith(normalized_incomplete)
    ]


def complete_manifest_dirs(
    _ctx: click.Context,
    _param: click.Parameter,
    incomplete: str,
) -> list[CompletionItem]:
    """Complete the filter pattern with directories holding a Cargo.toml."""
    try:
        manifests = discover_manifests()
    except ScanError:
        return []
    directories = [d for d in manifest_directories(manifests) if d != "."]
    return _filter(directories, incomplete)
