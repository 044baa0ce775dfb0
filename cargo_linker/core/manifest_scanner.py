"""Discovery of Cargo manifests beneath a workspace root."""

import os
from pathlib import Path, PurePath

from cargo_linker.config import MANIFEST_FILENAME
from cargo_linker.core.errors import ScanError


def _raise_scan_error(exc: OSError) -> None:
    """os.walk error hook: abort the whole scan."""
    location = exc.filename or "<unknown>"
    msg = f"Cannot scan '{location}': {exc.strerror or exc}"
    raise ScanError(msg) from exc


def discover_manifests(root: Path | None = None) -> list[str]:
    """Find every file named Cargo.toml under root.

    Directories are walked top-down with entries sorted by name, so the
    result is reproducible for an unchanged tree. Symlinked directories are
    listed but not descended into.

    Args:
        root: Directory to search (default: current working directory)

    Returns:
        Paths relative to root with '/' separators, e.g. 'b/c/Cargo.toml'

    Raises:
        ScanError: If root or any directory below it cannot be listed
    """
    base = Path.cwd() if root is None else root
    manifests: list[str] = []

    for dirpath, dirnames, filenames in os.walk(base, onerror=_raise_scan_error):
        dirnames.sort()
        if MANIFEST_FILENAME in filenames:
            relative = PurePath(os.path.relpath(dirpath, base)) / MANIFEST_FILENAME
            manifests.append(relative.as_posix())

    return manifests


def manifest_directories(manifests: list[str]) -> list[str]:
    """Return the distinct parent directories of manifest paths, in order.

    The workspace root itself is reported as '.'.

    Examples:
        >>> manifest_directories(['Cargo.toml', 'a/Cargo.toml', 'b/c/Cargo.toml'])
        ['.', 'a/', 'b/c/']
    """
    directories: list[str] = []
    for manifest in manifests:
        parent = PurePath(manifest).parent.as_posix()
        entry = "." if parent == "." else f"{parent}/"
        if entry not in directories:
            directories.append(entry)
    return directories
