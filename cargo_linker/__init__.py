"""
cargo-link

Keeps rust-analyzer's ``linkedProjects`` setting in sync with the Cargo
manifests found in a workspace.
"""

__version__ = "0.1.0"

from cargo_linker.core.project_linker import LinkResult, run
from cargo_linker.cli.commands import main

__all__ = [
    "LinkResult",
    "main",
    "run",
]
