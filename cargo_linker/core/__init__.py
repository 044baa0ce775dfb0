"""Core linking logic."""

from cargo_linker.core.errors import (
    ConfigLoadError,
    LinkerError,
    PatternError,
    ScanError,
    WriteError,
)
from cargo_linker.core.project_linker import LinkResult, build_settings, run

__all__ = [
    "ConfigLoadError",
    "LinkResult",
    "LinkerError",
    "PatternError",
    "ScanError",
    "WriteError",
    "build_settings",
    "run",
]
