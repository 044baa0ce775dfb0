"""
CLI module for cargo-link.

Provides the main entry point installed as the ``cargo-link`` console script.
"""

from .commands import main

__all__ = ["main"]
