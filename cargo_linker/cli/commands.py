#!/usr/bin/env python3
"""cargo-link - point rust-analyzer at the Cargo projects in this tree.

Usage:
    cargo-link [PATTERN] [--settings PATH] [--dry-run] [--quiet]

Finds every Cargo.toml below the current directory, keeps the paths that
match PATTERN (a regular expression or plain substring), and stores them as
"rust-analyzer.linkedProjects" in .vscode/settings.json. All other settings
are kept.

Examples:
    cargo-link              # link every crate
    cargo-link chapter-3/   # only crates under chapter-3/
    cargo-link --dry-run    # show what would be linked
"""

from __future__ import annotations

import contextlib
import os
import sys
from pathlib import Path

import click

from cargo_linker.cli.completions import complete_manifest_dirs
from cargo_linker.config import LINKED_PROJECTS_KEY, SETTINGS_RELATIVE_PATH
from cargo_linker.core.errors import LinkerError
from cargo_linker.core.project_linker import LinkResult, run
from cargo_linker.helpers.helpers_logging import (
    print_detail,
    print_header,
    print_info,
    print_success,
    print_warning,
    set_quiet,
)

PROG_NAME = "cargo-link"
_COMPLETE_VAR = "_CARGO_LINK_COMPLETE"
_EXIT_CANCELLED = 130


def _report(result: LinkResult, pattern: str | None) -> None:
    """Print a summary of a finished run."""
    print_header(f"🦀 {LINKED_PROJECTS_KEY}")
    found = len(result.discovered)
    if pattern:
        print_info(
            f"Found {found} Cargo.toml file(s), "
            + f"{len(result.linked)} matching '{pattern}'"
        )
    else:
        print_info(f"Found {found} Cargo.toml file(s)")

    for path in result.linked:
        print_detail(f"  • {path}")

    if not result.linked:
        print_warning("No projects matched; linkedProjects will be empty")

    if not result.written:
        print_info(f"Dry run: {result.settings_path} not modified")
    elif result.changed:
        print_success(f"Updated {result.settings_path}")
    else:
        print_success(f"{result.settings_path} already up to date")


@click.command(
    name=PROG_NAME,
    help="Link every Cargo.toml matching PATTERN in .vscode/settings.json.",
)
@click.argument(
    "pattern",
    required=False,
    default=None,
    shell_complete=complete_manifest_dirs,
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Settings file to rewrite (default: {SETTINGS_RELATIVE_PATH})",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show what would be linked without writing the settings file",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only print errors",
)
def _click_cli(
    pattern: str | None,
    settings_path: Path | None,
    dry_run: bool,
    quiet: bool,
) -> int:
    """Top-level cargo-link command."""
    set_quiet(quiet)
    result = run(pattern, settings_path=settings_path, dry_run=dry_run)
    _report(result, pattern)
    return 0


def main() -> int:
    """Main CLI entry point."""
    # Let Click handle shell completion protocol before anything else.
    if os.environ.get(_COMPLETE_VAR):
        with contextlib.suppress(SystemExit):
            _click_cli.main(
                args=sys.argv[1:],
                prog_name=PROG_NAME,
                standalone_mode=True,
            )
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except LinkerError as exc:
        exc.print_error()
        return exc.exit_code
    finally:
        set_quiet(False)

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
