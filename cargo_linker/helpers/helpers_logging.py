"""Simple logging helpers for the cargo-link CLI."""

import sys


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    DIM = '\033[2m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


_quiet = False


def set_quiet(quiet: bool) -> None:
    """Silence every helper except print_error."""
    global _quiet
    _quiet = quiet


def print_header(msg: str) -> None:
    """Print a header message."""
    if not _quiet:
        print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.RESET}")


def print_info(msg: str) -> None:
    """Print an info message."""
    if not _quiet:
        print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_detail(msg: str) -> None:
    """Print a dimmed detail line."""
    if not _quiet:
        print(f"{Colors.DIM}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    if not _quiet:
        print(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    if not _quiet:
        print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}", file=sys.stderr)
