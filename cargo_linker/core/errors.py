"""Error types raised while linking Cargo projects.

Every error is fatal to a run. The CLI layer turns them into exit codes.
"""

from cargo_linker.helpers.helpers_logging import print_error

EXIT_CONFIG_LOAD = 3
EXIT_SCAN = 4
EXIT_WRITE = 5


class LinkerError(Exception):
    """Base error for a failed cargo-link run."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class ScanError(LinkerError):
    """Raised when the manifest search cannot complete."""

    exit_code = EXIT_SCAN


class PatternError(ScanError):
    """Raised when the filter pattern is not a valid regular expression."""


class ConfigLoadError(LinkerError):
    """Raised when the settings file is missing, unreadable or not a JSON object."""

    exit_code = EXIT_CONFIG_LOAD


class WriteError(LinkerError):
    """Raised when the updated settings file cannot be written."""

    exit_code = EXIT_WRITE
