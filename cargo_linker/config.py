"""Fixed names and locations used by cargo-link."""

from pathlib import Path

MANIFEST_FILENAME = "Cargo.toml"
SETTINGS_RELATIVE_PATH = Path(".vscode") / "settings.json"
LINKED_PROJECTS_KEY = "rust-analyzer.linkedProjects"
JSON_INDENT = 2


def get_settings_path(root: Path | None = None) -> Path:
    """Return the settings file location for a workspace root.

    Args:
        root: Workspace root (default: current working directory)

    Returns:
        Path to ``.vscode/settings.json`` under root
    """
    base = Path.cwd() if root is None else root
    return base / SETTINGS_RELATIVE_PATH
