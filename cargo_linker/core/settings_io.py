"""Load and save the editor settings document.

Saving never leaves a truncated file behind: the document is written to a
temporary file beside the target and swapped in with ``os.replace``.
"""

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any, cast

from cargo_linker.config import JSON_INDENT
from cargo_linker.core.errors import ConfigLoadError, WriteError

# Keys are editor setting identifiers, values are any JSON value.
SettingsDocument = dict[str, Any]


def _reject_constant(name: str) -> float:
    """json hook: NaN and Infinity are not JSON."""
    raise ValueError(f"invalid JSON constant {name}")


def load_settings(settings_path: Path) -> SettingsDocument:
    """Read and parse the settings file.

    Args:
        settings_path: Path to settings.json

    Returns:
        Parsed JSON object

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not valid JSON,
            or does not hold a JSON object
    """
    try:
        text = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Settings file not found: {settings_path}"
        raise ConfigLoadError(msg) from exc
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read settings file {settings_path}: {exc}"
        raise ConfigLoadError(msg) from exc

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        msg = f"Settings file {settings_path} is not valid JSON: {exc}"
        raise ConfigLoadError(msg) from exc

    if not isinstance(data, dict):
        msg = (
            f"Settings file {settings_path} must contain a JSON object, "
            f"found {type(data).__name__}"
        )
        raise ConfigLoadError(msg)

    return cast(SettingsDocument, data)


def dump_settings(document: SettingsDocument) -> str:
    """Serialize a settings document the way it is written to disk.

    Raises:
        ValueError: If document holds a float JSON cannot represent
    """
    return json.dumps(
        document,
        indent=JSON_INDENT,
        ensure_ascii=False,
        allow_nan=False,
    ) + "\n"


def save_settings(settings_path: Path, document: SettingsDocument) -> None:
    """Atomically replace the settings file with document.

    Args:
        settings_path: Path to settings.json
        document: Settings to write

    Raises:
        WriteError: If the document cannot be serialized or written; the
            original file is left untouched
    """
    try:
        content = dump_settings(document)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot serialize settings for {settings_path}: {exc}"
        raise WriteError(msg) from exc

    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{settings_path.name}.",
            suffix=".tmp",
            dir=settings_path.parent,
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        with contextlib.suppress(OSError):
            os.chmod(tmp_name, settings_path.stat().st_mode & 0o777)
        os.replace(tmp_name, settings_path)
    except OSError as exc:
        if tmp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
        msg = f"Cannot write settings file {settings_path}: {exc}"
        raise WriteError(msg) from exc
