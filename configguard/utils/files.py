"""File helpers shared by the scanner and the CLI."""

import os
from pathlib import Path
from typing import List, Union

from configguard.core.exceptions import ScanError, SourceReadError

PathLike = Union[str, Path]

CONFIG_DIR = "config"
CONFIG_SUFFIX = ".exs"


def read_source(file_path: PathLike) -> str:
    """
    Read the full text of a configuration file.

    Raises:
        SourceReadError: if the file cannot be read or decoded
    """
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(
            f"Failed to read {file_path}: {e}", details={"file": str(file_path)}
        ) from e


def normalize_path(file_path: PathLike) -> str:
    """Display form of a path: relative to the working directory when below it."""
    absolute = Path(os.path.abspath(file_path))
    try:
        return absolute.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return absolute.as_posix()


def list_config_files(root: PathLike) -> List[str]:
    """
    Names of the ``*.exs`` files in ``<root>/config``, sorted.

    Raises:
        ScanError: if the configuration directory does not exist
    """
    config_dir = Path(root) / CONFIG_DIR
    if not config_dir.is_dir():
        raise ScanError(f"Configuration directory not found: {config_dir}")
    return sorted(
        entry.name
        for entry in config_dir.iterdir()
        if entry.is_file() and entry.suffix == CONFIG_SUFFIX
    )
