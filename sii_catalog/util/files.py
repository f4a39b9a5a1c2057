"""
File utility functions.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists, creating if necessary."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def write_text(path: str | Path, content: str) -> None:
    """Write UTF-8 text to file, creating parent directories if needed."""
    p = Path(path)
    ensure_dir(p.parent)
    p.write_text(content, encoding="utf-8")


def list_subdirs(path: str | Path) -> list[Path]:
    """
    List immediate subdirectories, sorted by name.

    Args:
        path: Directory to list

    Returns:
        Subdirectory paths, or an empty list if the directory can't be read
    """
    try:
        return sorted(p for p in Path(path).iterdir() if p.is_dir())
    except OSError as e:
        logger.debug(f"Failed to list directory {path}: {e}")
        return []


def list_files(path: str | Path, extension: str) -> list[Path]:
    """
    List files with the given extension (non-recursive), sorted by name.

    Args:
        path: Directory to list
        extension: Extension without the dot, matched case-sensitively

    Returns:
        Matching file paths, or an empty list if the directory can't be read
    """
    suffix = f".{extension}"
    try:
        return sorted(p for p in Path(path).iterdir() if p.is_file() and p.suffix == suffix)
    except OSError as e:
        logger.debug(f"Failed to list directory {path}: {e}")
        return []
