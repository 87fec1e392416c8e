from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os', 'shutil' and 'glob' used by the rotation-aware
writer. Only the writer (while holding its lock) calls into this module, so
none of these helpers synchronize on their own. Errors propagate as OSError
subclasses for the writer to classify.
"""

import glob
import os
import shutil
from typing import List, Optional

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def ensure_dir(path: str) -> bool:
    """
    Create a directory hierarchy if it does not exist.

    Args:
        path: Target directory path.

    Returns:
        bool: True if the directory had to be created.
    """
    if not path or os.path.isdir(path):
        return False
    os.makedirs(path, exist_ok=True)
    return True


# -----------------------------------------------------------------------------
# FILE API
# -----------------------------------------------------------------------------

def file_size(path: str) -> Optional[int]:
    """Return the size in bytes of an existing file, or None if absent."""
    try:
        return os.path.getsize(path)
    except FileNotFoundError:
        return None


def remove_if_exists(path: str) -> bool:
    """
    Delete a file, treating 'does not exist' as success.

    Returns:
        bool: True if a file was actually removed.
    """
    try:
        os.remove(path)
        return True
    except FileNotFoundError:
        return False


def copy_file(src: str, dst: str) -> None:
    """Copy file contents to a new path, overwriting any file already there."""
    shutil.copyfile(src, dst)


def creation_time_ns(path: str) -> int:
    """
    Best available creation timestamp for a file.

    Uses st_birthtime where the platform records it and falls back to the
    inode change time (which is the creation time for files that are never
    renamed or re-permissioned, as is the case for rotated backups).
    """
    st = os.stat(path)
    birth = getattr(st, "st_birthtime_ns", None)
    if birth is None and hasattr(st, "st_birthtime"):
        birth = int(st.st_birthtime * 1_000_000_000)
    return int(birth) if birth is not None else st.st_ctime_ns


def list_files_by_creation(directory: str, pattern: str) -> List[str]:
    """
    List regular files in a directory matching a glob, oldest first.

    Args:
        directory: Directory to scan (not recursive).
        pattern: Glob pattern relative to the directory.

    Returns:
        List[str]: Matching paths sorted by creation time, ties broken by name.
    """
    matches = [
        p for p in glob.glob(os.path.join(glob.escape(directory), pattern))
        if os.path.isfile(p)
    ]
    return sorted(matches, key=lambda p: (creation_time_ns(p), os.path.basename(p)))


def read_tail(path: str, n_lines: int) -> List[str]:
    """
    Return the last lines of a text file.

    Decoding errors are replaced so a partially corrupted log stays readable.
    """
    if n_lines <= 0:
        return []
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = f.readlines()
    return lines[-n_lines:]
