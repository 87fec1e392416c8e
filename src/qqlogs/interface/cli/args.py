from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
logger construction options.
"""

import argparse
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the qqlogs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="qqlogs",
        description="Append a timestamped line to a size-rotated log file.",
    )

    p.add_argument("message", nargs="?", default=None, help="Message to write.")

    # --- Target ---
    p.add_argument("-n", "--name", dest="filename", default=None, help="Log file base name.")
    p.add_argument("-r", "--root", dest="root_directory", default=None, help="Log directory.")
    p.add_argument("--config", dest="config_path", default=None, help="JSON file of logger options.")

    # --- Event ---
    p.add_argument(
        "-l", "--level",
        dest="level",
        default="INFO",
        help="Level of the message (name or number, default INFO).",
    )
    p.add_argument("--prefix", default=None, help="Text placed before the line.")
    p.add_argument("--overwrite", action="store_true", help="Discard the current log first.")

    # --- Logger Options ---
    p.add_argument("--min-level", dest="minimum_level", default=None, help="Minimum level written.")
    p.add_argument("--format", dest="line_format", default=None, help="Line template.")
    p.add_argument("--size-limit", dest="size_limit_bytes", type=int, default=None, help="Rotation threshold in bytes.")
    p.add_argument("--keep", dest="retained_backup_count", type=int, default=None, help="Backups to retain.")
    p.add_argument("--ext", dest="backup_extension", default=None, help="Backup file extension.")
    p.add_argument(
        "--prune-to-limit",
        dest="prune_to_limit",
        action="store_true",
        default=None,
        help="Delete every backup above the retention count on rotation.",
    )

    # --- Modes ---
    p.add_argument("--tail", dest="tail", type=int, default=None, metavar="N", help="Print the last N lines and exit.")
    p.add_argument("--debug", action="store_true", help="Emit library diagnostics to stderr.")

    return p


# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------
_OPTION_FIELDS: List[str] = [
    "filename",
    "root_directory",
    "minimum_level",
    "line_format",
    "size_limit_bytes",
    "retained_backup_count",
    "backup_extension",
    "prune_to_limit",
]


def args_to_options(args: argparse.Namespace, base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Overlay explicitly given CLI flags on top of a base option mapping.

    Args:
        args: Parsed namespace.
        base: Options loaded from a config file, if any.

    Returns:
        Dict[str, Any]: Merged construction options.
    """
    options: Dict[str, Any] = dict(base or {})
    for field_name in _OPTION_FIELDS:
        value = getattr(args, field_name, None)
        if value is not None:
            options[field_name] = value
    return options
