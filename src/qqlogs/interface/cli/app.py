from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Resolves logger options (config file, then flags), then either appends one
line or prints the tail of the active log. The exit code is the write
status (0 on success).
"""

import sys
from typing import List, Optional

from qqlogs.core.reporting import ErrorCollector
from qqlogs.domain.config import load_options
from qqlogs.domain.errors import InvalidConfiguration, InvalidLevel
from qqlogs.domain.levels import LevelLike, parse_level, validate_level
from qqlogs.infra.logging import DiagnosticsConfig, configure_logging, get_logger
from qqlogs.interface.cli import args as cli_args
from qqlogs.logger import Logger

logger = get_logger(__name__)

EXIT_USAGE = 2


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(DiagnosticsConfig(level="DEBUG" if args.debug else "WARNING"))

    # 1. Option resolution
    try:
        base = load_options(args.config_path) if args.config_path else None
        options = cli_args.args_to_options(args, base)
        collector = ErrorCollector()
        log = Logger.from_options(options, error_sink=collector)
    except InvalidConfiguration as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger.debug(f"Resolved {log!r}")

    # 2. Tail mode
    if args.tail is not None:
        sys.stdout.write("".join(log.tail(args.tail)))
        return 0

    # 3. Write mode
    if args.message is None:
        parser.print_usage(sys.stderr)
        print("ERROR: a message is required unless --tail is given.", file=sys.stderr)
        return EXIT_USAGE

    try:
        level = _event_level(args.level)
    except InvalidLevel as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    status = log.log(level, args.message, prefix=args.prefix, overwrite=args.overwrite)
    for report in collector.reports:
        print(f"ERROR: {report.kind.name}: {report.detail}", file=sys.stderr)
    return status


def _event_level(raw: str) -> LevelLike:
    """Numbers in [0, 10] pass through as raw levels (reserved slots included); names are parsed."""
    token = raw.strip()
    if token.lstrip("-").isdigit():
        return validate_level(int(token))
    return parse_level(token)


if __name__ == "__main__":
    sys.exit(main())
