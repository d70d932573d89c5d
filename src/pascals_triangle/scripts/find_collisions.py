#!/usr/bin/env python3
"""
Search Pascal's triangle for repeated values from the command line.

Examples:
  - python -m pascals_triangle 20
  - python -m pascals_triangle 200 --exact --json
  - python -m pascals_triangle -vv --config triangle.yaml 500
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import logging
import sys
import time
from typing import List, Optional

# --- Local Application Imports ---
from pascals_triangle.analysis.singmaster import Collision, check_collisions, find_collisions
from pascals_triangle.config import TriangleConfig, load_config
from pascals_triangle.utils.logging_utils import setup_logger, DEFAULT_LOG_DIR

logger = logging.getLogger(__name__)


def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None,
                      base_level: int = logging.WARNING) -> None:
    """
    Configures the loggers of this script and of the analysis and structures packages.

    Parameters
    ----------
    verbose_level : int
        0 keeps `base_level`, 1 selects INFO, 2 selects DEBUG.
    log_file : Optional[str]
        Explicit log file. Without one, a timestamped file under `var/log/`
        is written when `verbose_level > 0`.
    base_level : int, optional
        Level used without `-v`, normally the configured `log_level`.
    """
    level_map = {
        0: base_level,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(verbose_level, logging.DEBUG)
    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    for logger_name in (__name__, "pascals_triangle.analysis", "pascals_triangle.structures"):
        setup_logger(
            logger_name,
            level=log_level,
            log_file=log_file,
            enable_file_logging=should_log_to_file,
            enable_tqdm=True,
        )

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")


def format_collision(pair: Collision) -> str:
    first, second = pair
    return f"C({first.n},{first.k}) ~ C({second.n},{second.k}) = {first.val}"


def main(argv: Optional[List[str]] = None) -> int:
    """Parses command-line arguments and runs the collision search."""
    parser = argparse.ArgumentParser(description="Find repeated values in Pascal's triangle.")
    parser.add_argument("max_row", type=int, nargs="?", default=20,
                        help="Last row of the triangle to search (default: 20).")
    parser.add_argument("--config", default=None,
                        help="Path to a YAML configuration file.")
    parser.add_argument("--exact", action="store_true",
                        help="Keep only exact collisions.")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of human-readable text.")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file (default: var/log/... if verbose)")

    cli_args = parser.parse_args(argv)

    try:
        config = load_config(cli_args.config) if cli_args.config else TriangleConfig()
    except (OSError, ValueError) as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        return 2

    setup_cli_logging(cli_args.verbose, cli_args.log_file, base_level=config.resolve_log_level())

    if cli_args.max_row < 0:
        print("max_row must be non-negative", file=sys.stderr)
        return 2

    logger.info(f"Searching rows up to {cli_args.max_row} with value type {config.value_type}")
    start = time.perf_counter()
    try:
        collisions = find_collisions(cli_args.max_row,
                                     value_type=config.resolve_value_type(),
                                     show_progress=cli_args.progress)
    except ValueError as e:
        logger.error(f"Collision search rejected its input: {e}")
        print(str(e), file=sys.stderr)
        return 2
    if cli_args.exact:
        collisions = check_collisions(collisions)
    logger.info(f"Found {len(collisions)} collisions in {time.perf_counter() - start:.2f}s")

    if cli_args.json:
        print(json.dumps([
            {"first": [a.n, a.k], "second": [b.n, b.k], "value": str(a.val)}
            for a, b in collisions
        ], indent=2))
    else:
        for pair in collisions:
            print(format_collision(pair))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
