"""
Argument Parsing Module.

Handles the command-line interface (CLI) of the path toolkit.
Bridges terminal inputs with the pydantic ResolverConfig.
"""

import argparse
from typing import List, Optional

SPECIAL_FOLDERS = ("settings", "data", "cache", "program", "assets")


# ARGUMENT PARSING
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Configure and parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="pathforge",
        description="Resolve per-user folders, program and asset paths; inspect paths.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # ===== Resolver Settings =====
    # Defaults are None so that only explicit flags override the YAML config
    res_group = parser.add_argument_group("Resolver Settings")

    res_group.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config file with resolver settings",
    )
    res_group.add_argument(
        "--app_name",
        type=str,
        default=None,
        help="Folder name used under the per-user special folders",
    )
    res_group.add_argument(
        "--assets_dir_name",
        type=str,
        default=None,
        help="Directory name probed for bundled assets",
    )
    res_group.add_argument(
        "--assets_base",
        type=str,
        default=None,
        help="Explicit assets base directory (disables probing)",
    )

    # ===== Logging =====
    log_group = parser.add_argument_group("Logging")

    log_group.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console/file logging level",
    )
    log_group.add_argument(
        "--log_dir",
        type=str,
        default=None,
        help="Directory for rotating log files (default: <user cache folder>/logs)",
    )

    # ===== Commands =====
    commands = parser.add_subparsers(dest="command", required=True)

    where = commands.add_parser("where", help="Print a resolved special path")
    where.add_argument("folder", choices=SPECIAL_FOLDERS)

    asset = commands.add_parser("asset", help="Print the full path of an asset")
    asset.add_argument("name", help="Asset identifier relative to the assets base")

    inspect = commands.add_parser("inspect", help="Decompose a path")
    inspect.add_argument("path")

    make = commands.add_parser("mkpath", help="Create every missing directory of a path")
    make.add_argument("path")

    report = commands.add_parser("report", help="Resolve every special path")
    report.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the report as YAML to this file instead of stdout",
    )
    report.add_argument(
        "--setup_dirs",
        action="store_true",
        help="Create the settings/data/cache folders before reporting",
    )

    return parser.parse_args(argv)
