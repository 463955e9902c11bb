"""
pathforge: Command-Line Entry Point.

Wires the CLI to a single PathResolver built from the resolver configuration.

Usage:
    # Where would settings be stored for this app?
    python forge.py --app_name mygame where settings

    # Full path of an asset, probing ./assets/ and the program directory
    python forge.py asset shaders/basic.vert

    # Decompose a path
    python forge.py inspect ./assets/foo/bar/mesh.obj

    # Resolve everything, create the user folders and save a YAML report
    python forge.py --config recipes/resolver.yaml report --setup_dirs --output report.yaml

Log files go to --log_dir, or to the logs/ folder under the per-user cache
folder when it can be resolved.

Exit status is 0 on success and 1 when the requested path could not be
resolved or created.
"""

import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from pathforge.core import (
    LOGGER_NAME,
    FilePath,
    Logger,
    PathResolver,
    ResolverConfig,
    parse_args,
    save_config_as_yaml,
)


def _inspect(path: FilePath) -> dict:
    return {
        "path": path.to_string(),
        "generic": path.to_generic_string(),
        "valid": path.is_valid(),
        "absolute": path.is_absolute(),
        "file_name": path.file_name(),
        "extension": path.file_extension(),
        "base_path": path.base_path().to_string(),
        "elements": path.elements(),
    }


def _print_mapping(data: dict) -> None:
    width = max(len(key) for key in data)
    for key, value in data.items():
        print(f"{key:<{width}} : {value}")


def _log_dir(args, resolver: PathResolver) -> Optional[FilePath]:
    """Explicit --log_dir, else <user cache>/logs, else None (console only)."""
    if args.log_dir:
        return FilePath(args.log_dir)
    cache = resolver.user_cache_path()
    return cache / "logs" if cache else None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs one CLI command.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)
    logger = Logger.setup(name=LOGGER_NAME, level=args.log_level)

    try:
        cfg = ResolverConfig.from_args(args)
    except (ValidationError, ValueError, FileNotFoundError, yaml.YAMLError) as e:
        logger.error(f"Invalid resolver configuration: {e}")
        return 1

    resolver = PathResolver(cfg)
    logger = Logger.setup(name=LOGGER_NAME, level=args.log_level, log_dir=_log_dir(args, resolver))

    if args.command == "where":
        lookups = {
            "settings": resolver.user_settings_path,
            "data": resolver.user_data_path,
            "cache": resolver.user_cache_path,
            "program": resolver.program_path,
            "assets": resolver.assets_base_path,
        }
        result = lookups[args.folder]()
        if result.empty():
            return 1
        print(result)
        return 0

    if args.command == "asset":
        base = resolver.assets_base_path()
        print(resolver.asset_path(args.name))
        return 0 if base else 1

    if args.command == "inspect":
        _print_mapping(_inspect(FilePath(args.path)))
        return 0

    if args.command == "mkpath":
        return 0 if resolver.mkpath(args.path) else 1

    if args.command == "report":
        if args.setup_dirs:
            status = resolver.setup_user_directories()
            logger.info(f"User directories ready: {status}")
        report = resolver.report()
        if args.output:
            save_config_as_yaml(report, Path(args.output))
        else:
            _print_mapping(report)
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
