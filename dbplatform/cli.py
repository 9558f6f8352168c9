"""dbplatform CLI - Inspect platform type mappings from the command line.

Usage:
    dbplatform types --platform postgres
    dbplatform types --platform mysql --uuid binary --json
    dbplatform resolve JSON --length 1000
    dbplatform --config platform.yaml resolve UUID

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from dbplatform import __version__
from dbplatform.config import DbUuid, PlatformConfig
from dbplatform.platforms import PLATFORMS, DatabasePlatform, create_platform
from dbplatform.types import DbType, DbTypeLookup


# =============================================================================
# Output Formatting
# =============================================================================


class OutputFormatter:
    """Formats output for CLI display."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "dim": "\033[2m",
        "red": "\033[31m",
        "cyan": "\033[36m",
    }

    def __init__(self, color: bool = True, json_output: bool = False):
        self.color = color and sys.stdout.isatty()
        self.json_output = json_output

    def _c(self, text: str, color: str) -> str:
        """Colorize text if color enabled."""
        if self.color:
            return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"
        return text

    def error(self, message: str) -> None:
        """Print error message."""
        if self.json_output:
            print(json.dumps({"status": "error", "message": message}))
        else:
            print(self._c("✗", "red"), message, file=sys.stderr)

    def table(self, headers: List[str], rows: List[List[Any]], title: Optional[str] = None) -> None:
        """Print formatted table."""
        if self.json_output:
            print(json.dumps({"title": title, "headers": headers, "rows": rows}))
            return

        if title:
            print(self._c(title, "bold"))
            print()

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(str(cell)))

        print(self._c(" │ ".join(h.ljust(widths[i]) for i, h in enumerate(headers)), "bold"))
        print("─┼─".join("─" * w for w in widths))
        for row in rows:
            print(" │ ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row)))

    def kv(self, data: Dict[str, Any], title: Optional[str] = None) -> None:
        """Print key-value pairs."""
        if self.json_output:
            print(json.dumps({"title": title, "data": data}))
            return

        if title:
            print(self._c(title, "bold"))
            print()

        max_key_len = max(len(k) for k in data.keys()) if data else 0
        for key, value in data.items():
            key_str = self._c(f"{key}:", "cyan").ljust(max_key_len + 10)
            print(f"  {key_str} {value}")


# =============================================================================
# Commands
# =============================================================================


def load_config(args: argparse.Namespace) -> PlatformConfig:
    """Build configuration from the config file and command line flags."""
    if args.config:
        config = PlatformConfig.from_yaml(Path(args.config))
    else:
        config = PlatformConfig()

    if args.platform:
        config.platform = args.platform
    if args.uuid:
        config.db_uuid = DbUuid.parse(args.uuid)
    return config


def cmd_types(args: argparse.Namespace, platform: DatabasePlatform, formatter: OutputFormatter) -> int:
    """List every logical type with its resolved DDL type."""
    mapping = platform.type_mapping
    rows = []
    for db_type in sorted(DbType, key=lambda t: t.name):
        bound = mapping.get(db_type)
        resolved = mapping.lookup(db_type.name, False)
        rows.append([db_type.name, db_type.code, bound.name, resolved.render_type()])

    formatter.table(["Type", "Code", "Bound", "DDL"], rows, title=f"{platform.name} types")
    return 0


def cmd_resolve(args: argparse.Namespace, platform: DatabasePlatform, formatter: OutputFormatter) -> int:
    """Resolve a single type name."""
    with_scale = args.scale or bool(args.length)
    resolved = platform.type_mapping.lookup(args.name, with_scale)
    db_type = DbTypeLookup.by_name(args.name)

    formatter.kv({
        "type": db_type.name,
        "code": db_type.code,
        "platform": platform.name,
        "name": resolved.name,
        "ddl": resolved.render_type(args.length or 0, args.precision_scale or 0),
    }, f"Resolved {db_type.name}")
    return 0


# =============================================================================
# Main CLI
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="dbplatform",
        description="dbplatform - Database platform type mapping",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dbplatform types --platform postgres
  dbplatform resolve JSON --length 1000
  dbplatform --uuid binary resolve UUID
        """,
    )

    parser.add_argument("--version", action="version", version=f"dbplatform {__version__}")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", "-c", help="YAML configuration file")
    parser.add_argument("--platform", "-p", choices=sorted(PLATFORMS), help="Database platform")
    parser.add_argument("--uuid", "-u", choices=[m.value for m in DbUuid], help="UUID storage strategy")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("types", help="List all type mappings")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a type name")
    resolve_parser.add_argument("name", help="Standard sql type name")
    resolve_parser.add_argument("--length", "-l", type=int, help="Column length or precision")
    resolve_parser.add_argument("--scale", "-s", action="store_true", help="Column declares a length/scale")
    resolve_parser.add_argument("--precision-scale", type=int, help="Column scale for decimal types")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    formatter = OutputFormatter(color=not args.no_color, json_output=args.json)

    commands = {
        "types": cmd_types,
        "resolve": cmd_resolve,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        platform = create_platform(load_config(args))
        return handler(args, platform, formatter)
    except (OSError, ValueError, yaml.YAMLError) as e:
        formatter.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
