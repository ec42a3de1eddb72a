"""propcatalog CLI: inspect descriptor files."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from propcatalog.codes import GROUP_COMPONENT, GROUP_PROPERTIES


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(2)


def main():
    """Main CLI entry point for propcatalog commands."""
    try:
        propcatalog_version = get_version("propcatalog")
    except PackageNotFoundError:
        propcatalog_version = "dev"

    parser = argparse.ArgumentParser(
        prog="propcatalog",
        description="propcatalog: Parse and query component metadata descriptors"
    )
    parser.add_argument("--version", action="version", version=f"propcatalog {propcatalog_version}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # rows command
    rows_parser = subparsers.add_parser(
        "rows",
        help="Print the parsed rows of a descriptor, one JSON object per line"
    )
    rows_parser.add_argument("file", type=Path, help="Path to descriptor JSON")
    rows_parser.add_argument(
        "--group",
        default=GROUP_PROPERTIES,
        help="Group to parse (default: properties)"
    )
    rows_parser.add_argument(
        "--no-flatten",
        dest="flatten",
        action="store_false",
        help="Read the group as a single map, one row per key"
    )
    rows_parser.add_argument(
        "--main",
        action="store_true",
        help="Parse the file as a main configuration descriptor"
    )

    # describe command
    describe_parser = subparsers.add_parser(
        "describe",
        help="Print a typed summary of one property"
    )
    describe_parser.add_argument("file", type=Path, help="Path to descriptor JSON")
    describe_parser.add_argument("name", help="Property name (optionally prefixed)")
    describe_parser.add_argument(
        "--group",
        default=GROUP_PROPERTIES,
        help="Group holding the property (default: properties)"
    )
    describe_parser.add_argument(
        "--main",
        action="store_true",
        help="Parse the file as a main configuration descriptor"
    )

    # component command
    component_parser = subparsers.add_parser(
        "component",
        help="Print a typed summary of the component group"
    )
    component_parser.add_argument("file", type=Path, help="Path to descriptor JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Lazy imports: only load the kernel when a command runs
    from propcatalog._internal.canonical_json import canonical_dumps, rows_to_lines
    from propcatalog.api import describe_component, describe_property
    from propcatalog.errors import SchemaParseError
    from propcatalog.kernel.parser import parse_json_schema, parse_main_json_schema

    json_text = _read_text(args.file)

    try:
        if args.command == "rows":
            if args.main:
                rows = parse_main_json_schema(json_text)
            else:
                rows = parse_json_schema(args.group, json_text, args.flatten)
            sys.stdout.write(rows_to_lines(rows))
        elif args.command == "describe":
            if args.main:
                rows = parse_main_json_schema(json_text)
            else:
                rows = parse_json_schema(args.group, json_text, True)
            info = describe_property(rows, args.name)
            if info is None:
                print(f"Error: Property '{args.name}' not found", file=sys.stderr)
                sys.exit(1)
            print(canonical_dumps(info.model_dump()))
        elif args.command == "component":
            rows = parse_json_schema(GROUP_COMPONENT, json_text, False)
            print(canonical_dumps(describe_component(rows).model_dump()))
        else:
            parser.print_help()
            sys.exit(1)
    except SchemaParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
