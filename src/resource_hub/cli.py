"""CLI entrypoint for the resource hub query service."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from resource_hub.api.errors import InternalError, NotFoundError
from resource_hub.api.resource_api import (
    by_type_name_version,
    list_resources,
    query_resources,
    versions_by_id,
)
from resource_hub.config.loader import get_default_limit, get_log_level, get_sqlite_path, load_config
from resource_hub.database.sqlite_client import session_context
from resource_hub.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_NOT_FOUND = 1
EXIT_INTERNAL = 2


def _positive_int(value: str) -> int:
    """argparse type for --limit: a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _print_json(result: Any) -> None:
    if isinstance(result, list):
        payload = [item.model_dump(exclude_none=True) for item in result]
    else:
        payload = result.model_dump(exclude_none=True)
    print(json.dumps(payload, indent=2))


def cmd_query(args: argparse.Namespace, config: dict) -> None:
    """Find resources by name and/or type."""
    limit = args.limit if args.limit is not None else get_default_limit(config)
    with session_context(get_sqlite_path(config)) as session:
        result = query_resources(session, name=args.name, type=args.type, limit=limit)
    _print_json(result)


def cmd_list(args: argparse.Namespace, config: dict) -> None:
    """List all resources sorted by rating."""
    limit = args.limit if args.limit is not None else get_default_limit(config)
    with session_context(get_sqlite_path(config)) as session:
        result = list_resources(session, limit=limit)
    _print_json(result)


def cmd_versions(args: argparse.Namespace, config: dict) -> None:
    """Show all versions of a resource."""
    with session_context(get_sqlite_path(config)) as session:
        result = versions_by_id(session, args.resource_id)
    _print_json(result)


def cmd_get(args: argparse.Namespace, config: dict) -> None:
    """Show one version of a resource."""
    with session_context(get_sqlite_path(config)) as session:
        result = by_type_name_version(session, args.type, args.name, args.version)
    _print_json(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resource-hub",
        description="Query a catalog of versioned resources",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: resource_hub.config.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # query command
    query_parser = subparsers.add_parser("query", help="Find resources by name and/or type")
    query_parser.add_argument("--name", type=str, default="", help="Name substring (case-insensitive)")
    query_parser.add_argument("--type", type=str, default="", help="Resource type (case-insensitive)")
    query_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Maximum number of resources (default: query.default_limit)",
    )
    query_parser.set_defaults(func=cmd_query)

    # list command
    list_parser = subparsers.add_parser("list", help="List all resources sorted by rating")
    list_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Maximum number of resources (default: query.default_limit)",
    )
    list_parser.set_defaults(func=cmd_list)

    # versions command
    versions_parser = subparsers.add_parser("versions", help="Show all versions of a resource")
    versions_parser.add_argument("resource_id", type=int, help="Resource ID")
    versions_parser.set_defaults(func=cmd_versions)

    # get command
    get_parser = subparsers.add_parser("get", help="Show one version of a resource")
    get_parser.add_argument("type", type=str, help="Resource type")
    get_parser.add_argument("name", type=str, help="Resource name")
    get_parser.add_argument("version", type=str, help="Version, e.g. 0.2")
    get_parser.set_defaults(func=cmd_get)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    config = load_config(args.config)
    configure_logging(get_log_level(config))

    try:
        args.func(args, config)
    except NotFoundError as e:
        print(str(e), file=sys.stderr)
        sys.exit(EXIT_NOT_FOUND)
    except InternalError as e:
        print(str(e), file=sys.stderr)
        sys.exit(EXIT_INTERNAL)


if __name__ == "__main__":
    main()
