"""Command-line entry point."""

from __future__ import annotations

import argparse

from .config import VERSION, initialize


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resourcehub", description="Work with resources of the remote API."
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-u", "--api-url", help="API URL to use")
    parser.add_argument("-k", "--api-key", help="API key for authentication")

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    fetch = commands.add_parser("fetch", help="Fetch data from the API")
    fetch.add_argument("-i", "--id", required=True, help="Resource ID to fetch")

    listing = commands.add_parser("list", help="List available resources")
    listing.add_argument(
        "-l", "--limit", type=_non_negative, default=10, help="Maximum number of items to show"
    )

    create = commands.add_parser("create", help="Create a new resource")
    create.add_argument("-n", "--name", required=True, help="Resource name")
    create.add_argument("-r", "--resource-type", required=True, help="Resource type")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv`` and report the requested action."""
    initialize()
    args = _build_parser().parse_args(argv)

    if args.command == "fetch":
        print(f"Fetching resource with ID: {args.id}")
    elif args.command == "list":
        print(f"Listing up to {args.limit} resources:")
    else:
        print(f"Creating a new {args.resource_type} resource named: {args.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())