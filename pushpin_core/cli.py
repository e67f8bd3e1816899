"""CLI tool for encoding, parsing, and checking share links."""

import argparse
import json
import sys
from dataclasses import asdict

from pushpin_core.exceptions import ShareLinkError
from pushpin_core.links import HypermergeUrl, create_document_link, parse_document_link
from pushpin_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


def _cmd_encode(args: argparse.Namespace) -> int:
    try:
        link = create_document_link(args.type, HypermergeUrl(args.internal_id))
    except ShareLinkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(link)
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    try:
        parts = parse_document_link(args.link)
    except ShareLinkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(asdict(parts), indent=2))
        return 0

    rows = [("scheme", parts.scheme), ("type", parts.type), ("identifier", parts.identifier), ("internal_id", parts.internal_id)]
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label.ljust(width)}  {value}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Exit 0 for a valid link; print the failure kind and message to stderr otherwise."""
    try:
        parse_document_link(args.link)
    except ShareLinkError as e:
        logger.debug(f"Rejected {args.link!r}: {type(e).__name__}")
        print(f"INVALID ({type(e).__name__}): {e}", file=sys.stderr)
        return 1
    print("OK")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for share link operations."""
    parser = argparse.ArgumentParser(prog="pushpin-links", description="Pushpin share link CLI")
    subparsers = parser.add_subparsers(dest="command")

    # encode
    encode_parser = subparsers.add_parser("encode", help="Build a share link from a content type and hypermerge URL")
    encode_parser.add_argument("type", help="Content type tag, e.g. board")
    encode_parser.add_argument("internal_id", help="Internal identifier, e.g. hypermerge:/abc123")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Verify a share link and print its parts")
    parse_parser.add_argument("link", help="Share link to parse")
    parse_parser.add_argument("--json", action="store_true", help="Print parts as JSON")

    # check
    check_parser = subparsers.add_parser("check", help="Report whether a share link is valid")
    check_parser.add_argument("link", help="Share link to check")

    args = parser.parse_args(argv)

    handlers = {"encode": _cmd_encode, "parse": _cmd_parse, "check": _cmd_check}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["main"]
