"""Command-line entry point.

Usage:
    python -m replitdb [--url URL] [-v] COMMAND [ARGS]

Results are written to stdout as JSON.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from replitdb.client import StoreClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="replitdb", description="Replit Database client")
    parser.add_argument("--url", help="Database URL (default: $REPLIT_DB_URL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("get", help="Print the value of a key")
    p.add_argument("key")
    p.add_argument("--raw", action="store_true", help="Print the stored text without decoding")

    p = sub.add_parser("set", help="Set a key to a JSON value")
    p.add_argument("key")
    p.add_argument("value", help="JSON text, e.g. '{\"a\": 1}' or '\"text\"'")

    p = sub.add_parser("delete", help="Delete one or more keys")
    p.add_argument("keys", nargs="+")

    p = sub.add_parser("list", help="List keys")
    p.add_argument("prefix", nargs="?", default="")

    sub.add_parser("dump", help="Print every key/value pair as a JSON object")
    sub.add_parser("load", help="Set every pair of a JSON object read from stdin")
    sub.add_parser("empty", help="Delete every key")
    return parser


async def run(args: argparse.Namespace) -> Any:
    """Execute the parsed command and return its JSON-serializable result."""
    db = StoreClient(args.url)

    if args.command == "get":
        return await db.get(args.key, raw=args.raw)
    if args.command == "set":
        await db.set(args.key, json.loads(args.value))
        return {"set": args.key}
    if args.command == "delete":
        if len(args.keys) == 1:
            await db.delete(args.keys[0])
        else:
            await db.delete_multiple(*args.keys)
        return {"deleted": args.keys}
    if args.command == "list":
        return await db.list(args.prefix)
    if args.command == "dump":
        return await db.get_all()
    if args.command == "load":
        data = json.loads(sys.stdin.read())
        if not isinstance(data, dict):
            raise ValueError("load expects a JSON object on stdin")
        await db.set_all(data)
        return {"set": list(data)}
    if args.command == "empty":
        await db.empty()
        return {"emptied": True}
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s [%(name)s]: %(message)s",
        )

    try:
        result = asyncio.run(run(args))
    except Exception as e:
        # Always emit valid JSON, even on failure
        print(json.dumps({"error": str(e), "error_type": type(e).__name__}))
        return 1

    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
