from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import logging
import sys
from pathlib import Path

from cardseed.engine.service import DeckRejected, DeckSeedService


def _read_deck(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DeckRejected("UNREADABLE_DECK", f"cannot read {path}: {exc}") from exc


async def _run(args: argparse.Namespace, service: DeckSeedService) -> None:
    if args.command == "shuffle":
        report = await service.shuffle()
        print(report.canonical_text)
        return

    deck_text = _read_deck(args.deck_file)
    if args.command == "inspect":
        report = await service.inspect(deck_text)
        print(json.dumps(report.model_dump(mode="json"), indent=2))
        return

    password = getpass.getpass("Password: ") if args.password_prompt else None
    result = await service.derive(
        deck_text,
        password=password,
        require_complete=not args.allow_incomplete,
    )
    if args.format == "json":
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    elif args.format == "bytes":
        sys.stdout.flush()
        sys.stdout.buffer.write(bytes.fromhex(result.secret_hex))
        sys.stdout.buffer.flush()
    else:
        print(result.secret_hex)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cardseed",
        description="Record, check and hash a shuffled deck of playing cards",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    inspect = commands.add_parser("inspect", help="parse a deck and report on its validity")
    inspect.add_argument("deck_file", type=Path, nargs="?", help="deck text file (default: stdin)")

    derive = commands.add_parser("derive", help="derive a 32-byte secret from a deck")
    derive.add_argument("deck_file", type=Path, nargs="?", help="deck text file (default: stdin)")
    derive.add_argument("--password-prompt", action="store_true", help="read a passphrase to mix in")
    derive.add_argument(
        "--allow-incomplete",
        action="store_true",
        help="derive even if cards are duplicated or missing",
    )
    derive.add_argument(
        "--format",
        choices=["hex", "bytes", "json"],
        default="hex",
        help="hex digest, raw bytes on stdout, or the full result as JSON",
    )

    commands.add_parser("shuffle", help="print a securely shuffled standard deck")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(_run(args, DeckSeedService()))
    except DeckRejected as exc:
        print(f"error: {exc.code}: {exc.message}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
