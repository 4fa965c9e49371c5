# qdhex/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import __version__
from .__about__ import APP_TITLE
from .logic import (
    bare_dump_string,
    formatted_dump_string,
    parse_int_maybe,
)

logger = logging.getLogger(__name__)

COMMANDS = ("dump", "bare", "string")


# ---------- helpers ----------
def _read_input(path: str | None) -> bytes:
    if path is None or path == "-":
        logger.debug("Reading from stdin")
        return sys.stdin.buffer.read()
    logger.debug("Reading from %s", path)
    with open(path, "rb") as f:
        return f.read()

def _parse_offset(text: str) -> int:
    offset = parse_int_maybe(text)
    if offset < 0:
        raise ValueError(f"Offset must not be negative: {text}")
    return offset

def _emit(data: bytes, *, bare: bool, offset: int) -> None:
    logger.debug("Dumping %d bytes (offset 0x%x, bare=%s)", len(data), offset, bare)
    if bare:
        if data:
            sys.stdout.write(bare_dump_string(data) + "\n")
    else:
        sys.stdout.write(formatted_dump_string(offset, data))


# ---------- subcommands ----------
def cmd_dump(args: argparse.Namespace) -> int:
    data = _read_input(args.file)
    _emit(data, bare=False, offset=_parse_offset(args.offset))
    return 0


def cmd_bare(args: argparse.Namespace) -> int:
    data = _read_input(args.file)
    _emit(data, bare=True, offset=0)
    return 0


def cmd_string(args: argparse.Namespace) -> int:
    # latin-1 keeps one byte per character
    raw = args.text.encode("latin-1", errors="replace")
    _emit(raw, bare=args.bare, offset=_parse_offset(args.offset))
    return 0


# ---------- parser ----------
def _add_offset_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--offset", default="0",
        help="address of the first byte, dec or 0x… (default: 0)"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="qdhex",
        description=f"{APP_TITLE} (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sp = p.add_subparsers(dest="cmd")

    # dump
    pd = sp.add_parser("dump", help="formatted hexdump with offsets and ASCII")
    pd.add_argument("file", nargs="?", help="input file (default: stdin)")
    _add_offset_arg(pd)
    pd.set_defaults(func=cmd_dump)

    # bare
    pb = sp.add_parser("bare", help="space-separated hex pairs on one line")
    pb.add_argument("file", nargs="?", help="input file (default: stdin)")
    pb.set_defaults(func=cmd_bare)

    # string
    ps = sp.add_parser("string", help="dump a text string (latin-1)")
    ps.add_argument("text", help="text to dump")
    ps.add_argument("--bare", action="store_true", help="bare dump instead of formatted")
    _add_offset_arg(ps)
    ps.set_defaults(func=cmd_string)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    # Convenience: `qdhex [-v] FILE` is treated as `qdhex [-v] dump FILE`.
    for i, a in enumerate(argv):
        if a == "-" or not a.startswith("-"):
            if a not in COMMANDS:
                argv.insert(i, "dump")
            break

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except ValueError as e:
        logger.error("%s", e)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
