"""
Command line entry point: decode a Bencoded file and print it.
"""
import argparse
import sys
from pathlib import Path

from .decoder import DEFAULT_MAX_DEPTH, BencodeDecodeError, decode
from .printer import render

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_IO = 2
EXIT_DECODE = 3


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(EXIT_USAGE)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="bview", description="Decode a Bencoded file and pretty-print it.")
    parser.add_argument("file", type=Path, help="path to a Bencoded file (.torrent, .fastresume, ...)")
    parser.add_argument("--strict", action="store_true",
                        help="reject unsorted or duplicate dictionary keys and zero-padded lengths")
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                        help=f"maximum list/dictionary nesting (default {DEFAULT_MAX_DEPTH})")
    parser.add_argument("--indent", type=int, default=1,
                        help="spaces per nesting level (default 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="report progress on stderr")
    return parser


def _log(message):
    print(f"[bview] {message}", file=sys.stderr)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_depth < 1:
        parser.error("--max-depth must be at least 1")
    if args.indent < 0:
        parser.error("--indent must not be negative")

    try:
        raw = args.file.read_bytes()
    except OSError as e:
        _log(f"Could not read {args.file}: {e}")
        return EXIT_IO

    if args.verbose:
        _log(f"Read {len(raw)} bytes from {args.file}")

    try:
        values = decode(raw, strict=args.strict, max_depth=args.max_depth)
    except BencodeDecodeError as e:
        print(f"failed: {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_DECODE

    if args.verbose:
        _log(f"Decoded {len(values)} top-level value(s)")

    sys.stdout.write(render(values, indent=" " * args.indent))
    return EXIT_OK
