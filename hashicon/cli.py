from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .encoders import ENCODERS, encode_rgba, get_encoder
from .errors import IdenticonError
from .generator import render
from .options import HashAlgorithm, IdenticonOptions

USAGE = "%(prog)s [options] [--] <md5|sha1|sha256|sha512> string [salt] output.png"


class _Parser(argparse.ArgumentParser):
    # usage errors exit 1, not argparse's 2
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_argparser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="hashicon",
        usage=USAGE,
        description="Deterministic 5x5 identicon PNG from a string (optionally salted).",
    )
    p.add_argument("args", nargs="*", metavar="ARG", help="algorithm, string, optional salt, output path")
    p.add_argument("--size", "-s", type=int, default=256, help="Image side in pixels (default: 256)")
    p.add_argument("--margin", "-m", type=float, default=0.08, help="Outer margin as a fraction of size (default: 0.08)")
    p.add_argument("--transparent", action="store_true", help="Leave background cells transparent")
    p.add_argument("--stroke", action="store_true", help="Draw foreground cells with a stroke border")
    p.add_argument("--stroke-size", type=int, default=1, help="Stroke width in pixels (default: 1)")
    p.add_argument("--encoder", default="pillow", choices=list(ENCODERS), help="PNG backend (default: pillow)")
    p.add_argument("--strict", action="store_true", help="Reject unknown algorithm names instead of using md5")
    p.add_argument("--quiet", "-q", action="store_true", help="Less console output")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    p.add_argument("--gui", action="store_true", help="Open the preview window instead")
    return p


def options_from_args(args: argparse.Namespace) -> IdenticonOptions:
    positional = args.args
    algorithm = HashAlgorithm.parse(positional[0], strict=args.strict)
    if algorithm.hashlib_name != positional[0].strip().lower():
        print(f"Warning: unknown algorithm {positional[0]!r}, using md5", file=sys.stderr)

    return IdenticonOptions(
        text=positional[1],
        salt=positional[2] if len(positional) == 4 else "",
        size=args.size,
        margin=args.margin,
        transparent=args.transparent,
        stroke=args.stroke,
        stroke_size=args.stroke_size,
        hash_algorithm=algorithm,
    )


def run_cli(args: argparse.Namespace) -> int:
    opts = options_from_args(args)
    out = args.args[-1]

    buf, meta = render(opts)
    encode_rgba(out, buf, opts.size, opts.size, encoder=get_encoder(args.encoder))

    if not args.quiet:
        r, g, b = meta.foreground
        print(f"Algorithm: {meta.algorithm}")
        print(f"Digest: {meta.digest_hex}")
        print(f"Foreground: #{r:02x}{g:02x}{b:02x}  Cells: {len(meta.cells)}")
        print(f"Size: {opts.size}px (cell {meta.geometry.cell}px, offset {meta.geometry.offset}px)")
        print(f"Saved: {out}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.gui:
        from .gui import App
        App().mainloop()
        return 0

    if len(args.args) not in (3, 4):
        parser.print_usage()
        return 1

    try:
        return run_cli(args)
    except IdenticonError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
