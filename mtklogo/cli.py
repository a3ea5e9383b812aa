#!/usr/bin/env python3
"""
Yet another Android logo customizer for MTK devices.

  mtklogo unpack logo.bin -o extracted/
  mtklogo explore logo.bin -w 720 -o explore/
  mtklogo repack -o logo.new.bin extracted/logo_*
  mtklogo guess -s 3686400
  mtklogo info logo.bin
"""

import argparse
import logging
import sys

from . import __version__
from .color import ColorMode
from .config import Config, DEFAULT_PROFILE
from .console import err, err_console, setup_logging
from .errors import MtkLogoError
from .explore import run_explore
from .guess import run_guess
from .info import run_info
from .repack import run_repack
from .unpack import run_unpack

log = logging.getLogger(__name__)


def parse_slots(s: str):
    try:
        slots = [int(tok, 10) for tok in s.split(",") if tok.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"slots must be comma separated numbers, got '{s}'") from None
    if any(slot < 0 for slot in slots):
        raise argparse.ArgumentTypeError("slots cannot be negative")
    return slots


def parse_size(s: str) -> int:
    s = s.strip().lower()
    try:
        value = int(s, 16) if s.startswith("0x") else int(s, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: '{s}'") from None
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def color_mode_name(s: str) -> str:
    try:
        return ColorMode.by_name(s).canonical_name
    except MtkLogoError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mtklogo",
        description="Unpacks or repacks images from an MTK `logo.bin` file.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", metavar="command")

    # shared by unpack / explore / info
    src = argparse.ArgumentParser(add_help=False)
    src.add_argument("path", help="Path to input `logo.bin`")
    src.add_argument("--strict", action="store_true",
                     help="Require the MTK header padding to be filled with 0xFF")
    jobs = argparse.ArgumentParser(add_help=False)
    jobs.add_argument("-j", "--jobs", type=int, default=1, help="Slots processed in parallel")
    jobs.add_argument("--slots", type=parse_slots,
                      help="Only these slots (e.g. 0,3,4)")

    u = sub.add_parser("unpack", parents=[src, jobs], help="unpacks a logo image")
    u.add_argument("-p", "--profile", default=DEFAULT_PROFILE, help="Uses an alternative profile name")
    u.add_argument("-c", "--config", help="Uses an alternative configuration file")
    u.add_argument("-m", "--mode", type=color_mode_name, help="Overrides profile's color mode")
    u.add_argument("-f", "--flip", action="store_true", help="Flips orientation")
    u.add_argument("-z", "--zip", action="store_true",
                   help="Do not convert to png, extract as plain .z files")
    out = u.add_mutually_exclusive_group()
    out.add_argument("-o", "--output", default=".", help="Sets images output directory")
    out.add_argument("-n", "--no-out", action="store_true",
                     help="Do not extract images, just check image formats")

    e = sub.add_parser("explore", parents=[src, jobs],
                       help="unpacks a logo image in every color mode for a given width")
    e.add_argument("-w", "--width", type=parse_size, required=True, help="Image width in pixels")
    e.add_argument("-o", "--output", default=".", help="Sets images output directory")

    g = sub.add_parser("guess", help="guesses image dimensions from a buffer size")
    g.add_argument("-s", "--size", type=parse_size, required=True, help="Image size in bytes")

    r = sub.add_parser("repack", help="repacks a logo image")
    r.add_argument("-o", "--output", required=True, help="Path to output `logo.bin`")
    r.add_argument("-a", "--alpha", action="store_true",
                   help="Strips alpha channel, assume image is opaque")
    r.add_argument("files", nargs="+", help="Files to repack (logo_NNN_<mode>.png or logo_NNN_raw.z)")

    sub.add_parser("info", parents=[src], help="dumps the logo table")
    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    setup_logging(args.verbose)
    if not args.command:
        p.print_usage(sys.stderr)
        return 1
    if args.command in ("unpack", "explore") and args.jobs < 1:
        p.error("--jobs must be at least 1")
    if args.command == "unpack" and args.zip and args.slots is not None:
        p.error("--zip and --slots cannot be used together")

    try:
        if args.command == "unpack":
            config = Config.load(args.config)
            run_unpack(args.path, args.output, config=config, profile_name=args.profile,
                       mode=args.mode, flip=args.flip, zip=args.zip, slots=args.slots,
                       check=args.no_out, strict=args.strict, jobs=args.jobs)
        elif args.command == "explore":
            run_explore(args.path, args.output, args.width, slots=args.slots,
                        strict=args.strict, jobs=args.jobs)
        elif args.command == "repack":
            run_repack(args.output, args.files, strip_alpha=args.alpha)
        elif args.command == "guess":
            run_guess(args.size)
        elif args.command == "info":
            run_info(args.path, strict=args.strict)
    except (MtkLogoError, OSError) as e:
        log.debug("command failed", exc_info=True)
        err_console.print(f"{err('Error:')} {err(e)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
