import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import ChexError, InvalidWordSize, UnknownFormat
from .formats import DumpRequest, format_names, lookup, render
from .naming import make_basename
from .words import WordSize

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        print(f"error: {message}", file=sys.stderr)
        self.print_help()
        raise SystemExit(1)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    formats = "\n".join(f"\t{name}: {description}" for name, description in format_names())
    parser = _Parser(
        prog="chex",
        usage="chex [options...] format infile",
        description="Dump a binary file as a hex literal for embedding in source code.",
        epilog=f"Formats:\n{formats}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-wordsize",
        "--wordsize",
        default="1",
        metavar="VALUE",
        help="Set word size in bytes. Supported sizes: 1, 2, 4, 8",
    )
    parser.add_argument("-caps", "--caps", action="store_true", help="Capitalize variable names")
    parser.add_argument("-name", "--name", metavar="VALUE", help="Set base name for variables")
    parser.add_argument("-prefix", "--prefix", metavar="STRING", help="Prefix variable names with string")
    parser.add_argument("-o", "--output", metavar="PATH", help="Write to PATH instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log what is being done to stderr")
    parser.add_argument("format", help="Output format, see below")
    parser.add_argument("infile", help="Input file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        word_size = WordSize.parse(args.wordsize)
    except InvalidWordSize:
        print(f"error: Unsupported word size {args.wordsize}", file=sys.stderr)
        return 1

    try:
        spec = lookup(args.format)
    except UnknownFormat:
        print(f"error: Unrecognised format: {args.format}", file=sys.stderr)
        return 1

    infile = Path(args.infile)
    basename = make_basename(args.name if args.name is not None else args.infile, args.prefix, args.caps)
    info = DumpRequest(basename, word_size)

    try:
        if spec.needs_data:
            data = infile.read_bytes()
            in_size = len(data)
            logger.debug("read %d byte(s) from %s", in_size, infile)
        else:
            data = None
            in_size = infile.stat().st_size
            logger.debug("%s is %d byte(s), contents not read", infile, in_size)
        text = render(info, data, in_size, spec.format)
    except OSError as e:
        print(f"error: cannot read input file: {e}", file=sys.stderr)
        return 1
    except ChexError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", newline="\n") as f:
                f.write(text)
        except OSError as e:
            print(f"error: cannot write output file: {e}", file=sys.stderr)
            return 1
        logger.debug("wrote %s to %s", spec.name, args.output)
    else:
        sys.stdout.write(text)
    return 0
