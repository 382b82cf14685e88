"""
BF Runtime - Command Line

    bf-run SOURCE [--dump] [--no-optimize] [--max-run N] [-v]

Only the first positional argument is used; anything after it is ignored.
Compile errors and end of input are reported and exit 0. Bad options exit 2
through argparse. File errors propagate.
"""

import argparse
import logging
import sys

from .config import RuntimeOptions
from .errors import BFCompileError, BFConfigError, BFInputError
from .listing import format_listing
from .runtime import BFRuntime

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bf-run", description="Run a BF program.")
    parser.add_argument("source", nargs="?", help="Path to the BF source file (UTF-8).")
    parser.add_argument("--no-optimize", action="store_true",
                        help="Run the raw instruction list without run-length condensing.")
    parser.add_argument("--max-run", type=int, default=None,
                        help="Largest repeat count of a condensed instruction.")
    parser.add_argument("--dump", action="store_true",
                        help="Print the instruction listing instead of running.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages to stderr.")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if extra:
        logger.debug("ignoring extra arguments: %s", " ".join(extra))

    if args.source is None:
        parser.print_usage()
        print("please provide a file name")
        return 0

    try:
        options = RuntimeOptions.from_env().with_overrides(
            optimize=False if args.no_optimize else None,
            max_run_length=args.max_run,
        )
    except BFConfigError as err:
        parser.error(err.message)

    # Open/read failures are not recoverable; let them propagate.
    with open(args.source, "r", encoding=options.encoding) as fp:
        source = fp.read()

    runtime = BFRuntime(options)
    try:
        if args.dump:
            print(format_listing(runtime.prepare(source)))
        else:
            runtime.execute(source)
    except BFCompileError as err:
        print(err.message)
    except BFInputError as err:
        # stdout carries program output; keep the notice out of it
        print(err.message, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
