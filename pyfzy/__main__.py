#!/usr/bin/env python3

import sys
import argparse
import logging

from pyfzy.config import ConfigError, create_config
from pyfzy.filter import better_filter, rank
from pyfzy.helpers import profile


logger = logging.getLogger("pyfzy")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="pyfzy", description="Fuzzy find lines with the fzy algorithm.")
    parser.add_argument("-f", "--filter", metavar="QUERY", default=None, help="Print lines matching QUERY, best first, and exit.")
    parser.add_argument("-s", "--show-scores", action="store_true", default=False, help="Prefix filtered lines with their score.")
    parser.add_argument("-c", "--case-sensitive", action="store_true", default=False, help="Perform case-sensitive matching.")
    parser.add_argument("-l", "--max-length", type=int, default=None, help="Longest line that gets scored.")
    parser.add_argument("-j", "--workers", type=int, default=None, help="Score lines on this many threads.")
    parser.add_argument("--reverse", action="store_true", default=False, help="Show the prompt at the top.")
    parser.add_argument("--height", type=int, default=None, help="Maximum height of the result list.")
    parser.add_argument("--no-multi", dest="multi", action="store_false", default=True, help="Disable multi-select.")
    parser.add_argument("--log-file", default=None, help="Write log records to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug records.")
    parser.add_argument("--profile", action="store_true", default=False, help="Log profiler stats on exit.")
    parser.add_argument("infile", nargs="?", type=argparse.FileType("r"), default=sys.stdin, help="Input file.")
    return parser.parse_args(argv)


def build_config(args):
    overrides = {"case_sensitive": args.case_sensitive}
    if args.max_length is not None:
        overrides["max_match_length"] = args.max_length
    return create_config(overrides)


def run_filter(config, query, lines, show_scores=False, workers=None, out=None):
    out = out or sys.stdout
    results = rank(better_filter(config, query, lines, workers=workers))
    for result in results:
        if show_scores:
            out.write("{:.6f}\t{}\n".format(result.score, result.string))
        else:
            out.write(result.string + "\n")
    return 0 if results else 1


def run_finder(config, lines, args):
    from pyfzy.fuzzyfinder import Finder

    finder = Finder(
        lines,
        config=config,
        multi=args.multi,
        reverse=args.reverse,
        height=args.height,
        workers=args.workers,
    )
    if args.infile is sys.stdin:
        # prompt_toolkit needs a terminal to read keys from
        stdin = sys.stdin
        with open("/dev/tty") as tty:
            sys.stdin = tty
            try:
                selected = finder.run()
            finally:
                sys.stdin = stdin
    else:
        selected = finder.run()
    if not selected:
        return 130
    for line in selected:
        print(line)
    return 0


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        filename=args.log_file,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    lines = args.infile.read().splitlines()
    if args.infile is not sys.stdin:
        args.infile.close()
    logger.debug("read %d lines", len(lines))

    try:
        config = build_config(args)
    except ConfigError as e:
        print("pyfzy: {}".format(e), file=sys.stderr)
        return 2

    if args.profile:
        with profile():
            return _dispatch(config, lines, args)
    return _dispatch(config, lines, args)


def _dispatch(config, lines, args):
    if args.filter is not None:
        return run_filter(config, args.filter, lines, show_scores=args.show_scores, workers=args.workers)
    return run_finder(config, lines, args)


if __name__ == "__main__":
    sys.exit(main())
