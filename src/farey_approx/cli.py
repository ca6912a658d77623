"""Approximate a non-negative real number by a fraction using Farey mediants."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from farey_approx import __version__
from farey_approx.core.contracts import validate_approximation_report
from farey_approx.core.errors import FareyError
from farey_approx.formatting import build_report, format_diagram, format_trace_line
from farey_approx.search import DEFAULT_MAX_ITERATIONS, MediantSearchEngine, SearchConfig, TraceRecord

logger = logging.getLogger(__name__)


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="farey-approx", description=__doc__)
    parser.add_argument("number", type=float, help="The real number")
    parser.add_argument(
        "--max-iterations",
        type=positive_int,
        default=DEFAULT_MAX_ITERATIONS,
        help=f"Give up after this many mediant steps (default: {DEFAULT_MAX_ITERATIONS})",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print per-iteration trace lines")
    parser.add_argument("--json", action="store_true", help="Print a JSON report instead of the diagram")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def print_trace(record: TraceRecord) -> None:
    print(format_trace_line(record))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    show_trace = not (args.quiet or args.json)
    engine = MediantSearchEngine(
        SearchConfig(max_iterations=args.max_iterations),
        sink=print_trace if show_trace else None,
    )

    try:
        result = engine.search(args.number)
    except FareyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        report = build_report(result)
        validate_approximation_report(report)
        print(json.dumps(report))
    else:
        print(format_diagram(result.fraction))

    logger.debug("Done in %d iterations", result.iterations)
    return 0


if __name__ == "__main__":
    sys.exit(main())
