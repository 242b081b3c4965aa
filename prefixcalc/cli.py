"""Command line entry point: evaluate a prefix expression stored in a file."""

import argparse
import sys

from .colour import Colour, paint
from .errors import TreeError, format_error
from .file_data import read_text
from .logger import Logger, LogLevel
from .tree import DEFAULT_GRAPH_DIR, ParseError, evaluate, generate_dot, parse

DEFAULT_LOG_FILE = "../resources/logger/logger.log"


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="prefixcalc",
        description="Evaluate a prefix arithmetic expression and draw its tree.",
    )
    parser.add_argument("expression_file", help="file holding the expression")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="log file path")
    parser.add_argument(
        "--graph-dir", default=DEFAULT_GRAPH_DIR, help="directory for graph dumps"
    )
    parser.add_argument(
        "--no-render", action="store_true", help="do not run dot to make a PNG"
    )
    return parser


def main(argv=None):
    """Run the calculator; return the process exit status."""
    args = _build_parser().parse_args(argv)

    try:
        logger = Logger(args.log_file, LogLevel.DEBUG, True)
    except OSError:
        logger = None

    try:
        try:
            text = read_text(args.expression_file)
        except TreeError as exc:
            sys.stderr.write(format_error(exc.code, args.expression_file))
            if logger is not None:
                logger.error(str(exc))
            return 1

        sys.stderr.write(paint(text, Colour.YELLOW))

        try:
            root = parse(text)
        except ParseError as exc:
            sys.stderr.write(paint(f"\nparse error: {exc}\n", Colour.RED))
            if logger is not None:
                logger.error(str(exc))
            return 1

        try:
            generate_dot(root, args.graph_dir, not args.no_render)
        except TreeError as exc:
            sys.stderr.write(format_error(exc.code, args.graph_dir))

        try:
            result = evaluate(root)
        except ValueError as exc:
            sys.stderr.write(paint(f"\nevaluation error: {exc}\n", Colour.RED))
            if logger is not None:
                logger.error(str(exc))
            return 1

        sys.stderr.write(f"result {result:f}")
        return 0
    finally:
        if logger is not None:
            logger.close()


if __name__ == "__main__":
    sys.exit(main())