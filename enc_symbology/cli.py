"""
Command-line interface for enc_symbology package.

Provides argparse-based CLI with subcommands for symbolizing a cell
fixture, listing the procedure table and checking instruction strings.

Usage:
    enc-symbology symbolize harbour.yaml --safety-contour 10 --two-shades
    enc-symbology symbolize harbour.yaml --config mariner.yaml --format json --output out.json
    enc-symbology procedures
    enc-symbology parse ";OP(8OD13010);LS(SOLD,2,DEPSC)"
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .api import load_cell, symbolize_cell
from .config import MarinerParameters
from .exceptions import SymbologyError
from .logging_config import setup_logging
from .symbology.engine import ALIASES, PROCEDURES, SUB_PROCEDURES
from .symbology.instructions import RenderInstruction


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file,
            no_diagnostics
    """
    if getattr(args, "quiet", False):
        verbosity = -1  # WARNING
    elif getattr(args, "verbose", False):
        verbosity = 1  # DEBUG
    else:
        verbosity = 0  # INFO

    log_file = getattr(args, "log_file", None)
    diagnostics = not getattr(args, "no_diagnostics", False)
    setup_logging(verbosity=verbosity, log_file=log_file, diagnostics=diagnostics)


def load_parameters(args: argparse.Namespace) -> MarinerParameters:
    """
    Mariner parameters from ``--config`` with command-line overrides.

    Raises:
        InvalidParameterError: If the file or an override is invalid
    """
    if getattr(args, "config", None):
        params = MarinerParameters.load_from_file(Path(args.config))
    else:
        params = MarinerParameters()

    params = params.with_overrides(
        safety_contour=args.safety_contour,
        shallow_contour=args.shallow_contour,
        deep_contour=args.deep_contour,
        safety_depth=args.safety_depth,
        datum_offset=args.datum_offset,
        two_shades=True if args.two_shades else None,
        shallow_pattern=True if args.shallow_pattern else None,
        symbolized_boundaries=False if args.plain_boundaries else None,
    )
    params.validate()
    return params


def _write_output(text: str, output: Optional[str]) -> None:
    if output is None:
        print(text)
        return
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n")
    print(f"Instructions written to: {path}", file=sys.stderr)


def cmd_symbolize(args: argparse.Namespace) -> int:
    """Handle 'symbolize' subcommand."""
    try:
        params = load_parameters(args)
        features = load_cell(args.cell)
        results = symbolize_cell(features, params=params)

        if args.format == "json":
            text = json.dumps(
                {str(feature_id): instruction.serialize() for feature_id, instruction in results.items()},
                indent=2,
            )
        else:
            text = "\n".join(
                f"{feature_id}\t{instruction.serialize()}" for feature_id, instruction in results.items()
            )

        _write_output(text, args.output)
        return 0

    except SymbologyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_procedures(args: argparse.Namespace) -> int:
    """Handle 'procedures' subcommand."""
    for procedure in PROCEDURES:
        print(f"{procedure.value:<10} procedure")
    for alias, target in ALIASES.items():
        print(f"{alias.value:<10} alias of {target.value}")
    if args.all:
        for name in SUB_PROCEDURES:
            print(f"{name:<10} sub-procedure")
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Handle 'parse' subcommand."""
    try:
        instruction = RenderInstruction.parse(args.instruction)
    except SymbologyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for token in instruction:
        print(f"{token.code}\t{token!r}")
    print(instruction.serialize())
    return 0


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="enc-symbology",
        description="Compute S-52 conditional symbology for chart features",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    def _add_common_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Enable DEBUG logging"
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Suppress INFO logging (WARNING+ only)"
        )
        p.add_argument(
            "--log-file",
            type=str,
            help="Write logs to file"
        )
        p.add_argument(
            "--no-diagnostics",
            action="store_true",
            help="Hide chart data diagnostics on the console (still written to --log-file)"
        )

    _add_common_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========================================================================
    # symbolize subcommand
    # ========================================================================
    parser_symbolize = subparsers.add_parser(
        "symbolize",
        help="Symbolize every feature of a cell fixture"
    )
    _add_common_args(parser_symbolize)
    parser_symbolize.add_argument(
        "cell",
        type=str,
        help="Cell fixture file (YAML/JSON)"
    )
    parser_symbolize.add_argument(
        "--config",
        type=str,
        help="Mariner parameter file (YAML/JSON)"
    )
    parser_symbolize.add_argument(
        "--safety-contour",
        type=float,
        help="Safety contour depth in metres"
    )
    parser_symbolize.add_argument(
        "--shallow-contour",
        type=float,
        help="Shallow contour depth in metres"
    )
    parser_symbolize.add_argument(
        "--deep-contour",
        type=float,
        help="Deep contour depth in metres"
    )
    parser_symbolize.add_argument(
        "--safety-depth",
        type=float,
        help="Safety depth for soundings in metres"
    )
    parser_symbolize.add_argument(
        "--datum-offset",
        type=float,
        help="Offset added to charted depths in metres"
    )
    parser_symbolize.add_argument(
        "--two-shades",
        action="store_true",
        help="Shade depth areas with two shades only"
    )
    parser_symbolize.add_argument(
        "--shallow-pattern",
        action="store_true",
        help="Add the shallow water pattern"
    )
    parser_symbolize.add_argument(
        "--plain-boundaries",
        action="store_true",
        help="Draw area boundaries as plain lines"
    )
    parser_symbolize.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    parser_symbolize.add_argument(
        "--output",
        type=str,
        help="Output file (default: stdout)"
    )
    parser_symbolize.set_defaults(func=cmd_symbolize)

    # ========================================================================
    # procedures subcommand
    # ========================================================================
    parser_procedures = subparsers.add_parser(
        "procedures",
        help="List the procedure table"
    )
    _add_common_args(parser_procedures)
    parser_procedures.add_argument(
        "--all",
        action="store_true",
        help="Also list sub-procedures"
    )
    parser_procedures.set_defaults(func=cmd_procedures)

    # ========================================================================
    # parse subcommand
    # ========================================================================
    parser_parse = subparsers.add_parser(
        "parse",
        help="Check an instruction string and print its tokens"
    )
    _add_common_args(parser_parse)
    parser_parse.add_argument(
        "instruction",
        type=str,
        help="Instruction string, e.g. ';AC(DEPVS);AP(DIAMOND1)'"
    )
    parser_parse.set_defaults(func=cmd_parse)

    # Parse arguments
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    setup_logging_from_args(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
