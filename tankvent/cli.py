"""
Command line entry point for TANKVENT.

Usage:
  tankvent run case.yaml                   # summary table
  tankvent run case.yaml --edition 6TH     # override the API edition
  tankvent run case.json --json -o out.json
  tankvent example -o case.yaml            # write the TK-3120 reference case
"""
import argparse
import logging
import sys
from typing import List, Optional

import yaml

from tankvent import __version__
from tankvent.core.calculator import calculate
from tankvent.core.config import CalculationInput, ApiEdition, reference_case
from tankvent.core.exceptions import ConfigurationError, TankVentError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CALCULATION_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tankvent",
        description="API 2000 tank venting calculations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  tankvent example -o case.yaml
  tankvent run case.yaml
  tankvent run case.yaml --edition 5TH --json
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="calculate a YAML/JSON case file")
    run.add_argument("case", help="case file (.yaml, .yml or .json)")
    run.add_argument("--edition", choices=[e.value for e in ApiEdition], default=None,
                     help="override the API 2000 edition of the case")
    run.add_argument("--json", action="store_true",
                     help="print the full result as JSON instead of a summary")
    run.add_argument("--output", "-o", default=None,
                     help="write the full JSON result to this file")
    run.add_argument("--verbose", "-v", action="count", default=0,
                     help="-v for info, -vv for debug logging")

    example = sub.add_parser("example", help="write the TK-3120 reference case as YAML")
    example.add_argument("--output", "-o", default=None,
                         help="output file (default: stdout)")

    return parser


def _configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_summary(case: CalculationInput, summary: dict):
    print(f"{case.tank_number}" + (f" - {case.description}" if case.description else ""))
    width = max(len(k) for k in summary)
    for key, value in summary.items():
        print(f"  {key:<{width}}  {value}")


def _run(args) -> int:
    try:
        case = CalculationInput.from_file(args.case)
        if args.edition:
            case = case.copy(api_edition=ApiEdition.parse(args.edition))
        validation = case.validate_or_raise()
    except FileNotFoundError:
        print(f"Case file not found: {args.case}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ConfigurationError as e:
        for error in e.errors or [str(e)]:
            print(f"error: {error}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except (ValueError, KeyError, TypeError, yaml.YAMLError) as e:
        print(f"Could not parse {args.case}: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    for warning in validation.warnings:
        logger.warning(warning)

    try:
        result = calculate(case)
    except TankVentError as e:
        print(f"Calculation failed: {e}", file=sys.stderr)
        return EXIT_CALCULATION_ERROR

    if args.output:
        with open(args.output, "w") as f:
            f.write(result.to_json())
        logger.info(f"Result written to {args.output}")

    if args.json:
        print(result.to_json())
    else:
        _print_summary(case, result.summary_dict())
        for msg in result.warnings.messages():
            print(f"  warning: {msg}")

    return EXIT_OK


def _example(args) -> int:
    case = reference_case()
    if args.output:
        case.to_yaml(args.output)
    else:
        yaml.safe_dump(case.to_dict(), sys.stdout, default_flow_style=False, sort_keys=False)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        _configure_logging(args.verbose)
        return _run(args)
    return _example(args)


if __name__ == "__main__":
    sys.exit(main())
