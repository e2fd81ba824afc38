"""Command-line interface for exactnum.

Usage:
    exactnum calc 1.5E3 add 0.25          # 1500.25
    exactnum format 1234567.891 --decimals 2   # 1,234,567.89
    exactnum human 1500000 --decimals 1   # 1.5 M
    exactnum ln 2.71828182845904523536
    exactnum --scale 30 log 8 2

Exit codes:
    0 - Success
    1 - Invalid input or arithmetic error (message printed)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

import structlog

from exactnum.config import NumberConfig
from exactnum.errors import NumberError
from exactnum.number import Number

logger = structlog.get_logger()

OPERATIONS: dict[str, Callable[[Number, str], Number]] = {
    "add": Number.add,
    "sub": Number.sub,
    "mul": Number.mul,
    "div": Number.div,
    "mod": Number.mod,
    "pow": Number.pow,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exactnum",
        description="Exact fixed-scale decimal arithmetic and formatting",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=None,
        help="Internal scale in fractional digits (default: $EXACTNUM_SCALE or 20)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="ln() series terms (default: $EXACTNUM_LN_ITERATIONS or 100)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="Apply a binary operation")
    calc.add_argument("value")
    calc.add_argument("operation", choices=sorted(OPERATIONS))
    calc.add_argument("operand")

    fmt = commands.add_parser("format", help="Round and group by thousands")
    fmt.add_argument("value")
    fmt.add_argument("--decimals", type=int, default=0)

    rnd = commands.add_parser("round", help="Round half away from zero")
    rnd.add_argument("value")
    rnd.add_argument("--precision", type=int, default=0)

    human = commands.add_parser("human", help="Scale to K/M/G/T/P/E units")
    human.add_argument("value")
    human.add_argument("--decimals", type=int, default=0)

    ln = commands.add_parser("ln", help="Natural logarithm")
    ln.add_argument("value")

    log = commands.add_parser("log", help="Logarithm to a base")
    log.add_argument("value")
    log.add_argument("base")

    return parser


def configure_logging(verbose: bool) -> None:
    """Route structlog output to stderr at INFO, or DEBUG when verbose."""
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the text to print."""
    config = NumberConfig.from_env()
    if args.scale is not None:
        config = config.replace(scale=args.scale)
    if args.iterations is not None:
        config = config.replace(ln_iterations=args.iterations)

    value = Number(args.value, config)

    if args.command == "calc":
        return OPERATIONS[args.operation](value, args.operand).to_string()
    if args.command == "format":
        return value.format(args.decimals)
    if args.command == "round":
        return value.round(args.precision).to_string()
    if args.command == "human":
        return value.human_format(args.decimals)
    if args.command == "ln":
        return value.ln().to_string()
    if args.command == "log":
        return value.log(args.base).to_string()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        output = run(args)
    except (NumberError, ValueError) as err:
        logger.debug("command_failed", command=args.command, error=str(err))
        print(f"Error: {err}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
