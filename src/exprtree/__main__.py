import argparse
import sys

from .runtime.core import RuntimeContext
from .runtime.interpreter import run_for_cli
from .writer import IndentingWriter, set_debug


def main(argv: list[str] | None = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog="exprtree",
        description="Read one arithmetic expression from stdin, print its tree and value.",
    )
    arg_parser.add_argument("--debug", action="store_true", help="trace tokens and reductions")
    arg_parser.add_argument(
        "--strict",
        action="store_true",
        help="reject unmatched closing parentheses",
    )
    args = arg_parser.parse_args(argv)

    if args.debug:
        set_debug(True)

    context = RuntimeContext(writer=IndentingWriter(), strict=args.strict)
    evaluation = run_for_cli(sys.stdin.readline(), context)
    return 0 if evaluation is not None else 1


if __name__ == "__main__":
    sys.exit(main())
