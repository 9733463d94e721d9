import argparse
import logging
import sys
from typing import Optional

from shuntcalc.evaluator import evaluate
from shuntcalc.parser import format_postfix, parse
from shuntcalc.tokenizer import tokenize
from shuntcalc.utils import CalculatorError

logger = logging.getLogger("repl")


def run(code: str, show_postfix: bool) -> bool:
    try:
        postfix = parse(tokenize(code))
        if show_postfix:
            print(f"postfix: {format_postfix(postfix)}")
        result = evaluate(postfix)
    except CalculatorError as e:
        print(e.render(code))
        return False
    print(result)
    return True


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions with + - * / ^ and parentheses")
    parser.add_argument("expressions", nargs="*", help="expressions to evaluate; starts a REPL if none are given")
    parser.add_argument("--show-postfix", action="store_true", help="print the postfix form of each expression")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.expressions:
        ok = [run(code, args.show_postfix) for code in args.expressions if code.strip()]
        return 0 if all(ok) else 1

    logger.info("Starting REPL")
    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if not code.strip():
            continue
        run(code, args.show_postfix)


if __name__ == "__main__":
    sys.exit(main())
