from shuntcalc.evaluator import evaluate
from shuntcalc.parser import format_postfix, parse
from shuntcalc.tokenizer import tokenize
from shuntcalc.utils import CalculatorError

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "7/6/2000",
    "5^2",
    "2^3^2",
    "-2^2",
    "1 - 2 * 3 + 4",
    "10 / 5/ 2",
    "(1 + 14 * (54^2))",
    "3 + (4 - 2",
    "80225/+2",
    "5 @ 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = list(tokenize(code))
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        postfix = parse(tokens)
        print(f"postfix: {format_postfix(postfix)}")
        print(f"result: {evaluate(postfix)}")
    except CalculatorError as e:
        print(e.render(code))
