import logging
from typing import Union

from shuntcalc.evaluator import evaluate
from shuntcalc.parser import parse
from shuntcalc.tokenizer import tokenize
from shuntcalc.utils import CalculatorError

logger = logging.getLogger(__name__)


def calculate(code: str) -> Union[float, str]:
    """Evaluate an arithmetic expression.

    Returns the numeric result, ``""`` for empty input, or the error message if the
    input could not be tokenized, parsed or evaluated.
    """
    if code == "":
        return ""

    try:
        return evaluate(parse(tokenize(code)))
    except CalculatorError as e:
        logger.debug("Failed to calculate %r: %s", code, e)
        return str(e)
