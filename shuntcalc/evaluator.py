import logging
from typing import Iterable

from shuntcalc.parser import Operand, PostfixItem, ResolvedOperator
from shuntcalc.utils import CalculatorError

logger = logging.getLogger(__name__)


class EvaluationError(CalculatorError):
    pass


def evaluate(postfix: Iterable[PostfixItem]) -> float:
    stack: list[float] = []
    for item in postfix:
        if isinstance(item, Operand):
            try:
                stack.append(float(item.value))
            except OverflowError:
                raise EvaluationError("Evaluation Error! Numerical result out of range", pos=item.token.pos) from None
        elif isinstance(item, ResolvedOperator):
            stack.append(apply_operator(item, stack))
        else:
            raise EvaluationError(f"Evaluation Error! Unexpected item in postfix sequence: {item!r}")

    if len(stack) != 1:
        raise EvaluationError("Evaluation Error! Input has too many values")

    result = stack.pop()
    logger.debug("Result: %s", result)
    return result


def apply_operator(item: ResolvedOperator, stack: list[float]) -> float:
    """Pops the operator's operands off ``stack`` and applies it to them.

    The value nearest the top of the stack becomes the last argument, so for ``a b -``
    the call is ``sub(a, b)``.
    """
    definition = item.definition
    if len(stack) < definition.arity:
        raise EvaluationError(f"Evaluation Error! Not enough operands for '{item.token.lexeme}'", pos=item.token.pos)

    args = [0.0] * definition.arity
    for i in reversed(range(definition.arity)):
        args[i] = stack.pop()

    try:
        return definition.fn(*args)
    except ZeroDivisionError:
        raise EvaluationError("Evaluation Error! Division by zero", pos=item.token.pos) from None
    except OverflowError:
        raise EvaluationError("Evaluation Error! Numerical result out of range", pos=item.token.pos) from None
    except ValueError:
        raise EvaluationError("Evaluation Error! Result is not a real number", pos=item.token.pos) from None
