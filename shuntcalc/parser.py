import logging
from dataclasses import dataclass
from typing import Iterable, Union

from shuntcalc.operators import BINARY_OPERATORS, UNARY_MINUS, OperatorDefinition
from shuntcalc.tokenizer import Token, TokenType
from shuntcalc.utils import CalculatorError

logger = logging.getLogger(__name__)


class ParserError(CalculatorError):
    pass


@dataclass(frozen=True)
class Operand:
    value: int
    token: Token

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ResolvedOperator:
    definition: OperatorDefinition
    token: Token

    def __str__(self) -> str:
        return str(self.definition)


PostfixItem = Union[Operand, ResolvedOperator]
StackItem = Union[ResolvedOperator, Token]  # tokens on the stack are always left parens


def parse(tokens: Iterable[Token]) -> list[PostfixItem]:
    """Shunting-yard conversion of an infix token stream into postfix order.

    Operator symbols are resolved here: a minus where an operand is expected becomes
    unary negation, every other operator is looked up in the binary table.
    """
    expect_operator = False
    output: list[PostfixItem] = []
    stack: list[StackItem] = []

    for token in tokens:
        if token.type is TokenType.OPERAND:
            if expect_operator:
                raise ParserError("Syntax Error! unexpected operand", pos=token.pos)
            output.append(Operand(value=token.value, token=token))  # type: ignore
            expect_operator = True

        elif token.type is TokenType.OPERATOR:
            current = ResolvedOperator(definition=_resolve_operator(token, expect_operator), token=token)
            while stack:
                last = stack[-1]
                if not isinstance(last, ResolvedOperator) or not last.definition.binds_before(current.definition):
                    break
                output.append(stack.pop())
            stack.append(current)
            expect_operator = False

        elif token.type is TokenType.LEFT_PAREN:
            if expect_operator:
                raise ParserError(
                    "Syntax Error! encountered left parenthesis but expected operator",
                    pos=token.pos,
                )
            stack.append(token)
            expect_operator = False

        elif token.type is TokenType.RIGHT_PAREN:
            while stack and isinstance(stack[-1], ResolvedOperator):
                output.append(stack.pop())  # type: ignore
            if not stack:
                raise ParserError("Syntax Error! Parenthesis mismatch", pos=token.pos)
            stack.pop()  # matching left paren
            expect_operator = True

        else:
            raise ParserError(f"Syntax Error! Unknown token type '{token.type}'", pos=token.pos)

    unmatched = [item for item in stack if isinstance(item, Token)]
    if unmatched:
        raise ParserError("Syntax Error! Parenthesis mismatch", pos=unmatched[-1].pos)

    while stack:
        output.append(stack.pop())  # type: ignore

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Postfix: %s", format_postfix(output))
    return output


def _resolve_operator(token: Token, expect_operator: bool) -> OperatorDefinition:
    if expect_operator:
        return BINARY_OPERATORS[token.lexeme]
    if token.lexeme == "-":
        return UNARY_MINUS
    raise ParserError("Syntax Error! unexpected operator", pos=token.pos)


def format_postfix(items: Iterable[PostfixItem]) -> str:
    return " ".join(str(item) for item in items)
