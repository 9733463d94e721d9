import enum
import operator
from dataclasses import dataclass
from typing import Callable

from shuntcalc.utils import PrintableEnum


class Associativity(PrintableEnum):
    LEFT = enum.auto()
    RIGHT = enum.auto()


OperatorImpl = Callable[..., float]


@dataclass(frozen=True)
class OperatorDefinition:
    symbol: str
    precedence: int
    associativity: Associativity
    arity: int
    fn: OperatorImpl

    @property
    def is_left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT

    def binds_before(self, incoming: "OperatorDefinition") -> bool:
        """Whether this operator, already on the stack, must be applied before ``incoming``"""
        if incoming.is_left_associative:
            return incoming.precedence <= self.precedence
        else:
            return incoming.precedence < self.precedence

    def __str__(self) -> str:
        return self.symbol


def _power(base: float, exponent: float) -> float:
    result = base**exponent
    if isinstance(result, complex):
        raise ValueError(f"{base} ^ {exponent} has no real value")
    return result


BINARY_OPERATORS: dict[str, OperatorDefinition] = {
    "+": OperatorDefinition("+", precedence=1, associativity=Associativity.LEFT, arity=2, fn=operator.add),
    "-": OperatorDefinition("-", precedence=1, associativity=Associativity.LEFT, arity=2, fn=operator.sub),
    "*": OperatorDefinition("*", precedence=2, associativity=Associativity.LEFT, arity=2, fn=operator.mul),
    "/": OperatorDefinition("/", precedence=2, associativity=Associativity.LEFT, arity=2, fn=operator.truediv),
    "^": OperatorDefinition("^", precedence=3, associativity=Associativity.RIGHT, arity=2, fn=_power),
}

# binds tighter than "^": -2^2 is (-2)^2
UNARY_MINUS = OperatorDefinition("neg", precedence=4, associativity=Associativity.RIGHT, arity=1, fn=operator.neg)
