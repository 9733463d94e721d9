import enum
from dataclasses import dataclass
from typing import Iterator, Optional

from shuntcalc.utils import CalculatorError, PrintableEnum


class InputError(CalculatorError):
    pass


class TokenType(PrintableEnum):
    OPERAND = enum.auto()
    OPERATOR = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    pos: int
    value: Optional[int] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


OPERATOR_SYMBOLS = frozenset("+-*/^")
WHITESPACE = frozenset(" \t\n")
DIGITS = frozenset("0123456789")

PAREN_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}


def tokenize(code: str) -> Iterator[Token]:
    """Lazily split the input into tokens, left to right.

    Operators are emitted with their raw symbol; deciding between binary and unary
    minus is left to the parser.
    """
    i = 0
    while i < len(code):
        char = code[i]
        if char in WHITESPACE:
            i += 1
        elif char in DIGITS:
            number_end_idx = i + 1
            while number_end_idx < len(code) and code[number_end_idx] in DIGITS:
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            try:
                value = int(lexeme)
            except ValueError:
                # int() refuses literals beyond sys.get_int_max_str_digits()
                raise InputError("Input Error! Number literal is too long", pos=i) from None
            yield Token(type=TokenType.OPERAND, lexeme=lexeme, pos=i, value=value)
            i = number_end_idx
        elif char in OPERATOR_SYMBOLS:
            yield Token(type=TokenType.OPERATOR, lexeme=char, pos=i)
            i += 1
        elif char in PAREN_TOKENS:
            yield Token(type=PAREN_TOKENS[char], lexeme=char, pos=i)
            i += 1
        else:
            raise InputError(f"Input Error! Unknown input value '{char}'", pos=i)
