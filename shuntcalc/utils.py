import enum
from dataclasses import dataclass
from typing import Optional


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass
class CalculatorError(Exception):
    errmsg: str
    pos: Optional[int] = None

    def __str__(self) -> str:
        return self.errmsg

    def render(self, code: str) -> str:
        """Message followed by an excerpt of the input with a caret under the error position"""
        if self.pos is None:
            return self.errmsg
        return "\n".join([self.errmsg, *point_at(code, self.pos)])


def point_at(code: str, idx: int, context: int = 10) -> tuple[str, str]:
    start_idx = max(0, idx - context)
    ellipsis_pre = start_idx > 0
    end_idx = min(len(code), idx + context)
    ellipsis_post = end_idx < len(code)
    excerpt = ("..." if ellipsis_pre else "") + code[start_idx:end_idx] + ("..." if ellipsis_post else "")
    # tabs and newlines would break the column alignment
    excerpt = excerpt.replace("\t", " ").replace("\n", " ")
    caret = " " * (idx - start_idx + (3 if ellipsis_pre else 0)) + "^"
    return excerpt, caret
