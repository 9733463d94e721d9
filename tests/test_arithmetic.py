import sys

import pytest

from shuntcalc.calculator import calculate


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("2 + 3", 5.0),
        pytest.param("2+3*4", 14.0),
        pytest.param("(2+3)*4", 20.0),
        pytest.param("2^3^2", 512.0),
        pytest.param("(2^3)^2", 64.0),
        pytest.param("-2^2", 4.0),
        pytest.param("-(2^2)", -4.0),
        pytest.param("1 - 2 * 3 + 4", -1.0),
        pytest.param("1 + 2 * 3 - 4", 3.0),
        pytest.param("2 ^ 3 * 4 - 5 / 5 + 1", 32.0),
        pytest.param("10 - 2 * 3 + 4 / 2", 6.0),
        pytest.param("100 / 10 * 2 - 3 ^ 2 + 1", 12.0),
        pytest.param("2 - -3", 5.0),
        pytest.param("--3", 3.0),
        pytest.param("15 / 4", 3.75),
        pytest.param("0", 0.0),
        pytest.param("1 + (2 * (3 + (4 * (5 + 6))))", 95.0),
    ],
)
def test_calculate(code: str, expected_ret_val: float) -> None:
    assert calculate(code) == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "code, expected_message",
    [
        pytest.param("3 + (4 - 2", "Syntax Error! Parenthesis mismatch"),
        pytest.param("3 4", "Syntax Error! unexpected operand"),
        pytest.param("5 @ 3", "Input Error! Unknown input value '@'"),
        pytest.param("* 3", "Syntax Error! unexpected operator"),
        pytest.param("2 (3)", "Syntax Error! encountered left parenthesis but expected operator"),
        pytest.param("1)", "Syntax Error! Parenthesis mismatch"),
        pytest.param("1 / 0", "Evaluation Error! Division by zero"),
        pytest.param("   ", "Evaluation Error! Input has too many values"),
        pytest.param("()", "Evaluation Error! Input has too many values"),
    ],
)
def test_calculate_returns_error_message(code: str, expected_message: str) -> None:
    assert calculate(code) == expected_message


def test_empty_input() -> None:
    assert calculate("") == ""


def test_whitespace_is_insignificant() -> None:
    assert calculate("1+1") == calculate(" 1 + 1 ") == calculate("\t1\n+\t1\n") == 2


def test_repeated_calls_give_identical_results() -> None:
    for code in ["2^3^2", "1 - 2 * 3 + 4", "3 4", "5 @ 3"]:
        assert len({calculate(code) for _ in range(5)}) == 1


@pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0, reason="no int string conversion limit"
)
def test_number_literal_too_long() -> None:
    code = "9" * (sys.get_int_max_str_digits() + 1)
    assert calculate(code) == "Input Error! Number literal is too long"
