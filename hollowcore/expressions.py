"""
Restricted arithmetic evaluator for numeric input fields.

Lets a user type quick arithmetic such as "24+4" or "100*1.2" into a span or
load field. Evaluation is strictly left to right with no operator
precedence: "2+3*4" is 20. Parentheses are accepted by the character check
but never form a valid operand, so any expression containing one is
rejected.

The evaluator sits on a user-input boundary and never raises; every failure
returns NaN.
"""

import math
import re
from typing import Any, Union

NAN = math.nan

_ALLOWED = re.compile(r"[0-9+\-*/().]*")
_TOKEN = re.compile(r"([0-9]+\.?[0-9]*)|([+\-*/()])")
_WHITESPACE = re.compile(r"\s+")


def _tokenize(expr: str) -> list[Union[float, str]]:
    """
    Scan numeric literals and single-character operators left to right.

    Characters that fit neither (a lone '.') are skipped by the scan.
    """
    tokens: list[Union[float, str]] = []
    for match in _TOKEN.finditer(expr):
        number, operator = match.groups()
        tokens.append(float(number) if number is not None else operator)
    return tokens


def _apply(result: float, operator: str, operand: float) -> float:
    if operator == "+":
        return result + operand
    if operator == "-":
        return result - operand
    if operator == "*":
        return result * operand
    if operator == "/":
        if operand == 0:
            # IEEE division: x/0 is +-inf, 0/0 is nan; both are rejected later
            return NAN if result == 0 or math.isnan(result) else math.copysign(math.inf, result)
        return result / operand
    return NAN


def evaluate_expression(text: Any) -> float:
    """
    Evaluate a restricted arithmetic expression.

    Args:
        text: Expression typed by the user

    Returns:
        The finite result, or NaN if the input is not a string, is blank,
        contains characters other than digits, '.', '+', '-', '*', '/', '(' and
        ')', is malformed, or evaluates to a non-finite number.

    Examples:
        >>> evaluate_expression("24+4")
        28.0
        >>> evaluate_expression("2+3*4")
        20.0
    """
    if not isinstance(text, str):
        return NAN
    expr = text.strip()
    if not expr:
        return NAN

    clean = _WHITESPACE.sub("", expr)
    if not _ALLOWED.fullmatch(clean):
        return NAN

    tokens = _tokenize(clean)
    if not tokens:
        return NAN

    result = tokens[0]
    if not isinstance(result, float):
        return NAN

    for i in range(1, len(tokens), 2):
        operator = tokens[i]
        operand = tokens[i + 1] if i + 1 < len(tokens) else None
        if not isinstance(operand, float) or not isinstance(operator, str):
            return NAN
        result = _apply(result, operator, operand)

    return result if math.isfinite(result) else NAN


def is_valid_number(value: Any) -> bool:
    """Whether an evaluated value can be passed to the selector."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def format_number(value: float) -> Union[int, float]:
    """
    Echo form of an accepted value: integral values without decimals,
    anything else rounded to 2 decimals.
    """
    if float(value).is_integer():
        return int(value)
    return round(value, 2)
