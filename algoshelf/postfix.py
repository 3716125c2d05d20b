"""Evaluation of postfix expressions whose operands are single letters."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence

OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": math.pow,
}

Values = Mapping[str, float] | Iterable[float]


def _operand_values(expression: str, values: Values) -> list[float]:
    letters = [char for char in expression if char.isalpha()]
    if isinstance(values, Mapping):
        try:
            return [float(values[letter]) for letter in letters]
        except KeyError as error:
            raise ValueError(f"no value given for operand {error.args[0]!r}") from None
    numbers = [float(value) for value in values]
    if len(numbers) != len(letters):
        raise ValueError(
            f"expression has {len(letters)} operands but {len(numbers)} values were given"
        )
    return numbers


def evaluate_postfix(expression: str, values: Values) -> float:
    """Value of a postfix ``expression`` such as ``"abc*+"``.

    Letters are operands. ``values`` either maps each letter to its number
    or lists one number per letter occurrence, left to right. Operators are
    ``+ - * / ^``.
    """
    if not expression:
        raise ValueError("expression is empty")
    operands = iter(_operand_values(expression, values))
    stack: list[float] = []
    for char in expression:
        if char.isalpha():
            stack.append(next(operands))
        elif char in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATORS[char](left, right))
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    if not stack:
        raise ValueError("expression has no operands")
    return stack[-1]


def format_postfix(expression: str, values: Values) -> str:
    """The expression with each letter replaced by its value, tokens space-separated."""
    operands = iter(_operand_values(expression, values))
    return " ".join(
        f"{next(operands):g}" if char.isalpha() else char for char in expression
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read an expression and its operand values, then print the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        expression = args[0]
    else:
        words = input("Enter Postfix Expression with out any blank spaces:").split()
        expression = words[0] if words else ""
    try:
        numbers = [
            float(input(f"Enter values of{char}:"))
            for char in expression
            if char.isalpha()
        ]
        result = evaluate_postfix(expression, numbers)
    except (ValueError, ZeroDivisionError, OverflowError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"The given postfix expression is:{format_postfix(expression, numbers)} ")
    print(f"The result of evaluated postfix expression is:{result:g}")
    return 0