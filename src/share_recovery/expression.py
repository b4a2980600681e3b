# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Evaluator for the compact share value expressions.

A raw share value is one of three forms:

``Literal``
    A signed decimal integer, returned unchanged.

``Call``
    ``name(a1, ..., am)`` where ``name`` is one of :class:`Function`. Each
    operand is an integer literal or the variable token ``x``.

``RawSubstitution``
    Anything else that contains ``x``. Every ``x`` is replaced with the
    decimal value of the bound variable and the result must then read as a
    literal. This is a narrow fallback, not a polynomial evaluator.

Only one call is allowed per expression; nested calls are rejected. Error
messages describe the failure without echoing the expression.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from functools import reduce
from typing import Sequence, Union

from .config import DEFAULT_MAX_EXPONENT
from .digits import unlimited_int_digits
from .errors import MalformedExpression

VARIABLE = "x"

_LITERAL = re.compile(r"[+-]?\d+")


class Function(enum.Enum):
    MULTIPLY = "multiply"
    ADD = "add"
    SUBTRACT = "subtract"
    GCD = "gcd"
    LCM = "lcm"
    POWER = "power"


_FUNCTIONS = {f.value: f for f in Function}


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class Call:
    function: Function
    operands: tuple[str, ...]


@dataclass(frozen=True)
class RawSubstitution:
    template: str


Expression = Union[Literal, Call, RawSubstitution]


def _parse_literal(text: str, what: str) -> int:
    if not _LITERAL.fullmatch(text):
        raise MalformedExpression(f"{what} is not an integer literal")
    return int(text)


def parse(expression: str) -> Expression:
    """Classify ``expression`` into one of the supported forms."""

    text = expression.strip()
    if not text:
        raise MalformedExpression("empty expression")
    if _LITERAL.fullmatch(text):
        return Literal(int(text))

    if "(" in text:
        open_at = text.index("(")
        name = text[:open_at].strip()
        function = _FUNCTIONS.get(name)
        if function is None:
            raise MalformedExpression("unknown function name")
        if not text.endswith(")"):
            raise MalformedExpression("unbalanced parentheses")
        body = text[open_at + 1 : -1]
        if "(" in body or ")" in body:
            raise MalformedExpression("nested function calls are not supported")
        if not body.strip():
            return Call(function, ())
        return Call(function, tuple(part.strip() for part in body.split(",")))

    if ")" in text:
        raise MalformedExpression("unbalanced parentheses")
    if VARIABLE in text:
        return RawSubstitution(text)
    raise MalformedExpression("not an integer literal or function call")


def _operand_values(operands: Sequence[str], x: int) -> list[int]:
    values = []
    for position, operand in enumerate(operands, start=1):
        if not operand:
            raise MalformedExpression(f"operand {position} is empty")
        if operand == VARIABLE:
            operand = str(x)
        values.append(_parse_literal(operand, f"operand {position}"))
    return values


def _lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def _require_operands(function: Function, values: Sequence[int]) -> None:
    if not values:
        raise MalformedExpression(f"{function.value} needs at least one operand")


def _apply(function: Function, values: list[int], max_exponent: int) -> int:
    if function is Function.MULTIPLY:
        return reduce(lambda acc, v: acc * v, values, 1)
    if function is Function.ADD:
        return sum(values)
    if function is Function.SUBTRACT:
        _require_operands(function, values)
        return reduce(lambda acc, v: acc - v, values[1:], values[0])
    if function is Function.GCD:
        _require_operands(function, values)
        return reduce(math.gcd, values[1:], abs(values[0]))
    if function is Function.LCM:
        _require_operands(function, values)
        return reduce(_lcm, values[1:], abs(values[0]))
    # Function.POWER
    if len(values) != 2:
        raise MalformedExpression("power takes exactly two operands")
    base, exponent = values
    if exponent < 0:
        raise MalformedExpression("power exponent must be non-negative")
    if exponent > max_exponent:
        raise MalformedExpression("power exponent is too large")
    return base**exponent


def evaluate_parsed(node: Expression, x: int, *, max_exponent: int | None = None) -> int:
    if max_exponent is None:
        max_exponent = DEFAULT_MAX_EXPONENT
    if isinstance(node, Literal):
        return node.value
    with unlimited_int_digits():
        if isinstance(node, Call):
            return _apply(node.function, _operand_values(node.operands, x), max_exponent)
        substituted = node.template.replace(VARIABLE, str(x))
        return _parse_literal(substituted, "substituted value")


def evaluate(expression: str, x: int, *, max_exponent: int | None = None) -> int:
    """Evaluate ``expression`` with the variable token bound to ``x``.

    Raises :class:`MalformedExpression` when the text is not one of the
    supported forms or an operand cannot be read as an integer.
    """

    with unlimited_int_digits():
        return evaluate_parsed(parse(expression), x, max_exponent=max_exponent)


__all__ = [
    "Function",
    "Literal",
    "Call",
    "RawSubstitution",
    "Expression",
    "parse",
    "evaluate",
    "evaluate_parsed",
]
