"""Standard operator and function library."""

from typing import List

from exprtree.functions.base import AbstractFunction, AbstractNumberFunction, UNLIMITED_PARAMETERS, is_truthy
from exprtree.functions.operators import (
    Addition, Subtraction, Multiplication, Division, Modulus, Power,
    Equal, NotEqual, Greater, GreaterOrEqual, Lesser, LesserOrEqual,
    And, Or, Not, Assignment,
)
from exprtree.functions.math_functions import Abs, Ceiling, Floor, Round, Max, Min, SquareRoot, If, Concat

STANDARD_FUNCTION_CLASSES = [
    Addition, Subtraction, Multiplication, Division, Modulus, Power,
    Equal, NotEqual, Greater, GreaterOrEqual, Lesser, LesserOrEqual,
    And, Or, Not, Assignment,
    Abs, Ceiling, Floor, Round, Max, Min, SquareRoot, If, Concat,
]


def standard_functions() -> List[AbstractFunction]:
    """Returns fresh instances of every standard library function."""
    return [cls() for cls in STANDARD_FUNCTION_CLASSES]


__all__ = [
    "AbstractFunction", "AbstractNumberFunction", "UNLIMITED_PARAMETERS", "is_truthy",
    "STANDARD_FUNCTION_CLASSES", "standard_functions",
] + [cls.__name__ for cls in STANDARD_FUNCTION_CLASSES]
