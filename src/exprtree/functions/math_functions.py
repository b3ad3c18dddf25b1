"""
Named functions of the standard library.

Arguments reach these functions already evaluated, so `if` chooses between
two values rather than two branches.
"""
import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal, DecimalException
from typing import Any, List

from exprtree.functions.base import AbstractFunction, AbstractNumberFunction, decimal_arithmetic, decimal_context, is_truthy
from exprtree.system.errors import EvaluationError, ParameterError

logger = logging.getLogger(__name__)


class Abs(AbstractNumberFunction):

    def __init__(self):
        super().__init__("abs", min_parameters=1, max_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return abs(args[0])


class Ceiling(AbstractNumberFunction):

    def __init__(self):
        super().__init__("ceil", "ceiling", min_parameters=1, max_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return args[0].to_integral_value(rounding=ROUND_CEILING)


class Floor(AbstractNumberFunction):

    def __init__(self):
        super().__init__("floor", min_parameters=1, max_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return args[0].to_integral_value(rounding=ROUND_FLOOR)


class Round(AbstractNumberFunction):
    """round(x[, digits]): rounds half up to the given number of decimal places (default 0)."""

    def __init__(self):
        super().__init__("round", min_parameters=1, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        value = args[0]
        digits = args[1] if len(args) > 1 else Decimal(0)
        if digits != digits.to_integral_value():
            raise ParameterError(f"Number of digits must be an integer, got {digits}", expression=name)
        try:
            with decimal_context(context):
                return value.quantize(Decimal(1).scaleb(-int(digits)), rounding=ROUND_HALF_UP)
        except DecimalException as e:
            raise EvaluationError(f"Cannot round {value} to {digits} digits", expression=name, error_details=str(e)) from e


class Max(AbstractNumberFunction):

    def __init__(self):
        super().__init__("max", min_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return max(args)


class Min(AbstractNumberFunction):

    def __init__(self):
        super().__init__("min", min_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return min(args)


class SquareRoot(AbstractNumberFunction):

    def __init__(self):
        super().__init__("sqrt", "squareroot", min_parameters=1, max_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        if args[0] < 0:
            raise ParameterError(f"Cannot take the square root of negative number {args[0]}", expression=name)
        with decimal_arithmetic(context, name):
            return args[0].sqrt()


class If(AbstractFunction):
    """if(condition, when_true, when_false)"""

    def __init__(self):
        super().__init__("if", min_parameters=3, max_parameters=3)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Any:
        condition, when_true, when_false = args
        return when_true if is_truthy(condition) else when_false


class Concat(AbstractFunction):

    def __init__(self):
        super().__init__("concat")

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> str:
        return "".join(str(arg) for arg in args)
