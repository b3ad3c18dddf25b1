"""
Operators of the expression language.

Each class is registered in the evaluation context under its operator
symbol. Unary plus and minus share the binary aliases and are selected by
argument count.
"""
import logging
from decimal import Decimal, DecimalException
from typing import Any, List

from exprtree.functions.base import (
    AbstractFunction,
    AbstractNumberFunction,
    decimal_arithmetic,
    decimal_context,
    from_bool,
    is_truthy,
)
from exprtree.system.errors import EvaluationError, ParameterError

logger = logging.getLogger(__name__)


# --- Arithmetic ---

class Addition(AbstractFunction):
    """`+`: sums numbers, or concatenates when any argument is a string."""

    def __init__(self):
        super().__init__("+", min_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Any:
        if any(isinstance(arg, str) for arg in args):
            return "".join(str(arg) for arg in args)
        for position, arg in enumerate(args, start=1):
            if not isinstance(arg, Decimal):
                raise ParameterError(
                    f"Illegal argument type {type(arg).__name__} at position {position}, expecting a number or string",
                    expression=name
                )
        if len(args) == 1:
            return args[0]
        with decimal_arithmetic(context, name):
            total = args[0]
            for arg in args[1:]:
                total = total + arg
        return total


class Subtraction(AbstractNumberFunction):
    """`-`: negates a single argument, otherwise subtracts left to right."""

    def __init__(self):
        super().__init__("-", min_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        with decimal_arithmetic(context, name):
            if len(args) == 1:
                return -args[0]
            result = args[0]
            for arg in args[1:]:
                result = result - arg
        return result


class Multiplication(AbstractNumberFunction):

    def __init__(self):
        super().__init__("*", min_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        with decimal_arithmetic(context, name):
            result = args[0]
            for arg in args[1:]:
                result = result * arg
        return result


class Division(AbstractNumberFunction):
    """`/`: divides left to right at the configured precision."""

    def __init__(self):
        super().__init__("/", min_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        with decimal_arithmetic(context, name):
            result = args[0]
            for arg in args[1:]:
                if arg == 0:
                    raise EvaluationError("Division by zero", expression=name)
                result = result / arg
        return result


class Modulus(AbstractNumberFunction):
    """`%`: remainder with the sign of the dividend."""

    def __init__(self):
        super().__init__("%", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        dividend, divisor = args
        if divisor == 0:
            raise EvaluationError("Division by zero", expression=name)
        with decimal_arithmetic(context, name):
            return dividend % divisor


class Power(AbstractNumberFunction):
    """`^`: raises to an integral power."""

    def __init__(self):
        super().__init__("^", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        base, exponent = args
        if exponent != exponent.to_integral_value():
            raise ParameterError(f"Exponent must be an integer, got {exponent}", expression=name)
        if base == 0 and exponent < 0:
            raise EvaluationError("Division by zero", expression=name)
        try:
            with decimal_context(context):
                return base ** int(exponent)
        except DecimalException as e:
            raise EvaluationError(f"Cannot compute {base} ^ {exponent}", expression=name, error_details=str(e)) from e


# --- Comparison ---

class Equal(AbstractFunction):
    """`==`: numbers compare by value regardless of scale, anything else by equality."""

    def __init__(self):
        super().__init__("==", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(args[0] == args[1])


class NotEqual(AbstractFunction):

    def __init__(self):
        super().__init__("!=", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(args[0] != args[1])


class Greater(AbstractNumberFunction):

    def __init__(self):
        super().__init__(">", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(args[0] > args[1])


class GreaterOrEqual(AbstractNumberFunction):

    def __init__(self):
        super().__init__(">=", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(args[0] >= args[1])


class Lesser(AbstractNumberFunction):

    def __init__(self):
        super().__init__("<", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(args[0] < args[1])


class LesserOrEqual(AbstractNumberFunction):

    def __init__(self):
        super().__init__("<=", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(args[0] <= args[1])


# --- Logical ---

class And(AbstractFunction):

    def __init__(self):
        super().__init__("&&", min_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(all(is_truthy(arg) for arg in args))


class Or(AbstractFunction):

    def __init__(self):
        super().__init__("||", min_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(any(is_truthy(arg) for arg in args))


class Not(AbstractFunction):

    def __init__(self):
        super().__init__("!", min_parameters=1, max_parameters=1)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Decimal:
        return from_bool(not is_truthy(args[0]))


# --- Assignment ---

class Assignment(AbstractFunction):
    """`=`: binds the value to the assignee name in the context and returns the value."""

    def __init__(self):
        super().__init__("=", min_parameters=2, max_parameters=2)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Any:
        target, value = args
        if not isinstance(target, str):
            raise ParameterError(
                f"Assignment target must be a variable name, got {type(target).__name__}",
                expression=name
            )
        logger.debug(f"Assigning {value!r} to '{target}'")
        context.set_variable(target, value)
        return value
