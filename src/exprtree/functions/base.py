"""
Base classes shared by the operator and function library.

AbstractFunction validates argument counts before delegating to
`child_evaluate`; AbstractNumberFunction additionally requires every
argument to be a Decimal.
"""
import logging
from contextlib import contextmanager
from decimal import Decimal, DecimalException, getcontext, localcontext
from typing import Any, Iterator, List, Tuple

from exprtree.system.errors import EvaluationError, ParameterError
from exprtree.system.models import EvaluatorConfig

logger = logging.getLogger(__name__)

UNLIMITED_PARAMETERS = -1


def is_truthy(value: Any) -> bool:
    """Non-zero decimals and non-empty strings are true."""
    if isinstance(value, Decimal):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return bool(value)


def from_bool(flag: bool) -> Decimal:
    return Decimal(1) if flag else Decimal(0)


def precision_of(context: Any) -> int:
    """Precision for inexact operations, taken from the context's config when it has one."""
    config = getattr(context, "config", None)
    if not isinstance(config, EvaluatorConfig):
        config = EvaluatorConfig()
    return config.decimal_precision


def decimal_context(context: Any):
    """A decimal.localcontext() configured with the evaluation context's precision."""
    ctx = getcontext().copy()
    ctx.prec = precision_of(context)
    return localcontext(ctx)


@contextmanager
def decimal_arithmetic(context: Any, name: str) -> Iterator[None]:
    """
    Runs Decimal arithmetic under decimal_context, reporting trapped signals
    (overflow, invalid operation) as an EvaluationError for the named function.
    """
    try:
        with decimal_context(context):
            yield
    except DecimalException as e:
        logger.debug(f"Decimal signal in '{name}': {e!r}")
        raise EvaluationError(f"Arithmetic error in '{name}'", expression=name, error_details=repr(e)) from e


class AbstractFunction:
    """
    Base class for library functions.

    Subclasses pass their aliases and arity bounds to __init__ and implement
    `child_evaluate`. A maximum of UNLIMITED_PARAMETERS means no upper bound.
    """

    def __init__(self, *aliases: str, min_parameters: int = 0, max_parameters: int = UNLIMITED_PARAMETERS):
        self.aliases: Tuple[str, ...] = aliases
        self.min_parameters = min_parameters
        self.max_parameters = max_parameters

    def check_parameters(self, name: str, args: List[Any]) -> None:
        """
        Validates the argument count.

        Raises:
            ParameterError: If there are too few or too many arguments.
        """
        count = len(args)
        if count < self.min_parameters:
            raise ParameterError(
                f"Invalid number of parameters {count}, expected at least {self.min_parameters}",
                expression=name
            )
        if self.max_parameters != UNLIMITED_PARAMETERS and count > self.max_parameters:
            raise ParameterError(
                f"Invalid number of parameters {count}, expected at most {self.max_parameters}",
                expression=name
            )

    def evaluate(self, context: Any, name: str, args: List[Any]) -> Any:
        self.check_parameters(name, args)
        return self.child_evaluate(context, name, args)

    def child_evaluate(self, context: Any, name: str, args: List[Any]) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(aliases={list(self.aliases)})"


class AbstractNumberFunction(AbstractFunction):
    """Base class for functions that only accept Decimal arguments."""

    def check_parameters(self, name: str, args: List[Any]) -> None:
        super().check_parameters(name, args)
        for position, arg in enumerate(args, start=1):
            if not isinstance(arg, Decimal):
                raise ParameterError(
                    f"Illegal argument type {type(arg).__name__} at position {position}, expecting a number",
                    expression=name
                )
