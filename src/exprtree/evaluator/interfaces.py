"""Interface definitions for the Evaluator component.

This module defines the interfaces that the Evaluator component implements
and the collaborator interfaces it consumes: the evaluation context that
resolves variables and functions, and the functions themselves.
"""
from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from exprtree.system.models import VariableModifier


@runtime_checkable
class ExpressionNodeLike(Protocol):
    """
    Shape of an expression tree node as seen by the Evaluator.

    Any object exposing these three attributes can be evaluated.
    """
    kind: int
    text: str
    children: Sequence["ExpressionNodeLike"]


@runtime_checkable
class Function(Protocol):
    """
    Interface for operators and functions invoked by the Evaluator.

    [Interface:Function:1.0]
    """

    def evaluate(self, context: "EvaluationContext", name: str, args: List[Any]) -> Any:
        """
        Apply the function to already evaluated arguments.

        Args:
            context: The evaluation context the call happens in
            name: The name the function was invoked under (one of its aliases)
            args: Argument values in left-to-right order

        Returns:
            The function result, returned to the caller unchanged
        """
        ...


@runtime_checkable
class EvaluationContext(Protocol):
    """
    Interface for the collaborator that resolves variables and functions.

    Lookups happen at evaluation time; implementations may change their
    bindings between (or during) evaluations.

    [Interface:EvaluationContext:1.0]
    """

    def has_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> bool:
        """Return True if `name` can be resolved under `modifier`."""
        ...

    def get_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> Any:
        """Return the value bound to `name` under `modifier`."""
        ...

    def get_function(self, name: str) -> Optional[Function]:
        """Return the function registered under `name`, or None."""
        ...


@runtime_checkable
class EvaluatorInterface(Protocol):
    """
    Interface for Evaluator component.

    [Interface:Evaluator:1.0]
    """

    def evaluate(self, node: ExpressionNodeLike) -> Any:
        """
        Evaluate an expression tree node.

        Args:
            node: Root of the tree to evaluate

        Returns:
            Evaluation result

        Raises:
            EvaluationError: If evaluation fails
        """
        ...
