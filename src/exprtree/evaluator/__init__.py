"""Evaluator component for expression tree processing.

This component is responsible for walking expression trees, resolving
variables and dispatching operator and function calls through the
evaluation context.
"""

from exprtree.evaluator.interfaces import EvaluationContext, EvaluatorInterface, ExpressionNodeLike, Function
from exprtree.evaluator.evaluator import Evaluator

__all__ = ["EvaluationContext", "EvaluatorInterface", "ExpressionNodeLike", "Function", "Evaluator"]
