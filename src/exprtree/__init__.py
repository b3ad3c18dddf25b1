"""exprtree: a tree-walking evaluator for a small expression language."""

from exprtree.system.errors import (
    EvaluationError,
    NumberFormatError,
    ParameterError,
    TreeSyntaxError,
    UndefinedFunctionError,
    UndefinedVariableError,
    UnknownNodeTypeError,
)
from exprtree.system.models import EvaluatorConfig, ExpressionNode, NodeKind, VariableModifier
from exprtree.evaluator import Evaluator
from exprtree.context import ExpressionContext, MapVariableResolver
from exprtree.sexp_parser import TreeLoader

__all__ = [
    "EvaluationError", "NumberFormatError", "ParameterError", "TreeSyntaxError",
    "UndefinedFunctionError", "UndefinedVariableError", "UnknownNodeTypeError",
    "EvaluatorConfig", "ExpressionNode", "NodeKind", "VariableModifier",
    "Evaluator", "ExpressionContext", "MapVariableResolver", "TreeLoader",
]
