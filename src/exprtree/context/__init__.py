"""Evaluation context: function registry and variable storage."""

from exprtree.context.variable_resolver import MapVariableResolver, PromptHandler, VariableResolver
from exprtree.context.expression_context import ExpressionContext

__all__ = ["ExpressionContext", "MapVariableResolver", "PromptHandler", "VariableResolver"]
