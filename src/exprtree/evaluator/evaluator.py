"""Evaluator component implementation.

This module contains the Evaluator class, which walks an expression tree and
produces a single value. Variables and functions are resolved through the
evaluation context at the moment each node is evaluated.

Recursion depth equals tree depth and is not capped; a pathologically deep
tree surfaces as the interpreter's RecursionError.
"""
import logging
import re
from decimal import Decimal
from typing import Any, Callable, Dict, List

from exprtree.evaluator.interfaces import EvaluationContext, EvaluatorInterface, ExpressionNodeLike
from exprtree.system.errors import (
    NumberFormatError,
    UndefinedFunctionError,
    UndefinedVariableError,
    UnknownNodeTypeError,
)
from exprtree.system.models import NodeKind, VariableModifier

logger = logging.getLogger(__name__)

# Literal syntax accepted for NUMBER and HEXNUMBER nodes
DECIMAL_LITERAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
HEX_DIGITS = re.compile(r"[+-]?[0-9a-fA-F]+")
HEX_PREFIX_LENGTH = 2

QUOTE_CHARACTERS = ("'", '"')


def parse_decimal(text: str) -> Decimal:
    """Parse a base-10 literal, rejecting anything Decimal would leniently accept (NaN, blanks, underscores)."""
    if DECIMAL_LITERAL.fullmatch(text) is None:
        raise NumberFormatError(text)
    return Decimal(text)


def parse_hex(text: str) -> Decimal:
    """Parse a prefixed base-16 literal such as 0x1F into a Decimal."""
    digits = text[HEX_PREFIX_LENGTH:]
    if len(text) < HEX_PREFIX_LENGTH or HEX_DIGITS.fullmatch(digits) is None:
        raise NumberFormatError(text, radix=16)
    return Decimal(int(digits, 16))


def strip_quotes(text: str) -> str:
    """Remove one layer of matching single or double quotes; anything else is returned as-is."""
    if len(text) >= 2:
        first, last = text[0], text[-1]
        if first == last and first in QUOTE_CHARACTERS:
            return text[1:-1]
    return text


class Evaluator(EvaluatorInterface):
    """
    Evaluates expression trees against an evaluation context.

    The evaluator never mutates the tree and keeps no state between calls;
    all side effects happen inside the context or the invoked functions.
    """

    def __init__(self, context: EvaluationContext):
        """
        Initialize the Evaluator.

        Args:
            context: Resolves variables and functions by name
        """
        self.context = context
        self._handlers: Dict[NodeKind, Callable[[ExpressionNodeLike], Any]] = {
            NodeKind.ASSIGNEE: self._eval_assignee,
            NodeKind.TRUE: self._eval_true,
            NodeKind.FALSE: self._eval_false,
            NodeKind.NUMBER: self._eval_number,
            NodeKind.HEXNUMBER: self._eval_hex_number,
            NodeKind.UNARY_OPERATOR: self._eval_unary_operator,
            NodeKind.OPERATOR: self._eval_function,
            NodeKind.FUNCTION: self._eval_function,
            NodeKind.VARIABLE: self._eval_variable,
            NodeKind.PROMPTVARIABLE: self._eval_prompt_variable,
            NodeKind.STRING: self._eval_string,
        }

    def evaluate(self, node: ExpressionNodeLike) -> Any:
        """
        Evaluate a node and, recursively, its children.

        Args:
            node: Root of the tree to evaluate

        Returns:
            A Decimal, a str, or whatever a variable or function produced

        Raises:
            EvaluationError: On malformed literals, undefined names or unknown node kinds.
            Errors raised by functions propagate unchanged.
        """
        try:
            kind = NodeKind(node.kind)
        except (ValueError, TypeError):
            logger.debug(f"Unknown node kind {node.kind!r} for text '{node.text}'")
            raise UnknownNodeTypeError(node.text, node.kind) from None
        return self._handlers[kind](node)

    def _eval_assignee(self, node: ExpressionNodeLike) -> str:
        return node.text

    def _eval_true(self, node: ExpressionNodeLike) -> Decimal:
        return Decimal(1)

    def _eval_false(self, node: ExpressionNodeLike) -> Decimal:
        return Decimal(0)

    def _eval_number(self, node: ExpressionNodeLike) -> Decimal:
        value = parse_decimal(node.text)
        logger.debug(f"NUMBER: value={value}")
        return value

    def _eval_hex_number(self, node: ExpressionNodeLike) -> Decimal:
        value = parse_hex(node.text)
        logger.debug(f"HEXNUMBER: value={value}")
        return value

    def _eval_string(self, node: ExpressionNodeLike) -> str:
        return strip_quotes(node.text)

    def _evaluate_arguments(self, node: ExpressionNodeLike) -> List[Any]:
        """Evaluate child nodes strictly left to right."""
        args = []
        for child in node.children:
            args.append(self.evaluate(child))
        return args

    def _invoke(self, node: ExpressionNodeLike, unary: bool) -> Any:
        name = node.text
        logger.debug(f"{'UNARY_FUNCTION' if unary else 'FUNCTION'}: name={name} type={int(node.kind)}")

        # Arguments first: the lookup below must see bindings their evaluation created
        args = self._evaluate_arguments(node)

        function = self.context.get_function(name)
        if function is None:
            logger.debug(f"No function registered for '{name}'")
            raise UndefinedFunctionError(name, unary=unary)
        return function.evaluate(self.context, name, args)

    def _eval_unary_operator(self, node: ExpressionNodeLike) -> Any:
        return self._invoke(node, unary=True)

    def _eval_function(self, node: ExpressionNodeLike) -> Any:
        return self._invoke(node, unary=False)

    def _lookup_variable(self, name: str, modifier: VariableModifier) -> Any:
        if not self.context.has_variable(name, modifier):
            logger.debug(f"Variable '{name}' not defined (modifier={modifier.value})")
            raise UndefinedVariableError(name, modifier)
        value = self.context.get_variable(name, modifier)
        logger.debug(f"VARIABLE: name={name}, value={value}")
        return value

    def _eval_variable(self, node: ExpressionNodeLike) -> Any:
        return self._lookup_variable(node.text, VariableModifier.NONE)

    def _eval_prompt_variable(self, node: ExpressionNodeLike) -> Any:
        return self._lookup_variable(node.text, VariableModifier.PROMPT)
