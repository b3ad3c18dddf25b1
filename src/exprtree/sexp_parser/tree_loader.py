"""
Loads expression trees from their S-expression notation.
Uses the 'sexpdata' library for the underlying parsing mechanism.

Notation: (KIND text child...) where KIND is a NodeKind name, matched
case-insensitively. The text is optional and must be an atom; strings keep
their inner characters verbatim, so (string "'hi'") carries the text 'hi'
with its quotes. Numeric atoms are converted with str(), so write
(number "1.50") when the exact lexeme matters.

This is an interchange format for tooling and tests, not the grammar of the
expression language itself.
"""

import logging
from typing import Any, List

from sexpdata import ExpectClosingBracket, ExpectNothing, Symbol, parse

from exprtree.system.errors import TreeSyntaxError
from exprtree.system.models import ExpressionNode, NodeKind

logger = logging.getLogger(__name__)


class TreeLoader:
    """
    Converts S-expression strings into ExpressionNode trees.
    """

    def load_string(self, tree_string: str) -> ExpressionNode:
        """
        Loads a single expression tree from a string.

        Args:
            tree_string: The string containing the S-expression.

        Returns:
            The root ExpressionNode.

        Raises:
            TreeSyntaxError: If the input has syntax errors, is empty, names an
                             unknown kind, or has content after the main expression.
            TypeError: If the input is not a string.
        """
        if not isinstance(tree_string, str):
            raise TypeError("Input must be a string.")

        stripped_string = tree_string.strip()
        if not stripped_string:
            raise TreeSyntaxError("Input string is empty or contains only whitespace.", tree_string)

        try:
            # Disable sexpdata's nil/true/false conversion so every symbol stays a symbol
            top_level = parse(stripped_string, nil=None, true=None, false=None)
        except ExpectClosingBracket as e:
            raise TreeSyntaxError("Unbalanced parentheses or brackets.", tree_string, error_details=str(e)) from e
        except ExpectNothing as e:
            raise TreeSyntaxError("Unexpected content after the main expression.", tree_string, error_details=str(e)) from e
        except ValueError as e:
            raise TreeSyntaxError(f"S-expression syntax error: {e}", tree_string, error_details=str(e)) from e
        except Exception as e:
            logger.exception(f"Unexpected error while loading expression tree: {e}")
            raise TreeSyntaxError(f"An unexpected error occurred while loading the tree: {e}", tree_string, error_details=str(e)) from e

        if len(top_level) != 1:
            raise TreeSyntaxError(
                "Unexpected content after the main expression.",
                tree_string,
                error_details=f"Expected one top-level expression, found {len(top_level)}"
            )
        parsed_expression = top_level[0]

        logger.debug(f"Raw parsed expression: {parsed_expression!r}")
        return self._to_node(parsed_expression, tree_string)

    def _to_node(self, expr: Any, tree_string: str) -> ExpressionNode:
        if not isinstance(expr, list) or not expr:
            raise TreeSyntaxError(f"Expected a (KIND text child...) list, got: {expr!r}", tree_string)

        head = expr[0]
        if not isinstance(head, Symbol):
            raise TreeSyntaxError(f"Node kind must be a symbol, got: {head!r}", tree_string)
        kind = self._kind(str(head), tree_string)

        rest = expr[1:]
        text = ""
        if rest and not isinstance(rest[0], list):
            text = self._atom_text(rest[0], tree_string)
            rest = rest[1:]

        children: List[ExpressionNode] = [self._to_node(child, tree_string) for child in rest]
        return ExpressionNode(kind=kind, text=text, children=tuple(children))

    def _kind(self, name: str, tree_string: str) -> NodeKind:
        key = name.upper().replace("-", "_")
        try:
            return NodeKind[key]
        except KeyError:
            raise TreeSyntaxError(
                f"Unknown node kind: {name}",
                tree_string,
                error_details=f"Expected one of: {', '.join(k.name.lower() for k in NodeKind)}"
            ) from None

    def _atom_text(self, atom: Any, tree_string: str) -> str:
        if isinstance(atom, Symbol):
            return str(atom)
        if isinstance(atom, bool):
            raise TreeSyntaxError(f"Unsupported atom for node text: {atom!r}", tree_string)
        if isinstance(atom, (str, int, float)):
            return str(atom)
        raise TreeSyntaxError(f"Unsupported atom for node text: {atom!r}", tree_string)
