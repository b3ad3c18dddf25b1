"""
System-wide custom error types.

Every failure raised while evaluating an expression tree is an
EvaluationError (or a subclass), so callers can catch a single type.
Errors raised by function implementations are propagated unchanged.
"""
from typing import Any, Optional


class EvaluationError(Exception):
    """
    Raised when an expression tree cannot be evaluated.
    Indicates malformed literals, unresolvable references, unknown node kinds,
    or bad arguments passed to a library function.
    """
    def __init__(self, message: str, expression: str = "", error_details: str = ""):
        """
        Initializes the EvaluationError.

        Args:
            message: A high-level error message describing the evaluation failure.
            expression: The node text being evaluated when the error occurred.
            error_details: Specific details about the error (e.g., from underlying exceptions).
        """
        full_message = f"{message}"
        if expression:
            full_message += f"\nExpression: '{expression}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.message = message
        self.expression = expression
        self.error_details = error_details


class NumberFormatError(EvaluationError, ValueError):
    """Raised when a decimal or hexadecimal literal cannot be parsed."""
    def __init__(self, text: str, radix: int = 10):
        kind = "hexadecimal" if radix == 16 else "decimal"
        super().__init__(f"Invalid {kind} number: {text}")
        self.text = text
        self.radix = radix


class UndefinedFunctionError(EvaluationError):
    """Raised when an operator or function name has no registered implementation."""
    def __init__(self, name: str, unary: bool = False):
        prefix = "Undefined unary function" if unary else "Undefined function"
        super().__init__(f"{prefix}: {name}")
        self.name = name
        self.unary = unary


class UndefinedVariableError(EvaluationError):
    """Raised when a variable is not resolvable under the requested modifier."""
    def __init__(self, name: str, modifier: Optional[Any] = None):
        super().__init__(f"Undefined variable: {name}")
        self.name = name
        self.modifier = modifier


class UnknownNodeTypeError(EvaluationError):
    """
    Raised for a node kind outside the recognized set.
    This signals a defect in whatever produced the tree, not in user input.
    """
    def __init__(self, text: str, kind: Any):
        super().__init__(f"Unknown node type: name={text}, type={kind}")
        self.text = text
        self.kind = kind


class ParameterError(EvaluationError):
    """Raised by library functions when the argument count or types are wrong."""
    pass


class TreeSyntaxError(ValueError):
    """
    Raised when the S-expression form of an expression tree cannot be loaded.
    Inherits from ValueError for general compatibility but provides specific context.
    """
    def __init__(self, message: str, tree_string: str, error_details: str = ""):
        """
        Initializes the TreeSyntaxError.

        Args:
            message: A high-level error message.
            tree_string: The original S-expression string that caused the error.
            error_details: Specific details from the underlying parser, if available.
        """
        full_message = f"{message}\nInput: '{tree_string}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.tree_string = tree_string
        self.error_details = error_details
