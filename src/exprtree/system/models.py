"""
System-wide Pydantic models and enumerations for expression trees.
"""

import logging
from enum import Enum, IntEnum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

logger = logging.getLogger(__name__)


# --- Node Kinds ---

class NodeKind(IntEnum):
    """
    Discrete tag identifying what an expression tree node represents.
    Integer values are what appears in structural error messages.
    """
    ASSIGNEE = 1
    TRUE = 2
    FALSE = 3
    NUMBER = 4
    HEXNUMBER = 5
    UNARY_OPERATOR = 6
    OPERATOR = 7
    FUNCTION = 8
    VARIABLE = 9
    PROMPTVARIABLE = 10
    STRING = 11


class VariableModifier(str, Enum):
    """Access modifier threaded into every variable lookup."""
    NONE = "none"
    PROMPT = "prompt"


# --- Expression Tree ---

class ExpressionNode(BaseModel):
    """
    Immutable node of an expression tree.

    Only `kind`, `text` and `children` are read by the evaluator. `kind` is a
    plain int so that trees carrying kinds outside NodeKind can still be
    represented (the evaluator rejects them).
    """
    model_config = ConfigDict(frozen=True)

    kind: int = Field(description="NodeKind value of this node.")
    text: str = Field("", description="Lexeme backing the node: identifier, literal or operator name.")
    children: Tuple["ExpressionNode", ...] = Field(default_factory=tuple, description="Ordered argument nodes.")

    def __str__(self) -> str:
        try:
            kind_name = NodeKind(self.kind).name
        except ValueError:
            kind_name = str(self.kind)
        if not self.children:
            return f"{kind_name}({self.text})"
        return f"{kind_name}({self.text}; {', '.join(str(c) for c in self.children)})"


ExpressionNode.model_rebuild()


# --- Configuration ---

class EvaluatorConfig(BaseModel):
    """
    Tunables shared by the evaluation context and the function library.
    [Type:System:EvaluatorConfig:1.0]
    """
    decimal_precision: PositiveInt = Field(34, description="Significant digits for inexact decimal operations (division, sqrt).")
    cache_prompted_variables: bool = Field(True, description="Store values answered by the prompt handler so they are asked once.")
