import pytest
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from exprtree.context import ExpressionContext, MapVariableResolver
from exprtree.evaluator import Evaluator
from exprtree.system.models import ExpressionNode, NodeKind


# --- Tree Building Helpers ---

def node(kind, text="", *children):
    """Shorthand for building an ExpressionNode in tests."""
    return ExpressionNode(kind=kind, text=text, children=tuple(children))


def number(text):
    return node(NodeKind.NUMBER, text)


def string(text):
    return node(NodeKind.STRING, text)


def variable(name):
    return node(NodeKind.VARIABLE, name)


def function(name, *children):
    return node(NodeKind.FUNCTION, name, *children)


def operator(name, *children):
    return node(NodeKind.OPERATOR, name, *children)


@pytest.fixture
def tree():
    """Provides the tree building helpers as a namespace."""
    return SimpleNamespace(
        node=node, number=number, string=string,
        variable=variable, function=function, operator=operator,
    )


# --- Mock Collaborators ---

@pytest.fixture
def mock_context():
    """Provides a mock EvaluationContext with no variables and no functions."""
    ctx = MagicMock(name="MockEvaluationContext")
    ctx.has_variable.return_value = False
    ctx.get_function.return_value = None
    return ctx


@pytest.fixture
def mock_function():
    """Provides a mock Function returning a fixed value."""
    fn = MagicMock(name="MockFunction")
    fn.evaluate.return_value = Decimal("42")
    return fn


@pytest.fixture
def evaluator(mock_context):
    """Provides an Evaluator wired to the mock context."""
    return Evaluator(mock_context)


# --- Real Collaborators ---

@pytest.fixture
def resolver():
    return MapVariableResolver({"x": Decimal("10"), "name": "world"})


@pytest.fixture
def context(resolver):
    """Provides a context preloaded with the standard library."""
    return ExpressionContext.with_standard_functions(variable_resolver=resolver)
