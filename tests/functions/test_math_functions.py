"""Tests for the named standard library functions."""
import pytest
from decimal import Decimal

from exprtree.context import ExpressionContext
from exprtree.functions import Abs, Ceiling, Floor, Round, Max, Min, SquareRoot, If, Concat, standard_functions
from exprtree.system.errors import ParameterError
from exprtree.system.models import EvaluatorConfig, NodeKind

D = Decimal


@pytest.fixture
def ctx():
    return ExpressionContext()


def apply(function, ctx, *args):
    return function.evaluate(ctx, function.aliases[0], list(args))


def test_abs(ctx):
    assert apply(Abs(), ctx, D("-2.5")) == D("2.5")

@pytest.mark.parametrize("value, ceiling, floor", [
    ("1.2", 2, 1),
    ("-1.2", -1, -2),
    ("3", 3, 3),
])
def test_ceiling_and_floor(ctx, value, ceiling, floor):
    assert apply(Ceiling(), ctx, D(value)) == D(ceiling)
    assert apply(Floor(), ctx, D(value)) == D(floor)

def test_ceiling_alias():
    assert "ceiling" in Ceiling().aliases

@pytest.mark.parametrize("args, expected", [
    (("2.5",), "3"),
    (("-2.5",), "-3"),
    (("1.2345", "2"), "1.23"),
    (("1.235", "2"), "1.24"),
    (("1250", "-2"), "1.3E+3"),
])
def test_round(ctx, args, expected):
    assert str(apply(Round(), ctx, *[D(a) for a in args])) == expected

def test_round_requires_integral_digits(ctx):
    with pytest.raises(ParameterError):
        apply(Round(), ctx, D(1), D("0.5"))

def test_max_and_min(ctx):
    values = [D(3), D("-1"), D("7.5"), D(2)]
    assert apply(Max(), ctx, *values) == D("7.5")
    assert apply(Min(), ctx, *values) == D(-1)
    assert apply(Max(), ctx, D(1)) == D(1)

def test_max_requires_numbers(ctx):
    with pytest.raises(ParameterError):
        apply(Max(), ctx, D(1), "2")

def test_sqrt(ctx):
    assert apply(SquareRoot(), ctx, D(16)) == D(4)

def test_sqrt_precision():
    ctx = ExpressionContext(config=EvaluatorConfig(decimal_precision=6))
    assert apply(SquareRoot(), ctx, D(2)) == D("1.41421")

def test_sqrt_of_negative(ctx):
    with pytest.raises(ParameterError, match="negative"):
        apply(SquareRoot(), ctx, D(-4))

@pytest.mark.parametrize("condition, expected", [(D(1), "yes"), (D(0), "no"), ("", "no"), ("text", "yes")])
def test_if(ctx, condition, expected):
    assert apply(If(), ctx, condition, "yes", "no") == expected

def test_if_requires_three_arguments(ctx):
    with pytest.raises(ParameterError):
        apply(If(), ctx, D(1), "yes")

def test_concat(ctx):
    assert apply(Concat(), ctx, "a", D("1.0"), "b") == "a1.0b"
    assert apply(Concat(), ctx) == ""

def test_standard_functions_are_fresh_instances():
    first = standard_functions()
    second = standard_functions()
    assert len(first) == len(second)
    assert all(a is not b for a, b in zip(first, second))

def test_functions_through_evaluator(tree):
    context = ExpressionContext.with_standard_functions()
    node = tree.function(
        "if",
        tree.operator(">", tree.function("sqrt", tree.number("81")), tree.number("8")),
        tree.string("'big'"),
        tree.string("'small'"),
    )
    assert context.evaluate(node) == "big"
    negated = tree.node(NodeKind.UNARY_OPERATOR, "-", tree.function("abs", tree.number("-3")))
    assert context.evaluate(negated) == D(-3)
