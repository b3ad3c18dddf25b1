"""
Command line entry point.

Evaluates an expression tree written in S-expression notation against a
context preloaded with the standard library.

Usage:
    exprtree '(operator + (number 1) (variable x))' --var x=41
    exprtree --file tree.sexp --prompt
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console

from exprtree.config.logging_config import setup_logging
from exprtree.context import ExpressionContext, MapVariableResolver
from exprtree.evaluator.evaluator import parse_decimal
from exprtree.sexp_parser import TreeLoader
from exprtree.system.errors import EvaluationError, NumberFormatError, TreeSyntaxError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "EXPRTREE_LOG_LEVEL"
LOG_FILE_ENV = "EXPRTREE_LOG_FILE"


def coerce_value(raw: str) -> Any:
    """Command line values become decimals when they look like numbers, otherwise strings."""
    try:
        return parse_decimal(raw.strip())
    except NumberFormatError:
        return raw


def parse_assignments(assignments: List[str]) -> Dict[str, Any]:
    """
    Parses NAME=VALUE pairs.

    Raises:
        ValueError: If a pair has no '=' or an empty name.
    """
    bindings: Dict[str, Any] = {}
    for assignment in assignments:
        name, sep, raw = assignment.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid variable assignment '{assignment}', expected NAME=VALUE")
        bindings[name] = coerce_value(raw)
    return bindings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate an expression tree given in S-expression notation")
    parser.add_argument("tree", nargs="?", help="Expression tree, e.g. '(function max (number 1) (number 2))'")
    parser.add_argument("--file", help="Read the expression tree from a file instead")
    parser.add_argument("--var", action="append", default=[], metavar="NAME=VALUE",
                        help="Bind a variable before evaluation (repeatable)")
    parser.add_argument("--prompt", action="store_true",
                        help="Ask interactively for prompt variables that are not bound")
    parser.add_argument("--log-level", default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
                        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    parser.add_argument("--log-file", default=os.environ.get(LOG_FILE_ENV),
                        help=f"Write logs to this file (default: ${LOG_FILE_ENV} or stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()
    error_console = Console(stderr=True)

    if bool(args.tree) == bool(args.file):
        parser.error("provide exactly one of TREE or --file")

    setup_logging(args.log_level, args.log_file)

    try:
        bindings = parse_assignments(args.var)
    except ValueError as e:
        parser.error(str(e))

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                tree_string = f.read()
        except OSError as e:
            error_console.print(f"Error: cannot read {args.file}: {e}", style="red", markup=False, highlight=False)
            return 1
    else:
        tree_string = args.tree

    prompt_handler = None
    if args.prompt:
        def prompt_handler(name: str) -> Any:
            return coerce_value(console.input(f"Value for [bold]{name}[/bold]: "))

    resolver = MapVariableResolver(bindings, prompt_handler=prompt_handler)
    context = ExpressionContext.with_standard_functions(variable_resolver=resolver)

    try:
        tree = TreeLoader().load_string(tree_string)
        logger.info(f"Evaluating tree: {tree}")
        result = context.evaluate(tree)
    except (EvaluationError, TreeSyntaxError) as e:
        error_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1

    console.print(str(result), markup=False, highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
