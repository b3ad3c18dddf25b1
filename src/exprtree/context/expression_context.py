"""
Reference implementation of the evaluation context.

ExpressionContext owns a function registry (keyed by every alias a function
declares) and delegates variable storage to a VariableResolver.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from exprtree.context.variable_resolver import MapVariableResolver, VariableResolver
from exprtree.functions import standard_functions
from exprtree.evaluator.evaluator import Evaluator
from exprtree.evaluator.interfaces import ExpressionNodeLike, Function
from exprtree.system.models import EvaluatorConfig, VariableModifier

logger = logging.getLogger(__name__)


class ExpressionContext:
    """
    Function registry and variable store consumed by the Evaluator.

    Implements the EvaluationContext interface.
    """

    def __init__(
        self,
        variable_resolver: Optional[VariableResolver] = None,
        functions: Optional[Iterable[Function]] = None,
        config: Optional[EvaluatorConfig] = None
    ):
        """
        Initializes the context.

        Args:
            variable_resolver: Variable store; a fresh MapVariableResolver when omitted.
            functions: Functions to register immediately.
            config: Shared tunables, read by library functions through `context.config`.
        """
        self.config = config or EvaluatorConfig()
        self.variable_resolver = variable_resolver if variable_resolver is not None else MapVariableResolver(config=self.config)
        self._functions: Dict[str, Function] = {}
        if functions is not None:
            self.add_functions(functions)

    @classmethod
    def with_standard_functions(
        cls,
        variable_resolver: Optional[VariableResolver] = None,
        config: Optional[EvaluatorConfig] = None
    ) -> "ExpressionContext":
        """Creates a context preloaded with the standard operator and function library."""
        return cls(variable_resolver=variable_resolver, functions=standard_functions(), config=config)

    # --- Functions ---

    def add_function(self, function: Function) -> None:
        """
        Registers a function under each of its aliases, replacing earlier registrations.

        Raises:
            ValueError: If the function declares no aliases.
        """
        aliases = list(getattr(function, "aliases", ()) or ())
        if not aliases:
            raise ValueError(f"Function {function!r} declares no aliases to register under.")
        for alias in aliases:
            if alias in self._functions:
                logger.debug(f"Replacing function registered as '{alias}'")
            self._functions[alias] = function
        logger.debug(f"Registered {type(function).__name__} as {aliases}")

    def add_functions(self, functions: Iterable[Function]) -> None:
        for function in functions:
            self.add_function(function)

    def remove_function(self, name: str) -> Optional[Function]:
        """Unregisters a single alias and returns what was registered under it."""
        return self._functions.pop(name, None)

    def get_function(self, name: str) -> Optional[Function]:
        return self._functions.get(name)

    def function_names(self) -> List[str]:
        return sorted(self._functions)

    # --- Variables ---

    def has_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> bool:
        return self.variable_resolver.has_variable(name, modifier)

    def get_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> Any:
        return self.variable_resolver.get_variable(name, modifier)

    def set_variable(self, name: str, value: Any, modifier: VariableModifier = VariableModifier.NONE) -> None:
        self.variable_resolver.set_variable(name, value, modifier)

    # --- Evaluation ---

    def evaluate(self, node: ExpressionNodeLike) -> Any:
        """Evaluates a tree against this context."""
        return Evaluator(self).evaluate(node)
