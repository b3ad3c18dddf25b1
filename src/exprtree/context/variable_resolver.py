"""
Variable storage for expression evaluation.
Provides the VariableResolver interface and a dictionary-backed implementation
that supports interactive resolution of prompt variables.
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from exprtree.system.errors import UndefinedVariableError
from exprtree.system.models import EvaluatorConfig, VariableModifier

logger = logging.getLogger(__name__)

PromptHandler = Callable[[str], Any]


@runtime_checkable
class VariableResolver(Protocol):
    """
    Interface for components that hold variable bindings.

    [Interface:VariableResolver:1.0]
    """

    def has_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> bool:
        ...

    def get_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> Any:
        ...

    def set_variable(self, name: str, value: Any, modifier: VariableModifier = VariableModifier.NONE) -> None:
        ...

    def variables(self) -> Dict[str, Any]:
        ...


class MapVariableResolver:
    """
    Dictionary-backed VariableResolver.

    Ordinary lookups (VariableModifier.NONE) only see bound names. Prompt
    lookups (VariableModifier.PROMPT) see bound names too, and when a prompt
    handler is configured every unbound name is resolvable by asking it.
    """

    def __init__(
        self,
        bindings: Optional[Dict[str, Any]] = None,
        prompt_handler: Optional[PromptHandler] = None,
        config: Optional[EvaluatorConfig] = None
    ):
        """
        Initializes a new MapVariableResolver.

        Args:
            bindings: Optional initial variable bindings. The dictionary is copied.
            prompt_handler: Optional callable asked for the value of unbound prompt variables.
            config: Optional configuration; controls caching of prompted answers.
        """
        self._bindings: Dict[str, Any] = dict(bindings) if bindings is not None else {}
        self.prompt_handler = prompt_handler
        self.config = config or EvaluatorConfig()
        logger.debug(f"Initialized MapVariableResolver (Bindings: {list(self._bindings.keys())}, Prompting: {prompt_handler is not None})")

    def has_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> bool:
        if name in self._bindings:
            return True
        return modifier == VariableModifier.PROMPT and self.prompt_handler is not None

    def get_variable(self, name: str, modifier: VariableModifier = VariableModifier.NONE) -> Any:
        """
        Looks up a variable.

        Raises:
            UndefinedVariableError: If the name is unbound and cannot be prompted for.
        """
        if name in self._bindings:
            return self._bindings[name]
        if modifier == VariableModifier.PROMPT and self.prompt_handler is not None:
            logger.debug(f"Prompting for variable '{name}'")
            value = self.prompt_handler(name)
            if self.config.cache_prompted_variables:
                self._bindings[name] = value
            return value
        raise UndefinedVariableError(name, modifier)

    def set_variable(self, name: str, value: Any, modifier: VariableModifier = VariableModifier.NONE) -> None:
        logger.debug(f"Binding variable '{name}' (modifier={modifier.value})")
        self._bindings[name] = value

    def remove_variable(self, name: str) -> None:
        """Unbinds a variable; unknown names raise UndefinedVariableError."""
        if name not in self._bindings:
            raise UndefinedVariableError(name)
        del self._bindings[name]

    def variables(self) -> Dict[str, Any]:
        """Returns a snapshot of the current bindings."""
        return dict(self._bindings)

    def __repr__(self) -> str:
        return f"MapVariableResolver(bindings={list(self._bindings.keys())})"
