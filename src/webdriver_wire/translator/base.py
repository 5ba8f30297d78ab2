"""Protocol Translator base class.

A translator turns dialect-independent commands, parameters and element
references into the shapes one wire protocol expects. Each concrete
translator is data driven: a command table mapping command names to
(HTTP method, URL template) and a table of parameter rewrite rules.
Translators hold no per-call state and are safe to share between threads.
"""
from __future__ import annotations

from abc import ABC
from typing import Any, Callable, ClassVar, Dict, Mapping, Tuple

from ..commands import (
    CommandName,
    ExecutableWebDriverCommand,
    WebDriverCommand,
    command_name,
)
from ..dialect import WebDriverDialect
from ..exceptions import InvalidElementReferenceError, UnsupportedCommandError

# Element reference keys
JSON_WIRE_ELEMENT_KEY = "ELEMENT"
W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"

HttpRoute = Tuple[str, str]
ParameterRule = Callable[[Dict[str, Any]], Dict[str, Any]]


def encode_keys(value: Any) -> str:
    """Flatten a keys value (string, number or nested list) into one string."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "".join(encode_keys(item) for item in value)
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def split_keys(value: Any) -> list:
    """Keys as the list of single characters both protocols accept."""
    return list(encode_keys(value))


class ProtocolTranslator(ABC):
    """Translates commands, parameters and element references for one dialect.

    Subclasses provide:
        dialect: The dialect they translate to.
        COMMANDS: Command name -> (HTTP method, URL template).
        PARAMETER_RULES: Command name -> rewrite applied to a parameter copy.
        ELEMENT_KEYS: Element reference keys, preferred key first.
    """

    dialect: ClassVar[WebDriverDialect]
    COMMANDS: ClassVar[Dict[str, HttpRoute]] = {}
    PARAMETER_RULES: ClassVar[Dict[str, ParameterRule]] = {}
    ELEMENT_KEYS: ClassVar[Tuple[str, ...]] = ()

    def supports(self, name: CommandName) -> bool:
        return command_name(name) in self.COMMANDS

    def translate_command(self, command: WebDriverCommand) -> ExecutableWebDriverCommand:
        """Map an abstract command to an executable one.

        Raises:
            UnsupportedCommandError: If the command is absent from this
                dialect's table. Raised before any I/O happens.
        """
        name = command.name_token
        route = self.COMMANDS.get(name)
        if route is None:
            raise UnsupportedCommandError(name, self.dialect)
        method, url = route
        return ExecutableWebDriverCommand(
            method=method,
            url=url,
            parameters=self.translate_parameters(name, command.parameters),
            session_id=command.session_id,
        )

    def translate_element(self, raw_element: Any) -> str:
        """Extract the opaque element id from a raw element reference.

        Raises:
            InvalidElementReferenceError: If no known element key is present.
        """
        if isinstance(raw_element, Mapping):
            for key in self.ELEMENT_KEYS:
                if key in raw_element:
                    return raw_element[key]
        raise InvalidElementReferenceError(
            f"Not a web element reference for the {self.dialect.value} protocol: {raw_element!r}",
            raw_element,
        )

    def translate_parameters(self, name: CommandName, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Rewrite parameters into this dialect's wire shape.

        Commands without a rule pass through unchanged. The input mapping
        is never mutated and applying the translation twice gives the same
        result as applying it once.
        """
        translated = dict(params or {})
        rule = self.PARAMETER_RULES.get(command_name(name))
        if rule is None:
            return translated
        return rule(translated)
