"""Remote session.

A session binds a session id to the single dialect its remote end speaks.
The dialect is settled once in :meth:`RemoteSession.create` and threaded
through every command afterwards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from ..commands import CommandName, DriverCommand, WebDriverCommand
from ..dialect import WebDriverDialect
from ..translator import ProtocolTranslator, create_by_dialect
from .element import RemoteWebElement

if TYPE_CHECKING:
    from .executor import HttpCommandExecutor

logger = logging.getLogger(__name__)


class RemoteSession:
    """One WebDriver session on a remote end.

    Attributes:
        executor: Executor commands are sent through.
        session_id: Opaque id assigned by the remote end.
        dialect: Dialect the remote end speaks; fixed for the session.
        capabilities: Capabilities returned when the session was created.
    """

    def __init__(
        self,
        executor: "HttpCommandExecutor",
        session_id: str,
        dialect: WebDriverDialect,
        capabilities: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.executor = executor
        self.session_id = session_id
        self.dialect = WebDriverDialect(dialect)
        self.capabilities: Dict[str, Any] = dict(capabilities or {})

    @classmethod
    def create(
        cls,
        executor: "HttpCommandExecutor",
        desired_capabilities: Optional[Mapping[str, Any]] = None,
    ) -> "RemoteSession":
        """Start a new session and detect the dialect of the remote end."""
        response, dialect = executor.new_session(desired_capabilities)
        capabilities = response.value if isinstance(response.value, dict) else {}
        logger.debug(f"Started session {response.session_id} ({dialect.value})")
        return cls(executor, response.session_id, dialect, capabilities)

    @property
    def translator(self) -> ProtocolTranslator:
        return create_by_dialect(self.dialect)

    def execute(self, name: CommandName, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Execute a command in this session and return its value.

        Returns None when the remote end answers with no actionable value.
        """
        command = WebDriverCommand(self.session_id, name, dict(params or {}))
        response = self.executor.execute(command, self.dialect)
        if response is None:
            return None
        return response.value

    def find_element(self, using: str, value: str) -> RemoteWebElement:
        raw_element = self.execute(
            DriverCommand.FIND_ELEMENT, {"using": using, "value": value}
        )
        return self.new_element(self.translator.translate_element(raw_element))

    def find_elements(self, using: str, value: str) -> List[RemoteWebElement]:
        raw_elements = self.execute(
            DriverCommand.FIND_ELEMENTS, {"using": using, "value": value}
        )
        return [
            self.new_element(self.translator.translate_element(raw))
            for raw in raw_elements or []
        ]

    def new_element(self, element_id: str) -> RemoteWebElement:
        return RemoteWebElement(self, element_id)

    def quit(self) -> None:
        self.execute(DriverCommand.QUIT)
        logger.debug(f"Closed session {self.session_id}")
