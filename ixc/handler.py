"""Raw handler and host backend interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .account_id import AccountID
from .code import ErrorCode, SystemCode
from .gas import Gas
from .message import Message, Request, Response


@dataclass
class InvokeParams:
    """Parameters common to all host invocations.

    ``gas`` is an optional meter for the call: its consumption is updated as
    the message runs and the call fails when its limit is exceeded. An
    unlimited meter monitors consumption without a limit.
    """

    gas: Optional[Gas] = None


class HostBackend(ABC):
    """The host side that handlers call back into."""

    @abstractmethod
    def invoke_msg(self, message: Message, invoke_params: InvokeParams) -> Response:
        """Invoke a message."""

    @abstractmethod
    def invoke_query(self, message: Message, invoke_params: InvokeParams) -> Response:
        """Invoke a query message."""

    @abstractmethod
    def update_state(self, request: Request, invoke_params: InvokeParams) -> Response:
        """Update the state of the account."""

    @abstractmethod
    def query_state(self, request: Request, invoke_params: InvokeParams) -> Response:
        """Query the state of the account."""

    @abstractmethod
    def consume_gas(self, amount: int) -> None:
        """Consume gas; raise an out-of-gas error if there is not enough."""


class RawHandler:
    """A handler for an account. Every message kind is unhandled unless overridden."""

    def handle_msg(
        self, caller: AccountID, message: Message, callbacks: HostBackend
    ) -> Response:
        """Handle a message."""
        raise ErrorCode(SystemCode.MESSAGE_NOT_HANDLED)

    def handle_query(self, message: Message, callbacks: HostBackend) -> Response:
        """Handle a query message."""
        raise ErrorCode(SystemCode.MESSAGE_NOT_HANDLED)

    def handle_system(
        self, forwarded_caller: AccountID, message: Message, callbacks: HostBackend
    ) -> Response:
        """Handle a system message."""
        raise ErrorCode(SystemCode.MESSAGE_NOT_HANDLED)