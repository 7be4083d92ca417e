"""Exceptions raised across streamgate."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from streamgate.policy.models import Decision


class StreamGateError(Exception):
    """Base exception for all streamgate errors."""


class PolicyLoadError(StreamGateError, ValueError):
    """Raised when a vhost security configuration cannot be loaded."""


class ConnectionRejected(StreamGateError):
    """Raised by the gate when a connection is denied admission."""

    def __init__(self, decision: Decision, vhost: str, address: str) -> None:
        self.decision = decision
        self.vhost = vhost
        self.address = address
        super().__init__(f"vhost={vhost} {decision.reason}")
