"""Security gate — looks up a vhost's settings and runs the policy evaluator."""

from __future__ import annotations

import logging

from streamgate.errors import ConnectionRejected
from streamgate.policy.evaluator import decide
from streamgate.policy.models import (
    ConnKind,
    ConnType,
    Decision,
    SecurityConfig,
    Verdict,
)

logger = logging.getLogger(__name__)

_DISABLED = Decision(admitted=True, reason="security disabled", verdict=Verdict.ADMITTED)


class SecurityGate:
    """Admits or rejects connections per vhost.

    The config is read on every call and never mutated here; swap in a new
    SecurityConfig with :meth:`reload` rather than editing the current one.
    """

    def __init__(self, config: SecurityConfig) -> None:
        self._config = config

    @property
    def config(self) -> SecurityConfig:
        return self._config

    def reload(self, config: SecurityConfig) -> None:
        self._config = config

    def check(self, conn_type: ConnType, address: str, vhost: str) -> Decision:
        """Decide admission for a connection reported by the protocol layer."""
        return self._evaluate(conn_type.kind, address, vhost)

    def evaluate(self, kind: ConnKind, address: str, vhost: str) -> Decision:
        return self._evaluate(kind, address, vhost)

    def enforce(self, conn_type: ConnType, address: str, vhost: str) -> Decision:
        """Like :meth:`check`, but raise ConnectionRejected on a deny."""
        decision = self.check(conn_type, address, vhost)
        if not decision.admitted:
            logger.warning(
                "Rejected %s from %s on vhost %s: %s",
                conn_type.value,
                address,
                vhost,
                decision.reason,
            )
            raise ConnectionRejected(decision, vhost=vhost, address=address)
        return decision

    def _evaluate(self, kind: ConnKind | None, address: str, vhost: str) -> Decision:
        config = self._config
        if not config.security_enabled(vhost):
            return _DISABLED
        return decide(config.security_rules(vhost), kind, address)
