"""Policy data models — immutable dataclasses shared by loader, evaluator and gate."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from streamgate.policy.cidr import get_cidr_ipv4, get_cidr_mask, is_ipv4

WILDCARD = "all"


class RuleAction(enum.Enum):
    """Whether a rule admits or rejects the connections it matches."""

    ALLOW = "allow"
    DENY = "deny"


class ConnKind(enum.Enum):
    """Connection category a rule restricts."""

    PLAY = "play"
    PUBLISH = "publish"


class ConnType(enum.Enum):
    """Connection variants as reported by the protocol layer."""

    PLAY = "play"
    FMLE_PUBLISH = "fmle-publish"
    FLASH_PUBLISH = "flash-publish"
    HAIVISION_PUBLISH = "haivision-publish"
    UNKNOWN = "unknown"

    @property
    def kind(self) -> ConnKind | None:
        """Policy category; publish handshakes are equivalent, unknown has none."""
        if self is ConnType.PLAY:
            return ConnKind.PLAY
        if self is ConnType.UNKNOWN:
            return None
        return ConnKind.PUBLISH


class TargetKind(enum.Enum):
    """Shape of a normalized rule target."""

    WILDCARD = "wildcard"
    LITERAL = "literal"
    CIDR = "cidr"


@dataclass(frozen=True)
class Target:
    """A rule target normalized at load time.

    ``raw`` is always kept, since literal equality with the source address is
    checked for every kind. ``network`` and ``mask`` are set only for CIDR
    targets, with ``mask`` in dotted form.
    """

    raw: str
    kind: TargetKind
    network: str = ""
    mask: str = ""

    @classmethod
    def parse(cls, raw: str) -> Target:
        if raw == WILDCARD:
            return cls(raw=raw, kind=TargetKind.WILDCARD)

        network = get_cidr_ipv4(raw)
        mask = get_cidr_mask(raw)
        if is_ipv4(network) and mask:
            return cls(raw=raw, kind=TargetKind.CIDR, network=network, mask=mask)

        return cls(raw=raw, kind=TargetKind.LITERAL)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Rule:
    """A single allow/deny directive for one connection kind."""

    action: RuleAction
    kind: ConnKind
    target: Target

    @classmethod
    def of(cls, action: str, kind: str, target: str) -> Rule:
        """Build a rule from its configured strings."""
        return cls(
            action=RuleAction(action),
            kind=ConnKind(kind),
            target=Target.parse(target),
        )

    def __str__(self) -> str:
        return f"{self.action.value} {self.kind.value} {self.target.raw}"


RuleSet = tuple[Rule, ...]


@dataclass(frozen=True)
class ConnectionRequest:
    """An incoming connection awaiting admission."""

    kind: ConnKind | None
    address: str


class Verdict(enum.Enum):
    """Why a decision came out the way it did."""

    DEFAULT_DENY = "default_deny"
    DENY_MATCHED = "deny_matched"
    NOT_ALLOWED = "not_allowed"
    ADMITTED = "admitted"


class PolicyMode(enum.Enum):
    """Default stance of a vhost, derived from the rules it carries."""

    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"


@dataclass(frozen=True)
class Decision:
    """Outcome of one admission check."""

    admitted: bool
    reason: str
    verdict: Verdict
    matched_rule: Rule | None = None


@dataclass(frozen=True)
class VhostSecurity:
    """The security block of one vhost; ``rules`` is None when no block is configured."""

    enabled: bool = False
    rules: RuleSet | None = None


@dataclass(frozen=True)
class SecurityConfig:
    """Security settings for every configured vhost; read-only once built."""

    vhosts: Mapping[str, VhostSecurity] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "vhosts", MappingProxyType(dict(self.vhosts)))

    def security_enabled(self, vhost: str) -> bool:
        security = self.vhosts.get(vhost)
        return security is not None and security.enabled

    def security_rules(self, vhost: str) -> RuleSet | None:
        security = self.vhosts.get(vhost)
        if security is None:
            return None
        return security.rules
