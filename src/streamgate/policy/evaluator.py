"""Policy evaluator — decides admission of one connection against a vhost rule set.

Evaluation is an existence test per action class, not first-applicable-rule:
a matching allow rule always wins over a matching deny rule, and rule order
only decides which rule gets reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from streamgate.policy.cidr import ipv4_within_mask, is_ipv4
from streamgate.policy.models import (
    ConnKind,
    Decision,
    PolicyMode,
    Rule,
    RuleAction,
    RuleSet,
    Target,
    TargetKind,
    Verdict,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DenyOutcome:
    """Result of the deny scan; ``rule`` is None when no deny rule matched."""

    rule: Rule | None = None

    @property
    def matched(self) -> bool:
        return self.rule is not None

    @property
    def reason(self) -> str:
        return f"deny by rule<{self.rule.target.raw}>" if self.rule else ""


@dataclass(frozen=True)
class AllowOutcome:
    """Result of the allow scan.

    ``rule`` is set on an explicit match. Without one, ``failed`` tells a
    whitelist miss (hard failure) from a blacklist-mode soft pass.
    """

    rule: Rule | None
    allow_count: int
    deny_count: int
    failed: bool

    @property
    def matched(self) -> bool:
        return self.rule is not None

    @property
    def reason(self) -> str:
        if not self.failed:
            return ""
        return f"not allowed by any of {self.allow_count}/{self.deny_count} rules"


class PolicyEvaluator:
    """Evaluates connections against one vhost's rule set."""

    def __init__(self, rules: RuleSet | None) -> None:
        self.rules = rules

    def decide(self, kind: ConnKind | None, address: str) -> Decision:
        return decide(self.rules, kind, address)


def decide(rules: RuleSet | None, kind: ConnKind | None, address: str) -> Decision:
    """Admit or reject a connection of ``kind`` from ``address``.

    ``rules`` is None when the vhost has no rule list at all, which denies
    everything. ``kind`` is None for connections of unknown type; such
    connections match no rule.
    """
    if rules is None:
        return Decision(
            admitted=False,
            reason=f"default deny for {address}",
            verdict=Verdict.DEFAULT_DENY,
        )

    denied = deny_check(rules, kind, address)
    allowed = allow_check(rules, kind, address)

    if denied.matched and allowed.matched:
        logger.info(
            "allowing ip=%s because allow rule<%s> has precedence over deny rule<%s>",
            address,
            allowed.rule.target,
            denied.rule.target,
        )
        return Decision(
            admitted=True,
            reason="",
            verdict=Verdict.ADMITTED,
            matched_rule=allowed.rule,
        )

    if denied.matched:
        return Decision(
            admitted=False,
            reason=denied.reason,
            verdict=Verdict.DENY_MATCHED,
            matched_rule=denied.rule,
        )

    if allowed.failed:
        return Decision(
            admitted=False,
            reason=allowed.reason,
            verdict=Verdict.NOT_ALLOWED,
        )

    return Decision(
        admitted=True,
        reason="",
        verdict=Verdict.ADMITTED,
        matched_rule=allowed.rule,
    )


def deny_check(rules: RuleSet, kind: ConnKind | None, address: str) -> DenyOutcome:
    """Return the first deny rule for ``kind`` whose target matches."""
    for rule in rules:
        if rule.action is not RuleAction.DENY or rule.kind is not kind:
            continue
        if _rule_matches(rule, address):
            return DenyOutcome(rule=rule)
    return DenyOutcome()


def allow_check(rules: RuleSet, kind: ConnKind | None, address: str) -> AllowOutcome:
    """Scan for a matching allow rule, counting rules of both actions.

    Counts include rules of every kind; they only feed :func:`select_mode`.
    """
    allow_count = 0
    deny_count = 0

    for rule in rules:
        if rule.action is RuleAction.DENY:
            deny_count += 1
            continue
        allow_count += 1

        if rule.kind is not kind:
            continue
        if _rule_matches(rule, address):
            return AllowOutcome(
                rule=rule,
                allow_count=allow_count,
                deny_count=deny_count,
                failed=False,
            )

    mode = select_mode(allow_count, deny_count)
    return AllowOutcome(
        rule=None,
        allow_count=allow_count,
        deny_count=deny_count,
        failed=mode is PolicyMode.WHITELIST,
    )


def select_mode(allow_count: int, deny_count: int) -> PolicyMode:
    """Any allow rule, or no rules at all, means default-deny."""
    if allow_count > 0 or allow_count + deny_count == 0:
        return PolicyMode.WHITELIST
    return PolicyMode.BLACKLIST


def target_matches(target: Target, address: str) -> bool:
    if target.kind is TargetKind.WILDCARD:
        return True
    if target.raw == address:
        return True
    if target.kind is TargetKind.CIDR and is_ipv4(address):
        return ipv4_within_mask(address, target.network, target.mask)
    return False


def _rule_matches(rule: Rule, address: str) -> bool:
    matched = target_matches(rule.target, address)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s %s ip=%s (ipv4?=%s) against rule<%s> network=%s mask=%s -> %s",
            rule.action.value,
            rule.kind.value,
            address,
            is_ipv4(address),
            rule.target,
            rule.target.network or "-",
            rule.target.mask or "-",
            matched,
        )
    return matched
