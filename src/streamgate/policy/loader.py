"""Load vhost security configuration from YAML into normalized models."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from streamgate.errors import PolicyLoadError
from streamgate.policy.models import (
    Rule,
    RuleSet,
    SecurityConfig,
    VhostSecurity,
)

logger = logging.getLogger(__name__)

_ENABLED_WORDS = {"on": True, "off": False}


def load_security_config(path: str | Path) -> SecurityConfig:
    """Load a security configuration from a YAML file path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise PolicyLoadError(f"Cannot read security config {path}: {exc}") from exc
    return load_security_config_from_string(text)


def load_security_config_from_string(text: str) -> SecurityConfig:
    """Parse a YAML string into a SecurityConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PolicyLoadError(f"Invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise PolicyLoadError("Security config YAML must be a mapping")

    vhosts_data = data.get("vhosts") or {}
    if not isinstance(vhosts_data, dict):
        raise PolicyLoadError("'vhosts' must be a mapping of vhost name to settings")

    vhosts: dict[str, VhostSecurity] = {}
    for name, vhost_data in vhosts_data.items():
        vhosts[str(name)] = _build_vhost(str(name), vhost_data or {})

    logger.debug("Loaded security config for %d vhost(s)", len(vhosts))
    return SecurityConfig(vhosts=vhosts)


def _build_vhost(name: str, data: object) -> VhostSecurity:
    if not isinstance(data, dict):
        raise PolicyLoadError(f"vhost {name}: settings must be a mapping")

    security = data.get("security")
    if security is None:
        return VhostSecurity()
    if not isinstance(security, dict):
        raise PolicyLoadError(f"vhost {name}: 'security' must be a mapping")

    enabled = _parse_enabled(name, security.get("enabled", False))

    # A security block with no directives is an empty rule set, not an absent one
    rules = _parse_rules(name, security.get("rules") or [])

    return VhostSecurity(enabled=enabled, rules=rules)


def _parse_enabled(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in _ENABLED_WORDS:
        return _ENABLED_WORDS[value.lower()]
    raise PolicyLoadError(f"vhost {name}: 'enabled' must be a boolean or on/off")


def _parse_rules(name: str, rules_data: object) -> RuleSet:
    if not isinstance(rules_data, list):
        raise PolicyLoadError(f"vhost {name}: 'rules' must be a list")

    rules: list[Rule] = []
    for index, entry in enumerate(rules_data):
        try:
            rules.append(_parse_rule(entry))
        except (KeyError, ValueError) as exc:
            raise PolicyLoadError(f"vhost {name}: rule #{index + 1} {entry!r}: {exc}") from exc
    return tuple(rules)


def _parse_rule(entry: object) -> Rule:
    """Parse ``"allow play all"`` or ``{action, kind, target}`` into a Rule."""
    if isinstance(entry, str):
        parts = entry.split()
        if len(parts) != 3:
            raise ValueError("expected '<allow|deny> <play|publish> <target>'")
        return Rule.of(*parts)

    if isinstance(entry, dict):
        return Rule.of(
            str(entry["action"]),
            str(entry["kind"]),
            str(entry["target"]),
        )

    raise ValueError("rule must be a string or a mapping")
