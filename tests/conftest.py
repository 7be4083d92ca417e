"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from streamgate.policy.models import Rule, SecurityConfig, VhostSecurity


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def vhosts_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "vhosts.yaml"


@pytest.fixture
def mixed_rules() -> tuple[Rule, ...]:
    return (
        Rule.of("allow", "play", "all"),
        Rule.of("deny", "publish", "all"),
        Rule.of("allow", "publish", "192.168.1.0/24"),
        Rule.of("allow", "publish", "127.0.0.1"),
    )


@pytest.fixture
def security_config(mixed_rules: tuple[Rule, ...]) -> SecurityConfig:
    return SecurityConfig(
        vhosts={
            "live": VhostSecurity(enabled=True, rules=mixed_rules),
            "open": VhostSecurity(enabled=False, rules=()),
            "locked": VhostSecurity(enabled=True, rules=None),
            "blacklist": VhostSecurity(
                enabled=True,
                rules=(Rule.of("deny", "play", "10.0.0.0/8"),),
            ),
        }
    )
