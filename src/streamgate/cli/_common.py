"""Helpers shared by CLI commands."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from streamgate.errors import PolicyLoadError
from streamgate.policy.loader import load_security_config
from streamgate.policy.models import SecurityConfig

console = Console(stderr=True)


def load_config_or_exit(ctx: click.Context) -> SecurityConfig:
    """Load the vhost security file named by the global options."""
    vhosts_file = ctx.obj["config"].vhosts_file
    try:
        return load_security_config(vhosts_file)
    except PolicyLoadError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(2)
