"""CLI command: streamgate check <address> — decide one connection."""

from __future__ import annotations

import sys

import click

from streamgate.cli._common import console, load_config_or_exit
from streamgate.policy.models import ConnType
from streamgate.security import SecurityGate


@click.command()
@click.argument("address")
@click.option(
    "--vhost",
    default="__defaultVhost__",
    show_default=True,
    help="Vhost the connection targets.",
)
@click.option(
    "--type",
    "conn_type",
    type=click.Choice([t.value for t in ConnType if t is not ConnType.UNKNOWN]),
    default=ConnType.PLAY.value,
    show_default=True,
    help="Connection type reported by the protocol layer.",
)
@click.pass_context
def check(ctx: click.Context, address: str, vhost: str, conn_type: str) -> None:
    """Check whether ADDRESS may play or publish on a vhost."""
    gate = SecurityGate(load_config_or_exit(ctx))
    decision = gate.check(ConnType(conn_type), address, vhost)

    if decision.admitted:
        detail = f" by rule<{decision.matched_rule}>" if decision.matched_rule else ""
        console.print(
            f"[green]ALLOW[/green] {conn_type} from [cyan]{address}[/cyan] "
            f"on vhost [cyan]{vhost}[/cyan]{detail}"
        )
        return

    console.print(
        f"[red]DENY[/red] {conn_type} from [cyan]{address}[/cyan] "
        f"on vhost [cyan]{vhost}[/cyan]: {decision.reason}"
    )
    sys.exit(1)
