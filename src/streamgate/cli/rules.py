"""CLI command: streamgate rules — show configured security rules."""

from __future__ import annotations

import click
from rich.table import Table

from streamgate.cli._common import console, load_config_or_exit
from streamgate.policy.evaluator import select_mode
from streamgate.policy.models import RuleAction, RuleSet, VhostSecurity

_ACTION_COLORS = {
    RuleAction.ALLOW: "green",
    RuleAction.DENY: "red",
}


@click.command()
@click.option("--vhost", default=None, help="Only show this vhost.")
@click.pass_context
def rules(ctx: click.Context, vhost: str | None) -> None:
    """List security rules and the resulting policy mode per vhost."""
    config = load_config_or_exit(ctx)

    names = sorted(config.vhosts)
    if vhost is not None:
        if vhost not in config.vhosts:
            console.print(f"[yellow]Vhost {vhost} is not configured.[/yellow]")
            return
        names = [vhost]

    if not names:
        console.print("[yellow]No vhosts configured.[/yellow]")
        return

    for name in names:
        security = config.vhosts[name]
        console.print(f"[bold]{name}[/bold]  {_describe(security)}")
        if security.rules:
            console.print(_rules_table(security.rules))


def _describe(security: VhostSecurity) -> str:
    if not security.enabled:
        return "[dim]security disabled, all connections admitted[/dim]"
    if security.rules is None:
        return "[red]no rules, default deny[/red]"

    allow_count = sum(1 for r in security.rules if r.action is RuleAction.ALLOW)
    deny_count = len(security.rules) - allow_count
    mode = select_mode(allow_count, deny_count)
    return f"mode [cyan]{mode.value}[/cyan] ({allow_count} allow / {deny_count} deny)"


def _rules_table(rule_set: RuleSet) -> Table:
    table = Table(show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Action", style="bold", width=8)
    table.add_column("Kind")
    table.add_column("Target", style="cyan")
    table.add_column("Match")

    for index, rule in enumerate(rule_set, start=1):
        color = _ACTION_COLORS[rule.action]
        table.add_row(
            str(index),
            f"[{color}]{rule.action.value}[/{color}]",
            rule.kind.value,
            rule.target.raw,
            rule.target.kind.value,
        )
    return table
