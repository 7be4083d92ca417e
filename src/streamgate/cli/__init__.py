"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from streamgate import __version__
from streamgate.config import StreamGateConfig


@click.group()
@click.version_option(version=__version__, prog_name="streamgate")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to the vhost security YAML (default: $STREAMGATE_CONFIG or XDG).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """StreamGate — per-vhost play/publish admission for streaming servers."""
    config = StreamGateConfig.load()
    if config_path:
        config.vhosts_file = Path(config_path)
    config.verbose = config.verbose or verbose

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    level = logging.DEBUG if config.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from streamgate.cli.check import check  # noqa: F811
    from streamgate.cli.rules import rules  # noqa: F811

    main.add_command(check)
    main.add_command(rules)


_register_commands()
