"""
Click implementation of the config command.

Usage: strhash config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ..decorators import report_errors


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .strhash/config.toml, pyproject.toml [tool.strhash]
    and STRHASH_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        strhash config list

        strhash config get hash.default_algorithm
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    click.echo("Available config options:")
    click.echo("")
    for key, info in config_list().items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_context
@report_errors
def config_get_cmd(ctx: click.Context, key: str) -> None:
    """Show the effective value of KEY (e.g. hash.key_encoding)."""
    config_path = ctx.find_root().params.get("config_path")
    click.echo(f"{key}: {config_get(key, config_path=config_path)}")
