"""
Click-based CLI for strhash.

Usage:
    from strhash.cli import cli
    cli()
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from ..core.exceptions import StrhashException
from .context import StrhashContext
from .decorators import to_click_exception

try:
    __version__ = version("strhash")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="strhash")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of searching for .strhash/config.toml",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """strhash - hex digests and HMACs of strings

    \b
    Hashing:
        strhash digest <text>          MD5 / SHA-1 digest
        strhash hmac -k <key> <text>   HMAC-SHA256
        strhash algorithms             List supported algorithms

    \b
    Configuration:
        strhash config                 View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    try:
        ctx.obj = StrhashContext.create(config_path=config_path)
    except StrhashException as e:
        raise to_click_exception(e) from e


def register_commands() -> None:
    """Attach every command in strhash.cli.commands to the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "StrhashContext",
    "__version__",
    "cli",
    "register_commands",
]
