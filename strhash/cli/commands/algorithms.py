"""
Click implementation of the algorithms command.
"""

import click

from ..context import StrhashContext


@click.command("algorithms")
@click.pass_obj
def algorithms(ctx: StrhashContext) -> None:
    """List supported algorithms."""
    default = ctx.default_algorithm
    for hash_type in ctx.registry.available_algorithms:
        mode = "keyed" if hash_type.keyed else "unkeyed"
        marker = "  (default)" if hash_type is default else ""
        click.echo(f"{hash_type.value:<12} {mode:<8} {hash_type.hex_length} hex chars{marker}")
