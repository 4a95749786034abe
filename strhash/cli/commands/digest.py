"""
Click implementation of the digest command.

Usage: strhash digest [-a ALGORITHM] TEXT
"""

from __future__ import annotations

import click

from ...hashing.types import HashType
from ..context import StrhashContext
from ..decorators import read_text_argument, report_errors

ALGORITHM_CHOICES = [t.value for t in HashType]


@click.command("digest")
@click.argument("text")
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice(ALGORITHM_CHOICES, case_sensitive=False),
    default=None,
    help="Digest algorithm (default: hash.default_algorithm from config)",
)
@click.pass_obj
@report_errors
def digest(ctx: StrhashContext, text: str, algorithm: str | None) -> None:
    """Print the hex digest of TEXT.

    Use '-' as TEXT to read from stdin.

    \b
    Examples:

        strhash digest abc                 # MD5 unless configured otherwise

        strhash digest -a sha1 abc

        echo -n abc | strhash digest -a sha1 -
    """
    hash_type = HashType.parse(algorithm) if algorithm else ctx.default_algorithm
    click.echo(ctx.registry.calculate(read_text_argument(text), hash_type))
