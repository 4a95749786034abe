"""
Click implementation of the hmac command.

Usage: strhash hmac -k KEY [-e ENCODING] [-a ALGORITHM] TEXT
"""

from __future__ import annotations

import click

from ...hashing.types import HashType
from ..context import StrhashContext
from ..decorators import read_text_argument, report_errors
from .digest import ALGORITHM_CHOICES


@click.command("hmac")
@click.argument("text")
@click.option(
    "-k",
    "--key",
    "secret_key",
    required=True,
    envvar="STRHASH_SECRET_KEY",
    help="Secret key (or set STRHASH_SECRET_KEY)",
)
@click.option(
    "-e",
    "--encoding",
    default=None,
    help="Text encoding of the key (default: hash.key_encoding from config)",
)
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice(ALGORITHM_CHOICES, case_sensitive=False),
    default=HashType.HMAC_SHA256.value,
    show_default=True,
    help="MAC algorithm",
)
@click.pass_obj
@report_errors
def hmac(ctx: StrhashContext, text: str, secret_key: str, encoding: str | None, algorithm: str) -> None:
    """Print the hex HMAC of TEXT under a secret key.

    Use '-' as TEXT to read from stdin.

    \b
    Examples:

        strhash hmac -k secret "payload"

        STRHASH_SECRET_KEY=secret strhash hmac -e latin-1 "payload"
    """
    ctx.logger.debug("hmac requested with %s key encoding", encoding or ctx.key_encoding)
    click.echo(
        ctx.registry.calculate_keyed(
            read_text_argument(text),
            secret_key,
            encoding or ctx.key_encoding,
            HashType.parse(algorithm),
        )
    )
