"""
Click command implementations for the strhash CLI.

Commands are registered with the main group by register_commands()
in strhash.cli.
"""

from .algorithms import algorithms
from .config import config
from .digest import digest
from .keyed import hmac

COMMANDS = [
    algorithms,
    config,
    digest,
    hmac,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "digest",
    "hmac",
]
