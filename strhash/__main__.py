"""
Entry point for `python -m strhash`.
"""


def main():
    """Main entry point for the strhash CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
