"""Allow ``python -m agegate``."""

from agegate.cli import cli

if __name__ == "__main__":
    cli()
