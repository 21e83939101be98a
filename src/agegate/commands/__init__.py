"""Subcommand modules for agegate.

Provides register_commands() which uses deferred imports to keep
``agegate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from agegate.commands.check import check
    from agegate.commands.demo import demo
    from agegate.commands.multiply import multiply
    from agegate.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(check)
    cli.add_command(multiply)
    cli.add_command(demo)
