"""Command: validate a single age."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agegate.commands._base import AgeCommand

if TYPE_CHECKING:
    from agegate.commands._context import AppContext


@click.command(
    cls=AgeCommand,
    examples="""\
  agegate check 25
  agegate check -- -5
  agegate --json check abc""",
)
@click.argument("value")
@click.option(
    "--trim/--no-trim",
    default=None,
    help="Strip surrounding whitespace before parsing.",
)
@click.pass_obj
def check(app: AppContext, value: str, trim: bool | None) -> None:
    """Validate VALUE as an age in [0, 150]."""
    app.emit(app.validation_service(trim_whitespace=trim).check(value))
