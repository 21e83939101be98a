"""Command: multiply two integers given as text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agegate.commands._base import AgeCommand

if TYPE_CHECKING:
    from agegate.commands._context import AppContext


@click.command(
    cls=AgeCommand,
    examples="""\
  agegate multiply 6 7
  agegate multiply six 7""",
)
@click.argument("a")
@click.argument("b")
@click.pass_obj
def multiply(app: AppContext, a: str, b: str) -> None:
    """Multiply integers A and B; fails on the first operand that does not parse."""
    app.emit(app.validation_service().multiply(a, b))
