"""Command: run the reference validation scenario."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agegate.commands._base import AgeCommand

if TYPE_CHECKING:
    from agegate.commands._context import AppContext


@click.command(cls=AgeCommand, examples="  agegate demo\n  agegate --json demo")
@click.pass_obj
def demo(app: AppContext) -> None:
    """Validate the sample inputs 25, abc, -5 and 200."""
    app.emit(app.validation_service().demo())
