"""Command: validate a batch of ages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agegate.commands._base import AgeCommand

if TYPE_CHECKING:
    from agegate.commands._context import AppContext


@click.command(
    cls=AgeCommand,
    examples="""\
  agegate validate -- 25 abc -5 200
  agegate validate --fail-fast 30 x 40
  agegate validate --trim " 42 "
  agegate --json validate 0 150 151
  agegate -c ./agegate.toml validate 7""",
)
@click.argument("inputs", nargs=-1, required=True)
@click.option(
    "--fail-fast/--no-fail-fast",
    default=None,
    help="Stop at the first invalid input.",
)
@click.option(
    "--trim/--no-trim",
    default=None,
    help="Strip surrounding whitespace before parsing.",
)
@click.pass_obj
def validate(
    app: AppContext,
    inputs: tuple[str, ...],
    fail_fast: bool | None,
    trim: bool | None,
) -> None:
    """Validate each INPUT as an age in [0, 150].

    Inputs are checked independently; exits 1 if any is invalid.
    """
    svc = app.validation_service(trim_whitespace=trim, fail_fast=fail_fast)
    app.emit(svc.validate_many(inputs))
