"""Command: print the name of a type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typefmt.commands._base import TypefmtCommand

if TYPE_CHECKING:
    from typefmt.commands._context import AppContext

STYLE_CHOICES = ["short", "qualified", "full", "repr", "all"]


@click.command(
    cls=TypefmtCommand,
    examples="""\
  typefmt name datetime.timedelta
  typefmt name collections.OrderedDict --style full
  typefmt name int --style repr
  typefmt -q name email.message.EmailMessage --style short
  typefmt --json name pathlib.Path""",
)
@click.argument("target")
@click.option(
    "--style",
    type=click.Choice(STYLE_CHOICES),
    default=None,
    help="Name style (default from [names] default_style).",
)
@click.pass_obj
def name(app: AppContext, target: str, style: str | None) -> None:
    """Show the names of the type at dotted path TARGET."""
    app.emit(app.service.describe_type(target, style=style))
