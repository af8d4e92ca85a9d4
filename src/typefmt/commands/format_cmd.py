"""Command: render a message with type-name directives."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typefmt.commands._base import TypefmtCommand

if TYPE_CHECKING:
    from typefmt.commands._context import AppContext


@click.command(
    "format",
    cls=TypefmtCommand,
    examples="""\
  typefmt format "expected str, got %T" 42
  typefmt format "%N is not %#N" datetime.timedelta collections.OrderedDict
  typefmt -q format "%T" "[1, 2]"
  typefmt format "%-10s|%5d|" "'left'" 7""",
)
@click.argument("fmt", metavar="FORMAT")
@click.argument("args", nargs=-1)
@click.pass_obj
def format_cmd(app: AppContext, fmt: str, args: tuple[str, ...]) -> None:
    """Render FORMAT with ARGS.

    Arguments for %N and %#N are dotted import paths. All other
    arguments are parsed as Python literals, or kept as plain strings.
    """
    app.emit(app.service.format_message(fmt, list(args)))
