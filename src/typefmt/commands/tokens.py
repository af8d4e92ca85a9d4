"""Command: list the type-name directives."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typefmt.commands._base import TypefmtCommand

if TYPE_CHECKING:
    from typefmt.commands._context import AppContext


@click.command(cls=TypefmtCommand)
@click.pass_obj
def tokens(app: AppContext) -> None:
    """List the %T / %N directives and what they render."""
    app.emit(app.service.list_tokens())
