"""Subcommand modules for typefmt.

Provides register_commands() which uses deferred imports to keep
``typefmt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from typefmt.commands.format_cmd import format_cmd
    from typefmt.commands.name import name
    from typefmt.commands.tokens import tokens

    cli.add_command(name)
    cli.add_command(format_cmd)
    cli.add_command(tokens)
