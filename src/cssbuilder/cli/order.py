"""CLI command: cssbuilder order -- show the canonical part order."""

from __future__ import annotations

import click

from cssbuilder.model import CANONICAL_ORDER


@click.command()
def order() -> None:
    """Print the order selector parts must follow inside a compound selector.

    Parts marked (once) may appear at most one time.
    """
    for kind in CANONICAL_ORDER:
        marker = " (once)" if kind.unique else ""
        click.echo(f"{kind.order + 1}. {kind.value}{marker}")
