"""CLI command: cssbuilder build -- compose a selector from part tokens."""

from __future__ import annotations

import sys

import click

from cssbuilder.compose import compose
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: BuilderConfig | None, tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts and combinator tokens.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.
    Combinators (' ', '>', '+', '~') start the next compound selector.

    \b
    Example:
        cssbuilder build element=ul class=menu '>' element=li pseudo-class=hover
    """
    config = config or BuilderConfig()
    try:
        selector = compose(tokens, combinators=config.combinators)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
