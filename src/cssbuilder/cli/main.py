"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import LOG_LEVELS, BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $CSSBUILDER_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuilder - assemble CSS selectors from parts and combinators."""
    config = BuilderConfig.from_env()
    if log_level:
        config = BuilderConfig(log_level=log_level.upper(), combinators=config.combinators)
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("cssbuilder").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.order import order  # noqa: E402

cli.add_command(build)
cli.add_command(order)
