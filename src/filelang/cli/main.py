"""filelang CLI entry point."""

import logging

import click

from filelang.config import LanguageConfig


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """filelang: pattern language for file routing rules."""
    config = LanguageConfig.from_env()
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommands
from filelang.cli.compile_cmd import compile_cmd  # noqa: E402
from filelang.cli.rules_cmd import rules  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(rules)
