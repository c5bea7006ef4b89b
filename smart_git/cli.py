"""CLI entry point."""

import sys

import click

from .config import __version__
from .prompts import ClickPrompter
from .ui import ProgressReporter
from .wizard import run_wizard


@click.command()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """Smart-git: guided staging, commit message suggestion and push."""
    reporter = ProgressReporter(interactive=sys.stdout.isatty())
    ctx.exit(run_wizard(ClickPrompter(), reporter))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
