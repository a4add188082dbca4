"""featurecss CLI entry point: Click group with subcommands."""

import logging

import click

from featurecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="featurecss")
@click.option("-v", "--verbose", is_flag=True, help="Log each built selector.")
def cli(verbose: bool) -> None:
    """featurecss - build CSS selectors gated on detected browser features."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from featurecss.cli.build import build, operations  # noqa: E402

cli.add_command(build)
cli.add_command(operations)
