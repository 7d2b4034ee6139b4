"""wasmbundle command group."""

import logging

import click

from wasmbundle.core.bundler.utils import setup_logging

from .commands.install import install_cmd
from .commands.package import package_cmd


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
def app(verbose: bool) -> None:
    """Package compiled web modules into browser bundles."""
    setup_logging(level=logging.DEBUG if verbose else logging.INFO)


app.add_command(install_cmd)
app.add_command(package_cmd)


if __name__ == "__main__":
    app()
