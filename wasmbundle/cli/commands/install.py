"""Install command - makes sure webpack is available."""

import click

from wasmbundle.cli.core import fail, load_config
from wasmbundle.core.bundler import BundlerError, install_if_required


@click.command("install")
@click.option("--yes", "-y", "skip_prompt", is_flag=True, help="Install without asking.")
def install_cmd(skip_prompt: bool) -> None:
    """Install webpack and webpack-cli globally if they are missing."""
    config = load_config()

    # install failures print the package manager's stderr themselves
    try:
        install_if_required(skip_prompt, config=config)
    except BundlerError as e:
        fail(e)

    click.echo(f"{config.bundler_name} is installed")
