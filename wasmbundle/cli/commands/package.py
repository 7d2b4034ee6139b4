"""Package command - bundles a compiled module into a browser script."""

from pathlib import Path

import click

from wasmbundle.cli.core import fail, load_config
from wasmbundle.core.bundler import BundlerError, build, package_bin
from wasmbundle.core.bundler.constants import BUILD_MODES


@click.command("package")
@click.argument("target_name")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--yes", "-y", "skip_prompt", is_flag=True, help="Install webpack without asking.")
@click.option(
    "--mode",
    type=click.Choice(sorted(BUILD_MODES)),
    default=None,
    help="webpack mode, defaults to WASMBUNDLE_MODE or development.",
)
@click.option("--skip-install", is_flag=True, help="Do not check for webpack before bundling.")
def package_cmd(
    target_name: str, path: Path, skip_prompt: bool, mode: str | None, skip_install: bool
) -> None:
    """Bundle TARGET_NAME compiled at PATH into TARGET_NAME.js."""
    config = load_config(mode)

    try:
        if skip_install:
            bundle_path = package_bin(target_name, path, config=config)
        else:
            bundle_path = build(target_name, path, skip_prompt=skip_prompt, config=config).bundle_path
    except BundlerError as e:
        fail(e)

    click.echo(str(bundle_path))
