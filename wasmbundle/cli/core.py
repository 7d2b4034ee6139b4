"""Shared helpers for wasmbundle commands."""

from typing import NoReturn

import click

from wasmbundle.core.bundler import (
    BundlerError,
    FatalToolchainError,
    PackageFailed,
    ToolchainConfig,
)


def load_config(mode: str | None = None) -> ToolchainConfig:
    """Build the toolchain config from the environment, as a usage error if invalid."""
    try:
        return ToolchainConfig.from_env(mode=mode)
    except ValueError as e:
        raise click.UsageError(str(e)) from e


def fail(error: BundlerError) -> NoReturn:
    """Report a pipeline error and stop the command."""
    if isinstance(error, FatalToolchainError):
        click.echo(str(error), err=True)
        raise SystemExit(1)

    # webpack reports compile errors on stdout
    if isinstance(error, PackageFailed):
        for output in (error.stdout, error.stderr):
            if output.strip():
                click.echo(output.rstrip(), err=True)

    raise click.ClickException(str(error)) from error
