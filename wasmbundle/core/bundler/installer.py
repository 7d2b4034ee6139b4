"""
Package manager checks and bundler installation
"""

import sys
import subprocess
import logging
from typing import Callable, Optional

from .constants import PACKAGE_MANAGER_MISSING, BUNDLER_INSTALL_PROMPT
from .errors import (
    PackageManagerMissing, ToolCommandError, InstallCommandError,
    InstallDeclined, InstallFailed
)
from .prober import ToolProber, ProbeStatus
from .prompt import prompt_confirm
from .toolchain import ToolName, ToolchainConfig, CommandResolver
from .utils import decode_output

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]


class BundlerInstaller:
    """Makes sure the bundler is installed, installing it through the package manager"""

    def __init__(self, config: Optional[ToolchainConfig] = None,
                 confirm: Optional[ConfirmFn] = None):
        self.config = config or ToolchainConfig.from_env()
        self.resolver = CommandResolver(self.config)
        self.prober = ToolProber(self.config)
        self.confirm = confirm or prompt_confirm

    @property
    def missing_package_manager_message(self) -> str:
        return PACKAGE_MANAGER_MISSING.format(
            package_manager=self.config.package_manager_name,
            bundler=self.config.bundler_name,
            url=self.config.package_manager_url,
        )

    @property
    def install_prompt(self) -> str:
        return BUNDLER_INSTALL_PROMPT.format(bundler=self.config.bundler_name)

    def ensure_package_manager(self) -> None:
        """
        Check that the package manager can be found

        Raises:
            PackageManagerMissing: If it is not installed. Callers are expected
                to report this and stop, there is no way to install the
                bundler without it.
            ToolCommandError: If probing failed for another reason
        """
        result = self.prober.probe(ToolName.PACKAGE_MANAGER)

        if result.status is ProbeStatus.ABSENT:
            raise PackageManagerMissing(
                self.config.package_manager_name, self.missing_package_manager_message
            )
        if result.status is ProbeStatus.ERROR:
            raise ToolCommandError(
                f"Failed to run {self.config.package_manager_name}: {result.error}",
                result.error,
            ) from result.error

    def install_if_required(self, skip_prompt: bool = False) -> None:
        """
        Install the bundler if it is not already available

        Args:
            skip_prompt: Install without asking for confirmation

        Raises:
            PackageManagerMissing: If the package manager is not installed
            ToolCommandError: If a tool could not be probed
            PromptError: If the confirmation prompt failed
            InstallDeclined: If the user chose not to install
            InstallFailed: If the install command exited with an error
            InstallCommandError: If the install command could not be spawned
        """
        self.ensure_package_manager()

        result = self.prober.probe(ToolName.BUNDLER)

        if result.status is ProbeStatus.PRESENT:
            logger.debug(f"{self.config.bundler_name} is already installed")
            return

        if result.status is ProbeStatus.ERROR:
            raise ToolCommandError(
                f"Failed to run {self.config.bundler_name}: {result.error}",
                result.error,
            ) from result.error

        if not (skip_prompt or self.confirm(self.install_prompt)):
            raise InstallDeclined(
                f"{self.config.bundler_name} is not installed and installation was declined.\n\n"
                f"{self.get_installation_instructions()}"
            )

        self.install()

    def install(self) -> None:
        """
        Globally install the bundler and its CLI with the package manager

        Raises:
            InstallFailed: If the package manager exited with an error
            InstallCommandError: If the package manager could not be spawned
        """
        cmd = self.resolver.command(
            ToolName.PACKAGE_MANAGER,
            [*self.config.global_install_args, self.config.bundler_name,
             self.config.bundler_cli_name],
        )
        logger.info(
            f"Installing {self.config.bundler_name} and {self.config.bundler_cli_name} "
            f"with {self.config.package_manager_name}..."
        )

        try:
            result = subprocess.run(cmd, stdin=subprocess.DEVNULL, capture_output=True)
        except OSError as e:
            raise InstallCommandError(f"Failed to run {' '.join(cmd)}: {e}", e) from e

        if result.returncode != 0:
            stderr = decode_output(result.stderr)
            print(stderr, file=sys.stderr)
            raise InstallFailed(
                f"Installing {self.config.bundler_name} failed with exit code {result.returncode}",
                stderr,
            )

        logger.info(f"{self.config.bundler_name} installed successfully")

    def get_installation_instructions(self) -> str:
        """
        Get instructions for installing the toolchain by hand

        Returns:
            Installation instructions as string
        """
        package_manager = self.config.package_manager_name
        bundler = self.config.bundler_name
        install_args = " ".join(self.config.global_install_args)
        return f"""
To install {bundler} globally using {package_manager}:
    {package_manager} {install_args} {bundler} {self.config.bundler_cli_name}

{package_manager} itself can be installed from {self.config.package_manager_url}
""".strip()


def install_if_required(skip_prompt: bool = False,
                        config: Optional[ToolchainConfig] = None,
                        confirm: Optional[ConfirmFn] = None) -> None:
    """Install the bundler if missing, see BundlerInstaller.install_if_required"""
    BundlerInstaller(config, confirm).install_if_required(skip_prompt)
