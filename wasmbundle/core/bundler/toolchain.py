"""
Toolchain configuration and platform specific command resolution
"""

import os
import sys
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .constants import (
    PACKAGE_MANAGER_NAME, BUNDLER_NAME, BUNDLER_CLI_NAME, PACKAGE_MANAGERS,
    DEFAULT_BUILD_MODE, BUILD_MODES, WINDOWS_PLATFORM, WINDOWS_SHELL,
    WINDOWS_SHELL_FLAG, WINDOWS_SCRIPT_SUFFIX
)

logger = logging.getLogger(__name__)


class ToolName(Enum):
    """External tools driven by the bundler pipeline"""
    PACKAGE_MANAGER = "package-manager"
    BUNDLER = "bundler"


@dataclass(frozen=True)
class ToolchainConfig:
    """Names of the external tools and how to invoke them"""
    package_manager_name: str = PACKAGE_MANAGER_NAME
    bundler_name: str = BUNDLER_NAME
    bundler_cli_name: str = BUNDLER_CLI_NAME
    platform: str = field(default_factory=lambda: sys.platform)
    mode: str = DEFAULT_BUILD_MODE

    def __post_init__(self):
        if self.mode not in BUILD_MODES:
            raise ValueError(
                f"Unknown build mode '{self.mode}', expected one of {sorted(BUILD_MODES)}"
            )
        if self.package_manager_name not in PACKAGE_MANAGERS:
            raise ValueError(
                f"Unsupported package manager '{self.package_manager_name}', "
                f"expected one of {sorted(PACKAGE_MANAGERS)}"
            )

    @classmethod
    def from_env(cls, mode: Optional[str] = None) -> "ToolchainConfig":
        """
        Build a config from the WASMBUNDLE_* environment defaults

        Args:
            mode: Override for the bundler mode

        Returns:
            ToolchainConfig for the running platform
        """
        return cls(
            package_manager_name=os.getenv("WASMBUNDLE_PACKAGE_MANAGER", PACKAGE_MANAGER_NAME),
            bundler_name=os.getenv("WASMBUNDLE_BUNDLER", BUNDLER_NAME),
            bundler_cli_name=os.getenv("WASMBUNDLE_BUNDLER_CLI", BUNDLER_CLI_NAME),
            mode=mode or os.getenv("WASMBUNDLE_MODE", DEFAULT_BUILD_MODE),
        )

    @property
    def global_install_args(self) -> List[str]:
        """Arguments that make the package manager install packages globally"""
        return list(PACKAGE_MANAGERS[self.package_manager_name]["global_install"])

    @property
    def package_manager_url(self) -> str:
        return PACKAGE_MANAGERS[self.package_manager_name]["url"]

    @property
    def is_windows(self) -> bool:
        return self.platform == WINDOWS_PLATFORM

    def tool_name(self, tool: ToolName) -> str:
        if tool is ToolName.PACKAGE_MANAGER:
            return self.package_manager_name
        return self.bundler_name


class CommandResolver:
    """Maps a ToolName to the argv needed to run it on the configured platform"""

    def __init__(self, config: Optional[ToolchainConfig] = None):
        self.config = config or ToolchainConfig.from_env()

    def executable(self, tool: ToolName) -> str:
        """
        Get the bare executable name for a tool

        Args:
            tool: Tool to look up

        Returns:
            Executable name, with the batch script suffix on Windows
        """
        if not isinstance(tool, ToolName):
            raise TypeError(f"Expected a ToolName, got {tool!r}")

        name = self.config.tool_name(tool)
        if self.config.is_windows:
            return f"{name}{WINDOWS_SCRIPT_SUFFIX}"
        return name

    def command(self, tool: ToolName, args: Sequence[str] = ()) -> List[str]:
        """
        Get the full argv for running a tool with arguments

        Batch scripts cannot be spawned directly on Windows so they are run
        through the command interpreter there.

        Args:
            tool: Tool to run
            args: Arguments passed to the tool

        Returns:
            Argument list suitable for subprocess.run (never a shell string)
        """
        argv = [self.executable(tool), *(str(arg) for arg in args)]
        if self.config.is_windows:
            argv = [WINDOWS_SHELL, WINDOWS_SHELL_FLAG, *argv]

        logger.debug(f"Resolved {tool.value} command: {argv}")
        return argv
