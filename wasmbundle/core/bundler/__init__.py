"""
wasmbundle bundler - packages a compiled module into a browser bundle

Checks for yarn, installs webpack when needed, generates the bootstrap
module and host page and runs webpack over them.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Union
import logging

from .errors import (
    BundlerError, FatalToolchainError, PackageManagerMissing, ToolCommandError,
    InstallCommandError, PackageCommandError, PromptError, InstallError,
    InstallDeclined, InstallFailed, PackageFailed, ArtifactWriteError,
    JsIndexWriteError, HtmlIndexWriteError, InvalidPackagingRequest
)
from .installer import BundlerInstaller, ConfirmFn, install_if_required
from .packager import BundlerPackager, package_bin
from .prober import ToolProber, ProbeResult, ProbeStatus
from .templates import create_js_index, create_html_index, validate_target_name
from .toolchain import ToolName, ToolchainConfig, CommandResolver

# Setup logging
logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__all__ = [
    "build", "install_if_required", "package_bin", "create_js_index",
    "create_html_index", "PackagingRequest", "PackagingResult", "ToolName",
    "ToolchainConfig", "CommandResolver", "ToolProber", "ProbeResult",
    "ProbeStatus", "BundlerInstaller", "BundlerPackager", "BundlerError",
    "FatalToolchainError", "PackageManagerMissing", "ToolCommandError",
    "InstallCommandError", "PackageCommandError", "PromptError", "InstallError",
    "InstallDeclined", "InstallFailed", "PackageFailed", "ArtifactWriteError",
    "JsIndexWriteError", "HtmlIndexWriteError", "InvalidPackagingRequest",
]


@dataclass(frozen=True)
class PackagingRequest:
    """A compiled module to package"""
    target_name: str
    output_path: Path

    def __post_init__(self):
        validate_target_name(self.target_name)
        object.__setattr__(self, "output_path", Path(self.output_path))
        if not self.output_path.parent.is_dir():
            raise InvalidPackagingRequest(
                f"Build directory does not exist: {self.output_path.parent}"
            )


@dataclass(frozen=True)
class PackagingResult:
    """Files produced by a successful packaging run"""
    target_name: str
    bundle_path: Path
    html_path: Path


def build(target_name: str, path: Union[str, Path], skip_prompt: bool = False,
          config: Optional[ToolchainConfig] = None,
          confirm: Optional[ConfirmFn] = None) -> PackagingResult:
    """
    Install the bundler if needed and package a compiled module

    Args:
        target_name: Base name of the compiled module
        path: Path of the compiled module inside its build directory
        skip_prompt: Install the bundler without asking
        config: Toolchain configuration, defaults to the environment
        confirm: Yes/no prompt used before installing

    Returns:
        PackagingResult pointing at the bundled script and host page
    """
    request = PackagingRequest(target_name, Path(path))
    config = config or ToolchainConfig.from_env()

    BundlerInstaller(config, confirm).install_if_required(skip_prompt)
    bundle_path = BundlerPackager(config).package_bin(request.target_name, request.output_path)

    logger.info(f"Packaged {request.target_name} into {bundle_path}")
    return PackagingResult(
        target_name=request.target_name,
        bundle_path=bundle_path,
        html_path=bundle_path.with_name(f"{request.target_name}.html"),
    )
