"""
Bundler invocation

Turns a compiled module into a single browser script by generating a
bootstrap module, running the bundler on it and writing a host page.
"""

import subprocess
import logging
from pathlib import Path
from typing import Optional, Union

from .constants import JS_INDEX_FILE
from .errors import PackageFailed, PackageCommandError, InvalidPackagingRequest
from .templates import create_js_index, create_html_index, validate_target_name
from .toolchain import ToolName, ToolchainConfig, CommandResolver
from .utils import decode_output

logger = logging.getLogger(__name__)


class BundlerPackager:
    """Runs the bundler over a generated bootstrap module"""

    def __init__(self, config: Optional[ToolchainConfig] = None):
        self.config = config or ToolchainConfig.from_env()
        self.resolver = CommandResolver(self.config)

    def output_file(self, target_name: str, path: Union[str, Path]) -> Path:
        """Get the bundle path for a compiled module: <build dir>/../<target_name>.js"""
        build_dir = Path(path).parent
        return build_dir.parent / f"{target_name}.js"

    def package_bin(self, target_name: str, path: Union[str, Path]) -> Path:
        """
        Bundle a compiled module into <target_name>.js

        Args:
            target_name: Base name of the compiled module
            path: Path of the compiled module inside its build directory

        Returns:
            Path of the bundled script, one level above the build directory

        Raises:
            InvalidPackagingRequest: If the target name or path is unusable
            JsIndexWriteError: If index.js could not be written
            PackageFailed: If the bundler exited with an error
            PackageCommandError: If the bundler could not be spawned
            HtmlIndexWriteError: If the host page could not be written
        """
        validate_target_name(target_name)
        build_dir = Path(path).parent
        if not build_dir.is_dir():
            raise InvalidPackagingRequest(f"Build directory does not exist: {build_dir}")

        js_index = create_js_index(target_name, build_dir)

        out_dir = build_dir.parent
        out_file = self.output_file(target_name, path)

        cmd = self.resolver.command(
            ToolName.BUNDLER,
            [str(build_dir / JS_INDEX_FILE), "--output", str(out_file),
             "--mode", self.config.mode],
        )
        logger.info(f"Bundling {js_index} into {out_file} ({self.config.mode})")

        try:
            result = subprocess.run(cmd, stdin=subprocess.DEVNULL, capture_output=True)
        except OSError as e:
            raise PackageCommandError(f"Failed to run {' '.join(cmd)}: {e}", e) from e

        if result.returncode != 0:
            stderr = decode_output(result.stderr)
            logger.error(f"{self.config.bundler_name} exited with code {result.returncode}")
            raise PackageFailed(
                f"Packaging {target_name} failed with exit code {result.returncode}",
                stderr,
                decode_output(result.stdout),
            )

        print(decode_output(result.stdout))

        create_html_index(target_name, out_dir)

        return out_file


def package_bin(target_name: str, path: Union[str, Path],
                config: Optional[ToolchainConfig] = None) -> Path:
    """Bundle a compiled module, see BundlerPackager.package_bin"""
    return BundlerPackager(config).package_bin(target_name, path)
