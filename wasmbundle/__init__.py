"""
wasmbundle - package compiled web modules into browser bundles

wasmbundle combines:
- a yarn/webpack toolchain check with optional webpack installation
- bootstrap module and host page generation
- a webpack run producing a single script next to the build directory
"""

from .core.bundler import (
    build,
    install_if_required,
    package_bin,
    ToolchainConfig,
    BundlerError,
)

__version__ = "0.1.0"
__description__ = "Package compiled web modules into a browser bundle with webpack"

__all__ = [
    "build",
    "install_if_required",
    "package_bin",
    "ToolchainConfig",
    "BundlerError",
]
