"""
wasmbundle CLI Package

Command-line entry point for checking the webpack toolchain and packaging
compiled modules into browser bundles.
"""

from .main import app

__all__ = ["app"]
