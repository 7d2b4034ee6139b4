"""
Common utility functions for the bundler
"""

import logging
from pathlib import Path
from typing import Union, Optional

from .constants import LOG_FORMAT

# Setup module logger
logger = logging.getLogger(__name__)


def write_file_bytes(file_path: Union[str, Path], content: str, encoding: str = 'utf-8') -> Path:
    """
    Write file content in place, replacing whatever was there

    The file is truncated, written, flushed and closed. There is no atomic
    rename so an interrupted write leaves a partial file behind.

    Args:
        file_path: Target file path
        content: Content to write
        encoding: File encoding

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be opened or written
    """
    path = Path(file_path)
    with open(path, 'wb') as f:
        f.write(content.encode(encoding))
        f.flush()

    logger.debug(f"Wrote {path}")
    return path


def decode_output(output: Optional[bytes]) -> str:
    """Decode captured process output, replacing undecodable bytes"""
    if not output:
        return ""
    return output.decode('utf-8', errors='replace')


def setup_logging(level: int = logging.INFO, format_str: Optional[str] = None) -> None:
    """
    Setup logging for wasmbundle

    Args:
        level: Logging level
        format_str: Custom format string
    """
    if format_str is None:
        format_str = LOG_FORMAT

    package_logger = logging.getLogger('wasmbundle')

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(format_str)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.propagate = False

    package_logger.setLevel(level)
