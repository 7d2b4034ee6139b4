"""
Bootstrap module and host page templates
"""

import logging
from pathlib import Path
from typing import Union

from .constants import JS_INDEX_FILE, ENTRY_FUNCTION
from .errors import JsIndexWriteError, HtmlIndexWriteError, InvalidPackagingRequest
from .utils import write_file_bytes

logger = logging.getLogger(__name__)


def validate_target_name(target_name: str) -> str:
    """
    Check that a target name can be used as a file name stem

    Raises:
        InvalidPackagingRequest: If the name is empty or contains a path separator
    """
    if not target_name or target_name in (".", ".."):
        raise InvalidPackagingRequest(f"Invalid target name: {target_name!r}")
    if "/" in target_name or "\\" in target_name:
        raise InvalidPackagingRequest(
            f"Target name must not contain path separators: {target_name!r}"
        )
    return target_name


def render_js_index(target_name: str) -> str:
    """Get the bootstrap module that imports the compiled module and runs it"""
    return f'''
void async function () {{
    const js = await import("./{target_name}");
    js.{ENTRY_FUNCTION}()
}}();
'''


def render_html_index(target_name: str) -> str:
    """Get the host page loading the bundled script"""
    return f'''<html>
    <head>
        <meta content="text/html;charset=utf-8" http-equiv="Content-Type"/>
    </head>
    <body>
        <script src='./{target_name}.js'></script>
    </body>
</html>
'''


def create_js_index(target_name: str, directory: Union[str, Path]) -> Path:
    """
    Write index.js into a directory, overwriting any existing file

    Args:
        target_name: Base name of the compiled module to import
        directory: Directory that holds the compiled module

    Returns:
        Path of the written index.js

    Raises:
        JsIndexWriteError: If the file could not be written
    """
    validate_target_name(target_name)
    js_path = Path(directory) / JS_INDEX_FILE

    try:
        write_file_bytes(js_path, render_js_index(target_name))
    except OSError as e:
        logger.error(f"Failed to write {js_path}: {e}")
        raise JsIndexWriteError(js_path, e) from e

    return js_path


def create_html_index(target_name: str, directory: Union[str, Path]) -> Path:
    """
    Write <target_name>.html into a directory, overwriting any existing file

    Args:
        target_name: Base name of the bundled script
        directory: Directory that holds the bundled script

    Returns:
        Path of the written host page

    Raises:
        HtmlIndexWriteError: If the file could not be written
    """
    validate_target_name(target_name)
    html_path = Path(directory) / f"{target_name}.html"

    try:
        write_file_bytes(html_path, render_html_index(target_name))
    except OSError as e:
        logger.error(f"Failed to write {html_path}: {e}")
        raise HtmlIndexWriteError(html_path, e) from e

    return html_path
