"""
Interactive yes/no confirmation
"""

import logging

import click

from .errors import PromptError

logger = logging.getLogger(__name__)


def prompt_confirm(message: str) -> bool:
    """
    Ask the user a yes/no question on the terminal

    Args:
        message: Question to display

    Returns:
        True if the user answered yes

    Raises:
        PromptError: If no answer could be read (closed stdin, Ctrl+C)
    """
    try:
        return click.confirm(message, default=False)
    except click.Abort as e:
        logger.error(f"Confirmation aborted: {message}")
        raise PromptError(f"Could not read an answer for: {message}") from e
