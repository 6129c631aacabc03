"""
Shredder Prompts

Strict yes/no confirmation. Only y/Y/n/N are accepted; an empty answer is
never treated as yes.
"""

import click

from .constants import (
    CONFIRM_DELETE_PROMPT,
    CONFIRM_FILL_PROMPT,
    INVALID_CHOICE_MESSAGE,
    NO_CHOICES,
    WAIT_ENTER_PROMPT,
    YES_CHOICES,
)
from .debug import debug


def get_user_choice(message: str) -> bool:
    """
    Ask a yes/no question until a valid answer is given.

    The first non-blank character of the answer decides, so "yes" counts
    as y. Anything else is rejected with an error and the question is
    repeated.

    Args:
        message: Prompt text shown to the user

    Returns:
        True for y/Y, False for n/N

    Raises:
        click.Abort: If stdin is closed or the user hits Ctrl-C
    """
    while True:
        answer = click.prompt(message, default="", show_default=False, prompt_suffix="")
        choice = answer.strip()[:1]
        if choice in YES_CHOICES:
            return True
        if choice in NO_CHOICES:
            return False
        debug.print(f"Rejected answer: {answer!r}")
        click.echo(INVALID_CHOICE_MESSAGE)


def confirm_fill() -> bool:
    return get_user_choice(CONFIRM_FILL_PROMPT)


def confirm_delete() -> bool:
    return get_user_choice(CONFIRM_DELETE_PROMPT)


def wait_enter() -> None:
    """Block until the user presses Enter. End of input counts as Enter."""
    click.echo(WAIT_ENTER_PROMPT, nl=False)
    click.get_text_stream("stdin").readline()
