"""Line-oriented user input, injectable so interactive flows can be scripted in tests."""

from abc import ABC, abstractmethod

import click


class Prompter(ABC):
    """Asks the user a question and returns the raw line they typed."""

    @abstractmethod
    def prompt(self, question: str) -> str:
        """Show question and return the response (empty string for no input)."""
        ...


class ConsolePrompter(Prompter):
    """Reads responses from the terminal via click.prompt.

    Raises click.Abort on Ctrl-C or end of input, which click turns into
    "Aborted!" and exit code 1.
    """

    def prompt(self, question: str) -> str:
        return click.prompt(
            question,
            default="",
            show_default=False,
            prompt_suffix=" ",
            err=True,
        )
