"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from addon_loader.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing status messages.

    Commands and core flows call ctx.feedback instead of echoing directly,
    so tests can capture messages with a fake.

    Usage:
        ctx.feedback.info("Generating autoconfig.js from template...")
        ctx.feedback.warning("Restart Firefox to load the addon")
        ctx.feedback.success("✓ AutoConfig installation complete")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show advisory message that does not change the exit code."""


class InteractiveFeedback(UserFeedback):
    """Styled feedback on stderr."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style("Warning: ", fg="yellow") + message)
